"""Config parser logic."""

import os
from typing import Dict, Mapping, Optional, Any
import logging
import yaml

from ..models import BranchConfig, UiConfig

# Get module logger
logger = logging.getLogger(__name__)

ConfigSection = Dict[str, Any]  # Use Any since yaml can return various types
Config = Dict[str, ConfigSection]

CONFIG_FILE = '.cherry-quick.yaml'

# Environment variable -> (section, key)
ENV_DEFAULTS = {
    'CHERRY_QUICK_DEFAULT_FROM_BRANCH': ('branches', 'from_branch'),
    'CHERRY_QUICK_DEFAULT_INCLUDE_BRANCH': ('branches', 'include_branch'),
    'CHERRY_QUICK_DEFAULT_TO_BRANCH': ('branches', 'to_branch'),
    'CHERRY_QUICK_DEFAULT_ROWS': ('ui', 'rows'),
}

def default_values() -> Config:
    """Built-in defaults from the config models, lowest precedence."""
    return {
        'branches': BranchConfig().model_dump(),
        'ui': UiConfig().model_dump(),
        'run': {},
    }

def load_config_file(config: Config, path: str = CONFIG_FILE) -> None:
    """Merge the repository config file into config, if there is one."""
    try:
        with open(path, 'r') as f:
            logger.debug(f"Found {path}, loading...")
            file_config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug(f"No {path} found, using defaults")
        return

    if not file_config:
        return
    for section in ('branches', 'ui'):
        if section in file_config and isinstance(file_config[section], dict):
            logger.debug(f"Config from {path} [{section}]: {file_config[section]}")
            config[section].update(file_config[section])

def load_environment(config: Config, environ: Mapping[str, str]) -> None:
    """Apply CHERRY_QUICK_DEFAULT_* variables on top of config."""
    for name, (section, key) in ENV_DEFAULTS.items():
        value = environ.get(name)
        if value:
            logger.debug(f"Using {name}={value}")
            config[section][key] = value

def parse_config(from_branch: Optional[str] = None,
                 to_branch: Optional[str] = None,
                 include_branch: Optional[str] = None,
                 branch: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 path: str = CONFIG_FILE) -> Config:
    """Parse config from defaults, config file, environment and CLI options.

    Later sources win: defaults, then the config file, then the environment,
    then any option passed explicitly on the command line.
    """
    if environ is None:
        environ = os.environ

    config = default_values()
    load_config_file(config, path)
    load_environment(config, environ)

    cli_values = {
        'from_branch': from_branch,
        'to_branch': to_branch,
        'include_branch': include_branch,
    }
    for key, value in cli_values.items():
        if value:
            config['branches'][key] = value
    if branch:
        config['run']['branch'] = branch

    return config
