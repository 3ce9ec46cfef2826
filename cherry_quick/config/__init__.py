"""Config module."""

from typing import Dict, Any
from .models import BranchConfig, UiConfig, CherryQuickConfig

class Config(CherryQuickConfig):
    """Config object holding branch and UI config.

    Built from the nested dict produced by the config parser and validated
    section by section.
    """
    def __init__(self, config: Dict[str, Dict[str, Any]]):
        """Initialize with parsed config dict."""
        branch_config = config.get('branches', {})
        ui_config = config.get('ui', {})
        run_config = config.get('run', {})

        super().__init__(
            branches=BranchConfig.model_validate(branch_config),
            ui=UiConfig.model_validate(ui_config),
            branch=run_config.get('branch'),
        )

def default_config() -> Config:
    """Get default config without reading any file or environment."""
    return Config({})
