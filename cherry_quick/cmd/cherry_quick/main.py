"""CLI entry point."""

import logging
from typing import Any, Dict, Optional

import click
from click import Context, HelpFormatter

from ...config import Config
from ...config.config_parser import parse_config
from ...git import RealGit
from ...quick import CherryQuick

# Get module logger
logger = logging.getLogger(__name__)

EPILOG = """\b
This command automatically prepends each branch with '{remote}/' prefix.
This command does not perform any modification actions.

\b
Defaults can be set with CHERRY_QUICK_DEFAULT_FROM_BRANCH,
CHERRY_QUICK_DEFAULT_TO_BRANCH, CHERRY_QUICK_DEFAULT_INCLUDE_BRANCH and
CHERRY_QUICK_DEFAULT_ROWS, or in a .cherry-quick.yaml file.

\b
Usage:
  Pick commits from '{from_branch}' branch that are not in the '{to_branch}' branch:
  $ cherry-quick

\b
  Specify 'from' and 'to' branches:
  $ cherry-quick --from release-dev
  $ cherry-quick --to release-dev

\b
  Mark commits that were already merged into 'release-dev':
  $ cherry-quick --include release-dev

\b
  Generate commands for creating a new branch and PR on GitHub:
  $ cherry-quick --branch HRIS-123-CP-PROD
"""

# Option help templates, filled in with the defaults in effect
OPTION_HELP = {
    'from_branch': "Branch to pick commits from (default: {from_branch})",
    'to_branch': "Name of the target branch (default: {to_branch})",
    'include_branch': "Mark commits that are already merged to this branch ({include})",
}

class DefaultsHelpCommand(click.Command):
    """Command whose help shows the defaults from the environment and config file."""

    def format_help(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Fill option help and epilog from the resolved config, then format."""
        branches = Config(parse_config()).branches
        values: Dict[str, Any] = branches.model_dump()
        if branches.include_branch:
            values['include'] = f"default: {branches.include_branch}"
        else:
            values['include'] = "optional"

        for param in self.params:
            if isinstance(param, click.Option) and param.name in OPTION_HELP:
                param.help = OPTION_HELP[param.name].format(**values)
        self.epilog = EPILOG.format(**values)
        super().format_help(ctx, formatter)

def setup(from_branch: Optional[str], to_branch: Optional[str],
          include_branch: Optional[str], branch: Optional[str]) -> CherryQuick:
    """Build config once and wire it to a real git client."""
    config = Config(parse_config(from_branch, to_branch, include_branch, branch))
    logger.debug(f"Config: {config.model_dump()}")
    return CherryQuick(config, RealGit())

@click.command(name="cherry-quick", cls=DefaultsHelpCommand,
               context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--from', '-f', 'from_branch')
@click.option('--to', '-t', 'to_branch')
@click.option('--include', '-i', 'include_branch')
@click.option('--branch', '-b', help="Name of a cherry-pick branch (optional)")
@click.option('-v', '--verbose', count=True, help="Increase verbosity (can be used multiple times for more verbosity)")
def cli(from_branch: Optional[str], to_branch: Optional[str], include_branch: Optional[str],
        branch: Optional[str], verbose: int) -> None:
    """Quickly select commits to cherry-pick.

    Search commits by typing part of message or author's name.
    """
    from ... import setup_logging
    setup_logging(verbose)

    quick = setup(from_branch, to_branch, include_branch, branch)
    quick.run()


def main() -> None:
    """Main entry point."""
    cli()

if __name__ == "__main__":
    main()
