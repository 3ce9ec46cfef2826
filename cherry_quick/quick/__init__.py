"""Cherry-quick implementation: fetch, pick, print."""

import sys
import logging
from typing import Callable, List

import click
import pyperclip

from ..commands import build_command, execution_order
from ..config.models import CherryQuickConfig
from ..git import list_cherry_pickable, list_commits
from ..selector import build_entries, display_order, match_cherry_pickable, Entry
from ..selector.picker import pick_commits
from ..typing import Cancelled, CommitHash, Commit, GitInterface, SelectionResult

# Get module logger
logger = logging.getLogger(__name__)

Picker = Callable[[List[Entry], int], SelectionResult]


class CherryQuick:
    """Select commits interactively and print the commands that cherry-pick them.

    Nothing here modifies the repository; git is only queried.
    """

    def __init__(self, config: CherryQuickConfig, git_cmd: GitInterface,
                 picker: Picker = pick_commits):
        """Initialize with config, git client and the picker to show."""
        self.config = config
        self.git_cmd = git_cmd
        self.picker = picker
        self.output = sys.stdout
        self.confirm: Callable[..., bool] = click.confirm
        self.copy: Callable[[str], None] = pyperclip.copy

    def say(self, message: str = "") -> None:
        print(message, file=self.output)

    def cherry_pickable_commits(self) -> List[Commit]:
        """Commits that can be picked from the source branch, in display order."""
        branches = self.config.branches
        hashes = list_cherry_pickable(self.config, self.git_cmd,
                                      branches.from_branch, branches.to_branch)
        commits = list_commits(self.config, self.git_cmd,
                               branches.from_branch, branches.to_branch)
        return display_order(match_cherry_pickable(hashes, commits, branches.from_branch))

    def include_branch_hashes(self) -> List[CommitHash]:
        """Hashes still missing from the include branch, empty without one."""
        branches = self.config.branches
        if not branches.include_branch:
            return []
        return list_cherry_pickable(self.config, self.git_cmd,
                                    branches.from_branch, branches.include_branch)

    def select(self, commits: List[Commit], include_hashes: List[CommitHash]) -> SelectionResult:
        entries = build_entries(commits, self.config.branches.include_branch, include_hashes)
        return self.picker(entries, self.config.ui.rows)

    def run(self) -> None:
        """Run the whole flow, returning early on any empty or aborted state."""
        branches = self.config.branches
        commits = self.cherry_pickable_commits()
        if not commits:
            self.say("No commits to pick from")
            return

        include_hashes = self.include_branch_hashes()

        result = self.select(commits, include_hashes)
        if isinstance(result, Cancelled):
            self.say("Operation aborted by user")
            return

        picked = execution_order(result.commits)
        if not picked:
            self.say("No commits were picked")
            return

        logger.debug(f"Picked {len(picked)} commits: {[c.hash for c in picked]}")
        command = build_command(picked, branches.to_branch, self.config.branch, branches.remote)

        self.say()
        self.say(command)
        self.say()

        if self.confirm("Copy generated command to clipboard?", default=True):
            self.copy_to_clipboard(command)

    def copy_to_clipboard(self, command: str) -> None:
        try:
            self.copy(command)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            return
        self.say("Copied to clipboard!")
