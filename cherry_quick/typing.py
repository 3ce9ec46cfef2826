"""Common types used across the codebase."""

from dataclasses import dataclass, field
from typing import List, NewType, Protocol, Union

from pydantic import BaseModel

# Full 40-character commit identifier
CommitHash = NewType('CommitHash', str)


class Commit(BaseModel):
    """A commit listed from the source branch."""
    branch: str
    timestamp: int  # milliseconds since epoch
    hash: str
    full_hash: CommitHash
    author: str
    message: str

    class Config:
        """Pydantic config."""
        frozen = True


class GitInterface(Protocol):
    """Anything that can run a git command and hand back its output."""
    def run_cmd(self, command: str) -> str:
        """Run git command, raising GitCommandFailed on error."""
        ...


@dataclass(frozen=True)
class Selected:
    """Commits picked by the user, in the order they were picked."""
    commits: List[Commit] = field(default_factory=list)


@dataclass(frozen=True)
class Cancelled:
    """The user left the picker without submitting."""


SelectionResult = Union[Selected, Cancelled]


class GitCommandFailed(Exception):
    """Raised when a git invocation fails."""
    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Git command failed: git {command}\n{reason}")


class InconsistentBranchStateError(Exception):
    """Raised when git cherry reports a commit that git log did not list.

    Both queries run against the same remote refs, so this only happens when
    the refs move between the two calls or the branches are in a state the
    tool cannot reason about.
    """
    def __init__(self, full_hash: str, source_branch: str):
        self.full_hash = full_hash
        self.source_branch = source_branch
        super().__init__(
            f"Missing commit: {full_hash} is cherry-pickable from '{source_branch}' "
            f"but was not found in its log. Fetch the remote and try again."
        )
