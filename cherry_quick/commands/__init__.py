"""Generating the shell commands that apply a selection of commits."""

from typing import List, Optional

from ..typing import Commit

COMMAND_SEPARATOR = " && \\\n"


def execution_order(commits: List[Commit]) -> List[Commit]:
    """Order commits oldest first so they apply in the order they were authored.

    The picker returns commits in the order the user toggled them, which
    says nothing about history. The sort is stable for equal timestamps.
    """
    return sorted(commits, key=lambda c: c.timestamp)


def pull_request_title(branch: str) -> str:
    """Derive a PR title from a branch name.

    The first hyphen is kept and every other one becomes a space, so
    'HRIS-123-CP-PROD' turns into 'HRIS-123 CP PROD'.
    """
    head, sep, rest = branch.partition("-")
    return head + sep + rest.replace("-", " ")


def build_command(commits: List[Commit], to_branch: str,
                  branch: Optional[str] = None, remote: str = "origin") -> str:
    """Build a single chained shell command cherry-picking commits.

    commits must already be in execution order. With a branch name, the
    command also creates that branch off the target, pushes it and opens a
    pull request assigned to the current user.
    """
    steps: List[str] = []
    if branch:
        steps.append(f"git switch -c {branch} {remote}/{to_branch}")
    steps.extend(f"git cherry-pick {c.full_hash}" for c in commits)
    if branch:
        steps.append(f"git push -u {remote} {branch}")
        steps.append(
            f'gh pr create -a @me -t "{pull_request_title(branch)}" '
            f"-B {to_branch} -H {branch} -w"
        )
    return COMMAND_SEPARATOR.join(steps).strip()
