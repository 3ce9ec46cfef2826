"""Git interfaces and implementation."""

import os
import shlex
import time
import logging
from typing import List
import git
from git.exc import GitCommandError, InvalidGitRepositoryError
from ..typing import Commit, CommitHash, GitInterface, GitCommandFailed
from ..config.models import CherryQuickConfig

# Get module logger
logger = logging.getLogger(__name__)

# Separates fields in git log output; commit subjects are free text so a
# plain ':' or '|' would be ambiguous
LOG_DELIMITER = ':;:'
LOG_FORMAT = LOG_DELIMITER.join(['%at', '%h', '%H', '%an', '%s'])

def list_cherry_pickable(config: CherryQuickConfig, git_cmd: GitInterface,
                         source_branch: str, dest_branch: str) -> List[CommitHash]:
    """Full hashes of commits on source_branch not yet applied to dest_branch.

    Uses patch equivalence (git cherry), so commits that were already
    cherry-picked under a different hash are excluded.
    """
    output = git_cmd.run_cmd(
        f"cherry {config.remote_ref(dest_branch)} {config.remote_ref(source_branch)}"
    )
    return parse_cherry_output(output)

def parse_cherry_output(output: str) -> List[CommitHash]:
    """Parse `git cherry` output, keeping only the '+' (not applied) lines."""
    hashes: List[CommitHash] = []
    for line in output.split('\n'):
        if line.startswith('+'):
            hashes.append(CommitHash(line[2:].strip()))
    return hashes

def list_commits(config: CherryQuickConfig, git_cmd: GitInterface,
                 source_branch: str, dest_branch: str) -> List[Commit]:
    """Commits reachable from source_branch but not dest_branch, newest first."""
    output = git_cmd.run_cmd(
        f'--no-pager log --pretty=format:"{LOG_FORMAT}" '
        f"{config.remote_ref(source_branch)} --not {config.remote_ref(dest_branch)}"
    )
    return parse_log_output(output, source_branch)

def parse_log_output(output: str, branch: str) -> List[Commit]:
    """Parse git log output produced with LOG_FORMAT."""
    commits: List[Commit] = []
    for line in output.split('\n'):
        if not line.strip():
            continue
        timestamp, short_hash, full_hash, author, message = line.split(LOG_DELIMITER, 4)
        commits.append(Commit(
            branch=branch,
            timestamp=int(timestamp) * 1000,  # %at is in seconds
            hash=short_hash,
            full_hash=CommitHash(full_hash),
            author=author,
            message=message,
        ))
    return commits

class RealGit:
    """Real Git implementation."""
    def run_cmd(self, command: str) -> str:
        """Run git command, logging it along with how long it took."""
        cmd_str = command.strip()
        logger.info(f"> git {cmd_str}")
        started_at = time.perf_counter()
        try:
            repo = git.Repo(os.getcwd(), search_parent_directories=True)
            result = repo.git.execute(['git', *shlex.split(cmd_str)])
        except GitCommandError as e:
            raise GitCommandFailed(cmd_str, str(e)) from e
        except InvalidGitRepositoryError as e:
            raise GitCommandFailed(cmd_str, "Not in a git repository") from e

        output = result if isinstance(result, str) else str(result)
        elapsed_ms = round((time.perf_counter() - started_at) * 1000)
        line_count = len(output.split("\n"))
        logger.info(f"  Returned {line_count} lines in {elapsed_ms}ms")
        return output
