"""Turning fetched commits into the entries shown by the picker.

Commits go through three orderings on their way to the generated command:

* log order: newest first, as git log lists them
* display order: oldest first, see display_order()
* execution order: ascending timestamp, see commands.execution_order()
"""

import re
import datetime
import logging
from dataclasses import dataclass
from typing import Collection, List, Optional, Tuple

from ..pretty import format_date, local_date, truncate
from ..typing import Commit, CommitHash, InconsistentBranchStateError

# Get module logger
logger = logging.getLogger(__name__)

MESSAGE_WIDTH = 80
AUTHOR_WIDTH = 20

_NON_WORD = re.compile(r'[^\w]')

# (style, text) pairs understood by prompt_toolkit
Fragments = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Entry:
    """One row of the picker, either a commit or a date separator."""
    fragments: Fragments
    commit: Optional[Commit] = None
    query: str = ""
    # None when no include branch was given
    included: Optional[bool] = None

    @property
    def label(self) -> str:
        return " ".join(text for _, text in self.fragments)

    @property
    def is_separator(self) -> bool:
        return self.commit is None


def normalize_query(text: str) -> str:
    """Lowercase text and drop everything that is not a word character."""
    return _NON_WORD.sub('', text).lower()


def match_cherry_pickable(hashes: Collection[CommitHash], commits: List[Commit],
                          source_branch: str) -> List[Commit]:
    """Keep the commits git cherry reported as pickable, in log order.

    Raises InconsistentBranchStateError if a reported hash has no commit
    record, since the two queries should always agree.
    """
    by_hash = {c.full_hash: c for c in commits}
    for full_hash in hashes:
        if full_hash not in by_hash:
            raise InconsistentBranchStateError(full_hash, source_branch)

    wanted = set(hashes)
    matched = [c for c in commits if c.full_hash in wanted]
    logger.debug(f"{len(matched)} of {len(commits)} commits are cherry-pickable")
    return matched


def display_order(commits: List[Commit]) -> List[Commit]:
    """Convert log order (newest first) to display order (oldest first)."""
    return list(reversed(commits))


def commit_entry(commit: Commit, include_branch: Optional[str] = None,
                 include_hashes: Collection[CommitHash] = ()) -> Entry:
    """Build the picker entry for a single commit.

    When include_branch is given, the entry is marked as included if the
    commit is no longer cherry-pickable to that branch.
    """
    included = None
    fragments = []
    if include_branch:
        included = commit.full_hash not in include_hashes
        fragments.append(("class:included" if included else "class:dim", include_branch))
    fragments.extend([
        ("class:dim", commit.hash),
        ("", truncate(commit.message, MESSAGE_WIDTH)),
        ("class:dim", truncate(commit.author, AUTHOR_WIDTH)),
    ])
    return Entry(
        fragments=tuple(fragments),
        commit=commit,
        query=normalize_query(f"{commit.hash} {commit.message} by {commit.author}"),
        included=included,
    )


def separator_entry(date: datetime.date) -> Entry:
    return Entry(fragments=(("class:separator", format_date(date)),))


def build_entries(commits: List[Commit], include_branch: Optional[str] = None,
                  include_hashes: Collection[CommitHash] = ()) -> List[Entry]:
    """Interleave commit entries with a date separator heading each day.

    commits are expected in display order. Days are compared by local
    calendar date, so two commits a few minutes apart around midnight land
    under different separators.
    """
    include_set = set(include_hashes)
    entries: List[Entry] = []
    previous: Optional[datetime.date] = None
    for commit in commits:
        day = local_date(commit.timestamp)
        if day != previous:
            entries.append(separator_entry(day))
            previous = day
        entries.append(commit_entry(commit, include_branch, include_set))
    return entries


def filter_entries(entries: List[Entry], typed: str) -> List[Entry]:
    """Entries matching what the user typed so far.

    Commit entries match when their query contains the typed text.
    Separators are kept only if a matching commit follows them before the
    next separator.
    """
    needle = normalize_query(typed)
    matching = [e for e in entries if e.is_separator or needle in e.query]

    visible: List[Entry] = []
    for i, entry in enumerate(matching):
        if entry.is_separator:
            following = matching[i + 1] if i + 1 < len(matching) else None
            if following is None or following.is_separator:
                continue
        visible.append(entry)
    return visible
