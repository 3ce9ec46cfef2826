"""Shared fixtures for cherry_quick tests."""

import datetime
from typing import Callable
from unittest.mock import MagicMock

import pytest

from cherry_quick.config import Config
from cherry_quick.typing import Commit, CommitHash

CommitFactory = Callable[..., Commit]

def _local_ms(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """Millisecond timestamp of a local wall-clock time."""
    return int(datetime.datetime(year, month, day, hour, minute).timestamp() * 1000)

@pytest.fixture
def local_ms() -> Callable[..., int]:
    return _local_ms

@pytest.fixture
def make_commit() -> CommitFactory:
    """Factory for commits with unique hashes derived from a number."""
    def factory(n: int, timestamp: int = 0, message: str = "", author: str = "Test User",
                branch: str = "dev") -> Commit:
        full_hash = f"{n:040x}"
        return Commit(
            branch=branch,
            timestamp=timestamp or _local_ms(2024, 1, 1, 9, n % 60),
            hash=full_hash[-7:],
            full_hash=CommitHash(full_hash),
            author=author,
            message=message or f"Commit number {n}",
        )
    return factory

@pytest.fixture
def config() -> Config:
    return Config({
        'branches': {
            'from_branch': 'dev',
            'to_branch': 'master',
            'remote': 'origin',
        },
        'ui': {'rows': 10},
    })

@pytest.fixture
def git_mock() -> MagicMock:
    return MagicMock()
