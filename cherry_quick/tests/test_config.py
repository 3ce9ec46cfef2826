"""Unit tests for config parsing and precedence."""

import pytest
from pydantic import ValidationError

from cherry_quick.config import Config, default_config
from cherry_quick.config.config_parser import parse_config


@pytest.fixture
def missing_file(tmp_path) -> str:
    return str(tmp_path / "absent.yaml")


class TestParseConfig:
    """Tests for defaults, file, environment and CLI precedence."""

    def test_defaults(self, missing_file: str) -> None:
        config = Config(parse_config(environ={}, path=missing_file))

        assert config.branches.from_branch == "dev"
        assert config.branches.to_branch == "master"
        assert config.branches.include_branch is None
        assert config.branches.remote == "origin"
        assert config.ui.rows == 20
        assert config.branch is None
        assert config.model_dump() == default_config().model_dump()

    def test_environment_overrides_defaults(self, missing_file: str) -> None:
        environ = {
            "CHERRY_QUICK_DEFAULT_FROM_BRANCH": "develop",
            "CHERRY_QUICK_DEFAULT_TO_BRANCH": "main",
            "CHERRY_QUICK_DEFAULT_INCLUDE_BRANCH": "staging",
            "CHERRY_QUICK_DEFAULT_ROWS": "35",
        }
        config = Config(parse_config(environ=environ, path=missing_file))

        assert config.branches.from_branch == "develop"
        assert config.branches.to_branch == "main"
        assert config.branches.include_branch == "staging"
        assert config.ui.rows == 35

    def test_cli_overrides_environment(self, missing_file: str) -> None:
        environ = {"CHERRY_QUICK_DEFAULT_FROM_BRANCH": "develop"}
        config = Config(parse_config(from_branch="hotfix", branch="HRIS-1-CP",
                                     environ=environ, path=missing_file))

        assert config.branches.from_branch == "hotfix"
        assert config.branch == "HRIS-1-CP"

    def test_config_file(self, tmp_path) -> None:
        path = tmp_path / ".cherry-quick.yaml"
        path.write_text("branches:\n  to_branch: production\n  remote: upstream\nui:\n  rows: 5\n")

        config = Config(parse_config(environ={}, path=str(path)))

        assert config.branches.to_branch == "production"
        assert config.branches.remote == "upstream"
        assert config.ui.rows == 5
        assert config.remote_ref("dev") == "upstream/dev"

    def test_environment_overrides_file(self, tmp_path) -> None:
        path = tmp_path / ".cherry-quick.yaml"
        path.write_text("branches:\n  to_branch: production\n")
        environ = {"CHERRY_QUICK_DEFAULT_TO_BRANCH": "main"}

        config = Config(parse_config(environ=environ, path=str(path)))
        assert config.branches.to_branch == "main"

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / ".cherry-quick.yaml"
        path.write_text("")
        config = Config(parse_config(environ={}, path=str(path)))
        assert config.model_dump() == default_config().model_dump()

    def test_invalid_rows(self, missing_file: str) -> None:
        with pytest.raises(ValidationError):
            Config(parse_config(environ={"CHERRY_QUICK_DEFAULT_ROWS": "many"}, path=missing_file))
