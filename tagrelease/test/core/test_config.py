"""Tests for tagrelease.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagrelease.core.config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ActionConfig,
    ConfigError,
    ConfigOverrides,
    load_config,
)
from tagrelease.core.result import Err, Ok
from tagrelease.release.model import MatchRule, RepoId

BASE_ENV = {
    "GITHUB_REPOSITORY": "acme/widget",
    "GITHUB_REF": "refs/tags/v1.2.3",
}


def _load(env: dict[str, str], overrides: ConfigOverrides | None = None) -> ActionConfig:
    result = load_config(env, overrides)
    assert isinstance(result, Ok), result
    return result.value


class TestLoadFromEnv:
    def test_minimal(self) -> None:
        config = _load(BASE_ENV)
        assert config.context.ref == "refs/tags/v1.2.3"
        assert config.context.repo == RepoId("acme", "widget")
        assert config.rule == MatchRule()
        assert config.token is None
        assert config.api_url == DEFAULT_API_URL
        assert config.output_path is None
        assert config.timeout == DEFAULT_TIMEOUT_SECONDS
        assert config.debug is False

    def test_action_inputs(self) -> None:
        config = _load(
            {
                **BASE_ENV,
                "INPUT_TOKEN": "abc",
                "INPUT_MATCH": "^v",
                "INPUT_EXCLUDE": "rc",
            }
        )
        assert config.token == "abc"
        assert config.rule == MatchRule(include="^v", exclude="rc")

    def test_empty_inputs_mean_unset(self) -> None:
        config = _load({**BASE_ENV, "INPUT_MATCH": "", "INPUT_EXCLUDE": ""})
        assert config.rule.is_empty

    def test_token_falls_back_to_github_token(self) -> None:
        assert _load({**BASE_ENV, "GITHUB_TOKEN": "gh"}).token == "gh"
        assert _load({**BASE_ENV, "GITHUB_TOKEN": "gh", "INPUT_TOKEN": "in"}).token == "in"

    def test_runner_context(self, tmp_path: Path) -> None:
        out = tmp_path / "output"
        config = _load(
            {
                **BASE_ENV,
                "GITHUB_API_URL": "https://ghe.example.com/api/v3/",
                "GITHUB_OUTPUT": str(out),
                "RUNNER_DEBUG": "1",
                "TAGRELEASE_HTTP_TIMEOUT": "7.5",
            }
        )
        assert config.api_url == "https://ghe.example.com/api/v3"
        assert config.output_path == out
        assert config.debug is True
        assert config.timeout == 7.5


class TestOverrides:
    def test_override_wins_over_env(self) -> None:
        config = _load(
            {**BASE_ENV, "INPUT_MATCH": "^v"},
            ConfigOverrides(match="^release-", repo="other/repo", ref="refs/tags/x"),
        )
        assert config.rule.include == "^release-"
        assert config.context.repo == RepoId("other", "repo")
        assert config.context.ref == "refs/tags/x"

    def test_verbose_enables_debug(self) -> None:
        assert _load(BASE_ENV, ConfigOverrides(verbose=True)).debug is True

    def test_output_path_override(self, tmp_path: Path) -> None:
        out = tmp_path / "o"
        assert _load(BASE_ENV, ConfigOverrides(output_path=out)).output_path == out


class TestConfigErrors:
    def test_missing_repository(self) -> None:
        result = load_config({"GITHUB_REF": "refs/tags/v1"})
        assert isinstance(result, Err)
        assert result.error.key == "GITHUB_REPOSITORY"

    @pytest.mark.parametrize("repo", ["widget", "acme/", "a/b/c"])
    def test_malformed_repository(self, repo: str) -> None:
        result = load_config({**BASE_ENV, "GITHUB_REPOSITORY": repo})
        assert isinstance(result, Err)
        assert "owner/name" in result.error.message

    def test_missing_ref_in_direct_mode(self) -> None:
        result = load_config({"GITHUB_REPOSITORY": "acme/widget"})
        assert result == Err(
            ConfigError(
                "GITHUB_REF is not set; pass --ref or a match/exclude pattern",
                key="GITHUB_REF",
            )
        )

    def test_empty_ref_is_passed_through(self) -> None:
        config = _load({"GITHUB_REPOSITORY": "acme/widget", "GITHUB_REF": ""})
        assert config.context.ref == ""
        assert config.rule.is_empty

    def test_missing_ref_allowed_in_pattern_mode(self) -> None:
        config = _load({"GITHUB_REPOSITORY": "acme/widget", "INPUT_MATCH": "^v"})
        assert config.context.ref == ""

    @pytest.mark.parametrize("raw", ["soon", "0", "-3"])
    def test_bad_timeout(self, raw: str) -> None:
        result = load_config({**BASE_ENV, "TAGRELEASE_HTTP_TIMEOUT": raw})
        assert isinstance(result, Err)
        assert result.error.key == "TAGRELEASE_HTTP_TIMEOUT"


class TestActionConfig:
    def test_frozen(self) -> None:
        config = _load(BASE_ENV)
        with pytest.raises(AttributeError):
            config.token = "x"  # type: ignore[misc]
