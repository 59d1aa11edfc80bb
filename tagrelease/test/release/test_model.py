"""Tests for release/model.py."""

from __future__ import annotations

import pytest

from tagrelease.release.model import (
    Direct,
    MatchRule,
    Pattern,
    ReleaseRecord,
    RepoId,
    TriggerContext,
    select_mode,
)


class TestRepoId:
    def test_parse(self) -> None:
        repo = RepoId.parse("acme/widget")
        assert repo == RepoId(owner="acme", name="widget")
        assert repo is not None
        assert repo.slug == "acme/widget"
        assert str(repo) == "acme/widget"

    @pytest.mark.parametrize("value", ["", "acme", "acme/", "/widget", "a/b/c"])
    def test_parse_rejects_malformed(self, value: str) -> None:
        assert RepoId.parse(value) is None


class TestMatchRule:
    def test_empty_strings_become_none(self) -> None:
        rule = MatchRule(include="", exclude="")
        assert rule.include is None
        assert rule.exclude is None
        assert rule.is_empty

    def test_single_pattern_is_not_empty(self) -> None:
        assert not MatchRule(exclude="rc").is_empty

    def test_frozen(self) -> None:
        rule = MatchRule(include="v")
        with pytest.raises(AttributeError):
            rule.include = "x"  # type: ignore[misc]


class TestSelectMode:
    def test_direct_without_patterns(self) -> None:
        ctx = TriggerContext(ref="refs/tags/v1", repo=RepoId("a", "b"))
        assert select_mode(ctx, MatchRule()) == Direct(ref="refs/tags/v1")

    def test_pattern_with_any_pattern(self) -> None:
        ctx = TriggerContext(ref="refs/tags/v1", repo=RepoId("a", "b"))
        assert select_mode(ctx, MatchRule(include="^v")) == Pattern(include="^v", exclude=None)


class TestReleaseRecord:
    def test_from_api(self) -> None:
        record = ReleaseRecord.from_api(
            {
                "id": 42,
                "html_url": "https://github.com/acme/widget/releases/tag/v1.0.0",
                "upload_url": "https://uploads.github.com/repos/acme/widget/releases/42/assets{?name,label}",
                "tag_name": "v1.0.0",
                "name": "Widget 1.0",
                "body": "notes",
                "draft": False,
                "prerelease": True,
                "author": {"login": "octocat", "id": 1},
            }
        )
        assert record is not None
        assert record.id == 42
        assert record.prerelease is True
        assert record.author_login == "octocat"

    def test_nullable_fields(self) -> None:
        record = ReleaseRecord.from_api(
            {"id": 1, "html_url": "h", "upload_url": "u", "name": None, "body": None}
        )
        assert record is not None
        assert record.name is None
        assert record.body is None
        assert record.draft is False
        assert record.author is None
        assert record.author_login is None

    def test_missing_required_fields(self) -> None:
        assert ReleaseRecord.from_api({"html_url": "h", "upload_url": "u"}) is None
        assert ReleaseRecord.from_api({"id": True, "html_url": "h", "upload_url": "u"}) is None
