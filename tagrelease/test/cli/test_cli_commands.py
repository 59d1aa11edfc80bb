from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import typer
from typer.testing import CliRunner

from tagrelease import __version__
from tagrelease.cli.app import app
from tagrelease.cli.context import CLIContext
from tagrelease.core.config import ActionConfig, ConfigOverrides
from tagrelease.core.errors import ErrorCode
from tagrelease.github.http import MockHttpClient
from tagrelease.output.console import MockConsole
from tagrelease.release.model import MatchRule, RepoId, TriggerContext

API = "https://api.github.com"
TAGS = f"{API}/repos/acme/widget/tags?per_page=10"


def _ctx(
    http: MockHttpClient,
    *,
    ref: str = "refs/tags/v1.2.0",
    rule: MatchRule | None = None,
    output_path: Path | None = None,
) -> CLIContext:
    config = ActionConfig(
        token=None,
        context=TriggerContext(ref=ref, repo=RepoId("acme", "widget")),
        rule=rule or MatchRule(),
        api_url=API,
        output_path=output_path,
    )
    return CLIContext(config=config, http=http, console=MockConsole())


def _release(tag: str) -> dict[str, Any]:
    return {
        "id": 7,
        "html_url": f"https://github.com/acme/widget/releases/tag/{tag}",
        "upload_url": "https://uploads.github.com/repos/acme/widget/releases/7/assets{?name,label}",
        "tag_name": tag,
        "name": f"Widget {tag}",
        "body": "notes",
        "draft": False,
        "prerelease": False,
        "author": {"login": "octocat"},
    }


def _patch(monkeypatch: pytest.MonkeyPatch, module: object, ctx: CLIContext) -> None:
    def fake_build_context(_overrides: ConfigOverrides) -> CLIContext:
        return ctx

    monkeypatch.setattr(module, "build_context", fake_build_context)


def _run(output: Path | None = None) -> None:
    import tagrelease.cli.commands.run_cmd as run_cmd

    run_cmd.run(
        token=None,
        match=None,
        exclude=None,
        ref=None,
        repo=None,
        api_url=None,
        output=output,
        verbose=False,
    )


def _tag() -> None:
    import tagrelease.cli.commands.tag_cmd as tag_cmd

    tag_cmd.tag(
        token=None,
        match=None,
        exclude=None,
        ref=None,
        repo=None,
        api_url=None,
        verbose=False,
    )


def test_run_prints_outputs_without_output_file(monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.run_cmd as run_cmd

    http = MockHttpClient()
    http.set_json(f"{API}/repos/acme/widget/releases/tags/v1.2.0", _release("v1.2.0"))
    ctx = _ctx(http)
    _patch(monkeypatch, run_cmd, ctx)

    _run()

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find("id=7")
    assert ctx.console.find("tag_name=v1.2.0")
    assert ctx.console.find("OK release 7 for tag v1.2.0")


def test_run_writes_output_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.run_cmd as run_cmd

    out = tmp_path / "github_output"
    http = MockHttpClient()
    http.set_json(f"{API}/repos/acme/widget/releases/tags/v1.2.0", _release("v1.2.0"))
    ctx = _ctx(http, output_path=out)
    _patch(monkeypatch, run_cmd, ctx)

    _run(output=out)

    text = out.read_text(encoding="utf-8")
    assert text.startswith("id<<ghadelimiter_")
    assert '{"login":"octocat"}' in text
    assert isinstance(ctx.console, MockConsole)
    assert not ctx.console.find("id=7")


def test_run_missing_release_exits_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.run_cmd as run_cmd

    ctx = _ctx(MockHttpClient())
    _patch(monkeypatch, run_cmd, ctx)

    with pytest.raises(typer.Exit) as exc:
        _run()

    assert exc.value.exit_code == int(ErrorCode.NOT_FOUND)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.find(
        "::error::No release found for tag 'v1.2.0' in acme/widget (Not Found)"
    )


def test_run_branch_ref_exits_user_error(monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.run_cmd as run_cmd

    http = MockHttpClient()
    ctx = _ctx(http, ref="refs/heads/main")
    _patch(monkeypatch, run_cmd, ctx)

    with pytest.raises(typer.Exit) as exc:
        _run()

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert http.calls == []


def test_tag_prints_matching_tag(monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.tag_cmd as tag_cmd

    http = MockHttpClient()
    http.set_json(f"{TAGS}&page=1", [{"name": "v2.0.0-rc1"}, {"name": "v1.9.0"}])
    ctx = _ctx(http, rule=MatchRule(include="^v", exclude="rc"))
    _patch(monkeypatch, tag_cmd, ctx)

    _tag()

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.messages[-1] == "v1.9.0"
    assert http.calls == [f"{TAGS}&page=1"]


def test_tag_no_match_exits_resolve_error(monkeypatch: pytest.MonkeyPatch) -> None:
    import tagrelease.cli.commands.tag_cmd as tag_cmd

    http = MockHttpClient()
    http.set_json(f"{TAGS}&page=1", [{"name": "nightly"}])
    ctx = _ctx(http, rule=MatchRule(include="^v"))
    _patch(monkeypatch, tag_cmd, ctx)

    with pytest.raises(typer.Exit) as exc:
        _tag()

    assert exc.value.exit_code == int(ErrorCode.RESOLVE_ERROR)


def test_missing_repository_exits_env_error(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GITHUB_REPOSITORY", "INPUT_MATCH", "INPUT_EXCLUDE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GITHUB_REF", "refs/tags/v1.2.0")

    with pytest.raises(typer.Exit) as exc:
        _tag()

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)


def test_empty_ref_exits_user_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for key in ("INPUT_MATCH", "INPUT_EXCLUDE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/widget")
    monkeypatch.setenv("GITHUB_REF", "")

    with pytest.raises(typer.Exit) as exc:
        _tag()

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    lines = [line.rstrip() for line in capsys.readouterr().out.splitlines()]
    assert "::error::Could not resolve tag from context. Ref is:" in lines


def test_version_flag() -> None:
    result = CliRunner().invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
