from __future__ import annotations

import pytest

from hsp3_vscode_installer.errors import ToolMissing
from hsp3_vscode_installer.lib.toolchain import Tool, check_tool, check_toolchain


def test_check_tool_returns_first_version_line(toolchain) -> None:
    assert check_tool(Tool.named("code")) == "1.94.0"
    assert toolchain.calls == [["code", "--version"]]


def test_missing_tool_raises_with_localized_hint(toolchain) -> None:
    toolchain.missing.add("npm")
    with pytest.raises(ToolMissing) as exc:
        check_tool(Tool.named("npm"))
    assert exc.value.tool == "npm"
    assert "npm をインストールしてください" in str(exc.value)
    assert exc.value.exit_code == 1


def test_failing_version_query_counts_as_missing(toolchain) -> None:
    toolchain.fail("npm --version", 127)
    with pytest.raises(ToolMissing) as exc:
        check_tool(Tool.named("npm"), lang="en")
    assert str(exc.value).startswith("Please install npm")


def test_unknown_tool_gets_generic_hint(toolchain) -> None:
    toolchain.missing.add("yarn")
    with pytest.raises(ToolMissing, match="yarn"):
        check_tool(Tool.named("yarn"), lang="en")


def test_check_toolchain_stops_at_first_missing_tool(toolchain) -> None:
    toolchain.missing.add("npm")
    with pytest.raises(ToolMissing):
        check_toolchain([Tool.named("npm"), Tool.named("code")])
    assert toolchain.calls == []


def test_check_toolchain_collects_versions(toolchain) -> None:
    versions = check_toolchain([Tool.named("npm"), Tool.named("code")])
    assert versions == {"npm": "10.8.2", "code": "1.94.0"}


def test_dry_run_skips_version_queries(toolchain) -> None:
    assert check_tool(Tool.named("npm"), dry_run=True) == ""
    assert toolchain.calls == []
