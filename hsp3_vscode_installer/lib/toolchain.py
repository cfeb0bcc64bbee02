from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from ..errors import ToolMissing
from ..messages import DEFAULT_LANG, install_hint
from .command import CommandFailed, CommandNotFound, run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tool:
    """An external tool the installer needs before it touches anything."""

    name: str
    version_argv: Tuple[str, ...]

    @classmethod
    def named(cls, name: str) -> "Tool":
        return cls(name=name, version_argv=(name, "--version"))


def check_tool(tool: Tool, *, lang: str = DEFAULT_LANG, dry_run: bool = False) -> str:
    """Return the tool's version string, or raise ToolMissing."""

    try:
        r = run_cmd(tool.version_argv, capture=True, dry_run=dry_run)
    except (CommandNotFound, CommandFailed) as e:
        logger.error("Toolchain check failed for %s: %s", tool.name, e)
        raise ToolMissing(tool.name, install_hint(tool.name, lang)) from e

    lines = r.stdout.strip().splitlines()
    version = lines[0].strip() if lines else ""
    logger.info("Found %s %s", tool.name, version or "(version unknown)")
    return version


def check_toolchain(
    tools: Iterable[Tool],
    *,
    lang: str = DEFAULT_LANG,
    dry_run: bool = False,
) -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for tool in tools:
        versions[tool.name] = check_tool(tool, lang=lang, dry_run=dry_run)
    return versions
