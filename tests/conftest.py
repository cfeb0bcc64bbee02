from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Set

import pytest

from hsp3_vscode_installer.lib import command
from hsp3_vscode_installer.logging_utils import reset_logging

ARTIFACT = "hsp3-analyzer-mini.vsix"


class FakeToolchain:
    """Stands in for npm/code: records every invocation, never spawns a process."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.missing: Set[str] = set()
        self.returncodes: Dict[str, int] = {}
        self.produce_artifact = True
        self.versions = {"npm": "10.8.2", "code": "1.94.0\nabc123\nx64"}

    def which(self, name: str) -> Optional[str]:
        if name in self.missing:
            return None
        return f"/usr/bin/{name}"

    def fail(self, key: str, returncode: int = 1) -> None:
        """key is the tool name plus its first argument, e.g. "npm install"."""
        self.returncodes[key] = returncode

    def run(self, argv, **kwargs) -> subprocess.CompletedProcess:
        cmd = [os.path.basename(argv[0]), *argv[1:]]
        self.calls.append(cmd)
        key = " ".join(cmd[:2])
        rc = self.returncodes.get(key, 0)

        if rc == 0 and cmd[1:2] == ["run"] and self.produce_artifact:
            Path(kwargs.get("cwd") or ".", ARTIFACT).write_bytes(b"PK\x03\x04")

        stdout = None
        if kwargs.get("stdout") == subprocess.PIPE:
            stdout = self.versions.get(cmd[0], "") + "\n" if cmd[1:2] == ["--version"] else ""
        stderr = "boom\n" if rc and kwargs.get("stderr") == subprocess.PIPE else None
        return subprocess.CompletedProcess(argv, rc, stdout=stdout, stderr=stderr)


@pytest.fixture
def toolchain(monkeypatch) -> FakeToolchain:
    fake = FakeToolchain()
    monkeypatch.setattr(command, "resolve_executable", fake.which)
    monkeypatch.setattr(command.subprocess, "run", fake.run)
    return fake


@pytest.fixture(autouse=True)
def _isolated_logging():
    yield
    reset_logging()
