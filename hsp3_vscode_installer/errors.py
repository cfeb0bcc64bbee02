from __future__ import annotations

from typing import Optional


class InstallerError(Exception):
    """Base error for failures the CLI reports and turns into an exit code."""

    exit_code = 1


class ConfigError(InstallerError):
    pass


class ToolMissing(InstallerError):
    """A required external tool could not be located or invoked."""

    def __init__(self, tool: str, hint: str) -> None:
        super().__init__(hint)
        self.tool = tool
        self.hint = hint


class StepFailure(InstallerError):
    """A pipeline step ran its command and the command failed."""

    def __init__(self, step_id: str, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.step_id = step_id
        self.returncode = returncode

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Propagate the tool's own status, like the last command of a shell script.
        if self.returncode and self.returncode < 0:
            # Killed by a signal: report it the way a shell does.
            return 128 - self.returncode
        if self.returncode:
            return self.returncode
        return 1
