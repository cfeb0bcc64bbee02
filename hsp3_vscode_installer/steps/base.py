from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import InstallerConfig
from ..errors import StepFailure
from ..lib.command import CmdResult, CommandFailed, CommandNotFound, run_cmd
from ..messages import message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepCtx:
    cfg: InstallerConfig
    dry_run: bool = False

    @property
    def cwd(self) -> str:
        return self.cfg.project_dir


def run_step_cmd(ctx: StepCtx, step_id: str, argv: Sequence[str]) -> CmdResult:
    """Run one step command in the project dir; failures become StepFailure."""

    try:
        return run_cmd(argv, cwd=ctx.cwd, dry_run=ctx.dry_run)
    except CommandFailed as e:
        raise StepFailure(
            step_id,
            message("step_failed", ctx.cfg.lang, step=step_id, code=e.returncode),
            returncode=e.returncode,
        ) from e
    except CommandNotFound as e:
        raise StepFailure(step_id, str(e)) from e
