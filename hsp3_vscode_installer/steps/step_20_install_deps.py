from __future__ import annotations

import logging
from typing import Any, Dict

from .base import StepCtx, run_step_cmd

logger = logging.getLogger(__name__)


class InstallDepsStep:
    step_id = "20_install_deps"

    def __init__(self, ctx: StepCtx) -> None:
        self.ctx = ctx

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = self.ctx.cfg
        run_step_cmd(self.ctx, self.step_id, [cfg.package_manager, *cfg.install_args])
        return state
