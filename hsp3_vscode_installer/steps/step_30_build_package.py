from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import StepFailure
from ..messages import message
from .base import StepCtx, run_step_cmd

logger = logging.getLogger(__name__)


class BuildPackageStep:
    step_id = "30_build_package"

    def __init__(self, ctx: StepCtx) -> None:
        self.ctx = ctx

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = self.ctx.cfg
        artifact = cfg.artifact_path

        run_step_cmd(self.ctx, self.step_id, [cfg.package_manager, "run", cfg.build_script])

        if not self.ctx.dry_run and cfg.strict and not artifact.is_file():
            raise StepFailure(self.step_id, message("artifact_missing", cfg.lang, artifact=artifact))

        logger.info("Extension package: %s", artifact)
        state["artifact"] = str(artifact)
        return state
