from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import StepFailure
from ..messages import message
from .base import StepCtx, run_step_cmd

logger = logging.getLogger(__name__)


class InstallExtensionStep:
    step_id = "40_install_extension"

    def __init__(self, ctx: StepCtx) -> None:
        self.ctx = ctx

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = self.ctx.cfg

        if not self.ctx.dry_run and cfg.strict and not cfg.artifact_path.is_file():
            raise StepFailure(self.step_id, message("artifact_missing", cfg.lang, artifact=cfg.artifact_path))

        # The editor CLI resolves the file against the project dir (cwd).
        argv = [cfg.editor, "--install-extension", cfg.artifact]
        if cfg.force_extension_install:
            argv.append("--force")
        run_step_cmd(self.ctx, self.step_id, argv)

        logger.info("Installed %s into %s", cfg.artifact, cfg.editor)
        return state
