from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.toolchain import check_toolchain
from .base import StepCtx

logger = logging.getLogger(__name__)


class CheckToolchainStep:
    step_id = "10_check_toolchain"
    # Tools can disappear between runs, so --resume re-checks them.
    resumable = False

    def __init__(self, ctx: StepCtx) -> None:
        self.ctx = ctx

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        # ToolMissing propagates: nothing else may run without the toolchain.
        versions = check_toolchain(
            self.ctx.cfg.required_tools,
            lang=self.ctx.cfg.lang,
            dry_run=self.ctx.dry_run,
        )
        state.setdefault("toolchain", {}).update(versions)
        return state
