from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .config import InstallerConfig, load_config
from .errors import InstallerError
from .lib.env import PATHS
from .logging_utils import configure_logging
from .messages import MESSAGES, message
from .pipeline import PipelineResult, Step, run_pipeline
from .state_store import ensure_defaults, load_state, reset_completed, save_state
from .steps import (
    BuildPackageStep,
    CheckToolchainStep,
    InstallDepsStep,
    InstallExtensionStep,
    StepCtx,
)

logger = logging.getLogger(__name__)


def build_steps(ctx: StepCtx) -> List[Step]:
    return [
        CheckToolchainStep(ctx),
        InstallDepsStep(ctx),
        BuildPackageStep(ctx),
        InstallExtensionStep(ctx),
    ]


def run(
    cfg: InstallerConfig,
    *,
    state_path: str,
    log_path: Optional[str] = None,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    resume: bool = False,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the install workflow, recording the run in the state file."""

    if log_path is not None:
        actual_log_path = configure_logging(log_path=log_path)
    else:
        actual_log_path = None

    state = ensure_defaults(load_state(state_path))
    state["config"] = dict(cfg.raw)
    exe = state.setdefault("execution", {})
    exe["log_path"] = actual_log_path
    exe["errors"] = []
    if not resume:
        reset_completed(state)

    steps = build_steps(StepCtx(cfg=cfg, dry_run=dry_run))

    try:
        result = run_pipeline(
            state=state,
            steps=steps,
            start_at=start_at,
            stop_after=stop_after,
            resume=resume,
            strict=cfg.strict,
        )
        state = result.state
        state.setdefault("execution", {})["summary"] = {
            "ran_steps": result.ran_steps,
            "skipped_steps": result.skipped_steps,
            "failed_steps": result.failed_steps,
        }
        return result
    except Exception as e:
        if isinstance(e, InstallerError):
            # main() reports it to the operator; the state file keeps the record.
            logger.debug("Installer failed: %s", e)
        else:
            logger.exception("Installer failed")
        state.setdefault("execution", {}).setdefault("errors", []).append(
            {
                "step": (state.get("execution") or {}).get("current_step"),
                "error": str(e),
            }
        )
        raise
    finally:
        save_state(state_path, state)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hsp3-vscode-installer",
        description="Build the HSP3 VSCode extension and install it into the editor.",
    )
    p.add_argument("--project-dir", default=".", help="Extension source directory (default: cwd)")
    p.add_argument("--config", default=None, help=f"Installer config (yaml, default: {PATHS.config_default})")
    p.add_argument("--state", default=None, help=f"Run record (json|yaml, default: {PATHS.state_default})")
    p.add_argument("--log", default=None, help=f"Log file (default: {PATHS.log_default})")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 30_build_package)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--resume", action="store_true", help="Skip steps completed by a previous run")
    p.add_argument("--lax", action="store_true", help="Keep going when dependency install or build fails")
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("--lang", choices=sorted(MESSAGES), default=None, help="Message language")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    project_dir = args.project_dir
    state_path = args.state or os.path.join(project_dir, PATHS.state_default)
    log_path = args.log or os.path.join(project_dir, PATHS.log_default)

    try:
        cfg = load_config(
            args.config or os.path.join(project_dir, PATHS.config_default),
            project_dir=project_dir,
            required=args.config is not None,
        )
        overrides: Dict[str, Any] = {"lang": args.lang}
        if args.lax:
            overrides["strict"] = False
        cfg = cfg.with_overrides(**overrides)

        result = run(
            cfg,
            state_path=state_path,
            log_path=log_path,
            start_at=args.start_at,
            stop_after=args.stop_after,
            resume=bool(args.resume),
            dry_run=bool(args.dry_run),
        )
    except InstallerError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code
    except ValueError as e:
        # Unknown step ids or an unreadable state file.
        print(str(e), file=sys.stderr)
        return 2

    if not args.dry_run and InstallExtensionStep.step_id in result.ran_steps:
        print(message("done", cfg.lang, artifact=cfg.artifact))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
