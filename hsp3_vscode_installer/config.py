from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .lib.toolchain import Tool
from .messages import DEFAULT_LANG


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)
    project_dir: str = "."

    @property
    def package_manager(self) -> str:
        return str(self.raw.get("package_manager") or "npm")

    @property
    def install_args(self) -> List[str]:
        args = self.raw.get("install_args")
        if args is None:
            return ["install"]
        return [str(a) for a in args]

    @property
    def build_script(self) -> str:
        return str(self.raw.get("build_script") or "package")

    @property
    def artifact(self) -> str:
        return str(self.raw.get("artifact") or "hsp3-analyzer-mini.vsix")

    @property
    def artifact_path(self) -> Path:
        return Path(self.project_dir) / self.artifact

    @property
    def editor(self) -> str:
        return str(self.raw.get("editor") or "code")

    @property
    def force_extension_install(self) -> bool:
        return bool(self.raw.get("force_extension_install", False))

    @property
    def strict(self) -> bool:
        return bool(self.raw.get("strict", True))

    @property
    def lang(self) -> str:
        return str(self.raw.get("lang") or DEFAULT_LANG)

    @property
    def required_tools(self) -> List[Tool]:
        names = self.raw.get("required_tools")
        if names is None:
            names = [self.package_manager, self.editor]
        return [Tool.named(str(n)) for n in names]

    def with_overrides(self, **overrides: Any) -> "InstallerConfig":
        """Return a copy with non-None overrides applied on top of the file values."""
        raw = dict(self.raw)
        raw.update({k: v for k, v in overrides.items() if v is not None})
        return replace(self, raw=raw)


def load_config(path: Optional[str], *, project_dir: str = ".", required: bool = False) -> InstallerConfig:
    """Load installer.yaml.

    A missing file yields defaults unless the caller named it explicitly.
    """

    if not path:
        return InstallerConfig(project_dir=project_dir)

    p = Path(path)
    if not p.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return InstallerConfig(project_dir=project_dir)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("installer config must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")

    return InstallerConfig(raw=raw, project_dir=project_dir)
