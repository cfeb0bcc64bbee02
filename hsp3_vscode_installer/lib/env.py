from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    config_default: str = "installer.yaml"
    state_default: str = ".hsp3-installer/state.json"
    log_default: str = ".hsp3-installer/install.log"


PATHS = Paths()
