from __future__ import annotations

from pathlib import Path

import pytest

from hsp3_vscode_installer.state_store import (
    ensure_defaults,
    is_step_completed,
    load_state,
    mark_step_completed,
    reset_completed,
    save_state,
)


def test_missing_state_file_loads_empty(tmp_path: Path) -> None:
    assert load_state(str(tmp_path / "state.json")) == {}


def test_ensure_defaults_keeps_recorded_values() -> None:
    state = ensure_defaults({"toolchain": {"npm": "10.8.2"}})
    assert state["toolchain"] == {"npm": "10.8.2"}
    assert state["execution"]["completed_steps"] == []
    assert state["execution"]["current_step"] is None
    assert state["artifact"] is None


def test_mark_completed_is_idempotent() -> None:
    state = ensure_defaults({})
    mark_step_completed(state, "20_install_deps")
    mark_step_completed(state, "20_install_deps")
    assert state["execution"]["completed_steps"] == ["20_install_deps"]
    assert is_step_completed(state, "20_install_deps")
    assert not is_step_completed(state, "30_build_package")

    reset_completed(state)
    assert not is_step_completed(state, "20_install_deps")


@pytest.mark.parametrize("name", ["state.json", "state.yaml"])
def test_save_then_load(tmp_path: Path, name: str) -> None:
    path = str(tmp_path / "nested" / name)
    state = ensure_defaults({})
    mark_step_completed(state, "10_check_toolchain")
    save_state(path, state)
    assert load_state(path)["execution"]["completed_steps"] == ["10_check_toolchain"]


def test_non_mapping_state_is_rejected(tmp_path: Path) -> None:
    p = tmp_path / "state.json"
    p.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_state(str(p))
