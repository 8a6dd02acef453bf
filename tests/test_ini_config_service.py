# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from pydfm.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture(autouse=True)
def isolated_user_dir(monkeypatch, tmp_path):
    # Point platformdirs at an empty temp dir so a real user config never leaks in
    monkeypatch.setattr(
        "pydfm.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg" / appname),
    )
    return tmp_path / "usercfg"


def test_defaults_when_no_config_files():
    cfg = IniConfigService()
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get("document", "default_ext") is None


def test_project_root_config_is_used_when_present(tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[document]\ndefault_ext = txt\n[app]\ntitle = Repo\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get("document", "default_ext") == "txt"
    assert cfg.get("app", "title") == "Repo"


def test_user_dir_preferred_over_project_root(tmp_path, isolated_user_dir):
    user_ini = isolated_user_dir / IniConfigService.DEFAULT_APP_DIR / "config.ini"
    write_ini(user_ini, "[document]\ndefault_ext = usr\n")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[document]\ndefault_ext = prj\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get("document", "default_ext") == "usr"


def test_explicit_path_wins(tmp_path, isolated_user_dir):
    explicit = tmp_path / "explicit.ini"
    write_ini(explicit, "[app]\ntitle = Mine\n")
    write_ini(
        isolated_user_dir / IniConfigService.DEFAULT_APP_DIR / "config.ini",
        "[app]\ntitle = Theirs\n",
    )

    cfg = IniConfigService(explicit_path=explicit)
    assert cfg.get("app", "title") == "Mine"


def test_malformed_file_is_skipped(tmp_path):
    bad = tmp_path / "bad.ini"
    write_ini(bad, "this is not [ini\n")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[app]\ntitle = Fallback\n")

    cfg = IniConfigService(explicit_path=bad, project_root=proj_root)
    assert cfg.get("app", "title") == "Fallback"


def test_percent_signs_are_not_interpolated(tmp_path):
    ini = tmp_path / "c.ini"
    write_ini(ini, "[document]\nsave_prompt = 100% sure?\n")
    cfg = IniConfigService(explicit_path=ini, use_user_dir=False)
    assert cfg.get("document", "save_prompt") == "100% sure?"

