"""
Tests for InstallConfig flags and InstallPaths resolution.
"""

from __future__ import annotations

from pathlib import Path

from pixarch_installer.install_config import InstallConfig, InstallPaths, flag_name


def test_relative_manifest_paths_live_in_dotfiles(tmp_path: Path) -> None:
    paths = InstallPaths(dotfiles=tmp_path / "pixarch", home=tmp_path / "home")

    assert paths.dotfile("boot/grub/grubel") == tmp_path / "pixarch" / "boot" / "grub" / "grubel"


def test_absolute_manifest_paths_are_kept(tmp_path: Path) -> None:
    paths = InstallPaths(dotfiles=tmp_path / "pixarch", home=tmp_path / "home")
    themes = tmp_path / "shared" / "themes" / "grubel"

    assert paths.dotfile(str(themes)) == themes


def test_derived_home_locations(tmp_path: Path) -> None:
    paths = InstallPaths(dotfiles=tmp_path, home=tmp_path / "home")

    assert paths.config_dir == tmp_path / "home" / ".config"
    assert paths.aur_dir == tmp_path / "home" / "code" / "aur"


def test_paths_from_flags(tmp_path: Path) -> None:
    cfg = InstallConfig(log_file="x.log", dotfiles_dir=str(tmp_path / "d"), home_dir=str(tmp_path / "h"))

    paths = InstallPaths.from_config(cfg)

    assert paths.dotfiles == tmp_path / "d"
    assert paths.home == tmp_path / "h"
    assert paths.tmp_dir is None


def test_skip_flags() -> None:
    cfg = InstallConfig(log_file="x.log", skip_browsel=True)

    assert cfg.is_skipped("skip_browsel")
    assert not cfg.is_skipped("skip_i3")
    assert not cfg.is_skipped(None)
    assert flag_name("skip_browsel") == "--skip-browsel"
