"""
Tests for the YAML package manifest.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pixarch_installer.lib.manifests import DEFAULT_CONFIGS, DEFAULT_CORE_PACKAGES, load_manifest


def test_shipped_manifest_matches_builtin_defaults() -> None:
    m = load_manifest()

    assert m.core_packages == DEFAULT_CORE_PACKAGES
    assert m.configs == DEFAULT_CONFIGS
    assert m.aur_fonts == ["ttf-monocraft"]
    assert m.browsel_packages == ["searxng-git", "surf-git"]
    assert m.window_manager("i3").package == "i3-wm"
    assert m.window_manager("qtile").flavour == "flavours/qtile"
    assert m.security_script == "installation_scripts/security.sh"


def test_partial_manifest_falls_back_to_defaults(tmp_path: Path) -> None:
    p = tmp_path / "packages.yaml"
    p.write_text("pacman:\n  core: [vim, git]\nconfigs: [vim]\n", encoding="utf-8")

    m = load_manifest(str(p))

    assert m.core_packages == ["vim", "git"]
    assert m.configs == ["vim"]
    assert m.yay_repo == "https://aur.archlinux.org/yay.git"
    assert m.grub_dest == "/boot/grub/"
    assert m.window_manager("i3").package == "i3-wm"


def test_manifest_must_be_a_mapping(tmp_path: Path) -> None:
    p = tmp_path / "packages.yaml"
    p.write_text("- vim\n- git\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_manifest(str(p))


def test_package_list_must_be_a_list(tmp_path: Path) -> None:
    p = tmp_path / "packages.yaml"
    p.write_text("pacman:\n  core: vim\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_manifest(str(p))


@pytest.mark.parametrize(
    "text",
    [
        "pacman: [go, vim]\n",
        "themes: boot/grub\n",
        "window_managers:\n  i3: i3-wm\n",
        "browsel:\n  packages: surf-git\n",
        "aur:\n  fonts: ttf-monocraft\n",
    ],
)
def test_malformed_sections_are_rejected_on_load(tmp_path: Path, text: str) -> None:
    p = tmp_path / "packages.yaml"
    p.write_text(text, encoding="utf-8")

    with pytest.raises(ValueError):
        load_manifest(str(p))


def test_missing_manifest(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest(str(tmp_path / "nope.yaml"))


def test_unknown_window_manager() -> None:
    with pytest.raises(KeyError):
        load_manifest().window_manager("sway")
