from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from pixarch_installer.lib.manifests import DEFAULT_CONFIGS

DEFAULT_COMMANDS = {
    "pacman",
    "sudo",
    "git",
    "yay",
    "makepkg",
    "patch",
    "fc-cache",
    "xdg-user-dirs-update",
    "grub-mkconfig",
    "systemctl",
    "bash",
}


class FakeSystem:
    """Stands in for subprocess.run and shutil.which.

    Every command is recorded. pacman -Q reports packages as missing; anything
    listed in `failing` exits 1; everything else succeeds.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.envs: List[Optional[Dict[str, str]]] = []
        self.commands = set(DEFAULT_COMMANDS)
        self.installed: set[str] = set()
        self.failing: List[Callable[[List[str]], bool]] = []

    def which(self, name: str, *args, **kwargs) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.commands else None

    def run(self, argv, *args, **kwargs) -> subprocess.CompletedProcess:
        argv = [str(a) for a in argv]
        self.calls.append(argv)
        self.envs.append(kwargs.get("env"))

        if argv[:2] == ["pacman", "-Q"]:
            rc = 0 if argv[2] in self.installed else 1
            return subprocess.CompletedProcess(argv, rc, stdout="", stderr="")

        if any(pred(argv) for pred in self.failing):
            return subprocess.CompletedProcess(argv, 1, stdout="", stderr="boom")

        if argv[:2] == ["yay", "-G"] and kwargs.get("cwd"):
            (Path(kwargs["cwd"]) / argv[2]).mkdir(parents=True, exist_ok=True)

        return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")

    def mutating_calls(self) -> List[List[str]]:
        return [c for c in self.calls if c[:2] != ["pacman", "-Q"]]

    def called_with(self, needle: str) -> bool:
        return any(needle in " ".join(c) for c in self.calls)


@pytest.fixture(autouse=True)
def regular_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "geteuid", lambda: 1000)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for h in list(getattr(root, "_pixarch_handlers", [])):
        root.removeHandler(h)
        h.close()
    setattr(root, "_pixarch_handlers", [])


@pytest.fixture
def fake_system(monkeypatch: pytest.MonkeyPatch) -> FakeSystem:
    fake = FakeSystem()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr("shutil.which", fake.which)
    return fake


@pytest.fixture
def dotfiles(tmp_path: Path) -> Path:
    root = tmp_path / "pixarch"
    for name in DEFAULT_CONFIGS:
        d = root / "config" / name
        d.mkdir(parents=True)
        (d / "config").write_text(f"# {name}\n", encoding="utf-8")
    for wm in ("i3", "qtile"):
        d = root / "flavours" / wm
        d.mkdir(parents=True)
        (d / "config").write_text(f"# {wm}\n", encoding="utf-8")
    (root / "boot" / "grub" / "grubel").mkdir(parents=True)
    (root / "boot" / "sddm" / "themes" / "pixarch_sddm").mkdir(parents=True)
    scripts = root / "installation_scripts"
    scripts.mkdir(parents=True)
    (scripts / "security.sh").write_text("#!/bin/bash\n", encoding="utf-8")
    (scripts / "theme.conf").write_text("[Theme]\nCurrent=pixarch_sddm\n", encoding="utf-8")
    patches = root / "applications" / "browsel"
    patches.mkdir(parents=True)
    (patches / "searxng.patch").write_text("--- PKGBUILD\n+++ PKGBUILD\n", encoding="utf-8")
    return root


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


def snapshot(root: Path) -> Dict[str, str]:
    """Map of every path under root to what it is (and where links point)."""
    out: Dict[str, str] = {}
    for p in sorted(root.rglob("*")):
        rel = str(p.relative_to(root))
        if p.is_symlink():
            out[rel] = "link:" + os.readlink(p)
        elif p.is_dir():
            out[rel] = "dir"
        else:
            out[rel] = "file:" + p.read_text(encoding="utf-8")
    return out


@pytest.fixture
def tree_snapshot() -> Callable[[Path], Dict[str, str]]:
    return snapshot
