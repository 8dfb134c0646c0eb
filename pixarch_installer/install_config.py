from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class InstallConfig:
    """Flags for one run, as parsed from the command line."""

    log_file: str
    assume_yes: bool = False
    dry_run: bool = False
    verbose: bool = False
    quiet: bool = False
    no_backup: bool = False
    skip_i3: bool = False
    skip_qtile: bool = False
    skip_themes: bool = False
    skip_browsel: bool = False
    skip_security: bool = False
    skip_aur: bool = False
    dotfiles_dir: Optional[str] = None
    home_dir: Optional[str] = None
    manifest_path: Optional[str] = None

    def is_skipped(self, flag: Optional[str]) -> bool:
        if flag is None:
            return False
        return bool(getattr(self, flag))


def flag_name(attr: str) -> str:
    """skip_browsel -> --skip-browsel"""
    return "--" + attr.replace("_", "-")


@dataclass(frozen=True)
class InstallPaths:
    dotfiles: Path
    home: Path
    tmp_dir: Optional[Path] = None

    @classmethod
    def from_config(cls, cfg: InstallConfig) -> "InstallPaths":
        dotfiles = Path(cfg.dotfiles_dir).expanduser() if cfg.dotfiles_dir else Path.cwd()
        if cfg.home_dir:
            home = Path(cfg.home_dir).expanduser()
        else:
            home = Path(os.environ.get("HOME") or f"/home/{os.environ.get('USER', '')}")
        return cls(dotfiles=dotfiles.absolute(), home=home.absolute())

    @property
    def config_dir(self) -> Path:
        return self.home / ".config"

    @property
    def aur_dir(self) -> Path:
        return self.home / "code" / "aur"

    def dotfile(self, rel: str) -> Path:
        """Resolve a manifest path; relative ones live in the dotfiles tree."""
        p = Path(rel).expanduser()
        if p.is_absolute():
            return p
        return self.dotfiles / p
