from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .command import run_cmd

logger = logging.getLogger(__name__)


def pacman_is_installed(package: str) -> bool:
    """Return True if pacman reports the package as installed.

    Read-only, so it runs even when previewing.
    """
    r = run_cmd(["pacman", "-Q", package], check=False)
    return r.ok


def split_installed(packages: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split into (missing, already installed)."""
    missing: List[str] = []
    present: List[str] = []
    for p in packages:
        if pacman_is_installed(p):
            present.append(p)
        else:
            missing.append(p)
    return missing, present


def pacman_sync_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    """Full system upgrade plus the given packages."""
    if not packages:
        return
    run_cmd(["sudo", "pacman", "-Syu", "--needed", "--noconfirm", *packages], dry_run=dry_run)


def pacman_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    if not packages:
        return
    run_cmd(["sudo", "pacman", "-S", "--noconfirm", "--needed", *packages], dry_run=dry_run)


def yay_install(packages: Sequence[str], *, dry_run: bool = False) -> None:
    if not packages:
        return
    run_cmd(["yay", "-S", "--noconfirm", "--needed", *packages], dry_run=dry_run)


def refresh_font_cache(*, dry_run: bool = False) -> bool:
    r = run_cmd(["fc-cache", "-fv"], check=False, dry_run=dry_run)
    if r.ok:
        logger.info("Font cache updated")
    else:
        logger.warning("Font cache update failed")
    return r.ok
