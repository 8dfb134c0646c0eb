from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Dict, Optional

from ..stats import RunStats
from .command import CommandError, command_exists, run_cmd

logger = logging.getLogger(__name__)


def patch_name(package: str) -> str:
    """searxng-git -> searxng.patch"""
    return package.removesuffix("-git") + ".patch"


def ensure_yay(*, aur_dir: Path, repo: str, stats: RunStats, dry_run: bool = False) -> bool:
    """Build and install yay from the AUR unless it is already on PATH.

    Returns True if yay is (or, in preview, would be) available afterwards.
    """

    if command_exists("yay"):
        logger.info("yay already installed at %s", shutil.which("yay"))
        return True

    yay_dir = aur_dir / "yay"
    logger.info("Installing yay into %s", yay_dir)

    if dry_run:
        logger.debug("DRY-RUN: mkdir -p %s", aur_dir)
        run_cmd(["git", "clone", repo, str(yay_dir)], dry_run=True)
        run_cmd(["makepkg", "-si", "--noconfirm"], cwd=str(yay_dir), dry_run=True)
        return True

    try:
        aur_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create AUR directory %s: %s", aur_dir, e)
        return False

    if not yay_dir.exists():
        try:
            run_cmd(["git", "clone", repo, str(yay_dir)])
        except CommandError as e:
            logger.error("Failed to clone yay repository: %s", e)
            return False

    # makepkg refuses to run as root; it calls sudo itself for the install.
    try:
        run_cmd(["makepkg", "-si", "--noconfirm"], cwd=str(yay_dir))
    except CommandError as e:
        logger.error("Failed to build/install yay: %s", e)
        return False

    logger.info("yay installed successfully")
    stats.packages_installed += 1
    return True


def build_patched_package(
    package: str,
    *,
    aur_dir: Path,
    stats: RunStats,
    patch_file: Optional[Path] = None,
    build_dir: Optional[Path] = None,
    dry_run: bool = False,
) -> bool:
    """Fetch an AUR package's build files, apply a local patch and build it."""

    pkg_dir = aur_dir / package
    logger.info("Building %s...", package)

    if os.path.lexists(pkg_dir):
        if dry_run:
            logger.debug("DRY-RUN: rm -rf %s", pkg_dir)
        else:
            try:
                shutil.rmtree(pkg_dir)
            except OSError as e:
                logger.error("Failed to remove stale checkout %s: %s", pkg_dir, e)
                return False

    if not dry_run:
        try:
            aur_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create AUR directory %s: %s", aur_dir, e)
            return False

    try:
        run_cmd(["yay", "-G", package], cwd=str(aur_dir), dry_run=dry_run)
    except CommandError as e:
        logger.error("Failed to get %s from AUR: %s", package, e)
        return False

    if not dry_run and not pkg_dir.is_dir():
        logger.error("yay -G %s did not produce %s", package, pkg_dir)
        return False

    if patch_file is not None and patch_file.is_file():
        r = run_cmd(["patch", "-p0", "-i", str(patch_file)], cwd=str(pkg_dir), check=False, dry_run=dry_run)
        if r.ok:
            logger.info("%s patch applied", package)
        else:
            logger.warning("%s patch failed", package)

    env: Dict[str, str] = {}
    if build_dir is not None:
        env["BUILDDIR"] = str(build_dir / package)

    try:
        run_cmd(["makepkg", "-si", "--noconfirm"], cwd=str(pkg_dir), env=env, dry_run=dry_run)
    except CommandError as e:
        logger.error("makepkg %s failed: %s", package, e)
        return False

    logger.info("%s installed", package)
    stats.packages_installed += 1
    return True
