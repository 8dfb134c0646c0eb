from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..stats import RunStats

logger = logging.getLogger(__name__)


def _same_target(src: Path, dest: Path) -> bool:
    if not dest.is_symlink():
        return False
    return os.path.realpath(dest) == os.path.realpath(src)


def backup_name(dest: Path, *, now: Optional[datetime] = None) -> Path:
    """<dest>.bak.<timestamp>, with a numeric suffix if that name is taken."""

    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    base = dest.with_name(f"{dest.name}.bak.{stamp}")
    candidate = base
    n = 1
    while os.path.lexists(candidate):
        candidate = base.with_name(f"{base.name}.{n}")
        n += 1
    return candidate


def backup_and_link(
    src: Path,
    dest: Path,
    *,
    stats: RunStats,
    dry_run: bool = False,
    no_backup: bool = False,
) -> bool:
    """Point dest at src, moving whatever was at dest aside first.

    Returns True when dest is (or, in preview, would be) a link to src.
    """

    if not src.exists():
        logger.warning("Source does not exist: %s (skipping link)", src)
        return False

    if _same_target(src, dest):
        logger.info("Already linked: %s -> %s", dest, src)
        stats.configs_linked += 1
        return True

    if os.path.lexists(dest):
        if not no_backup:
            backup = backup_name(dest)
            logger.info("Backing up existing %s -> %s", dest, backup)
            if dry_run:
                logger.debug("DRY-RUN: mv %s %s", dest, backup)
            else:
                try:
                    os.rename(dest, backup)
                except OSError as e:
                    logger.error("Failed to backup %s: %s", dest, e)
                    return False
        elif dest.is_dir() and not dest.is_symlink():
            logger.error("Refusing to replace directory %s without a backup", dest)
            return False
        elif dry_run:
            logger.debug("DRY-RUN: rm %s", dest)
        else:
            try:
                dest.unlink()
            except OSError as e:
                logger.error("Failed to remove %s: %s", dest, e)
                return False

    if dry_run:
        logger.debug("DRY-RUN: ln -s %s %s", src, dest)
    else:
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.symlink_to(src.absolute())
        except OSError as e:
            logger.error("Failed to create symlink: %s -> %s (%s)", dest, src, e)
            return False

    logger.info("Linked: %s -> %s", dest, src)
    stats.configs_linked += 1
    return True
