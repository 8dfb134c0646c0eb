from __future__ import annotations

import logging

from ..lib.command import CommandError
from ..lib.pkg import pacman_sync_install, split_installed
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class CorePackagesStep:
    step_id = "10_core_packages"
    title = "Installing core packages via pacman"
    skip_flag = None
    skip_label = "core packages"

    def run(self, ctx: InstallCtx) -> None:
        missing, present = split_installed(ctx.manifest.core_packages)
        for p in present:
            logger.debug("Package already installed: %s", p)
        ctx.stats.packages_skipped += len(present)

        if not missing:
            logger.info("All packages already installed")
            return

        logger.info("Installing %d packages: %s", len(missing), " ".join(missing))
        try:
            pacman_sync_install(missing, dry_run=ctx.dry_run)
        except CommandError as e:
            logger.error("Failed to install packages: %s", e)
            return
        ctx.stats.packages_installed += len(missing)
