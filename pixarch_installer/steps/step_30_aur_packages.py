from __future__ import annotations

import logging

from ..lib.aur import ensure_yay
from ..lib.command import CommandError
from ..lib.pkg import refresh_font_cache, yay_install
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class AurPackagesStep:
    step_id = "30_aur_packages"
    title = "Installing yay and AUR packages"
    skip_flag = "skip_aur"
    skip_label = "AUR packages"

    def run(self, ctx: InstallCtx) -> None:
        have_yay = ensure_yay(
            aur_dir=ctx.paths.aur_dir,
            repo=ctx.manifest.yay_repo,
            stats=ctx.stats,
            dry_run=ctx.dry_run,
        )
        if not have_yay:
            return

        fonts = ctx.manifest.aur_fonts
        try:
            yay_install(fonts, dry_run=ctx.dry_run)
        except CommandError as e:
            logger.warning("Failed to install AUR fonts: %s", e)
            return

        ctx.stats.packages_installed += len(fonts)
        refresh_font_cache(dry_run=ctx.dry_run)
