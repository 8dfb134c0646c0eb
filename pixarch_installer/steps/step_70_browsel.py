from __future__ import annotations

import logging

from ..lib.aur import build_patched_package, ensure_yay, patch_name
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class BrowselStep:
    """searxng + surf, built from the AUR with the dotfiles' local patches."""

    step_id = "70_browsel"
    title = "Installing browsel (searxng + surf)"
    skip_flag = "skip_browsel"
    skip_label = "browsel"

    def run(self, ctx: InstallCtx) -> None:
        if not ctx.confirm("Install searxng and surf (browsel) from AUR and apply local patches?"):
            logger.info("Skipping browsel (user declined)")
            return

        have_yay = ensure_yay(
            aur_dir=ctx.paths.aur_dir,
            repo=ctx.manifest.yay_repo,
            stats=ctx.stats,
            dry_run=ctx.dry_run,
        )
        if not have_yay:
            logger.warning("yay unavailable; cannot build browsel")
            return

        patch_dir = ctx.paths.dotfile(ctx.manifest.browsel_patch_dir)
        for package in ctx.manifest.browsel_packages:
            build_patched_package(
                package,
                aur_dir=ctx.paths.aur_dir,
                stats=ctx.stats,
                patch_file=patch_dir / patch_name(package),
                build_dir=ctx.paths.tmp_dir,
                dry_run=ctx.dry_run,
            )
