from __future__ import annotations

import logging

from ..lib.command import CommandError
from ..lib.links import backup_and_link
from ..lib.pkg import pacman_install
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class WindowManagerStep:
    """Install one window manager and link its flavour from the dotfiles."""

    def __init__(self, name: str, *, step_id: str) -> None:
        self.name = name
        self.step_id = step_id
        self.title = f"Installing {name} window manager"
        self.skip_flag = f"skip_{name}"
        self.skip_label = name

    def run(self, ctx: InstallCtx) -> None:
        wm = ctx.manifest.window_manager(self.name)

        if not ctx.confirm(f"Install {wm.name} ({wm.package}) and link {wm.name} flavour from dotfiles?"):
            logger.info("Skipping %s (user declined)", wm.name)
            return

        try:
            pacman_install([wm.package], dry_run=ctx.dry_run)
        except CommandError as e:
            logger.error("Failed to install %s: %s", wm.name, e)
            return
        ctx.stats.packages_installed += 1

        backup_and_link(
            ctx.paths.dotfile(wm.flavour),
            ctx.paths.config_dir / wm.name,
            stats=ctx.stats,
            dry_run=ctx.dry_run,
            no_backup=ctx.cfg.no_backup,
        )
