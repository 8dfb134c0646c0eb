from __future__ import annotations

import logging

from ..lib.command import command_exists, run_cmd
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class XdgDirsStep:
    step_id = "20_xdg_dirs"
    title = "Setting up XDG user directories"
    skip_flag = None
    skip_label = "XDG user directories"

    def run(self, ctx: InstallCtx) -> None:
        if not command_exists("xdg-user-dirs-update"):
            logger.debug("xdg-user-dirs-update not found; leaving user directories alone")
            return

        r = run_cmd(["xdg-user-dirs-update"], check=False, dry_run=ctx.dry_run)
        if r.ok:
            logger.info("XDG user directories configured")
        else:
            logger.warning("xdg-user-dirs-update failed")
