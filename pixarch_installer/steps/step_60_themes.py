from __future__ import annotations

import logging

from ..lib.command import CommandError, run_cmd
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)

GRUB_DEFAULTS = "/etc/default/grub"
GRUB_CFG = "/boot/grub/grub.cfg"
SDDM_CONF = "/etc/sddm.conf"


class ThemesStep:
    step_id = "60_themes"
    title = "Installing GRUB and SDDM themes"
    skip_flag = "skip_themes"
    skip_label = "themes"

    def _install_grub_theme(self, ctx: InstallCtx) -> None:
        src = ctx.paths.dotfile(ctx.manifest.grub_src)
        if not src.is_dir():
            logger.info("No GRUB theme at %s", src)
            return

        try:
            run_cmd(["sudo", "cp", "-r", str(src), ctx.manifest.grub_dest], dry_run=ctx.dry_run)
        except CommandError as e:
            logger.error("Failed to copy GRUB theme: %s", e)
            return
        logger.info("GRUB theme copied")

        expr = f's|#GRUB_THEME=.*|GRUB_THEME="{ctx.manifest.grub_theme_file}"|'
        r = run_cmd(["sudo", "sed", "-i", expr, GRUB_DEFAULTS], check=False, dry_run=ctx.dry_run)
        if not r.ok:
            logger.warning("Failed to update GRUB config")
            return
        logger.info("GRUB config updated")

        r = run_cmd(["sudo", "grub-mkconfig", "-o", GRUB_CFG], check=False, dry_run=ctx.dry_run)
        if r.ok:
            logger.info("GRUB configuration regenerated")
        else:
            logger.warning("grub-mkconfig failed")

    def _install_sddm_theme(self, ctx: InstallCtx) -> None:
        src = ctx.paths.dotfile(ctx.manifest.sddm_src)
        if not src.is_dir():
            logger.info("No SDDM theme at %s", src)
            return

        try:
            run_cmd(["sudo", "cp", "-r", str(src), ctx.manifest.sddm_dest], dry_run=ctx.dry_run)
        except CommandError as e:
            logger.error("Failed to copy SDDM theme: %s", e)
            return
        logger.info("SDDM theme copied")

        conf = ctx.paths.dotfile(ctx.manifest.sddm_conf)
        if conf.is_file():
            try:
                run_cmd(["sudo", "cp", str(conf), SDDM_CONF], dry_run=ctx.dry_run)
            except CommandError as e:
                logger.error("Failed to install %s: %s", SDDM_CONF, e)

        r = run_cmd(["sudo", "systemctl", "enable", "--now", "sddm"], check=False, dry_run=ctx.dry_run)
        if r.ok:
            logger.info("SDDM enabled and started")
        else:
            logger.warning("Failed to enable sddm service")

    def run(self, ctx: InstallCtx) -> None:
        if not ctx.confirm("Copy GRUB theme and SDDM theme to system locations and update config? (requires sudo)"):
            logger.info("Skipping themes (user declined)")
            return

        self._install_grub_theme(ctx)
        self._install_sddm_theme(ctx)
