from __future__ import annotations

import logging

from ..lib.command import CommandError, run_cmd
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class SecurityToolsStep:
    step_id = "80_security"
    title = "Installing security tools"
    skip_flag = "skip_security"
    skip_label = "security tools"

    def run(self, ctx: InstallCtx) -> None:
        if not ctx.confirm("Install ClamAV and UFW via installation script?"):
            logger.info("Skipping security tools (user declined)")
            return

        script = ctx.paths.dotfile(ctx.manifest.security_script)
        if not script.is_file():
            logger.warning("%s not found in %s", script.name, script.parent)
            return

        try:
            run_cmd(["bash", str(script)], cwd=str(ctx.paths.dotfiles), dry_run=ctx.dry_run)
        except CommandError as e:
            logger.error("%s failed: %s", script.name, e)
            return
        logger.info("Security tools installed")
