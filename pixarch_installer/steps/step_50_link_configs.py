from __future__ import annotations

import logging

from ..lib.links import backup_and_link
from ..pipeline import InstallCtx

logger = logging.getLogger(__name__)


class LinkConfigsStep:
    step_id = "50_link_configs"
    title = "Linking configuration files"
    skip_flag = None
    skip_label = "configuration links"

    def run(self, ctx: InstallCtx) -> None:
        config_dir = ctx.paths.config_dir
        if ctx.dry_run:
            logger.debug("DRY-RUN: mkdir -p %s", config_dir)
        else:
            try:
                config_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error("Failed to create %s: %s", config_dir, e)
                return

        linked = 0
        for name in ctx.manifest.configs:
            ok = backup_and_link(
                ctx.paths.dotfile(f"config/{name}"),
                config_dir / name,
                stats=ctx.stats,
                dry_run=ctx.dry_run,
                no_backup=ctx.cfg.no_backup,
            )
            linked += int(ok)

        logger.info("Linked %d/%d configs", linked, len(ctx.manifest.configs))
