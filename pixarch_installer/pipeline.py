from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .install_config import InstallConfig, InstallPaths, flag_name
from .lib.command import CommandError
from .lib.manifests import Manifest
from .lib.prompt import ask_yes_no
from .stats import RunStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallCtx:
    cfg: InstallConfig
    paths: InstallPaths
    manifest: Manifest
    stats: RunStats

    @property
    def dry_run(self) -> bool:
        return self.cfg.dry_run

    def confirm(self, prompt: str) -> bool:
        return ask_yes_no(prompt, assume_yes=self.cfg.assume_yes, dry_run=self.cfg.dry_run)


class Step(Protocol):
    """A single pipeline step.

    skip_flag names the InstallConfig attribute that disables the step, and
    skip_label is what the skip message calls it.
    """

    step_id: str
    title: str
    skip_flag: Optional[str]
    skip_label: str

    def run(self, ctx: InstallCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    skipped_steps: List[str]
    total_steps: int


def run_pipeline(*, ctx: InstallCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order.

    A step disabled by its skip flag only logs that it was skipped. A command
    failure escaping a step is logged and the next step still runs.
    """

    ran: List[str] = []
    skipped: List[str] = []

    enabled = [s for s in steps if not ctx.cfg.is_skipped(s.skip_flag)]
    total = len(enabled)
    logger.info("Total steps to execute: %d", total)

    current = 0
    for step in steps:
        if ctx.cfg.is_skipped(step.skip_flag):
            logger.info("Skipping %s (%s)", step.skip_label, flag_name(step.skip_flag or ""))
            skipped.append(step.step_id)
            continue

        current += 1
        logger.info("Step %d/%d: %s", current, total, step.title)
        try:
            step.run(ctx)
        except CommandError as e:
            logger.error("Step %s failed: %s", step.step_id, e)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran, skipped_steps=skipped, total_steps=total)
