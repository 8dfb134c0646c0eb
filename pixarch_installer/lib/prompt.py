from __future__ import annotations

import logging
import subprocess
from typing import Callable, Optional

from .command import command_exists

logger = logging.getLogger(__name__)


def ask_yes_no(
    prompt: str,
    *,
    assume_yes: bool = False,
    dry_run: bool = False,
    input_fn: Optional[Callable[[str], str]] = None,
) -> bool:
    """Ask a yes/no question.

    --yes accepts without asking. --dry-run declines so the preview never
    commits to anything. Otherwise ask with dialog if it is installed, or on
    the terminal.
    """

    if assume_yes:
        logger.info("Non-interactive: auto-accepting: %s", prompt)
        return True
    if dry_run:
        logger.info("DRY-RUN: would prompt: %s (treating as 'no' for preview)", prompt)
        return False

    if command_exists("dialog"):
        # dialog draws on the terminal; leave stdio alone.
        p = subprocess.run(["dialog", "--stdout", "--yesno", prompt, "7", "60"])
        return p.returncode == 0

    try:
        answer = (input_fn or input)(f"{prompt} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")
