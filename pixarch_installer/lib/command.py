from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    """A command exited non-zero. Recoverable: callers log it and carry on."""

    def __init__(self, result: CmdResult) -> None:
        self.result = result
        msg = f"Command failed (exit {result.returncode}): {fmt_argv(result.argv)}"
        if result.stderr.strip():
            msg += f"\n{result.stderr.strip()}"
        super().__init__(msg)


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def command_exists(name: str) -> bool:
    return shutil.which(name) is not None


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command, or only log it when previewing.

    - Always logs the command at debug level.
    - dry_run logs a DRY-RUN line and reports success without executing.
    - Captures stdout/stderr and logs them at debug level.
    - check raises CommandError on a non-zero exit.
    """

    argv_list = list(argv)
    logger.debug("Executing: %s", fmt_argv(argv_list))

    if dry_run:
        logger.info("DRY-RUN: %s", fmt_argv(argv_list))
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
    except FileNotFoundError as e:
        result = CmdResult(argv=argv_list, returncode=127, stdout="", stderr=str(e))
    else:
        result = CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout or "", stderr=p.stderr or "")

    if result.stdout.strip():
        logger.debug("Output: %s", result.stdout.strip())
    if result.stderr.strip():
        logger.debug("Error output: %s", result.stderr.strip())

    if check and not result.ok:
        raise CommandError(result)

    return result
