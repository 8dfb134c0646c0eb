from __future__ import annotations

import logging
import os

from .install_config import InstallConfig, InstallPaths
from .lib.command import command_exists

logger = logging.getLogger(__name__)

REQUIRED_COMMANDS = ("pacman", "sudo", "git")


class InstallerError(RuntimeError):
    """Fatal: the run must stop before changing anything."""


def check_not_root(cfg: InstallConfig) -> None:
    # Preview is allowed as root since it changes nothing.
    if not cfg.dry_run and os.geteuid() == 0:
        raise InstallerError(
            "This installer should NOT be run as root. Run as your regular user; "
            "it uses sudo for required root actions."
        )


def check_environment(paths: InstallPaths) -> None:
    if not paths.dotfiles.is_dir():
        raise InstallerError(f"Dotfiles directory not found: {paths.dotfiles}")
    if not paths.home.is_dir():
        raise InstallerError(f"Home directory not found: {paths.home}")
    for cmd in REQUIRED_COMMANDS:
        if not command_exists(cmd):
            raise InstallerError(f"Required command not found: {cmd}")
    logger.debug("Preflight checks passed")
