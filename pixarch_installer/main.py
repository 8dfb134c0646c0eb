from __future__ import annotations

import argparse
import getpass
import logging
import shutil
import tempfile
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import yaml

from .checks import InstallerError, check_environment, check_not_root
from .install_config import InstallConfig, InstallPaths
from .lib.manifests import Manifest, load_manifest
from .logging_utils import LoggingSetup, configure_logging, default_log_path
from .pipeline import InstallCtx, PipelineResult, Step, run_pipeline
from .stats import RunStats
from .steps import (
    AurPackagesStep,
    BrowselStep,
    CorePackagesStep,
    LinkConfigsStep,
    SecurityToolsStep,
    ThemesStep,
    WindowManagerStep,
    XdgDirsStep,
)

logger = logging.getLogger(__name__)


def build_steps() -> List[Step]:
    return [
        CorePackagesStep(),
        XdgDirsStep(),
        AurPackagesStep(),
        WindowManagerStep("i3", step_id="40_i3"),
        WindowManagerStep("qtile", step_id="45_qtile"),
        LinkConfigsStep(),
        ThemesStep(),
        BrowselStep(),
        SecurityToolsStep(),
    ]


def _load_manifest(path: Optional[str]) -> Manifest:
    try:
        return load_manifest(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise InstallerError(f"Cannot load package manifest: {e}") from e


def _log_header(cfg: InstallConfig, paths: InstallPaths, setup: LoggingSetup) -> None:
    logger.info("=== Pixarch Installation Log ===")
    logger.info("Started at: %s", datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
    logger.info("User: %s", getpass.getuser())
    logger.info("Home: %s", paths.home)
    logger.info("Dotfiles: %s", paths.dotfiles)
    logger.info(
        "Flags: NONINTERACTIVE=%s DRY_RUN=%s VERBOSE=%s QUIET=%s NO_BACKUP=%s",
        cfg.assume_yes,
        cfg.dry_run,
        cfg.verbose,
        cfg.quiet,
        cfg.no_backup,
    )
    logger.info("Log file: %s", setup.log_path)


def _log_summary(ctx: InstallCtx, setup: LoggingSetup, result: PipelineResult) -> None:
    s = ctx.stats
    logger.info("==================== Installation Summary ====================")
    logger.info("Packages installed: %d", s.packages_installed)
    logger.info("Packages skipped (already installed): %d", s.packages_skipped)
    logger.info("Configs linked: %d", s.configs_linked)
    logger.info("Steps run: %d/%d", len(result.ran_steps), result.total_steps)
    if result.skipped_steps:
        logger.info("Steps skipped by flag: %s", ", ".join(result.skipped_steps))
    logger.info("Errors encountered: %d", s.errors)
    logger.info("Log file: %s", setup.log_path)
    if not ctx.cfg.no_backup:
        logger.info("Backup files created with .bak.<timestamp> extension")
    logger.info("==============================================================")

    if s.errors:
        logger.warning("Installation completed with %d error(s). Review log for details.", s.errors)
    else:
        logger.info("Installation completed successfully!")


def run(cfg: InstallConfig, *, steps: Optional[List[Step]] = None) -> RunStats:
    """Run the installer once and return its counters.

    Raises InstallerError on fatal conditions, before anything is changed.
    """

    check_not_root(cfg)

    setup = configure_logging(cfg.log_file, verbose=cfg.verbose, quiet=cfg.quiet)
    stats = RunStats(error_counter=setup.errors)
    paths = InstallPaths.from_config(cfg)

    _log_header(cfg, paths, setup)
    logger.info("Pixarch installer starting...")

    check_environment(paths)
    manifest = _load_manifest(cfg.manifest_path)

    tmp_dir: Optional[Path] = None
    if not cfg.dry_run:
        tmp_dir = Path(tempfile.mkdtemp(prefix="pixarch-install-"))
        paths = replace(paths, tmp_dir=tmp_dir)

    try:
        logger.info("DOTDIR=%s", paths.dotfiles)
        logger.info("Home=%s", paths.home)
        logger.info("AUR=%s", paths.aur_dir)

        ctx = InstallCtx(cfg=cfg, paths=paths, manifest=manifest, stats=stats)
        result = run_pipeline(ctx=ctx, steps=build_steps() if steps is None else steps)
        _log_summary(ctx, setup, result)
    finally:
        if tmp_dir is not None:
            shutil.rmtree(tmp_dir, ignore_errors=True)

    return stats


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pixarch-install",
        description="Install the Pixarch package set and link its dotfiles into your home directory.",
        epilog=(
            "examples:\n"
            "  pixarch-install --yes --verbose\n"
            "  pixarch-install --dry-run --log-file install.log\n"
            "  pixarch-install --skip-themes --skip-browsel"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-y", "--yes", action="store_true", help="Non-interactive: accept all prompts")
    p.add_argument("-n", "--dry-run", action="store_true", help="Print actions that would be taken (no changes)")
    level = p.add_mutually_exclusive_group()
    level.add_argument("-v", "--verbose", action="store_true", help="Verbose output (shows all commands)")
    level.add_argument("-q", "--quiet", action="store_true", help="Minimal output (errors only)")
    p.add_argument(
        "--log-file",
        default=None,
        help="Write logs to file (default: /tmp/pixarch-install-TIMESTAMP.log)",
    )
    p.add_argument("--no-backup", action="store_true", help="Skip backing up existing configs")
    p.add_argument("--skip-i3", action="store_true", help="Skip i3 installation")
    p.add_argument("--skip-qtile", action="store_true", help="Skip qtile installation")
    p.add_argument("--skip-themes", action="store_true", help="Skip GRUB/SDDM theme installation")
    p.add_argument("--skip-browsel", action="store_true", help="Skip browsel (searxng/surf) installation")
    p.add_argument("--skip-security", action="store_true", help="Skip security tools installation")
    p.add_argument("--skip-aur", action="store_true", help="Skip all AUR packages")
    p.add_argument("--dotfiles", default=None, help="Dotfiles tree (default: current directory)")
    p.add_argument("--home", default=None, help="Home directory to link into (default: $HOME)")
    p.add_argument("--manifest", default=None, help="Alternate package manifest (YAML)")
    return p


def config_from_args(args: argparse.Namespace) -> InstallConfig:
    return InstallConfig(
        log_file=args.log_file or default_log_path(),
        assume_yes=bool(args.yes),
        dry_run=bool(args.dry_run),
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        no_backup=bool(args.no_backup),
        skip_i3=bool(args.skip_i3),
        skip_qtile=bool(args.skip_qtile),
        skip_themes=bool(args.skip_themes),
        skip_browsel=bool(args.skip_browsel),
        skip_security=bool(args.skip_security),
        skip_aur=bool(args.skip_aur),
        dotfiles_dir=args.dotfiles,
        home_dir=args.home,
        manifest_path=args.manifest,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)

    try:
        stats = run(cfg)
    except InstallerError as e:
        logger.error("%s", e)
        return 1

    return 1 if stats.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
