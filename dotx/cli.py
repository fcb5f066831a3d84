"""Command-line interface."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from . import logger, tui
from .config import Config, ConfigError, load
from .fs import FsError, Path, delete, mkdir, move, symlink

VERSION = "dev"


def _repo_file(cfg: Config, name: str) -> Path:
    return Path(os.path.join(cfg.repo_path, name.lstrip("/\\")))


def run_add(cfg: Config, path: str) -> None:
    """Move ``path`` into the repository and leave a symlink in its place."""
    source = Path(path)
    filename = source.filename()
    dest = _repo_file(cfg, filename)

    if cfg.repo.dotfile_exists(source):
        logger.error("already exists in dotfiles")

    try:
        move(source, dest)
    except (FsError, OSError) as exc:
        logger.error("failed to move", error=exc)
    logger.debug("moved", **{"from": source.abs_path, "to": dest.abs_path})

    try:
        symlink(dest, source)
    except (FsError, OSError) as exc:
        logger.error("failed to create symlink", error=exc)
    logger.debug("created symlink", **{"from": dest.abs_path, "to": source.abs_path})

    try:
        cfg.repo.write_dotfile(source, dest)
    except ConfigError as exc:
        logger.error("failed to write dotfiles config", error=exc)
    logger.debug("written to dotfiles config")

    logger.info("successfully added", dotfile=source.filename())


def run_deploy(cfg: Config, force: bool) -> None:
    """Link every tracked dotfile into its destination."""
    for dotfile in cfg.repo.dotfiles:
        source = _repo_file(cfg, dotfile.source)
        dest = Path(dotfile.destination)

        logger.debug("try deploying", **{"from": source.abs_path, "to": dest.abs_path})

        if dest.exists():
            if dest.is_symlink() and dest.symlink_path() == source.abs_path:
                logger.debug("dotfile already deployed with dotx", dotfile=source.filename())
                continue

            if not force:
                kind = "Directory" if dest.is_dir() else "File"
                try:
                    overwrite = tui.confirm(f"{kind} already exists. Overwrite?", dest.abs_path)
                except Exception as exc:
                    logger.error("failed to render TUI", error=exc)
                if not overwrite:
                    logger.debug("overwrite cancelled")
                    continue

            try:
                delete(dest)
            except (FsError, OSError) as exc:
                logger.error("failed to delete", error=exc)
            logger.debug("deleted", path=dest.abs_path)

        parent = Path(dest.dir())
        try:
            mkdir(parent)
        except OSError as exc:
            logger.error("could not create parent directory", error=exc)
        logger.debug("parent directory created or already exists", dir=parent.abs_path)

        try:
            symlink(source, dest)
        except (FsError, OSError) as exc:
            logger.error("failed to create symlink", error=exc)
        logger.debug("created symlink", **{"from": source.abs_path, "to": dest.abs_path})

        logger.info("successfully deployed", dotfile=source.filename())


def _handle_add(cfg: Config, args: argparse.Namespace) -> None:
    for path in args.paths:
        run_add(cfg, path)


def _handle_deploy(cfg: Config, args: argparse.Namespace) -> None:
    run_deploy(cfg, args.force)


def build_parser(cfg: Config, version: str) -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from ``cfg``."""
    parser = argparse.ArgumentParser(
        prog="dotx",
        description="dotx helps you manage, version control, and synchronize your "
        "configuration files (dotfiles) across multiple systems",
    )
    parser.add_argument("--version", action="version", version=f"dotx version {version}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=cfg.app.verbose,
        help="enable verbose output",
    )
    parser.set_defaults(handler=None)
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    add = commands.add_parser(
        "add",
        help="Add a file or directory to your dotfiles",
        description="Track a configuration file or directory in your dotfiles by "
        "creating a symlink to its original location",
    )
    add.add_argument("paths", nargs="+", metavar="path")
    add.set_defaults(handler=_handle_add)

    deploy = commands.add_parser(
        "deploy",
        help="Deploy your dotfiles to the current system",
        description="Create symbolic links from your dotfiles to their appropriate "
        "locations in your home directory",
    )
    deploy.add_argument(
        "-f", "--force", action="store_true", default=False,
        help="never prompt for overwriting",
    )
    deploy.set_defaults(handler=_handle_deploy)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    cfg = load()
    parser = build_parser(cfg, VERSION)
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.verbose:
        logger.set_level(logger.Level.DEBUG)

    if args.handler is None:
        parser.print_help()
        return 0

    args.handler(cfg, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())