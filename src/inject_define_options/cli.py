"""Typer-based CLI for inject-define-options.

Status messages go to the console through ConsoleReporter. Diagnostic
logging (level from INJECT_DEFINE_OPTIONS_LOG_LEVEL) goes to a rotating
log file when INJECT_DEFINE_OPTIONS_LOG_DIR is set; only critical records
reach stderr.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import typer

from inject_define_options import __version__
from inject_define_options.config import DEFAULT_VIEWS_DIR, InjectConfig
from inject_define_options.injector import inject_define_options
from inject_define_options.reporting import ConsoleReporter

app = typer.Typer(
    name="inject-define-options",
    help="Inject or override defineOptions({ name }) in Vue components.",
    add_completion=False,
)

LOG_FILE_NAME = "inject-define-options.log"


def resolve_views_dir(views_flag: str | None) -> str:
    """Resolve the views directory from CLI flag, env var, or default.

    Priority: CLI flag > INJECT_DEFINE_OPTIONS_VIEWS env var > "./src/views".
    """
    if views_flag:
        return views_flag
    return os.getenv("INJECT_DEFINE_OPTIONS_VIEWS", DEFAULT_VIEWS_DIR)


def resolve_log_level() -> str:
    """Log level from INJECT_DEFINE_OPTIONS_LOG_LEVEL, default "warning"."""
    return os.getenv("INJECT_DEFINE_OPTIONS_LOG_LEVEL", "warning")


def resolve_log_dir() -> Path | None:
    """Log directory from INJECT_DEFINE_OPTIONS_LOG_DIR, or None for no log file."""
    log_dir = os.getenv("INJECT_DEFINE_OPTIONS_LOG_DIR")
    return Path(log_dir) if log_dir else None


def parse_exclude(values: list[str] | None) -> tuple[str, ...]:
    """Flatten repeated and comma separated --exclude values.

    Example:
        >>> parse_exclude(["error,demo", "login"])
        ('error', 'demo', 'login')
    """
    names: list[str] = []
    for value in values or []:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return tuple(names)


def setup_logging(log_level: str, log_dir: Path | None = None) -> None:
    """Configure root logging: critical errors to stderr, everything to a rotating file.

    Args:
        log_level: Logging level (debug, info, warning, error, critical)
        log_dir: Directory for the log file (created if missing), or None
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Clear existing handlers to prevent duplicates
    root_logger.handlers.clear()

    # Stderr handler for critical errors only; status lines come from the reporter
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.CRITICAL)
    stderr_handler.setFormatter(
        logging.Formatter("%(levelname)s: %(message)s"),
    )
    root_logger.addHandler(stderr_handler)

    if log_dir is None:
        return

    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    # File handler with rotation (10MB max, 3 backups)
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=3,
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        ),
    )
    root_logger.addHandler(file_handler)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"inject-define-options {__version__}")
        raise typer.Exit(0)


@app.command()
def main(
    route: Path = typer.Option(
        ...,
        "-r",
        "--route",
        exists=True,
        dir_okay=False,
        help="Path to route file (e.g. localAuthRoute.ts)",
    ),
    views: str | None = typer.Option(
        None,
        "-v",
        "--views",
        help=f"Views base directory (default: {DEFAULT_VIEWS_DIR}, or INJECT_DEFINE_OPTIONS_VIEWS)",
    ),
    exclude: list[str] | None = typer.Option(
        None,
        "-e",
        "--exclude",
        help="Directory name to exclude (relative to views); repeat or comma separate",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit",
    ),
) -> None:
    """Inject defineOptions({ name }) into the Vue components of a route file.

    Every route with a `name` and a `component: () => import("@/views/...")`
    gets its component named after the route. Files are rewritten in place.
    """
    setup_logging(resolve_log_level(), resolve_log_dir())

    config = InjectConfig.from_paths(
        route_file=route,
        views_dir=resolve_views_dir(views),
        exclude_dirs=parse_exclude(exclude),
    )
    inject_define_options(config, ConsoleReporter())
