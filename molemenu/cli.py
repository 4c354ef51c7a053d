"""Command-line front door for molemenu.

Parses options, collects items from arguments or stdin, and runs the menu.
Confirmed selections are printed to stdout as comma-separated indices; all
drawing goes to stderr so shell callers can capture the result.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence

from . import __version__
from .errors import UsageError
from .labels import parse_app_record
from .menu import Cancelled, paginated_multi_select
from .model import SORT_KEYS, split_csv
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger("molemenu")

ENV_META_EPOCHS = "MOLE_MENU_META_EPOCHS"
ENV_META_SIZEKB = "MOLE_MENU_META_SIZEKB"
ENV_PRESELECTED = "MOLE_PRESELECTED_INDICES"

EXIT_CONFIRMED = 0
EXIT_CANCELLED = 1
EXIT_USAGE = 2

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure the ``molemenu`` logger.

    With ``log_file`` records go to that file; otherwise only warnings (or
    everything, with ``verbose``) reach stderr.
    """
    level = logging.DEBUG if verbose else logging.INFO
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
            existing.close()
    handler: logging.Handler
    if log_file:
        try:
            handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(logging.WARNING)
            logger.warning("failed to open log file %s: %s", log_file, exc)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="molemenu",
        description="Interactive paginated multi-select menu. Prints selected indices to stdout.",
    )
    parser.add_argument("title", help="Menu title.")
    parser.add_argument("items", nargs="*", help="Item labels. Read one per line from stdin when omitted.")
    parser.add_argument("--sort", choices=SORT_KEYS, default=None, help="Initial sort mode.")
    parser.add_argument("--recency", metavar="CSV", default=None, help="Comma-separated epoch seconds per item.")
    parser.add_argument("--sizes", metavar="CSV", default=None, help="Comma-separated sizes in KB per item.")
    parser.add_argument("--preselect", metavar="CSV", default=None, help="Comma-separated indices selected at start.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Rows per page (default: 15).")
    parser.add_argument(
        "--auto-select-cursor",
        action="store_true",
        default=None,
        help="On Enter with nothing selected, return the row under the cursor.",
    )
    parser.add_argument(
        "--managed-alt-screen",
        action="store_true",
        default=None,
        help="Caller already owns the alternate screen; do not enter or leave it.",
    )
    parser.add_argument(
        "--app-records",
        action="store_true",
        help="Items are scanner records 'epoch|path|name|bundle_id|size|last_used'.",
    )
    parser.add_argument("--theme", choices=available_theme_names(), default=None, help="Color theme (default: default).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", default=None, help="Append log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_stdin_items() -> list[str]:
    if sys.stdin.isatty():
        return []
    # One row per input line, blank lines included.
    return [line.rstrip("\r\n") for line in sys.stdin]


def collect_menu_input(
    args: argparse.Namespace,
    environ: Mapping[str, str],
) -> tuple[list[str], list[object] | None, list[object] | None, list[str]]:
    """Return ``(labels, recency, sizes, preselected)`` from args, stdin, and env."""
    raw_items: list[str] = list(args.items) or _read_stdin_items()
    recency: list[object] | None = None
    sizes: list[object] | None = None

    if args.app_records:
        labels: list[str] = []
        recency, sizes = [], []
        for line in raw_items:
            record = parse_app_record(line)
            if record is None:
                logger.warning("malformed app record shown as-is: %r", line)
                labels.append(line)
                recency.append(None)
                sizes.append(None)
                continue
            labels.append(record.label())
            recency.append(record.epoch)
            sizes.append(record.size_kb)
    else:
        labels = raw_items

    recency_csv = args.recency if args.recency is not None else environ.get(ENV_META_EPOCHS)
    if recency_csv:
        recency = list(split_csv(recency_csv))
    sizes_csv = args.sizes if args.sizes is not None else environ.get(ENV_META_SIZEKB)
    if sizes_csv:
        sizes = list(split_csv(sizes_csv))
    preselect_csv = args.preselect if args.preselect is not None else environ.get(ENV_PRESELECTED)
    return labels, recency, sizes, split_csv(preselect_csv)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the menu, and return the process exit code.

    0 confirmed (indices on stdout, possibly an empty line), 1 cancelled,
    2 usage error. Interrupts exit with 128 + signal number.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    labels, recency, sizes, preselected = collect_menu_input(args, os.environ)
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    try:
        result = paginated_multi_select(
            args.title,
            labels,
            recency=recency,
            sizes=sizes,
            preselected=preselected,
            sort_key=args.sort,
            page_size=args.page_size,
            auto_select_cursor_on_empty_confirm=args.auto_select_cursor,
            managed_alt_screen=args.managed_alt_screen,
            theme=resolve_theme(args.theme, no_color=no_color),
        )
    except UsageError as exc:
        print(f"molemenu: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if isinstance(result, Cancelled):
        return EXIT_CANCELLED
    sys.stdout.write(result.as_csv() + "\n")
    sys.stdout.flush()
    return EXIT_CONFIRMED


if __name__ == "__main__":
    raise SystemExit(main())
