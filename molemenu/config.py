"""Read-only JSON config and environment overrides.

Stores default sort mode, page size, and the confirm-on-empty policy.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .input import ESC_SEQUENCE_TIMEOUT_MS
from .model import DEFAULT_SORT_KEY, normalize_sort_key
from .view_model import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

APP_NAME = "molemenu"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

ENV_MANAGED_ALT_SCREEN = "MOLE_MANAGED_ALT_SCREEN"
ENV_SORT_DEFAULT = "MOLE_MENU_SORT_DEFAULT"

MAX_PAGE_SIZE = 200
DEFAULT_ESCAPE_TIMEOUT_MS = ESC_SEQUENCE_TIMEOUT_MS
MAX_ESCAPE_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class MenuSettings:
    """Resolved preferences for one menu invocation."""

    sort_key: str = DEFAULT_SORT_KEY
    page_size: int = DEFAULT_PAGE_SIZE
    auto_select_cursor_on_empty_confirm: bool = False
    managed_alt_screen: bool = False
    escape_timeout_ms: int = DEFAULT_ESCAPE_TIMEOUT_MS


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _bounded_int(value: object, low: int, high: int) -> int | None:
    """Accept plain ints within ``[low, high]``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < low or value > high:
        return None
    return value


def env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true"}


def load_menu_settings(environ: Mapping[str, str] | None = None) -> MenuSettings:
    """Resolve settings from defaults, then config file, then environment."""
    env = os.environ if environ is None else environ
    data = load_config()

    sort_key = normalize_sort_key(data.get("sort_default")) or DEFAULT_SORT_KEY
    env_sort = normalize_sort_key(env.get(ENV_SORT_DEFAULT))
    if env_sort is not None:
        sort_key = env_sort
    elif env.get(ENV_SORT_DEFAULT):
        logger.warning("ignoring unknown %s=%r", ENV_SORT_DEFAULT, env.get(ENV_SORT_DEFAULT))

    page_size = _bounded_int(data.get("page_size"), 1, MAX_PAGE_SIZE) or DEFAULT_PAGE_SIZE
    escape_timeout_ms = (
        _bounded_int(data.get("escape_timeout_ms"), 1, MAX_ESCAPE_TIMEOUT_MS) or DEFAULT_ESCAPE_TIMEOUT_MS
    )
    auto_select = data.get("auto_select_cursor_on_empty_confirm")

    return MenuSettings(
        sort_key=sort_key,
        page_size=page_size,
        auto_select_cursor_on_empty_confirm=auto_select if isinstance(auto_select, bool) else False,
        managed_alt_screen=env_flag(env.get(ENV_MANAGED_ALT_SCREEN)),
        escape_timeout_ms=escape_timeout_ms,
    )
