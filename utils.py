"""Utility helpers for app directories, logging, config and input validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from models import ErrorCode, SelectionMode, SortMode, UnjumbleError, UnjumbleOptions


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".unjumble"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".unjumble")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
LOG_PATH = APP_DIR / "app.log"

STD_DICT_PATH = "/usr/share/dict/words"
MIN_LETTERS = 3

SORT_REQUESTS: dict[str, tuple[SortMode, SelectionMode]] = {
    "alphabetical": (SortMode.ALPHABETICAL, SelectionMode.ALL),
    "by-length": (SortMode.BY_LENGTH, SelectionMode.ALL),
    "longest": (SortMode.BY_LENGTH, SelectionMode.LONGEST),
}

MSG_USAGE = "Usage: unjumble [-alpha|-len|-longest] [-include letter] letters [dictionary]"
MSG_MORE_LETTERS = "unjumble: must supply at least three letters"
MSG_INVALID_LETTERS = "unjumble: can only unjumble alphabetic characters"


def ensure_app_dirs() -> None:
    """Create the app directory if it does not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging() -> None:
    """Configure file logging once per run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    if not CONFIG_PATH.exists():
        return {}
    try:
        return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return {}


def default_dictionary_path(config: dict[str, Any]) -> str:
    """Dictionary used when none is named on the command line."""
    configured = config.get("dictionary_path")
    if isinstance(configured, str) and configured.strip():
        return configured.strip()
    return STD_DICT_PATH


def is_ascii_alpha(text: str) -> bool:
    return text.isascii() and text.isalpha()


def validate_letters(letters: str) -> str:
    """
    Check the jumble and return it unchanged.

    Length is checked before content, so "a1" reports too few letters.
    """
    if len(letters) < MIN_LETTERS:
        raise UnjumbleError(ErrorCode.MORE_LETTERS, MSG_MORE_LETTERS)
    if not is_ascii_alpha(letters):
        raise UnjumbleError(ErrorCode.INVALID_LETTERS, MSG_INVALID_LETTERS)
    return letters


def validate_include(letter: str) -> str:
    """The required letter must be exactly one alphabetic character."""
    if len(letter) != 1 or not is_ascii_alpha(letter):
        raise UnjumbleError(ErrorCode.PARAMS, MSG_USAGE)
    return letter


def build_options(sort_request: str | None, required_letter: str | None) -> UnjumbleOptions:
    """Map a sort request ("alphabetical", "by-length", "longest") onto run options."""
    if sort_request is None:
        sort_mode, selection_mode = None, SelectionMode.ALL
    else:
        try:
            sort_mode, selection_mode = SORT_REQUESTS[sort_request]
        except KeyError:
            raise UnjumbleError(ErrorCode.PARAMS, MSG_USAGE) from None
    if required_letter is not None:
        required_letter = validate_include(required_letter)
    return UnjumbleOptions(
        sort_mode=sort_mode,
        selection_mode=selection_mode,
        required_letter=required_letter,
    )
