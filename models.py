"""Data models for unjumble options, results and error codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class SortMode(Enum):
    """Order applied to the matched words."""

    ALPHABETICAL = "alphabetical"
    BY_LENGTH = "by-length"


class SelectionMode(Enum):
    """Which of the ordered matches are kept."""

    ALL = "all"
    LONGEST = "longest"


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    PARAMS = 1
    INVALID_FILE = 2
    MORE_LETTERS = 3
    INVALID_LETTERS = 4
    NO_MATCHES = 10


class UnjumbleError(Exception):
    """Invalid input, carrying the exit code it maps to."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        super().__init__(message or code.name)
        self.code = code
        self.message = message


@dataclass(slots=True)
class UnjumbleOptions:
    """Sorting, selection and filtering options for one run."""

    sort_mode: SortMode | None = None
    selection_mode: SelectionMode = SelectionMode.ALL
    required_letter: str | None = None


@dataclass(slots=True)
class UnjumbleReport:
    """Outcome of one dictionary scan."""

    letters: str
    matches: list[str]
    selected: list[str]
    lines: list[str]
    total_lines: int = 0
    dictionary_path: str = ""

    @property
    def no_matches(self) -> bool:
        """True when nothing matched before required-letter filtering."""
        return not self.matches
