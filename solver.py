"""Letter matching engine and result pipeline."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from string import ascii_letters
from typing import Iterable

from models import SelectionMode, SortMode, UnjumbleOptions, UnjumbleReport
from utils import validate_letters

MIN_WORD_LENGTH = 4


def _letter_key(char: str) -> str | None:
    if len(char) == 1 and char in ascii_letters:
        return char.lower()
    return None


class LetterMultiset:
    """Case-insensitive count of available ASCII letters. Anything else is never contained."""

    __slots__ = ("_counts",)

    def __init__(self, letters: Iterable[str] = "") -> None:
        keys = (_letter_key(letter) for letter in letters)
        self._counts: Counter[str] = Counter(key for key in keys if key is not None)

    def contains(self, letter: str) -> bool:
        key = _letter_key(letter)
        return key is not None and self._counts[key] > 0

    def consume(self, letter: str) -> None:
        """Spend one instance of letter; does nothing if none are left."""
        if self.contains(letter):
            self._counts[letter.lower()] -= 1

    def count(self, letter: str) -> int:
        key = _letter_key(letter)
        return self._counts[key] if key is not None else 0

    def copy(self) -> LetterMultiset:
        clone = LetterMultiset()
        clone._counts = self._counts.copy()
        return clone

    def __len__(self) -> int:
        return sum(self._counts.values())


def matches(word: str, jumble: LetterMultiset | str) -> bool:
    """True when every character of word can be drawn from jumble."""
    if not word:
        return False
    if isinstance(jumble, LetterMultiset):
        available = jumble.copy()
    else:
        available = LetterMultiset(jumble)

    for char in word:
        if not available.contains(char):
            return False
        available.consume(char)
    return True


def trim_line(line: str) -> str:
    return line.rstrip("\r\n")


def collect(lines: Iterable[str], jumble: LetterMultiset | str) -> list[str]:
    """Scan the dictionary once, keeping matching words in dictionary order."""
    multiset = jumble if isinstance(jumble, LetterMultiset) else LetterMultiset(jumble)
    found: list[str] = []
    for line in lines:
        word = trim_line(line)
        if len(word) < MIN_WORD_LENGTH:
            continue
        if matches(word, multiset):
            found.append(word)
    return found


def _length_key(word: str) -> tuple[int, str]:
    return -len(word), word.lower()


def order(words: list[str], mode: SortMode | None) -> list[str]:
    """
    Return words in the requested order.

    Both sorts are stable, so words equal under case-insensitive comparison
    keep their dictionary order.
    """
    if mode is None:
        return list(words)
    if mode is SortMode.ALPHABETICAL:
        return sorted(words, key=str.lower)
    if mode is SortMode.BY_LENGTH:
        return sorted(words, key=_length_key)
    raise ValueError(f"Unknown sort mode: {mode!r}")


def select(words: list[str], mode: SelectionMode, applied_sort: SortMode | None) -> list[str]:
    """
    Apply the selection mode to already ordered words.

    LONGEST keeps the words as long as the first one, which is only the
    maximum when words were ordered by length.
    """
    if mode is SelectionMode.ALL:
        return list(words)
    if mode is SelectionMode.LONGEST:
        if applied_sort is not SortMode.BY_LENGTH:
            raise ValueError("Longest selection requires words ordered by length")
        if not words:
            return []
        longest = len(words[0])
        return [word for word in words if len(word) == longest]
    raise ValueError(f"Unknown selection mode: {mode!r}")


def present(words: list[str], required_letter: str | None) -> list[str]:
    """Output lines, optionally restricted to words containing required_letter."""
    if required_letter is None:
        return list(words)
    needle = required_letter.lower()
    return [word for word in words if needle in word.lower()]


class Unjumbler:
    """Find dictionary words that can be built from a jumble of letters."""

    def __init__(self, letters: str) -> None:
        self.letters = validate_letters(letters)
        self.multiset = LetterMultiset(letters)

    def run(self, lines: Iterable[str], options: UnjumbleOptions, dictionary_path: str = "") -> UnjumbleReport:
        """Collect, order, select and present matches from a line source."""
        total_lines = 0

        def counted(source: Iterable[str]) -> Iterable[str]:
            nonlocal total_lines
            for line in source:
                total_lines += 1
                yield line

        found = collect(counted(lines), self.multiset)
        ordered = order(found, options.sort_mode)
        selected = select(ordered, options.selection_mode, options.sort_mode)
        output = present(selected, options.required_letter)

        logging.info(
            "Unjumbled %r: %d lines scanned, %d matches, %d selected, %d printed",
            self.letters,
            total_lines,
            len(found),
            len(selected),
            len(output),
        )
        return UnjumbleReport(
            letters=self.letters,
            matches=found,
            selected=selected,
            lines=output,
            total_lines=total_lines,
            dictionary_path=dictionary_path,
        )

    def run_file(self, dictionary_path: str, options: UnjumbleOptions) -> UnjumbleReport:
        """Scan a dictionary file with one word per line."""
        path = Path(dictionary_path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {dictionary_path}")

        with path.open("rb") as handle:
            lines = (raw_line.decode("utf-8", errors="ignore") for raw_line in handle)
            return self.run(lines, options, dictionary_path=str(path))
