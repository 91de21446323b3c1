"""Small stateful systems: a priority task scheduler, an undoable text editor
and a URL shortener."""

from __future__ import annotations

import heapq
import itertools
import string

_CODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


class TaskScheduler:
    """Runs tasks highest priority first; equal priorities run in the order added."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, str]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def add_task(self, priority: int, description: str) -> None:
        """Queue a task with the given ``priority`` (larger runs sooner)."""
        heapq.heappush(self._heap, (-priority, next(self._sequence), description))

    def execute(self) -> str:
        """Remove and return the description of the most urgent task.

        Returns an empty string when no task is pending.
        """
        if not self._heap:
            return ""
        _, _, description = heapq.heappop(self._heap)
        return description


class TextEditor:
    """An append-only text buffer with undo and redo."""

    def __init__(self) -> None:
        self.text = ""
        self._undo: list[str] = []
        self._redo: list[str] = []

    def add_text(self, text: str) -> None:
        """Append ``text``; this discards anything that could be redone."""
        self._undo.append(self.text)
        self.text += text
        self._redo.clear()

    def can_undo(self) -> bool:
        """Return whether there is an edit to undo."""
        return bool(self._undo)

    def undo(self) -> None:
        """Revert the last edit; does nothing if there is none."""
        if not self._undo:
            return
        self._redo.append(self.text)
        self.text = self._undo.pop()

    def can_redo(self) -> bool:
        """Return whether there is an undone edit to restore."""
        return bool(self._redo)

    def redo(self) -> None:
        """Restore the last undone edit; does nothing if there is none."""
        if not self._redo:
            return
        self._undo.append(self.text)
        self.text = self._redo.pop()


def _encode(number: int) -> str:
    """Encode a positive counter as base-62, least significant digit first."""
    digits = []
    while number:
        number, remainder = divmod(number, len(_CODE_ALPHABET))
        digits.append(_CODE_ALPHABET[remainder])
    return "".join(digits)


class URLShortener:
    """Maps long URLs to short base-62 codes and back."""

    def __init__(self) -> None:
        self._short_to_long: dict[str, str] = {}
        self._long_to_short: dict[str, str] = {}
        self._counter = 0

    def shorten(self, long_url: str) -> str:
        """Return the code for ``long_url``, creating one if it is new."""
        existing = self._long_to_short.get(long_url)
        if existing is not None:
            return existing
        self._counter += 1
        code = _encode(self._counter)
        self._short_to_long[code] = long_url
        self._long_to_short[long_url] = code
        return code

    def retrieve(self, short_code: str) -> str:
        """Return the URL for ``short_code``, or an empty string if unknown."""
        return self._short_to_long.get(short_code, "")