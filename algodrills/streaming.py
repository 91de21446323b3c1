"""Online structures over a stream of events: stock spans, rate limiting,
duplicate suppression and price tracking."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import NamedTuple

from sortedcontainers import SortedList


class _SpanEntry(NamedTuple):
    price: int
    span: int


class StockSpan:
    """Reports, for each new price, how many consecutive days up to today
    had a price no higher than today's."""

    def __init__(self) -> None:
        self._stack: list[_SpanEntry] = []

    def next(self, price: int) -> int:
        """Record today's ``price`` and return its span."""
        span = 1
        while self._stack and self._stack[-1].price < price:
            span += self._stack.pop().span
        self._stack.append(_SpanEntry(price, span))
        return span


class RateLimiter:
    """Allows each user at most ``max_requests`` requests in any sliding
    window of ``window_seconds``."""

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: defaultdict[str, deque[int]] = defaultdict(deque)

    def allow(self, user_id: str, timestamp: int) -> bool:
        """Return whether a request from ``user_id`` at ``timestamp`` is allowed.

        An allowed request is recorded; a refused one is not. A request
        made exactly ``window_seconds`` after an earlier one no longer
        counts against it.
        """
        history = self._requests[user_id]
        while history and timestamp - history[0] >= self.window_seconds:
            history.popleft()
        if len(history) < self.max_requests:
            history.append(timestamp)
            return True
        return False


class SpamFilter:
    """Flags messages already seen within the last ``window`` time units."""

    def __init__(self, window: int) -> None:
        self.window = window
        self._last_seen: dict[str, int] = {}
        self._order: deque[tuple[str, int]] = deque()

    def is_duplicate(self, message: str, timestamp: int) -> bool:
        """Return whether ``message`` was seen within the window before ``timestamp``.

        A message seen exactly ``window`` units earlier still counts as a
        duplicate. Duplicates do not refresh the time a message was seen.
        """
        while self._order and timestamp - self._order[0][1] > self.window:
            expired, _ = self._order.popleft()
            self._last_seen.pop(expired, None)
        if message in self._last_seen:
            return True
        self._last_seen[message] = timestamp
        self._order.append((message, timestamp))
        return False


class StockTracker:
    """Tracks prices by timestamp, allowing corrections, and answers the
    latest, highest and lowest price."""

    def __init__(self) -> None:
        self._by_timestamp: dict[int, int] = {}
        self._prices: SortedList = SortedList()
        self._latest: int | None = None

    def update(self, timestamp: int, price: int) -> None:
        """Set the price at ``timestamp``, replacing any earlier value for it."""
        previous = self._by_timestamp.get(timestamp)
        if previous is not None:
            self._prices.remove(previous)
        self._by_timestamp[timestamp] = price
        self._prices.add(price)
        if self._latest is None or timestamp > self._latest:
            self._latest = timestamp

    def _require_prices(self) -> None:
        if self._latest is None:
            raise ValueError("no prices recorded")

    def current(self) -> int:
        """Return the price at the latest timestamp."""
        self._require_prices()
        return self._by_timestamp[self._latest]

    def maximum(self) -> int:
        """Return the highest price currently recorded."""
        self._require_prices()
        return self._prices[-1]

    def minimum(self) -> int:
        """Return the lowest price currently recorded."""
        self._require_prices()
        return self._prices[0]