"""Classic algorithm solutions and small in-memory systems: string, array,
linked-list, interval and search algorithms, medians, streaming helpers and
small stateful systems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "intervals",
    "linked_lists",
    "medians",
    "search",
    "streaming",
    "systems",
    "text_algos",
]