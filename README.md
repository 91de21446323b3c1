# algodrills

A collection of classic algorithm solutions and small in-memory systems,
written in plain Python. The only runtime dependency is
`sortedcontainers`, used by `StockTracker`.

## Installation

```
pip install algodrills
```

To run the test suite, install the `test` extra:

```
pip install "algodrills[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.text_algos` | `longest_palindrome`, `length_of_longest_substring` |
| `algodrills.arrays` | `majority_element`, `max_subarray_sum`, `max_subarray` (returns a `SubarrayMax` of `total`, `start`, `end`), `product_except_self`, `product_except_self_brute_force`, `closest_pair` |
| `algodrills.linked_lists` | `ListNode`, `from_values`, `to_values`, `merge_two_lists`, `merge_k_lists`, `remove_nth_from_end` |
| `algodrills.intervals` | `min_meeting_rooms`, `max_meetings` |
| `algodrills.search` | `total_n_queens`, `coin_change`, `count_islands` |
| `algodrills.medians` | `median_of_sorted_arrays`, `MedianFinder` |
| `algodrills.streaming` | `StockSpan`, `RateLimiter`, `SpamFilter`, `StockTracker` |
| `algodrills.systems` | `TaskScheduler`, `TextEditor`, `URLShortener` |

## Examples

```python
from algodrills.text_algos import longest_palindrome
from algodrills.arrays import max_subarray, max_subarray_sum
from algodrills.search import coin_change, count_islands, total_n_queens

longest_palindrome("cbbd")                          # "bb"
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # SubarrayMax(total=6, start=3, end=6)
coin_change([1, 2, 5], 11)                          # 3
coin_change([2], 3)                                 # -1
total_n_queens(8)                                   # 92
count_islands([[1, 0, 1], [0, 0, 0], [1, 0, 1]])    # 4
```

Linked lists are built from and turned back into ordinary sequences:

```python
from algodrills.linked_lists import from_values, merge_k_lists, remove_nth_from_end, to_values

merged = merge_k_lists([from_values([1, 4, 7]), from_values([2, 5, 8])])
to_values(merged)  # [1, 2, 4, 5, 7, 8]

head = remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2)
to_values(head)    # [1, 2, 3, 5]
```

Streaming helpers keep their own state between calls:

```python
from algodrills.medians import MedianFinder
from algodrills.streaming import RateLimiter, SpamFilter, StockSpan, StockTracker

finder = MedianFinder()
for n in (1, 2, 3, 4):
    finder.add(n)
finder.median()  # 2.5

limiter = RateLimiter(2, 10)
limiter.allow("user1", 1)  # True
limiter.allow("user1", 2)  # True
limiter.allow("user1", 3)  # False

spam = SpamFilter(10)
spam.is_duplicate("hello", 1)  # False
spam.is_duplicate("hello", 5)  # True

span = StockSpan()
[span.next(p) for p in (100, 80, 60, 70, 60, 75, 85)]  # [1, 1, 1, 2, 1, 4, 6]

tracker = StockTracker()
tracker.update(1, 100)
tracker.update(2, 200)
tracker.update(1, 50)      # corrects the price at timestamp 1
tracker.current(), tracker.maximum(), tracker.minimum()  # (200, 200, 50)
```

Small systems with undo, priorities and short codes:

```python
from algodrills.systems import TaskScheduler, TextEditor, URLShortener

editor = TextEditor()
editor.add_text("Hello")
editor.add_text(" World")
editor.undo()
editor.text  # "Hello"
editor.redo()
editor.text  # "Hello World"

scheduler = TaskScheduler()
scheduler.add_task(1, "low")
scheduler.add_task(3, "high")
scheduler.execute()  # "high"
scheduler.execute()  # "low"
scheduler.execute()  # "" (nothing pending)

shortener = URLShortener()
code = shortener.shorten("https://www.example.com/very/long/path")
shortener.retrieve(code)       # "https://www.example.com/very/long/path"
shortener.retrieve("unknown")  # ""
```

## Errors

A few operations have no sensible answer and raise `ValueError` instead:

- `majority_element` on an empty sequence;
- `coin_change` with a negative amount;
- `MedianFinder.median` before any number has been added;
- `StockTracker.current`, `maximum` and `minimum` before any price has been recorded.

## What it does not do

This is a library only. It has no command-line tool, and every structure
lives in memory for the life of the object: nothing is stored to disk or
shared between processes.