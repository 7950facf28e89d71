"""
Collecting typed name parts before building a `Namefully`.

A `NameCollector` is a double-ended queue of `Name` parts. Parts may arrive in
any order and be dropped again; nothing is checked until `build`, which runs the
list-of-names validation (roles, arity, content) and hands the parts to a
`ListNameParser`.

```python
collector = NameCollector([Name.first("Jane")])
collector.add(Name.middle("Ann"), Name.last("Doe"))
collector.add_first(Name.prefix("Dr"))
collector.build().full    # Dr Jane Ann Doe
```
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional, Tuple, Union

from namefully.config import Config
from namefully.core import Namefully
from namefully.names import Name
from namefully.parsers import ListNameParser
from namefully.validators import Validators


class NameCollector:
    """Queue of name parts, turned into a `Namefully` by `build`."""

    def __init__(self, names: Optional[Iterable[Name]] = None):
        self._queue: Deque[Name] = deque(names or ())

    @property
    def names(self) -> Tuple[Name, ...]:
        return tuple(self._queue)

    @property
    def is_empty(self) -> bool:
        return not self._queue

    def add(self, *names: Name) -> None:
        """Append each of `names` at the end."""
        self._queue.extend(names)

    def add_first(self, name: Name) -> None:
        self._queue.appendleft(name)

    def add_last(self, name: Name) -> None:
        self._queue.append(name)

    def remove_first(self) -> Optional[Name]:
        """Pop the first part, or None when empty."""
        return self._queue.popleft() if self._queue else None

    def remove_last(self) -> Optional[Name]:
        return self._queue.pop() if self._queue else None

    def remove(self, name: Name) -> bool:
        """Drop the first part equal to `name`; False when there is none."""
        try:
            self._queue.remove(name)
        except ValueError:
            return False
        return True

    def remove_where(self, test: Callable[[Name], bool]) -> None:
        self._queue = deque(n for n in self._queue if not test(n))

    def retain_where(self, test: Callable[[Name], bool]) -> None:
        self._queue = deque(n for n in self._queue if test(n))

    def clear(self) -> None:
        self._queue.clear()

    def build(self, config: Union[Config, str, None] = None, **overrides: Any) -> Namefully:
        """Validate the collected parts and build a `Namefully` from them.

        Both a first and a last name must have been collected, whatever their
        position in the queue; the validation runs even under a bypassing config.
        """
        names = list(self._queue)
        Validators.list_name.validate(names)
        logging.debug("NameCollector building from %d parts", len(names))
        return Namefully(ListNameParser(names), config, **overrides)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._queue)

    def __repr__(self) -> str:
        return f"NameCollector({[str(n) for n in self._queue]!r})"
