"""
Incremental, reversible editing of a name.

A `NameBuilder` starts open on a parsed name and records every edit as a
`BuilderState` in its own history. Each accepted edit, including the initial
state, is pushed synchronously to every subscriber of the builder's channel.

    open --(reorder | shorten | uppercase | lowercase | flip | rollback)--> open
    open --(finalize | close)--> closed

Nothing leaves the closed state: once closed, the history and the channel are
released and every operation except `close` raises `NotAllowedError` naming the
attempted operation.

```python
builder = NameBuilder("Jane Ann Doe", subscribers=[print])
builder.shorten()      # Jane Doe
builder.uppercase()    # JANE DOE
builder.rollback()     # Jane Doe
name = builder.finalize()
```
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from namefully.config import Config, get_registry
from namefully.core import Namefully, RawName
from namefully.exceptions import NotAllowedError
from namefully.formatter import NameFormatter
from namefully.names import FullName
from namefully.types import CapsRange, NameOrder

Subscriber = Callable[[FullName], Any]


def _describe(name: FullName) -> str:
    """Raw text of the parts, for logs and errors; never consults the surname mode."""
    return " ".join(part.text for part in name)


class NameChannel:
    """Synchronous broadcast channel of full names."""

    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Attach `callback`; returns a function detaching it again."""
        if self._closed:
            raise NotAllowedError(
                source=getattr(callback, "__name__", None),
                operation="subscribe",
                message="channel is closed",
            )
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, name: FullName) -> None:
        if self._closed:
            raise NotAllowedError(source=_describe(name), operation="publish", message="channel is closed")
        for callback in list(self._subscribers):
            callback(name)

    def close(self) -> None:
        self._closed = True
        self._subscribers.clear()

    def __len__(self) -> int:
        return len(self._subscribers)


@dataclass(frozen=True)
class BuilderState:
    """One history entry: the name produced by `operation` and the one it replaced."""

    id: str
    operation: str
    current: FullName
    previous: Optional[FullName] = None


class NameBuilder:
    """State machine threading edits of a full name, with history and rollback."""

    def __init__(
        self,
        source: Union[RawName, Namefully],
        config: Union[Config, str, None] = None,
        subscribers: Iterable[Subscriber] = (),
    ):
        if isinstance(source, Namefully):
            source = source.full_name_value
        self._current = Namefully(source, config).full_name_value
        self._channel = NameChannel()
        self._history: List[BuilderState] = []
        self._ids = itertools.count()
        for callback in subscribers:
            self._channel.subscribe(callback)
        self._record("init", self._current, None)

    # ────────────────────────────────────────────────────────────────────────────
    # Read surface
    # ────────────────────────────────────────────────────────────────────────────

    @property
    def name(self) -> FullName:
        return self._current

    @property
    def as_string(self) -> str:
        return NameFormatter(self._current).full()

    @property
    def history(self) -> Tuple[BuilderState, ...]:
        return tuple(self._history)

    @property
    def is_open(self) -> bool:
        return not self._channel.is_closed

    @property
    def is_closed(self) -> bool:
        return self._channel.is_closed

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        return self._channel.subscribe(callback)

    # ────────────────────────────────────────────────────────────────────────────
    # Edits
    # ────────────────────────────────────────────────────────────────────────────

    def reorder(self, by: NameOrder) -> FullName:
        self._ensure_open("reorder")
        return self._apply("reorder", self._with_order(by))

    def by_first_name(self) -> FullName:
        self._ensure_open("by_first_name")
        return self._apply("by_first_name", self._with_order(NameOrder.FIRST_NAME))

    def by_last_name(self) -> FullName:
        self._ensure_open("by_last_name")
        return self._apply("by_last_name", self._with_order(NameOrder.LAST_NAME))

    def flip(self) -> FullName:
        self._ensure_open("flip")
        return self._apply("flip", self._with_order(self._current.config.order.flipped()))

    def shorten(self) -> FullName:
        self._ensure_open("shorten")
        return self._apply("shorten", self._current.shortened())

    def uppercase(self) -> FullName:
        self._ensure_open("uppercase")
        return self._apply("uppercase", self._current.capitalize(CapsRange.ALL))

    def lowercase(self) -> FullName:
        self._ensure_open("lowercase")
        return self._apply("lowercase", self._current.decapitalize(CapsRange.ALL))

    def rollback(self) -> FullName:
        """Drop the latest edit; with only the initial state left, republish it."""
        self._ensure_open("rollback")
        if len(self._history) <= 1:
            logging.warning("Nothing to roll back; the builder is at its initial state")
        else:
            self._history.pop()
            self._current = self._history[-1].current
            logging.debug("NameBuilder rollback: %s", _describe(self._current))
        self._channel.publish(self._current)
        return self._current

    def finalize(self) -> FullName:
        """Close the builder and return the final name."""
        self._ensure_open("finalize")
        name = self._current
        self.close()
        return name

    def close(self) -> None:
        """Release the history and the channel. Closing twice does nothing."""
        if self.is_closed:
            return
        self._history.clear()
        self._channel.close()
        logging.debug("NameBuilder closed on: %s", _describe(self._current))

    # ────────────────────────────────────────────────────────────────────────────
    # Internals
    # ────────────────────────────────────────────────────────────────────────────

    def _ensure_open(self, operation: str) -> None:
        if self.is_closed:
            raise NotAllowedError(source=_describe(self._current), operation=operation, message="builder is closed")

    def _with_order(self, order: NameOrder) -> FullName:
        # detached config, so earlier states keep rendering in their own order
        return self._current.with_config(get_registry().merge(self._current.config, order=order))

    def _apply(self, operation: str, name: FullName) -> FullName:
        previous, self._current = self._current, name
        return self._record(operation, name, previous)

    def _record(self, operation: str, current: FullName, previous: Optional[FullName]) -> FullName:
        state = BuilderState(f"state_{next(self._ids)}", operation, current, previous)
        self._history.append(state)
        logging.debug("NameBuilder %s (%s): %s", operation, state.id, _describe(current))
        self._channel.publish(current)
        return current

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"NameBuilder({_describe(self._current)!r}, {status}, states={len(self._history)})"
