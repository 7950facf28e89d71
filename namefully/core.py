"""
Namefully: handle person names the way they are written.

`Namefully` is the entry point of the package. It accepts a name in any of the
supported raw shapes, parses it into a `FullName` under a configuration, and
exposes every rendering of it.

## Architecture

- **Parsing**: the raw shape picks the parser (`str`, list of `str`, list of
  `Name`, mapping, or a ready `Parser`); parsers validate before constructing.
- **Configuration**: passed as a `Config` handle or by name; the shared config
  is read at rendering time, so later changes to it are observed.
- **Rendering**: delegated to `NameFormatter`.

## Usage

```python
from namefully import Namefully, parse_name

name = Namefully("Jane Ann Doe")
name.short        # 'Jane Doe'
name.initials()   # ['J', 'D']
name.zip()        # 'Jane A. D.'

result = parse_name("Jane")      # no exception, a failed NameResult
result.success                   # False
result.error_message             # 'InputError (Jane): expecting a list of 2-5 elements'
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from namefully.config import Config, get_config, get_registry
from namefully.exceptions import InputError, NameException
from namefully.formatter import NameFormatter
from namefully.names import FullName, Name
from namefully.parsers import ListNameParser, ListStringParser, MapNameParser, Parser, StringParser
from namefully.types import Capitalization, Flat, NameOrder, NameType, Namon, Surname

RawName = Union[str, Sequence[str], Sequence[Name], Mapping[str, Any], FullName, Parser]


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPE
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameResult:
    """Result of a name parsing operation - Either-like structure."""

    success: bool
    result: Any = None
    error: Optional[NameException] = None

    @classmethod
    def success_with_name(cls, name: Any) -> "NameResult":
        return cls(success=True, result=name, error=None)

    @classmethod
    def failure(cls, error: NameException) -> "NameResult":
        return cls(success=False, result=None, error=error)

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def map(self, f) -> "NameResult":
        """Transform a successful result; name errors raised by `f` become failures."""
        if self.success:
            try:
                return NameResult.success_with_name(f(self.result))
            except NameException as e:
                return NameResult.failure(e)
        return self

    def flat_map(self, f) -> "NameResult":
        """Chain an operation that itself returns a `NameResult`."""
        if self.success:
            try:
                return f(self.result)
            except NameException as e:
                return NameResult.failure(e)
        return self


# ════════════════════════════════════════════════════════════════════════════════
# FACADE
# ════════════════════════════════════════════════════════════════════════════════


def _as_config(config: Union[Config, str, None]) -> Optional[Config]:
    return get_config(config) if isinstance(config, str) else config


class Namefully:
    """A person name, parsed once and rendered on demand."""

    def __init__(self, names: RawName, config: Union[Config, str, None] = None, **overrides: Any):
        self._full_name = self._to_full_name(names, _as_config(config), overrides)
        self._formatter = NameFormatter(self._full_name)

    @staticmethod
    def _to_full_name(names: RawName, config: Optional[Config], overrides: Dict[str, Any]) -> FullName:
        if isinstance(names, FullName):
            if config is None and not overrides:
                return names
            return names.with_config(get_registry().merge(config or names.config, **overrides))
        if isinstance(names, Parser):
            return names.parse(config, **overrides)
        if isinstance(names, str):
            return StringParser(names).parse(config, **overrides)
        if isinstance(names, Mapping):
            return MapNameParser(names).parse(config, **overrides)
        if isinstance(names, (list, tuple)):
            if all(isinstance(n, str) for n in names):
                return ListStringParser(names).parse(config, **overrides)
            if all(isinstance(n, Name) for n in names):
                return ListNameParser(names).parse(config, **overrides)
            raise InputError(source=[str(n) for n in names], message="expecting a list of str or a list of Name")
        raise InputError(source=type(names).__name__, message="cannot parse this type of input")

    @classmethod
    def only(
        cls,
        first: str,
        last: str,
        prefix: Optional[str] = None,
        middle: Optional[Union[str, Sequence[str]]] = None,
        suffix: Optional[str] = None,
        config: Union[Config, str, None] = None,
    ) -> "Namefully":
        """Build from keyword parts; absent parts are left out."""
        parts = {"prefix": prefix, "first": first, "middle": middle, "last": last, "suffix": suffix}
        return cls({k: v for k, v in parts.items() if v is not None}, config)

    @classmethod
    def parse(cls, text: str, config: Union[Config, str, None] = None) -> "Namefully":
        """Build from plain text; see `Parser.build` for how long text is folded."""
        return cls(Parser.build(text), config)

    @classmethod
    def try_parse(cls, text: str, config: Union[Config, str, None] = None) -> Optional["Namefully"]:
        """Like `parse`, but returns None instead of raising a name error."""
        try:
            return cls.parse(text, config)
        except NameException:
            return None

    # ────────────────────────────────────────────────────────────────────────────
    # Parts
    # ────────────────────────────────────────────────────────────────────────────

    @property
    def config(self) -> Config:
        return self._full_name.config

    @property
    def full_name_value(self) -> FullName:
        return self._full_name

    @property
    def parts(self) -> Tuple[Name, ...]:
        return tuple(self._full_name)

    @property
    def prefix(self) -> Optional[str]:
        return self._formatter.prefix()

    @property
    def first(self) -> str:
        return self.first_name()

    @property
    def middle(self) -> Optional[str]:
        middles = self.middle_name()
        return middles[0] if middles else None

    @property
    def last(self) -> str:
        return self.last_name()

    @property
    def suffix(self) -> Optional[str]:
        return self._formatter.suffix()

    @property
    def has_middle(self) -> bool:
        return self._full_name.has(Namon.MIDDLE_NAME)

    def has(self, namon: Union[Namon, str]) -> bool:
        namon = Namon.cast(namon) if isinstance(namon, str) else namon
        return namon is not None and self._full_name.has(namon)

    def __getitem__(self, namon: Union[Namon, str]) -> Union[Name, Tuple[Name, ...], None]:
        key = Namon.cast(namon) if isinstance(namon, str) else namon
        if key is None:
            raise KeyError(namon)
        if key is Namon.MIDDLE_NAME:
            return self._full_name.middles
        return {
            Namon.PREFIX: self._full_name.prefix,
            Namon.FIRST_NAME: self._full_name.first,
            Namon.LAST_NAME: self._full_name.last,
            Namon.SUFFIX: self._full_name.suffix,
        }[key]

    def first_name(self, with_more: bool = True) -> str:
        return self._formatter.first(with_more)

    def middle_name(self) -> List[str]:
        return self._formatter.middles()

    def last_name(self, surname: Optional[Surname] = None) -> str:
        return self._formatter.last(surname)

    # ────────────────────────────────────────────────────────────────────────────
    # Renderings
    # ────────────────────────────────────────────────────────────────────────────

    def full_name(self, order: Optional[NameOrder] = None) -> str:
        return self._formatter.full(order)

    def birth_name(self, order: Optional[NameOrder] = None) -> str:
        return self._formatter.birth(order)

    @property
    def full(self) -> str:
        return self.full_name()

    @property
    def birth(self) -> str:
        return self.birth_name()

    @property
    def short(self) -> str:
        return self.shortest()

    @property
    def long(self) -> str:
        return self.longest()

    @property
    def public(self) -> str:
        return self._formatter.public()

    @property
    def length(self) -> int:
        return len(self.birth)

    @property
    def count(self) -> int:
        return self._formatter.count()

    def shortest(self, order: Optional[NameOrder] = None) -> str:
        return self._formatter.shortest(order)

    def shorten(self, order: Optional[NameOrder] = None) -> str:
        return self.shortest(order)

    def longest(self, order: Optional[NameOrder] = None) -> str:
        return self._formatter.longest(order)

    def initials(
        self,
        order: Optional[NameOrder] = None,
        with_middle: bool = False,
        only: NameType = NameType.BIRTH_NAME,
    ) -> List[str]:
        return self._formatter.initials(order, with_middle, only)

    def format(self, pattern: str) -> str:
        return self._formatter.format(pattern)

    def flatten(
        self,
        limit: int = 20,
        by: Flat = Flat.MIDDLE_NAME,
        with_period: bool = True,
        recursive: bool = False,
        with_more: bool = False,
        surname: Optional[Surname] = None,
    ) -> str:
        return self._formatter.flatten(limit, by, with_period, recursive, with_more, surname)

    def zip(self, by: Flat = Flat.MID_LAST, with_period: bool = True) -> str:
        return self._formatter.zip(by, with_period)

    def to(self, case: Capitalization) -> str:
        return self._formatter.to(case)

    def upper(self) -> str:
        return self.to(Capitalization.UPPER)

    def lower(self) -> str:
        return self.to(Capitalization.LOWER)

    def camel(self) -> str:
        return self.to(Capitalization.CAMEL)

    def pascal(self) -> str:
        return self.to(Capitalization.PASCAL)

    def snake(self) -> str:
        return self.to(Capitalization.SNAKE)

    def hyphen(self) -> str:
        return self.to(Capitalization.HYPHEN)

    def dot(self) -> str:
        return self.to(Capitalization.DOT)

    def toggle(self) -> str:
        return self.to(Capitalization.TOGGLE)

    def split(self, pattern: Optional[str] = None) -> List[str]:
        return self._formatter.split(pattern)

    def join(self, separator: str = "") -> str:
        return self._formatter.join(separator)

    def flip(self) -> None:
        """Toggle the order stored in the configuration, for every name sharing it."""
        order = self.config.order.flipped()
        self.config.update_order(order)
        logging.info(f"The name order is now changed to: {order.value}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": self.prefix,
            "first": self.first,
            "middle": self.middle_name(),
            "last": self.last,
            "suffix": self.suffix,
        }

    def to_list(self) -> List[Optional[str]]:
        middles = self.middle_name()
        return [self.prefix, self.first, " ".join(middles) if middles else None, self.last, self.suffix]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namefully):
            return NotImplemented
        return self.full == other.full

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.full

    def __repr__(self) -> str:
        return f"Namefully({self.full!r}, config={self.config.name!r})"


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


def parse_name(raw: RawName, config: Union[Config, str, None] = None) -> NameResult:
    """
    Parse a name without raising name errors.

    Args:
        raw: any input shape accepted by `Namefully`
        config: configuration handle or name; the default configuration otherwise

    Returns:
        NameResult holding the `Namefully` instance, or the `NameException` that
        stopped the parse. Errors that are not name errors propagate.
    """
    try:
        return NameResult.success_with_name(Namefully(raw, config))
    except NameException as e:
        return NameResult.failure(e)
