"""
Input-shape adapters turning raw data into a `FullName`.

Every parser validates the whole input before constructing anything, so a
failed parse never leaves a partially built name behind.

- `StringParser`: `"Mr Jane Ann Doe"`, split on the configured separator
- `ListStringParser`: `["Mr", "Jane", "Ann", "Doe"]`, roles resolved by position
- `ListNameParser`: `[Name.first("Jane"), Name.last("Doe")]`, roles carried by kind
- `MapNameParser`: `{"first": "Jane", "last": "Doe"}`, roles carried by key

Plain lists are ambiguous, so their roles depend only on the configured order
and the number of tokens (see `NameIndex.when`); nothing is guessed from content.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, TypeVar, Union

from namefully.config import Config, get_registry
from namefully.constants import MAX_NUMBER_OF_NAME_PARTS, MIN_NUMBER_OF_NAME_PARTS, NAMON_KEY_ALIASES
from namefully.exceptions import InputError
from namefully.names import FullName, Name
from namefully.types import NameOrder, Namon
from namefully.validators import Validators

T = TypeVar("T")


# ════════════════════════════════════════════════════════════════════════════════
# POSITIONAL INDEX
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameIndex:
    """Slot positions of each role in a plain list; -1 marks an absent role."""

    prefix: int
    first: int
    middle: int
    last: int
    suffix: int

    @classmethod
    def base(cls) -> "NameIndex":
        return cls(0, 1, 2, 3, 4)

    @classmethod
    def when(cls, order: NameOrder, count: int) -> "NameIndex":
        """Resolve the slots for `count` tokens given in `order`.

        by first name: first last | first middle last | prefix first middle last |
                       prefix first middle last suffix
        by last name:  last first | last first middle | prefix last first middle |
                       prefix last first middle suffix
        """
        if count < MIN_NUMBER_OF_NAME_PARTS or count > MAX_NUMBER_OF_NAME_PARTS:
            raise InputError(
                source=str(count),
                message=f"expecting {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} name parts",
            )
        return _INDEX_TABLE[order][count]

    def slots(self) -> Dict[Namon, int]:
        """Positions of the present roles."""
        positions = {
            Namon.PREFIX: self.prefix,
            Namon.FIRST_NAME: self.first,
            Namon.MIDDLE_NAME: self.middle,
            Namon.LAST_NAME: self.last,
            Namon.SUFFIX: self.suffix,
        }
        return {namon: pos for namon, pos in positions.items() if pos >= 0}


_INDEX_TABLE: Dict[NameOrder, Dict[int, NameIndex]] = {
    NameOrder.FIRST_NAME: {
        2: NameIndex(-1, 0, -1, 1, -1),
        3: NameIndex(-1, 0, 1, 2, -1),
        4: NameIndex(0, 1, 2, 3, -1),
        5: NameIndex(0, 1, 2, 3, 4),
    },
    NameOrder.LAST_NAME: {
        2: NameIndex(-1, 1, -1, 0, -1),
        3: NameIndex(-1, 1, 2, 0, -1),
        4: NameIndex(0, 2, 3, 1, -1),
        5: NameIndex(0, 2, 3, 1, 4),
    },
}


# ════════════════════════════════════════════════════════════════════════════════
# PARSERS
# ════════════════════════════════════════════════════════════════════════════════


class Parser(ABC, Generic[T]):
    """Turns raw data of one shape into a `FullName`."""

    def __init__(self, raw: T):
        self.raw = raw

    @abstractmethod
    def parse(self, config: Optional[Config] = None, **overrides: Any) -> FullName:
        """Parse the raw data under `config`, with optional option `overrides`."""

    @staticmethod
    def build(text: str) -> "Parser":
        """Build a parser from plain space-separated text.

        The words go straight to a `ListStringParser`, so the configured separator
        plays no part. Two or three words are parsed as they are. Longer text keeps
        its first and last words and folds everything in between into the middle
        name, so no prefix or suffix is ever inferred.
        """
        parts = text.strip().split()
        if len(parts) < 2:
            raise InputError(source=text, message="cannot build from invalid input")
        if len(parts) <= 3:
            return ListStringParser(parts)
        return ListStringParser([parts[0], " ".join(parts[1:-1]), parts[-1]])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"


def _resolve(config: Optional[Config], overrides: Dict[str, Any]) -> Config:
    return get_registry().merge(config, **overrides)


class StringParser(Parser[str]):
    def parse(self, config: Optional[Config] = None, **overrides: Any) -> FullName:
        config = _resolve(config, overrides)
        if not isinstance(self.raw, str):
            raise InputError(source=type(self.raw).__name__, message="expecting a string")
        token = config.separator.token
        if not token:
            raise InputError(source=self.raw, message="cannot split on an empty separator")
        return ListStringParser(self.raw.strip().split(token)).parse(config)


class ListStringParser(Parser[Sequence[str]]):
    def parse(self, config: Optional[Config] = None, **overrides: Any) -> FullName:
        config = _resolve(config, overrides)
        if isinstance(self.raw, str) or not all(isinstance(n, str) for n in self.raw):
            raise InputError(source=self.raw, message="expecting a list of strings")

        raw = [n.strip() for n in self.raw]
        Validators.list_string.validate_index(raw)
        index = NameIndex.when(config.order, len(raw))
        if config.bypass:
            logging.debug(f"Bypassing validation rules for {raw}")
        else:
            Validators.list_string.validate(raw, index)
        return self._distribute(raw, config, index)

    def _distribute(self, raw: List[str], config: Config, index: NameIndex) -> FullName:
        return FullName(
            first=Name.first(raw[index.first]),
            last=Name.last(raw[index.last], surname=config.surname),
            middles=tuple(self._to_middles(raw[index.middle], config)) if index.middle >= 0 else (),
            prefix=Name.prefix(raw[index.prefix]) if index.prefix >= 0 else None,
            suffix=Name.suffix(raw[index.suffix]) if index.suffix >= 0 else None,
            config=config,
        )

    @staticmethod
    def _to_middles(raw: str, config: Config) -> List[Name]:
        token = config.separator.token or " "
        return [Name.middle(n) for chunk in raw.split(token) for n in chunk.split()]


class ListNameParser(Parser[Sequence[Name]]):
    def parse(self, config: Optional[Config] = None, **overrides: Any) -> FullName:
        config = _resolve(config, overrides)
        names = list(self.raw)
        Validators.list_name.validate(names, bypass=config.bypass)

        parts: Dict[Namon, Name] = {}
        middles: List[Name] = []
        for name in names:
            if name.is_middle_name:
                middles.append(name)
            elif name.is_last_name:
                parts[Namon.LAST_NAME] = Name.last(name.text, name.mother, config.surname)
            else:
                parts[name.kind] = name
        return FullName(
            first=parts[Namon.FIRST_NAME],
            last=parts[Namon.LAST_NAME],
            middles=tuple(middles),
            prefix=parts.get(Namon.PREFIX),
            suffix=parts.get(Namon.SUFFIX),
            config=config,
        )


class MapNameParser(Parser[Mapping[str, Union[str, Sequence[str]]]]):
    """Parses `{"prefix", "first", "middle", "last", "suffix"}` keyed input."""

    def parse(self, config: Optional[Config] = None, **overrides: Any) -> FullName:
        config = _resolve(config, overrides)
        nama = self._as_nama()
        if config.bypass:
            logging.debug(f"Bypassing validation rules for {dict(self.raw)}")
            Validators.nama.validate_keys(nama)
        else:
            Validators.nama.validate(nama)

        middles = nama.get(Namon.MIDDLE_NAME)
        if isinstance(middles, str):
            middles = middles.split()
        return FullName(
            first=Name.first(nama[Namon.FIRST_NAME]),
            last=Name.last(nama[Namon.LAST_NAME], surname=config.surname),
            middles=tuple(Name.middle(m) for m in middles or ()),
            prefix=Name.prefix(nama[Namon.PREFIX]) if Namon.PREFIX in nama else None,
            suffix=Name.suffix(nama[Namon.SUFFIX]) if Namon.SUFFIX in nama else None,
            config=config,
        )

    def _as_nama(self) -> Dict[Namon, Any]:
        if not isinstance(self.raw, Mapping):
            raise InputError(source=type(self.raw).__name__, message="expecting a mapping of name parts")
        nama: Dict[Namon, Any] = {}
        for key, value in self.raw.items():
            if not Namon.contains_key(key):
                raise InputError(source=self.raw, message=f'unsupported key "{key}"')
            namon = Namon(NAMON_KEY_ALIASES[key])
            if namon in nama:
                raise InputError(source=self.raw, message=f'duplicate key for "{namon.key}"')
            nama[namon] = value
        return nama
