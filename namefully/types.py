"""
Enumerations shared across the namefully package.

The name standards used throughout are:

    (prefix) firstName (middleName) lastName (suffix)

where parenthesized parts are optional. Some terminology:

- namon: one piece of a name (e.g., a first name)
- nama: two or more pieces of a name (e.g., first name + last name)
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from namefully.constants import NAMON_KEY_ALIASES


class Namon(Enum):
    """The types of name parts handled according to the name standards."""

    PREFIX = "prefix"
    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    SUFFIX = "suffix"

    @property
    def key(self) -> str:
        """Short key used by map-shaped inputs and outputs."""
        return _NAMON_TO_KEY[self]

    @classmethod
    def cast(cls, key: str) -> Optional["Namon"]:
        """Makes a string key a namon type, or None if the key is unknown."""
        value = NAMON_KEY_ALIASES.get(key)
        return cls(value) if value is not None else None

    @classmethod
    def contains_key(cls, key: str) -> bool:
        return key in NAMON_KEY_ALIASES


_NAMON_TO_KEY: Dict[Namon, str] = {
    Namon.PREFIX: "prefix",
    Namon.FIRST_NAME: "first",
    Namon.MIDDLE_NAME: "middle",
    Namon.LAST_NAME: "last",
    Namon.SUFFIX: "suffix",
}


class NameOrder(Enum):
    """The order of appearance of a full name."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"

    def flipped(self) -> "NameOrder":
        return NameOrder.LAST_NAME if self is NameOrder.FIRST_NAME else NameOrder.FIRST_NAME


class NameType(Enum):
    """The subsets of a full name that can be targeted on their own."""

    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    BIRTH_NAME = "birthName"


class Separator(Enum):
    """The token used to split string values."""

    COMMA = ","
    COLON = ":"
    DOUBLE_QUOTE = '"'
    EMPTY = ""
    HYPHEN = "-"
    PERIOD = "."
    SEMI_COLON = ";"
    SINGLE_QUOTE = "'"
    SPACE = " "
    UNDERSCORE = "_"

    @property
    def token(self) -> str:
        return self.value


class Title(Enum):
    """Abbreviation style of a prefix: US adds a trailing period, UK does not."""

    US = "us"
    UK = "uk"


class Surname(Enum):
    """How a surname made of a father's and a mother's side is rendered."""

    FATHER = "father"
    MOTHER = "mother"
    HYPHENATED = "hyphenated"
    ALL = "all"


class CapsRange(Enum):
    """The range to use when capitalizing a string content."""

    NONE = "none"
    INITIAL = "initial"
    ALL = "all"


class Flat(Enum):
    """Which parts of a full name get compacted to their initials."""

    FIRST_NAME = "firstName"
    MIDDLE_NAME = "middleName"
    LAST_NAME = "lastName"
    FIRST_MID = "firstMid"
    MID_LAST = "midLast"
    ALL = "all"


class Capitalization(Enum):
    """Case conventions a birth name can be converted to."""

    CAMEL = "camel"
    DOT = "dot"
    HYPHEN = "hyphen"
    LOWER = "lower"
    PASCAL = "pascal"
    SNAKE = "snake"
    TOGGLE = "toggle"
    UPPER = "upper"
