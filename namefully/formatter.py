"""
Rendering of a `FullName` back to text.

`NameFormatter` reads the options of the full name's configuration at call time
(order, separator, title, ending, surname), so a shared configuration changed
after parsing is reflected by the next rendering.

Given `Mr John Ben Smith PhD` (first-name order, UK title):

| method              | output                       |
|---------------------|------------------------------|
| `shortest()`        | `John Smith`                 |
| `birth()`           | `John Ben Smith`             |
| `longest()`         | `Mr John Ben Smith PhD`      |
| `public()`          | `John S.`                    |
| `initials()`        | `['J', 'S']`                 |
| `official()`        | `Mr SMITH, John Ben PhD`     |
| `zip()`             | `John B. S.`                 |
| `format("%L, %f")`  | `SMITH, John`                |
| `format("%f %$l.")` | `John S.`                    |

## Pattern tokens

A token is the sigil `%` followed by a letter; a lower-case letter renders the
natural form and an upper-case letter the upper-cased form.

- `%p` prefix, `%f` first name, `%m` middle names, `%l` last name, `%s` suffix
- `%b` birth name, `%o` official form, `%i` initials, `%u` public form
- `%$f`, `%$m`, `%$l` the initial of the first name, of the first middle name
  (empty without middle names) and of the last name
- `%%` a literal `%`

Any other character, including an unknown token such as `%q`, is copied as is.
The whole-pattern aliases `short`, `long`, `public` and `official` are also
accepted.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from namefully.config import Config
from namefully.constants import (
    PATTERN_ALIASES,
    PATTERN_INITIAL_LETTERS,
    PATTERN_INITIAL_MODIFIER,
    PATTERN_LETTERS,
    PATTERN_SIGIL,
    SPLIT_PATTERN,
)
from namefully.exceptions import NotAllowedError
from namefully.names import FullName, capitalize, decapitalize, initials_of, to_display, toggle_case
from namefully.types import Capitalization, Flat, NameOrder, NameType, Surname, Title

# Which of (first, middle, last) get compacted for each variant
_FLATTENED: Dict[Flat, Tuple[bool, bool, bool]] = {
    Flat.FIRST_NAME: (True, False, False),
    Flat.MIDDLE_NAME: (False, True, False),
    Flat.LAST_NAME: (False, False, True),
    Flat.FIRST_MID: (True, True, False),
    Flat.MID_LAST: (False, True, True),
    Flat.ALL: (True, True, True),
}

# Escalation used by recursive flattening
_FLAT_SEQUENCE = (Flat.FIRST_NAME, Flat.MIDDLE_NAME, Flat.LAST_NAME, Flat.FIRST_MID, Flat.MID_LAST, Flat.ALL)

_SPACES = re.compile(r" {2,}")


class NameFormatter:
    """Text renderings of a full name. Never mutates the name."""

    def __init__(self, full_name: FullName):
        self._name = full_name

    @property
    def config(self) -> Config:
        return self._name.config

    @property
    def _joiner(self) -> str:
        return self.config.separator.token or " "

    # ────────────────────────────────────────────────────────────────────────────
    # Parts
    # ────────────────────────────────────────────────────────────────────────────

    def prefix(self) -> Optional[str]:
        """The prefix, with a trailing period under the US title style."""
        if self._name.prefix is None:
            return None
        text = self._name.prefix.text
        if self.config.title is Title.US and not text.endswith("."):
            text += "."
        return text

    def suffix(self) -> Optional[str]:
        return self._name.suffix.text if self._name.suffix is not None else None

    def first(self, with_more: bool = True) -> str:
        return to_display(self._name.first, include_extras=with_more)

    def middles(self) -> List[str]:
        return [m.text for m in self._name.middles]

    def last(self, surname: Optional[Surname] = None) -> str:
        mode = surname or self.config.surname
        if mode is Surname.MOTHER and not self._name.last.has_mother:
            raise NotAllowedError(
                source=self._name.last.text,
                operation="lastName",
                message="the surname mode selects a mother's surname that is absent",
            )
        return to_display(self._name.last, surname=mode)

    def _last_initials(self, surname: Optional[Surname] = None) -> List[str]:
        mode = surname or self.config.surname
        if mode is Surname.MOTHER and not self._name.last.has_mother:
            # same failure as rendering the last name itself
            self.last(mode)
        return initials_of(self._name.last, surname=mode)

    # ────────────────────────────────────────────────────────────────────────────
    # Ordered forms
    # ────────────────────────────────────────────────────────────────────────────

    def _birth_parts(self, order: Optional[NameOrder] = None) -> List[str]:
        order = order or self.config.order
        if order is NameOrder.FIRST_NAME:
            return [self.first(), *self.middles(), self.last()]
        return [self.last(), self.first(), *self.middles()]

    def birth(self, order: Optional[NameOrder] = None) -> str:
        """The birth name: no prefix, no suffix."""
        return self._joiner.join(self._birth_parts(order))

    def full(self, order: Optional[NameOrder] = None) -> str:
        """Every present part, in the given or configured order."""
        parts = self._birth_parts(order)
        suffix = self.suffix()
        if suffix is not None and self.config.ending:
            parts[-1] += ","
        prefix = self.prefix()
        return self._joiner.join([*([prefix] if prefix else []), *parts, *([suffix] if suffix else [])])

    def shortest(self, order: Optional[NameOrder] = None) -> str:
        """First and last name only; the first name's extras are left out."""
        order = order or self.config.order
        first, last = self.first(with_more=False), self.last()
        return self._joiner.join([first, last] if order is NameOrder.FIRST_NAME else [last, first])

    def longest(self, order: Optional[NameOrder] = None) -> str:
        return self.full(order)

    def public(self) -> str:
        """First name combined with the last name's initial, e.g. `Jane D.`."""
        return f"{self.first(with_more=False)} {self._last_initials()[0]}."

    def official(self) -> str:
        """`[prefix] LAST, first [middles][,] [suffix]`."""
        suffix = self.suffix()
        tail = [self.first(), *self.middles()]
        if suffix is not None and self.config.ending:
            tail[-1] += ","
        prefix = self.prefix()
        nama = [*([prefix] if prefix else []), f"{self.last().upper()},", *tail, *([suffix] if suffix else [])]
        return " ".join(nama)

    def count(self) -> int:
        """Number of characters of the longest form, separators excluded."""
        separator = self.config.separator.token
        return sum(1 for c in self.longest() if not c.isspace() and c != separator)

    def initials(
        self,
        order: Optional[NameOrder] = None,
        with_middle: bool = False,
        only: NameType = NameType.BIRTH_NAME,
    ) -> List[str]:
        """First letters of the birth name parts, in the given or configured order."""
        order = order or self.config.order
        first = initials_of(self._name.first)
        middles = [m.initial for m in self._name.middles]
        last = self._last_initials()

        if only is NameType.FIRST_NAME:
            return first
        if only is NameType.MIDDLE_NAME:
            return middles
        if only is NameType.LAST_NAME:
            return last
        if order is NameOrder.FIRST_NAME:
            return [*first, *(middles if with_middle else []), *last]
        return [*last, *first, *(middles if with_middle else [])]

    # ────────────────────────────────────────────────────────────────────────────
    # Compaction
    # ────────────────────────────────────────────────────────────────────────────

    def flatten(
        self,
        limit: int = 20,
        by: Flat = Flat.MIDDLE_NAME,
        with_period: bool = True,
        recursive: bool = False,
        with_more: bool = False,
        surname: Optional[Surname] = None,
    ) -> str:
        """Compact the parts selected by `by` to their initials.

        Nothing happens while the birth name fits within `limit` characters. With
        `recursive`, stronger variants are tried in turn until the result fits.
        For `John Winston Ono Lennon`:

        - FIRST_NAME: `J. Winston Ono Lennon`
        - MIDDLE_NAME: `John W. O. Lennon`
        - LAST_NAME: `John Winston Ono L.`
        - FIRST_MID: `J. W. O. Lennon`
        - MID_LAST: `John W. O. L.`
        - ALL: `J. W. O. L.`
        """
        if len(self.birth()) <= limit:
            return self.full()

        period = "." if with_period else ""
        glue = f"{period} "
        has_middle = bool(self._name.middles)
        first_flat, middle_flat, last_flat = _FLATTENED[by]

        first = (
            glue.join(initials_of(self._name.first, include_extras=with_more)) + period
            if first_flat
            else self.first(with_more=with_more)
        )
        if middle_flat:
            middle = glue.join(m.initial for m in self._name.middles) + period if has_middle else ""
        else:
            middle = " ".join(self.middles())
        last = glue.join(self._last_initials(surname)) + period if last_flat else self.last(surname)

        if self.config.order is NameOrder.FIRST_NAME:
            parts = [first, middle, last] if has_middle else [first, last]
        else:
            parts = [last, first, middle] if has_middle else [last, first]
        flat = " ".join(parts)

        if recursive and len(flat) > limit and by is not Flat.ALL:
            following = _FLAT_SEQUENCE[_FLAT_SEQUENCE.index(by) + 1]
            return self.flatten(limit, following, with_period, recursive, with_more, surname)
        return flat

    def zip(self, by: Flat = Flat.MID_LAST, with_period: bool = True) -> str:
        """Unconditional `flatten`."""
        return self.flatten(limit=0, by=by, with_period=with_period)

    # ────────────────────────────────────────────────────────────────────────────
    # Pattern interpreter
    # ────────────────────────────────────────────────────────────────────────────

    def format(self, pattern: str) -> str:
        """Expand the `%x` tokens of `pattern`; see the module docstring."""
        if pattern in PATTERN_ALIASES:
            aliases = {"short": self.shortest, "long": self.longest, "public": self.public, "official": self.official}
            return aliases[pattern]()

        out: List[str] = []
        i = 0
        while i < len(pattern):
            char = pattern[i]
            if char != PATTERN_SIGIL or i + 1 == len(pattern):
                out.append(char)
                i += 1
                continue
            letter = pattern[i + 1]
            if letter == PATTERN_INITIAL_MODIFIER and i + 2 < len(pattern):
                part = pattern[i + 2]
                if part.lower() in PATTERN_INITIAL_LETTERS:
                    value = self._initial_of(part.lower())
                    out.append(value.upper() if part.isupper() else value)
                    i += 3
                    continue
            role = PATTERN_LETTERS.get(letter.lower())
            if letter == PATTERN_SIGIL:
                out.append(PATTERN_SIGIL)
            elif role is None:
                out.append(char + letter)
            else:
                value = self._render(role)
                out.append(value.upper() if letter.isupper() else value)
            i += 2
        return _SPACES.sub(" ", "".join(out)).strip()

    def _render(self, role: str) -> str:
        if role == "prefix":
            return self.prefix() or ""
        if role == "first":
            return self.first()
        if role == "middle":
            return " ".join(self.middles())
        if role == "last":
            return self.last()
        if role == "suffix":
            return self.suffix() or ""
        if role == "birth":
            return self.birth()
        if role == "official":
            return self.official()
        if role == "initials":
            return "".join(self.initials(with_middle=True))
        return self.public()

    def _initial_of(self, part: str) -> str:
        if part == "f":
            return self._name.first.initial
        if part == "m":
            return self._name.middles[0].initial if self._name.middles else ""
        return self._last_initials()[0]

    # ────────────────────────────────────────────────────────────────────────────
    # Case conversions of the birth name
    # ────────────────────────────────────────────────────────────────────────────

    def split(self, pattern: Optional[str] = None) -> List[str]:
        """Words of the birth name, broken on apostrophes, hyphens, periods and spaces."""
        text = self.birth()
        separator = self.config.separator.token
        if separator:
            text = text.replace(separator, " ")
        return re.sub(pattern or SPLIT_PATTERN, " ", text).split()

    def join(self, separator: str = "") -> str:
        return separator.join(self.split())

    def to(self, case: Capitalization) -> str:
        words = self.split()
        if case is Capitalization.UPPER:
            return self.birth().upper()
        if case is Capitalization.LOWER:
            return self.birth().lower()
        if case is Capitalization.PASCAL:
            return "".join(capitalize(w) for w in words)
        if case is Capitalization.CAMEL:
            return decapitalize("".join(capitalize(w) for w in words))
        if case is Capitalization.SNAKE:
            return "_".join(w.lower() for w in words)
        if case is Capitalization.HYPHEN:
            return "-".join(w.lower() for w in words)
        if case is Capitalization.DOT:
            return ".".join(w.lower() for w in words)
        return toggle_case(self.birth())
