"""
Name parts and the full name aggregate.

A `Name` is a single namon tagged by its kind (`Namon`). Two kinds carry an extra
payload:

- a first name may carry `more`, additional given names that are not middle names
  (e.g., `Name.first("Jean", more=["Baptiste"])`);
- a last name may carry a `mother` surname and a `surname` composition mode
  (e.g., `Name.last("Garcia", mother="Lopez", surname=Surname.HYPHENATED)`).

Shared behavior lives in free functions (`to_display`, `initials_of`,
`capitalize_name`, `decapitalize_name`, `normalize_name`, `as_names`) that
dispatch on the tag; the methods on `Name` are shortcuts to them. Every
transformation returns a new value.

A `FullName` owns zero-or-one prefix and suffix, exactly one first name,
zero-or-more middle names and exactly one last name. It is frozen: changing its
case or shape produces a new `FullName`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Sequence, Tuple

from namefully.config import Config, get_config
from namefully.exceptions import InputError
from namefully.types import CapsRange, Namon, Surname


# ════════════════════════════════════════════════════════════════════════════════
# STRING HELPERS
# ════════════════════════════════════════════════════════════════════════════════


def capitalize(text: str, caps: CapsRange = CapsRange.INITIAL) -> str:
    """Upper-case the initial (lower-casing the rest) or the whole string."""
    if not text or caps is CapsRange.NONE:
        return text
    if caps is CapsRange.INITIAL:
        return text[0].upper() + text[1:].lower()
    return text.upper()


def decapitalize(text: str, caps: CapsRange = CapsRange.INITIAL) -> str:
    """Lower-case the initial only, or the whole string."""
    if not text or caps is CapsRange.NONE:
        return text
    if caps is CapsRange.INITIAL:
        return text[0].lower() + text[1:]
    return text.lower()


def toggle_case(text: str) -> str:
    return "".join(c.lower() if c.isupper() else c.upper() for c in text)


# ════════════════════════════════════════════════════════════════════════════════
# NAME PART (tagged variant)
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Name:
    """One piece of a name, tagged by its kind."""

    text: str
    kind: Namon
    caps: CapsRange = CapsRange.INITIAL
    more: Tuple[str, ...] = ()
    mother: Optional[str] = None
    surname: Surname = Surname.FATHER

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text:
            raise InputError(source=self.text, message="a name must not be empty")
        if isinstance(self.more, str):
            raise InputError(source=self.more, message="additional first names must be a sequence, not a string")
        if self.more and self.kind is not Namon.FIRST_NAME:
            raise InputError(source=self.text, message="only a first name may carry more names")
        if self.mother is not None and self.kind is not Namon.LAST_NAME:
            raise InputError(source=self.text, message="only a last name may carry a mother's surname")
        object.__setattr__(self, "more", tuple(self.more))
        for extra in self.more:
            if not extra:
                raise InputError(source=self.text, message="additional first names must not be empty")
        if self.mother == "":
            raise InputError(source=self.text, message="a mother's surname must not be empty")

    @classmethod
    def of(cls, text: str, kind: Namon, caps: Optional[CapsRange] = None) -> "Name":
        """Create a name part, applying `caps` right away when given."""
        name = cls(text, kind, caps or CapsRange.INITIAL)
        return capitalize_name(name, caps) if caps is not None else name

    @classmethod
    def prefix(cls, text: str) -> "Name":
        return cls(text, Namon.PREFIX)

    @classmethod
    def first(cls, text: str, more: Optional[Sequence[str]] = None) -> "Name":
        if isinstance(more, str):
            raise InputError(source=more, message="additional first names must be a sequence, not a string")
        return cls(text, Namon.FIRST_NAME, more=tuple(more or ()))

    @classmethod
    def middle(cls, text: str) -> "Name":
        return cls(text, Namon.MIDDLE_NAME)

    @classmethod
    def last(cls, father: str, mother: Optional[str] = None, surname: Surname = Surname.FATHER) -> "Name":
        return cls(father, Namon.LAST_NAME, mother=mother, surname=surname)

    @classmethod
    def suffix(cls, text: str) -> "Name":
        return cls(text, Namon.SUFFIX)

    @property
    def initial(self) -> str:
        return self.text[0]

    @property
    def father(self) -> str:
        return self.text

    @property
    def has_more(self) -> bool:
        return bool(self.more)

    @property
    def has_mother(self) -> bool:
        return bool(self.mother)

    @property
    def is_prefix(self) -> bool:
        return self.kind is Namon.PREFIX

    @property
    def is_first_name(self) -> bool:
        return self.kind is Namon.FIRST_NAME

    @property
    def is_middle_name(self) -> bool:
        return self.kind is Namon.MIDDLE_NAME

    @property
    def is_last_name(self) -> bool:
        return self.kind is Namon.LAST_NAME

    @property
    def is_suffix(self) -> bool:
        return self.kind is Namon.SUFFIX

    def __len__(self) -> int:
        return len(self.text) + sum(len(n) for n in self.more) + len(self.mother or "")

    def __str__(self) -> str:
        return to_display(self)

    def to_display(self, include_extras: bool = False, surname: Optional[Surname] = None) -> str:
        return to_display(self, include_extras, surname)

    def initials(self, include_extras: bool = False, surname: Optional[Surname] = None) -> List[str]:
        return initials_of(self, include_extras, surname)

    def capitalize(self, caps: Optional[CapsRange] = None) -> "Name":
        return capitalize_name(self, caps)

    def decapitalize(self, caps: Optional[CapsRange] = None) -> "Name":
        return decapitalize_name(self, caps)

    def normalize(self) -> "Name":
        return normalize_name(self)


def to_display(name: Name, include_extras: bool = False, surname: Optional[Surname] = None) -> str:
    """Render a name part.

    A first name shows its additional names when `include_extras` is set. A last
    name is composed according to `surname` (defaulting to its own mode): the
    mother mode renders an empty string when no mother's surname is known.
    """
    if name.kind is Namon.FIRST_NAME:
        if include_extras and name.more:
            return " ".join((name.text, *name.more))
        return name.text
    if name.kind is Namon.LAST_NAME:
        mode = surname or name.surname
        if mode is Surname.FATHER:
            return name.text
        if mode is Surname.MOTHER:
            return name.mother or ""
        if not name.mother:
            return name.text
        joiner = "-" if mode is Surname.HYPHENATED else " "
        return f"{name.text}{joiner}{name.mother}"
    return name.text


def initials_of(name: Name, include_extras: bool = False, surname: Optional[Surname] = None) -> List[str]:
    """First characters of a name part, following the same rules as `to_display`."""
    if name.kind is Namon.FIRST_NAME:
        if include_extras:
            return [name.initial, *(n[0] for n in name.more)]
        return [name.initial]
    if name.kind is Namon.LAST_NAME:
        mode = surname or name.surname
        if mode is Surname.FATHER:
            return [name.initial]
        if mode is Surname.MOTHER:
            return [name.mother[0]] if name.mother else []
        return [name.initial, name.mother[0]] if name.mother else [name.initial]
    return [name.initial]


def _transform(name: Name, fn) -> Name:
    return replace(
        name,
        text=fn(name.text),
        more=tuple(fn(n) for n in name.more),
        mother=fn(name.mother) if name.mother else name.mother,
    )


def capitalize_name(name: Name, caps: Optional[CapsRange] = None) -> Name:
    caps = caps or name.caps
    return _transform(name, lambda s: capitalize(s, caps))


def decapitalize_name(name: Name, caps: Optional[CapsRange] = None) -> Name:
    caps = caps or name.caps
    return _transform(name, lambda s: decapitalize(s, caps))


def normalize_name(name: Name) -> Name:
    """Initial capital letter, the rest lower-cased, for every text the part carries."""
    return _transform(name, lambda s: capitalize(s, CapsRange.INITIAL))


def as_names(name: Name) -> List[Name]:
    """Split a part carrying extras into plain parts of the same kind."""
    if name.kind is Namon.FIRST_NAME:
        return [Name.first(name.text), *(Name.first(n) for n in name.more)]
    if name.kind is Namon.LAST_NAME:
        return [Name.last(name.text), *([Name.last(name.mother)] if name.mother else [])]
    return [name]


# ════════════════════════════════════════════════════════════════════════════════
# FULL NAME (aggregate)
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FullName:
    """Structured person name: (prefix) first (middles) last (suffix)."""

    first: Name
    last: Name
    middles: Tuple[Name, ...] = ()
    prefix: Optional[Name] = None
    suffix: Optional[Name] = None
    config: Config = field(default_factory=get_config, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "middles", tuple(self.middles))
        self._expect(self.first, Namon.FIRST_NAME)
        self._expect(self.last, Namon.LAST_NAME)
        for middle in self.middles:
            self._expect(middle, Namon.MIDDLE_NAME)
        if self.prefix is not None:
            self._expect(self.prefix, Namon.PREFIX)
        if self.suffix is not None:
            self._expect(self.suffix, Namon.SUFFIX)

    @staticmethod
    def _expect(name: Name, kind: Namon) -> None:
        if not isinstance(name, Name) or name.kind is not kind:
            raise InputError(source=name, message=f"expecting a name of kind {kind.value}")

    @classmethod
    def raw(
        cls,
        first: str,
        last: str,
        prefix: Optional[str] = None,
        middles: Optional[Sequence[str]] = None,
        suffix: Optional[str] = None,
        more: Optional[Sequence[str]] = None,
        mother: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "FullName":
        """Validate plain strings (unless bypassed) and assemble them by role."""
        from namefully.validators import Validators

        config = config or get_config()
        first_name = Name.first(first, more)
        last_name = Name.last(last, mother, config.surname)
        middle_names = [Name.middle(m) for m in middles or ()]
        if not config.bypass:
            if prefix is not None:
                Validators.namon.validate(prefix)
            Validators.first_name.validate(first_name)
            if middle_names:
                Validators.middle_name.validate(middle_names)
            Validators.last_name.validate(last_name)
            if suffix is not None:
                Validators.namon.validate(suffix)
        return cls(
            first=first_name,
            last=last_name,
            middles=tuple(middle_names),
            prefix=Name.prefix(prefix) if prefix is not None else None,
            suffix=Name.suffix(suffix) if suffix is not None else None,
            config=config,
        )

    def has(self, namon: Namon) -> bool:
        """Whether a part of the given kind is present."""
        if namon is Namon.PREFIX:
            return self.prefix is not None
        if namon is Namon.SUFFIX:
            return self.suffix is not None
        if namon is Namon.MIDDLE_NAME:
            return len(self.middles) > 0
        return True

    def __iter__(self) -> Iterator[Name]:
        """Iterate over the present parts following the name standards."""
        if self.prefix is not None:
            yield self.prefix
        yield self.first
        yield from self.middles
        yield self.last
        if self.suffix is not None:
            yield self.suffix

    def __str__(self) -> str:
        from namefully.formatter import NameFormatter

        return NameFormatter(self).full()

    def with_config(self, config: Config) -> "FullName":
        return replace(self, config=config)

    def map_parts(self, fn) -> "FullName":
        """Apply `fn` to every part, returning a new full name."""
        return replace(
            self,
            first=fn(self.first),
            last=fn(self.last),
            middles=tuple(fn(m) for m in self.middles),
            prefix=fn(self.prefix) if self.prefix is not None else None,
            suffix=fn(self.suffix) if self.suffix is not None else None,
        )

    def capitalize(self, caps: Optional[CapsRange] = None) -> "FullName":
        return self.map_parts(lambda n: capitalize_name(n, caps))

    def decapitalize(self, caps: Optional[CapsRange] = None) -> "FullName":
        return self.map_parts(lambda n: decapitalize_name(n, caps))

    def normalize(self) -> "FullName":
        return self.map_parts(normalize_name)

    def shortened(self) -> "FullName":
        """Keep only the first name (without extras) and the last name."""
        return FullName(first=Name.first(self.first.text), last=self.last, config=self.config)
