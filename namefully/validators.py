"""
Validation rules gating admission into the name model.

The rules only accept letters from an extended Latin, Greek, Cyrillic and
Icelandic alphabet. A name part is one or more alphabetic runs joined by a single
separator character:

- `namon` (prefix, first, last, suffix): hyphen, apostrophe, space or period
  (e.g., `Jean-Baptiste`, `O'Connor`, `Ph.D`)
- `middleName`: hyphen, apostrophe or space only

Leading, trailing and consecutive separators are rejected.

Validators are stateless singletons exposed through `Validators`. Parsers skip
the grammar checks when `Config.bypass` is set, but never the arity checks.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Sequence, Union

from namefully.constants import (
    MAX_NUMBER_OF_NAME_PARTS,
    MIDDLE_NAME_SEPARATORS,
    MIN_NUMBER_OF_NAME_PARTS,
    NAME_LETTERS,
    NAMON_SEPARATORS,
)
from namefully.exceptions import InputError, ValidationError
from namefully.names import Name, as_names
from namefully.types import Namon


class ValidationRule:
    """Precompiled patterns, one per rule name."""

    namon = re.compile(f"^[{NAME_LETTERS}]+(?:[{NAMON_SEPARATORS}][{NAME_LETTERS}]+)*$")
    first_name = namon
    middle_name = re.compile(f"^[{NAME_LETTERS}]+(?:[{MIDDLE_NAME_SEPARATORS}][{NAME_LETTERS}]+)*$")
    last_name = namon


def _check_arity(values: Sequence[Any]) -> None:
    if len(values) < MIN_NUMBER_OF_NAME_PARTS or len(values) > MAX_NUMBER_OF_NAME_PARTS:
        raise InputError(
            source=[str(v) for v in values],
            message=f"expecting a list of {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} elements",
        )


class NamonValidator:
    """Generic rule for a single piece of string."""

    def validate(self, value: str) -> None:
        if not isinstance(value, str) or not ValidationRule.namon.fullmatch(value):
            raise ValidationError(source=value, name_type="namon", message="invalid content")


class FirstNameValidator:
    def validate(self, value: Union[str, Name]) -> None:
        if isinstance(value, str):
            if not ValidationRule.first_name.fullmatch(value):
                raise ValidationError(source=value, name_type="firstName", message="invalid content")
        elif isinstance(value, Name):
            for name in as_names(value):
                self.validate(name.text)
        else:
            raise InputError(source=type(value).__name__, message="expecting types str | Name")


class MiddleNameValidator:
    def validate(self, value: Union[str, Sequence[str], Sequence[Name]]) -> None:
        if isinstance(value, str):
            if not ValidationRule.middle_name.fullmatch(value):
                raise ValidationError(source=value, name_type="middleName", message="invalid content")
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, Name):
                    if not ValidationRule.namon.fullmatch(item.text):
                        raise ValidationError(source=item.text, name_type="middleName", message="invalid content")
                    if item.kind is not Namon.MIDDLE_NAME:
                        raise ValidationError(
                            source=item.text,
                            name_type="middleName",
                            message=f"wrong type {item.kind.value}",
                        )
                elif isinstance(item, str):
                    if not ValidationRule.namon.fullmatch(item):
                        raise ValidationError(source=item, name_type="middleName", message="invalid content")
                else:
                    raise InputError(source=type(item).__name__, message="expecting types str | Name")
        else:
            raise InputError(source=type(value).__name__, message="expecting types str | list[str] | list[Name]")


class LastNameValidator:
    def validate(self, value: Union[str, Name]) -> None:
        if isinstance(value, str):
            if not ValidationRule.last_name.fullmatch(value):
                raise ValidationError(source=value, name_type="lastName", message="invalid content")
        elif isinstance(value, Name):
            for name in as_names(value):
                self.validate(name.text)
        else:
            raise InputError(source=type(value).__name__, message="expecting types str | Name")


class NameValidator:
    """Generic rule applied to a typed name part (prefix, suffix)."""

    def validate(self, name: Name) -> None:
        if not ValidationRule.namon.fullmatch(name.text):
            raise ValidationError(source=name.text, name_type=name.kind.value, message="invalid content")


class NamaValidator:
    """Validates map-shaped input keyed by `Namon`."""

    def validate(self, nama: Mapping[Namon, Any]) -> None:
        self.validate_keys(nama)
        Validators.first_name.validate(nama[Namon.FIRST_NAME])
        Validators.last_name.validate(nama[Namon.LAST_NAME])
        if Namon.MIDDLE_NAME in nama:
            Validators.middle_name.validate(nama[Namon.MIDDLE_NAME])
        for namon in (Namon.PREFIX, Namon.SUFFIX):
            if namon in nama:
                Validators.namon.validate(nama[namon])

    def validate_keys(self, nama: Mapping[Namon, Any]) -> None:
        source = " ".join(str(v) for v in nama.values())
        if not nama:
            raise InputError(source="null", message="the name map must not be empty")
        for namon in (Namon.FIRST_NAME, Namon.LAST_NAME):
            if namon not in nama:
                raise InputError(source=source, message=f'"{namon.key}" is a required key')
        if len(nama) < MIN_NUMBER_OF_NAME_PARTS or len(nama) > MAX_NUMBER_OF_NAME_PARTS:
            raise InputError(
                source=source,
                message=f"expecting {MIN_NUMBER_OF_NAME_PARTS}-{MAX_NUMBER_OF_NAME_PARTS} fields",
            )


class ListStringValidator:
    """Validates raw string tokens at the roles a `NameIndex` assigns them."""

    def validate(self, values: Sequence[str], index) -> None:
        self.validate_index(values)
        if index.prefix >= 0:
            Validators.namon.validate(values[index.prefix])
        Validators.first_name.validate(values[index.first])
        if index.middle >= 0:
            Validators.middle_name.validate(values[index.middle])
        Validators.last_name.validate(values[index.last])
        if index.suffix >= 0:
            Validators.namon.validate(values[index.suffix])

    def validate_index(self, values: Sequence[str]) -> None:
        _check_arity(values)


class ListNameValidator:
    """Validates typed name parts; arity and role checks always run."""

    def validate(self, names: Sequence[Name], bypass: bool = False) -> None:
        self.validate_shape(names)
        if bypass:
            return
        middles: List[Name] = []
        for name in names:
            if name.is_middle_name:
                middles.append(name)
            elif name.is_first_name:
                Validators.first_name.validate(name)
            elif name.is_last_name:
                Validators.last_name.validate(name)
            else:
                Validators.prefix.validate(name)
        if middles:
            Validators.middle_name.validate(middles)

    def validate_shape(self, names: Sequence[Name]) -> None:
        _check_arity(names)
        counts: Dict[Namon, int] = {}
        for name in names:
            if not isinstance(name, Name):
                raise InputError(source=type(name).__name__, message="expecting a list of Name")
            counts[name.kind] = counts.get(name.kind, 0) + 1
        if not counts.get(Namon.FIRST_NAME) or not counts.get(Namon.LAST_NAME):
            raise InputError(source=names, message="both first and last names are required")
        for namon in (Namon.PREFIX, Namon.FIRST_NAME, Namon.LAST_NAME, Namon.SUFFIX):
            if counts.get(namon, 0) > 1:
                raise InputError(source=names, message=f"at most one {namon.value} is allowed")


class Validators:
    """Validator singletons per namon."""

    namon = NamonValidator()
    nama = NamaValidator()
    prefix = NameValidator()
    first_name = FirstNameValidator()
    middle_name = MiddleNameValidator()
    last_name = LastNameValidator()
    suffix = NameValidator()
    list_string = ListStringValidator()
    list_name = ListNameValidator()
