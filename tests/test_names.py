"""
Tests for the name parts and the full name aggregate.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namefully
sys.path.insert(0, str(Path(__file__).parent.parent))

from namefully.config import Config
from namefully.exceptions import InputError, ValidationError
from namefully.names import FullName, Name, as_names, capitalize, decapitalize, toggle_case
from namefully.types import CapsRange, Namon, Surname

# (father, mother, surname mode) -> expected display
SURNAME_TEST_CASES = [
    (("Garcia", "Lopez", Surname.FATHER), "Garcia"),
    (("Garcia", "Lopez", Surname.MOTHER), "Lopez"),
    (("Garcia", "Lopez", Surname.HYPHENATED), "Garcia-Lopez"),
    (("Garcia", "Lopez", Surname.ALL), "Garcia Lopez"),
    (("Doe", None, Surname.FATHER), "Doe"),
    (("Doe", None, Surname.MOTHER), ""),
    (("Doe", None, Surname.HYPHENATED), "Doe"),
    (("Doe", None, Surname.ALL), "Doe"),
]


def test_string_helpers():
    assert capitalize("jOHN") == "John"
    assert capitalize("john", CapsRange.ALL) == "JOHN"
    assert capitalize("john", CapsRange.NONE) == "john"
    assert decapitalize("JOHN") == "jOHN"
    assert decapitalize("JOHN", CapsRange.ALL) == "john"
    assert toggle_case("Jane Doe") == "jANE dOE"
    assert capitalize("") == ""


def test_first_name_with_more():
    name = Name.first("Jean", more=["Baptiste"])
    assert name.to_display() == "Jean"
    assert name.to_display(include_extras=True) == "Jean Baptiste"
    assert name.initials() == ["J"]
    assert name.initials(include_extras=True) == ["J", "B"]
    assert name.has_more
    assert len(name) == len("Jean") + len("Baptiste")


def test_surname_modes():
    passed = 0
    failed = 0

    for (father, mother, mode), expected in SURNAME_TEST_CASES:
        result = Name.last(father, mother).to_display(surname=mode)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {father}/{mother} as {mode.value}: expected {expected!r}, got {result!r}")

    assert failed == 0, f"Surname tests: {failed} failures out of {len(SURNAME_TEST_CASES)} tests"
    print(f"Surname tests: {passed} passed, {failed} failed")


def test_last_name_initials_follow_surname_mode():
    name = Name.last("Garcia", mother="Lopez")
    assert name.initials() == ["G"]
    assert name.initials(surname=Surname.HYPHENATED) == ["G", "L"]
    assert name.initials(surname=Surname.MOTHER) == ["L"]
    assert Name.last("Doe").initials(surname=Surname.MOTHER) == []


def test_case_transforms_return_new_parts():
    original = Name.middle("ann")
    assert original.capitalize().text == "Ann"
    assert original.capitalize(CapsRange.ALL).text == "ANN"
    assert original.text == "ann"
    assert Name.first("JANE").decapitalize().text == "jANE"
    assert Name.first("JANE").decapitalize(CapsRange.ALL).text == "jane"
    assert Name.of("ann", Namon.MIDDLE_NAME, CapsRange.ALL).text == "ANN"


def test_capitalize_reaches_extras():
    first = Name.first("jean", more=["luc"]).capitalize(CapsRange.ALL)
    assert first.text == "JEAN" and first.more == ("LUC",)
    last = Name.last("garcia", mother="lopez").capitalize()
    assert last.text == "Garcia" and last.mother == "Lopez"


def test_normalize_is_idempotent():
    name = Name.first("jEAN", more=["bAPTISTE"])
    once = name.normalize()
    assert once.text == "Jean"
    assert once.more == ("Baptiste",)
    assert once.normalize() == once


def test_invalid_parts():
    with pytest.raises(InputError):
        Name("", Namon.FIRST_NAME)
    with pytest.raises(InputError):
        Name("Ann", Namon.MIDDLE_NAME, more=("Kate",))
    with pytest.raises(InputError):
        Name("Jane", Namon.FIRST_NAME, mother="Lopez")
    with pytest.raises(InputError):
        Name.first("Jean", more=[""])
    with pytest.raises(InputError):
        Name.first("Jean", more="Luc")
    with pytest.raises(InputError):
        Name("Jean", Namon.FIRST_NAME, more="Luc")
    with pytest.raises(InputError):
        FullName.raw("Jean", "Picard", more="Luc")
    with pytest.raises(InputError):
        Name.last("Garcia", mother="")


def test_as_names_splits_extras():
    assert as_names(Name.first("Jean", more=["Luc"])) == [Name.first("Jean"), Name.first("Luc")]
    assert as_names(Name.last("Garcia", mother="Lopez")) == [Name.last("Garcia"), Name.last("Lopez")]
    assert as_names(Name.middle("Ann")) == [Name.middle("Ann")]


def test_full_name_structure():
    name = FullName(first=Name.first("Jane"), last=Name.last("Doe"), middles=[Name.middle("Ann")])
    assert isinstance(name.middles, tuple)
    assert name.has(Namon.MIDDLE_NAME)
    assert not name.has(Namon.PREFIX)
    assert not name.has(Namon.SUFFIX)
    assert [n.text for n in name] == ["Jane", "Ann", "Doe"]
    assert str(name) == "Jane Ann Doe"


def test_full_name_rejects_misplaced_kinds():
    with pytest.raises(InputError):
        FullName(first=Name.last("Doe"), last=Name.last("Doe"))
    with pytest.raises(InputError):
        FullName(first=Name.first("Jane"), last=Name.last("Doe"), middles=[Name.first("Ann")])
    with pytest.raises(InputError):
        FullName(first=Name.first("Jane"), last=Name.last("Doe"), prefix=Name.suffix("PhD"))


def test_full_name_from_raw_strings():
    name = FullName.raw("Jane", "Doe", prefix="Dr", middles=["Ann"], suffix="PhD")
    assert str(name) == "Dr Jane Ann Doe PhD"

    with pytest.raises(ValidationError):
        FullName.raw("J4ne", "Doe")

    loose = Config.inline("loose", bypass=True)
    assert FullName.raw("J4ne", "Doe", config=loose).first.text == "J4ne"


def test_full_name_transforms_are_pure():
    name = FullName.raw("Jane", "Doe", prefix="Dr", middles=["Ann"])
    upper = name.capitalize(CapsRange.ALL)
    assert str(upper) == "DR JANE ANN DOE"
    assert str(name) == "Dr Jane Ann Doe"
    assert str(upper.decapitalize(CapsRange.ALL)) == "dr jane ann doe"
    assert str(upper.normalize()) == "Dr Jane Ann Doe"


def test_shortened_keeps_first_and_last_only():
    name = FullName.raw("Jane", "Doe", prefix="Dr", middles=["Ann"], suffix="PhD", more=["Kate"])
    short = name.shortened()
    assert short.prefix is None and short.suffix is None and short.middles == ()
    assert short.first == Name.first("Jane")
    assert short.config is name.config


def test_equality_ignores_config():
    one = FullName.raw("Jane", "Doe")
    other = FullName.raw("Jane", "Doe", config=Config.inline("other"))
    assert one == other
