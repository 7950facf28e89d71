"""
Tests for the named configuration registry.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namefully
sys.path.insert(0, str(Path(__file__).parent.parent))

from namefully.config import Config, ConfigRegistry, get_config, get_registry
from namefully.types import NameOrder, Separator, Surname, Title


def test_defaults():
    config = get_config()
    assert config.name == "default"
    assert config.order is NameOrder.FIRST_NAME
    assert config.separator is Separator.SPACE
    assert config.title is Title.UK
    assert config.ending is False
    assert config.bypass is False
    assert config.surname is Surname.FATHER


def test_same_name_same_instance():
    assert get_config("library") is get_config("library")
    assert Config.get("library") is get_config("library")
    assert get_config("library") is not get_config("other")


def test_writes_are_shared_by_name():
    get_config("library").order = NameOrder.LAST_NAME
    assert get_config("library").order is NameOrder.LAST_NAME
    assert get_config("other").order is NameOrder.FIRST_NAME


def test_lazy_creation_is_logged(caplog):
    caplog.set_level(logging.DEBUG)
    get_config("logged")
    assert "Created configuration 'logged'" in caplog.text


def test_merge_overrides_win_over_base():
    base = get_config("base")
    base.order = NameOrder.LAST_NAME

    merged = Config.merge(base, title=Title.US)
    assert merged is not base
    assert merged.title is Title.US
    assert merged.order is NameOrder.LAST_NAME
    assert merged.name == "base"
    # detached: the registered instance is untouched
    assert get_config("base") is base
    assert base.title is Title.UK


def test_merge_without_overrides_returns_base():
    base = get_config("base")
    assert Config.merge(base) is base
    assert Config.merge(base, title=None) is base
    assert Config.merge() is get_config()


def test_merge_rejects_unknown_options():
    with pytest.raises(TypeError):
        Config.merge(get_config(), colour="blue")


def test_inline_resets_unspecified_options():
    config = Config.inline("inline", order=NameOrder.LAST_NAME, title=Title.US)
    assert config is get_config("inline")
    assert config.order is NameOrder.LAST_NAME

    Config.inline("inline", title=Title.US)
    assert config.order is NameOrder.FIRST_NAME
    assert config.title is Title.US


def test_copy_with_registers_unique_names(caplog):
    caplog.set_level(logging.DEBUG)
    config = get_config("library")

    first_copy = config.copy_with(title=Title.US)
    second_copy = config.copy_with()
    assert first_copy.name == "library_copy"
    assert second_copy.name == "library_copy_copy"
    assert get_config("library_copy") is first_copy
    assert first_copy.title is Title.US
    assert config.title is Title.UK
    assert "Registered configuration 'library_copy'" in caplog.text

    named = config.copy_with(name="custom", bypass=True)
    assert named.name == "custom"
    assert named.bypass is True


def test_reset_and_update_order_work_in_place():
    config = Config.inline("edited", order=NameOrder.LAST_NAME, ending=True, surname=Surname.ALL)
    config.reset()
    assert config.options() == Config(name="edited").options()

    config.update_order(NameOrder.LAST_NAME)
    assert get_config("edited").order is NameOrder.LAST_NAME


def test_registry_introspection(fresh_registry):
    get_config("a")
    get_config("b")
    assert fresh_registry.names() == ["a", "b"]
    assert "a" in fresh_registry
    fresh_registry.clear()
    assert fresh_registry.names() == []


def test_global_registry_is_created_once():
    assert get_registry() is get_registry()
    assert isinstance(get_registry(), ConfigRegistry)


def test_separate_registries_are_independent():
    registry = ConfigRegistry()
    local = registry.get("library")
    assert local is not get_config("library")
    assert registry.names() == ["library"]
