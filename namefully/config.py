"""
Named, shared configuration.

A `Config` is looked up by name through a `ConfigRegistry`: asking for the same
name twice returns the same object, so every name built with it observes later
writes. Distinct names are independent. A process-wide registry is created on
first use and handed out by `get_registry()`; parsers and builders receive the
`Config` handle explicitly.

```python
from namefully.config import get_config
from namefully.types import NameOrder, Title

config = get_config("library")
config.order = NameOrder.LAST_NAME
assert get_config("library").order is NameOrder.LAST_NAME

detached = get_registry().merge(config, title=Title.US)   # not registered
copy = config.copy_with(title=Title.US)                    # registered as "library_copy"
```

Two holders of the same named config that mutate it concurrently race; the
registry does not arbitrate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional

from namefully.constants import COPY_ALIAS, DEFAULT_CONFIG_NAME
from namefully.types import NameOrder, Separator, Surname, Title


@dataclass(eq=False)
class Config:
    """Mutable options shared by every name built under the same `name`."""

    name: str = DEFAULT_CONFIG_NAME
    order: NameOrder = NameOrder.FIRST_NAME
    separator: Separator = Separator.SPACE
    title: Title = Title.UK
    ending: bool = False  # comma between the last name and the suffix
    bypass: bool = False
    surname: Surname = Surname.FATHER

    @classmethod
    def get(cls, name: str = DEFAULT_CONFIG_NAME) -> "Config":
        return get_registry().get(name)

    @classmethod
    def inline(cls, name: str = DEFAULT_CONFIG_NAME, **options: Any) -> "Config":
        return get_registry().inline(name, **options)

    @classmethod
    def merge(cls, base: Optional["Config"] = None, **overrides: Any) -> "Config":
        return get_registry().merge(base, **overrides)

    def copy_with(self, name: Optional[str] = None, **overrides: Any) -> "Config":
        return get_registry().copy_with(self, name, **overrides)

    def reset(self) -> None:
        get_registry().reset(self)

    def update_order(self, order: NameOrder) -> None:
        get_registry().update_order(self, order)

    def options(self) -> Dict[str, Any]:
        """All option values, excluding the name."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "name"}

    def __repr__(self) -> str:
        opts = ", ".join(f"{k}={v}" for k, v in self.options().items())
        return f"Config(name={self.name!r}, {opts})"


_OPTION_NAMES = frozenset(f.name for f in fields(Config) if f.name != "name")


def _check_options(options: Dict[str, Any]) -> None:
    unknown = set(options) - _OPTION_NAMES
    if unknown:
        raise TypeError(f"unknown config option(s): {', '.join(sorted(unknown))}")


class ConfigRegistry:
    """Process-wide cache of named configurations."""

    def __init__(self):
        self._configs: Dict[str, Config] = {}

    def get(self, name: str = DEFAULT_CONFIG_NAME) -> Config:
        """Return the configuration named `name`, creating it with defaults if needed."""
        config = self._configs.get(name)
        if config is None:
            config = Config(name=name)
            self._configs[name] = config
            logging.debug(f"Created configuration '{name}' with default options")
        return config

    def inline(self, name: str = DEFAULT_CONFIG_NAME, **options: Any) -> Config:
        """Set every option of the named configuration; unspecified options go back to defaults."""
        _check_options(options)
        config = self.get(name)
        defaults = Config(name=name)
        for option in _OPTION_NAMES:
            setattr(config, option, options.get(option, getattr(defaults, option)))
        return config

    def merge(self, base: Optional[Config] = None, **overrides: Any) -> Config:
        """Combine `base` with `overrides`, the overrides winning.

        Without overrides the shared `base` handle itself is returned. With overrides a
        detached value is returned: it carries `base`'s name but is not registered.
        """
        _check_options(overrides)
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if base is None:
            base = self.get()
        if not overrides:
            return base
        return replace(base, **overrides)

    def copy_with(self, config: Config, name: Optional[str] = None, **overrides: Any) -> Config:
        """Register a copy of `config` under a fresh name, applying `overrides`."""
        _check_options(overrides)
        new_name = self._unique_name(config.name, name or config.name + COPY_ALIAS)
        copy = replace(config, name=new_name, **{k: v for k, v in overrides.items() if v is not None})
        self._configs[new_name] = copy
        logging.debug(f"Registered configuration '{new_name}' copied from '{config.name}'")
        return copy

    def reset(self, config: Config) -> None:
        """Restore the default option values in place."""
        defaults = Config(name=config.name)
        for option in _OPTION_NAMES:
            setattr(config, option, getattr(defaults, option))

    def update_order(self, config: Config, order: NameOrder) -> None:
        config.order = order

    def names(self) -> List[str]:
        return list(self._configs)

    def clear(self) -> None:
        """Forget every registered configuration."""
        self._configs.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._configs

    def _unique_name(self, current: str, candidate: str) -> str:
        while candidate == current or candidate in self._configs:
            candidate += COPY_ALIAS
        return candidate


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global registry instance for module-level functions
_global_registry: Optional[ConfigRegistry] = None


def get_registry() -> ConfigRegistry:
    """Get or create the global registry instance."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ConfigRegistry()
    return _global_registry


def get_config(name: str = DEFAULT_CONFIG_NAME) -> Config:
    """Module-level shortcut for `get_registry().get(name)`."""
    return get_registry().get(name)
