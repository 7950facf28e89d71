"""Handle person names in a particular order, way, or shape."""

from namefully.builder import BuilderState, NameBuilder, NameChannel
from namefully.collector import NameCollector
from namefully.config import Config, ConfigRegistry, get_config, get_registry
from namefully.core import NameResult, Namefully, parse_name
from namefully.exceptions import (
    InputError,
    NameException,
    NameExceptionType,
    NotAllowedError,
    ValidationError,
)
from namefully.formatter import NameFormatter
from namefully.names import FullName, Name
from namefully.parsers import ListNameParser, ListStringParser, MapNameParser, NameIndex, Parser, StringParser
from namefully.types import (
    CapsRange,
    Capitalization,
    Flat,
    NameOrder,
    NameType,
    Namon,
    Separator,
    Surname,
    Title,
)
from namefully.validators import Validators

__version__ = "0.1.0"

__all__ = [
    "BuilderState",
    "CapsRange",
    "Capitalization",
    "Config",
    "ConfigRegistry",
    "Flat",
    "FullName",
    "InputError",
    "ListNameParser",
    "ListStringParser",
    "MapNameParser",
    "Name",
    "NameBuilder",
    "NameChannel",
    "NameCollector",
    "NameException",
    "NameExceptionType",
    "NameFormatter",
    "NameIndex",
    "NameOrder",
    "NameResult",
    "NameType",
    "Namefully",
    "Namon",
    "NotAllowedError",
    "Parser",
    "Separator",
    "StringParser",
    "Surname",
    "Title",
    "ValidationError",
    "Validators",
    "get_config",
    "get_registry",
    "parse_name",
]
