# ═════════════════════════════════════════════════════════════════════════════════
# NAME DATA TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data shared by validators, parsers and formatters:
# 1. ARITY: how many raw name parts an input may carry
# 2. ALPHABET: the letters a name part may be made of
# 3. KEYS: the accepted keys of map-shaped inputs
# 4. PATTERN TOKENS: the alphabet of the pattern formatter
#
# All tables are immutable (frozenset / MappingProxyType).
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# Layer 1: ARITY
MIN_NUMBER_OF_NAME_PARTS = 2
MAX_NUMBER_OF_NAME_PARTS = 5

# Layer 2: ALPHABET
#
# `\w` does not cover non-Latin characters, so the class is spelled out:
# - a-z, A-Z: Latin alphabet
# - À-Ö: Latin/German from À to Ö
# - Ø-ö: German/Icelandic from Ø to ö
# - ø-ÿ: German/Icelandic from ø to ÿ
# - Ѐ-ӿ: Cyrillic alphabet from Ѐ to ӿ
# - Ά-ώ: Greek alphabet from Ά to ώ
NAME_LETTERS = "a-zA-ZÀ-ÖØ-öø-ÿЀ-ӿΆ-ώ"

# Single characters allowed between two alphabetic runs
NAMON_SEPARATORS = "' \\-."
MIDDLE_NAME_SEPARATORS = "' \\-"

# Characters ignored when splitting a birth name into words
SPLIT_PATTERN = r"[' \-.]"

# Layer 3: KEYS
#
# Map inputs use the short keys; the long forms are accepted as aliases.
NAMON_KEY_ALIASES = MappingProxyType(
    {
        "prefix": "prefix",
        "first": "firstName",
        "firstName": "firstName",
        "middle": "middleName",
        "middleName": "middleName",
        "last": "lastName",
        "lastName": "lastName",
        "suffix": "suffix",
    }
)

# Layer 4: PATTERN TOKENS
PATTERN_SIGIL = "%"

# Whole-pattern aliases resolved before interpretation
PATTERN_ALIASES = frozenset({"short", "long", "public", "official"})

# Letters recognized after the sigil; upper-case letters render upper-cased output
PATTERN_LETTERS = MappingProxyType(
    {
        "p": "prefix",
        "f": "first",
        "m": "middle",
        "l": "last",
        "s": "suffix",
        "b": "birth",
        "o": "official",
        "i": "initials",
        "u": "public",
    }
)

# Modifier between the sigil and a birth-name letter selecting that part's initial
PATTERN_INITIAL_MODIFIER = "$"
PATTERN_INITIAL_LETTERS = frozenset({"f", "m", "l"})

DEFAULT_CONFIG_NAME = "default"
COPY_ALIAS = "_copy"
