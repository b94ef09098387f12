"""
quickpass.generator
Random password generator over a fixed set of character classes.
"""

import enum
import logging
import string
from random import Random, SystemRandom
from typing import Iterable, Optional


logger = logging.getLogger(__name__)

SYMBOLS = "!@#$%^&*()_+[]{}|;:,.<>?"
_sysrand = SystemRandom()


class CharacterClass(enum.Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"

    @property
    def chars(self) -> str:
        return CHARSETS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


CHARSETS = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.NUMBERS: string.digits,
    CharacterClass.SYMBOLS: SYMBOLS,
}

# enum definition order is the canonical charset order
CANONICAL_ORDER = tuple(CharacterClass)


def build_charset(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the enabled classes in canonical order, whatever order they came in."""
    enabled = set(classes)
    return "".join(CHARSETS[c] for c in CANONICAL_ORDER if c in enabled)


def generate(
    classes: Iterable[CharacterClass],
    length: int,
    rng: Optional[Random] = None,
) -> str:
    """
    Generate a password of `length` characters drawn uniformly, with
    replacement, from the charset of the enabled classes.

    No class is guaranteed to appear. With no class enabled the result is
    the empty string and no draws are made. `length` is not validated here.
    """
    charset = build_charset(classes)
    if not charset:
        logger.debug("no character class enabled, returning empty password")
        return ""

    rng = rng or _sysrand
    size = len(charset)
    return "".join(charset[rng.randrange(size)] for _ in range(length))


def generate_from(config, rng: Optional[Random] = None) -> str:
    """Generate from a configuration snapshot exposing `classes` and `length`."""
    return generate(config.classes, config.length, rng=rng)
