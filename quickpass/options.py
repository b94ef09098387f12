"""
quickpass.options

Password configuration snapshot and the validating boundary in front of
the generator.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List

from .generator import CANONICAL_ORDER, CharacterClass

MIN_LENGTH = 1
MAX_LENGTH = 32
DEFAULT_LENGTH = 12

EMPTY_CLASSES_MESSAGE = "You have to select at least one item."


class ConfigError(ValueError):
    """Raised when a configuration is rejected by the validating boundary."""


@dataclass(frozen=True)
class PasswordConfig:
    classes: FrozenSet[CharacterClass] = field(default_factory=lambda: frozenset(CharacterClass))
    length: int = DEFAULT_LENGTH

    def __post_init__(self):
        # accept any iterable of classes but always store a frozenset
        object.__setattr__(self, "classes", frozenset(self.classes))

    def with_length(self, length: int) -> "PasswordConfig":
        return replace(self, length=length)

    def with_classes(self, classes: Iterable[CharacterClass]) -> "PasswordConfig":
        return replace(self, classes=frozenset(classes))

    def toggled(self, cls: CharacterClass, enabled: bool) -> "PasswordConfig":
        if enabled:
            return self.with_classes(self.classes | {cls})
        return self.with_classes(self.classes - {cls})

    def ids(self) -> List[str]:
        return [c.value for c in CANONICAL_ORDER if c in self.classes]


DEFAULT_CONFIG = PasswordConfig()


def parse_classes(ids: Iterable[str]) -> FrozenSet[CharacterClass]:
    """Parse class ids such as "uppercase" or " Symbols " into CharacterClass members."""
    out = set()
    for raw in ids:
        key = str(raw).strip().lower()
        try:
            out.add(CharacterClass(key))
        except ValueError:
            valid = ", ".join(c.value for c in CANONICAL_ORDER)
            raise ConfigError(f"Unknown character class {raw!r} (expected one of: {valid})") from None
    return frozenset(out)


def validate(config: PasswordConfig) -> PasswordConfig:
    """
    Check a snapshot before it reaches the generator:
    - at least one character class enabled
    - length an integer within [MIN_LENGTH, MAX_LENGTH]
    Returns the snapshot unchanged, raises ConfigError otherwise.
    """
    if not config.classes:
        raise ConfigError(EMPTY_CLASSES_MESSAGE)
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise ConfigError(f"length must be an integer, got {length!r}")
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise ConfigError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}")
    return config
