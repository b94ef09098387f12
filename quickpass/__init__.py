"""
QuickPass: random passwords from selected character classes.
"""

from .generator import CharacterClass, build_charset, generate
from .options import DEFAULT_CONFIG, ConfigError, PasswordConfig, validate
from .session import PasswordSession

__version__ = "0.1.0"

__all__ = [
    "CharacterClass",
    "build_charset",
    "generate",
    "DEFAULT_CONFIG",
    "ConfigError",
    "PasswordConfig",
    "validate",
    "PasswordSession",
]
