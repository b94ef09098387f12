import pytest

from quickpass.generator import CharacterClass
from quickpass.options import (
    DEFAULT_CONFIG,
    EMPTY_CLASSES_MESSAGE,
    MAX_LENGTH,
    MIN_LENGTH,
    ConfigError,
    PasswordConfig,
    parse_classes,
    validate,
)


def test_defaults():
    assert DEFAULT_CONFIG.length == 12
    assert DEFAULT_CONFIG.classes == frozenset(CharacterClass)
    assert (MIN_LENGTH, MAX_LENGTH) == (1, 32)


def test_validate_bounds():
    assert validate(DEFAULT_CONFIG.with_length(1)).length == 1
    assert validate(DEFAULT_CONFIG.with_length(32)).length == 32
    for bad in (0, 33, -1):
        with pytest.raises(ConfigError):
            validate(DEFAULT_CONFIG.with_length(bad))


def test_validate_rejects_non_integer_length():
    for bad in (12.0, "12", True, None):
        with pytest.raises(ConfigError):
            validate(DEFAULT_CONFIG.with_length(bad))


def test_validate_rejects_empty_classes():
    with pytest.raises(ConfigError) as exc:
        validate(DEFAULT_CONFIG.with_classes([]))
    assert str(exc.value) == EMPTY_CLASSES_MESSAGE


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_snapshots_are_immutable():
    cfg = PasswordConfig(classes=[CharacterClass.NUMBERS], length=8)
    assert isinstance(cfg.classes, frozenset)
    changed = cfg.with_length(20)
    assert cfg.length == 8 and changed.length == 20
    with pytest.raises(Exception):
        cfg.length = 3


def test_toggled():
    cfg = PasswordConfig(classes={CharacterClass.LOWERCASE}, length=8)
    on = cfg.toggled(CharacterClass.SYMBOLS, True)
    assert on.classes == {CharacterClass.LOWERCASE, CharacterClass.SYMBOLS}
    off = on.toggled(CharacterClass.SYMBOLS, False)
    assert off == cfg
    # toggling an absent class off is a no-op
    assert cfg.toggled(CharacterClass.NUMBERS, False) == cfg


def test_ids_are_canonical():
    cfg = PasswordConfig(classes={CharacterClass.SYMBOLS, CharacterClass.UPPERCASE})
    assert cfg.ids() == ["uppercase", "symbols"]


def test_parse_classes():
    assert parse_classes([" Uppercase", "numbers", "NUMBERS"]) == {
        CharacterClass.UPPERCASE,
        CharacterClass.NUMBERS,
    }
    assert parse_classes([]) == frozenset()


def test_parse_classes_unknown():
    with pytest.raises(ConfigError) as exc:
        parse_classes(["uppercase", "emoji"])
    assert "emoji" in str(exc.value)
