# tests/test_config.py

import pytest

from orthocal.core.config import DEFAULT_CONFIGURATION, IndentConfiguration
from orthocal.core.errors import InvalidConfiguration

DEFAULT_OPTIONS = [33, 32, 33, 31, 32, 33, 30, 31, 32, 33, 30, 31, 17, 32, 33, 10, 11]


def test_default_options():
    assert DEFAULT_CONFIGURATION.to_options() == (DEFAULT_OPTIONS, False)
    assert DEFAULT_CONFIGURATION.winter(4) == (30, 31, 32, 33)


def test_options_roundtrip():
    values = list(range(1, 18))
    cfg = IndentConfiguration.from_options(values, True)
    assert cfg.to_options() == (values, True)
    assert cfg.winter(3) == (4, 5, 6)
    assert cfg.spring == (16, 17)
    assert cfg.cache_key() == tuple(values) + (1,)


def test_with_updates_are_copies():
    cfg = DEFAULT_CONFIGURATION.with_winter(1, [20]).with_spring([12, 13]).with_spring_apostol(True)
    assert cfg.winter_1 == (20,)
    assert cfg.spring == (12, 13)
    assert cfg.spring_apostol
    assert DEFAULT_CONFIGURATION.winter_1 == (33,)
    assert cfg.cache_key() != DEFAULT_CONFIGURATION.cache_key()


@pytest.mark.parametrize("kwargs", [
    {"winter_1": (0,)},
    {"winter_2": (32, 34)},
    {"winter_3": (31, 32)},
    {"spring": (10, 11, 12)},
    {"winter_1": (True,)},
    {"spring": (10, "11")},
])
def test_validation(kwargs):
    with pytest.raises(InvalidConfiguration):
        IndentConfiguration(**kwargs)


def test_bad_option_lists():
    with pytest.raises(InvalidConfiguration):
        IndentConfiguration.from_options(DEFAULT_OPTIONS[:-1])
    with pytest.raises(InvalidConfiguration):
        DEFAULT_CONFIGURATION.with_winter(6, [1, 2, 3, 4, 5, 6])
    with pytest.raises(ValueError):
        DEFAULT_CONFIGURATION.winter(0)
