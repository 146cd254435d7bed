"""
Tests for board configuration validation and presets
"""

import pytest

from termsweeper.config import MAX_DIMENSION, PRESETS, GameConfig, InvalidConfiguration


def test_presets_are_valid():
    assert PRESETS['beginner'] == GameConfig(9, 9, 10)
    assert PRESETS['intermediate'] == GameConfig(16, 16, 40)
    assert PRESETS['expert'] == GameConfig(30, 16, 99)
    for config in PRESETS.values():
        assert config.validate() is config


def test_too_many_mines_rejected():
    # 1 >= 2 - 1
    with pytest.raises(InvalidConfiguration, match='Too many mines'):
        GameConfig(2, 1, 1).validate()
    GameConfig(3, 1, 1).validate()


@pytest.mark.parametrize('width,height,mines', [
    (0, 5, 1),
    (5, -1, 1),
    (5, 5, -1),
    (MAX_DIMENSION + 1, 2, 1),
])
def test_invalid_dimensions_rejected(width, height, mines):
    with pytest.raises(InvalidConfiguration):
        GameConfig(width, height, mines).validate()


def test_custom_parses_text_input():
    assert GameConfig.custom(' 12\n', '8', '20 ') == GameConfig(12, 8, 20)


def test_custom_rejects_garbage():
    with pytest.raises(InvalidConfiguration, match='Error while reading input'):
        GameConfig.custom('ten', '8', '20')
    with pytest.raises(InvalidConfiguration):
        GameConfig.custom('3', '3', '8')
