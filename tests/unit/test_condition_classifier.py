"""
Testes para o classificador de condições do WeatherAPI.com
"""
import pytest

from domain.constants import WeatherCondition as WeatherConditionConstants
from domain.services.condition_classifier import (
    classify_condition,
    get_condition_key,
    get_icon_key
)


class TestClassifyCondition:
    """Testes para classify_condition"""

    def test_clear_day(self):
        condition = classify_condition(1000, True)

        assert condition.icon_key == "clear_day"
        assert condition.text == "Sunny"
        assert condition.has_icon

    def test_clear_night(self):
        condition = classify_condition(1000, False)

        assert condition.icon_key == "clear_night"
        # Texto é sempre a descrição diurna do código
        assert condition.text == "Sunny"

    def test_unknown_code(self):
        condition = classify_condition(9999, True)

        assert condition.text == "Unknown"
        assert condition.icon_key == ""
        assert not condition.has_icon

    def test_code_with_text_but_no_icon(self):
        """1192 tem descrição no WeatherAPI mas não está na tabela de ícones"""
        condition = classify_condition(1192, True)

        assert condition.text == "Heavy rain at times"
        assert condition.icon_key == WeatherConditionConstants.NO_ICON

    @pytest.mark.parametrize("code,expected", [
        (1003, "partly_cloudy"),
        (1006, "cloudy"),
        (1009, "overcast"),
        (1030, "mist"),
        (1135, "mist"),
        (1147, "mist"),
        (1066, "snow"),
        (1278, "snow"),
        (1063, "rain"),
        (1255, "rain"),
        (1150, "shower_rain"),
        (1264, "shower_rain"),
        (1087, "thunderstorm"),
        (1282, "thunderstorm"),
    ])
    def test_condition_keys(self, code, expected):
        assert get_condition_key(code) == expected
        assert get_icon_key(code, True) == f"{expected}_day"
        assert get_icon_key(code, False) == f"{expected}_night"

    def test_unknown_key(self):
        assert get_condition_key(42) is None
        assert get_icon_key(42, False) == ""

    def test_code_sets_are_disjoint(self):
        """Ordem da tabela só importa para códigos repetidos; hoje não há nenhum"""
        seen = set()
        for codes, _ in WeatherConditionConstants.ICON_CODES:
            assert not (codes & seen)
            seen |= codes

    def test_first_match_wins(self, monkeypatch):
        table = (
            (frozenset({1000}), "first"),
            (frozenset({1000}), "second"),
        )
        monkeypatch.setattr(WeatherConditionConstants, "ICON_CODES", table)

        assert get_icon_key(1000, True) == "first_day"

    def test_is_pure(self):
        assert classify_condition(1183, False) == classify_condition(1183, False)
