import pytest

from streamta.indicators.moving_averages import SMA
from streamta.indicators.oscillators import PPO
from streamta.indicators.registry import INDICATORS, create_indicator, valid_params


def test_all_names_registered():
    assert set(INDICATORS) == {
        "SMA", "EMA", "MAX", "MIN", "MAD", "SD", "ER", "MFI", "RSI", "CCI",
        "FAST_STOCH", "SLOW_STOCH", "PPO", "ROC", "BB", "TRANGE", "ATR", "CE",
    }


def test_create_by_name():
    sma = create_indicator("SMA", period=20)
    assert isinstance(sma, SMA)
    assert sma.period == 20


def test_name_is_case_insensitive():
    ppo = create_indicator("ppo", fast=5, slow=10, signal=3)
    assert isinstance(ppo, PPO)
    assert str(ppo) == "PPO(5, 10, 3)"


def test_unknown_indicator():
    with pytest.raises(ValueError, match="Unknown indicator"):
        create_indicator("WMA")


def test_unknown_param():
    with pytest.raises(ValueError, match="Unknown parameters"):
        create_indicator("SMA", length=20)


def test_invalid_param_value_propagates():
    with pytest.raises(ValueError):
        create_indicator("EMA", period=0)


def test_valid_params():
    assert valid_params("BB") == frozenset({"period", "multiplier"})
    assert valid_params("TRANGE") == frozenset()
