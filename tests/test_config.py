import pytest

from holding_times.config import SweepConfig, us
from holding_times.errors import ArithmeticDegenerate, InvalidConfiguration


def test_defaults():
    config = SweepConfig()
    assert config.mcs == tuple(range(12))
    assert config.bandwidths == (20, 40, 80)
    assert config.payloads == (1500,)
    assert config.overhead == 42
    assert (config.sifs, config.difs, config.slot) == (16000, 34000, 9000)
    assert config.ack_bandwidth == 20
    assert config.guard_interval == 800
    assert config.nss == 1
    assert not config.verbose
    assert config.size == 36


def test_lists_are_frozen_to_tuples():
    config = SweepConfig(mcs=[3, 4], bandwidths=[160], payloads=[100, 200])
    assert config.mcs == (3, 4)
    assert config.size == 4
    with pytest.raises(AttributeError):
        config.slot = 1


def test_us_helper():
    assert us(16) == 16000
    assert us(0.8) == 800


@pytest.mark.parametrize("slot", [0, -9000])
def test_non_positive_slot_is_degenerate(slot):
    with pytest.raises(ArithmeticDegenerate):
        SweepConfig(slot=slot)


@pytest.mark.parametrize("kwargs", [
    dict(mcs=()),
    dict(bandwidths=[]),
    dict(payloads=[0]),
    dict(mcs=[-1]),
    dict(overhead=-1),
    dict(ack_size=0),
    dict(sifs=-1),
    dict(band="60GHz"),
])
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfiguration):
        SweepConfig(**kwargs)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        SweepConfig(slot=0)
