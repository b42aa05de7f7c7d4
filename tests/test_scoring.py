import pytest

from birdman.scoring import base_flap_impulse, flap_impulse, format_int_comma, record_from_x


@pytest.mark.parametrize("x, expected", [
    (-60, 20),
    (0, 20),
    (999, 20),
    (1000, 15),
    (2500, 10),
    (3999, 7),
    (4000, 5),
    (100000, 5),
])
def test_base_flap_impulse_bands(x, expected):
    assert base_flap_impulse(x) == expected


def test_flap_impulse_is_upwards_and_weakened_by_damage():
    assert flap_impulse(500, 0) == -20
    assert flap_impulse(500, 1) == -10
    assert flap_impulse(500, 3) == -5


def test_flap_impulse_truncates_towards_zero():
    assert flap_impulse(1500, 1) == -7
    assert flap_impulse(4500, 5) == 0


def test_flap_impulse_strictly_decreases_with_damage():
    magnitudes = [-flap_impulse(500, n) for n in range(4)]
    assert magnitudes == sorted(magnitudes, reverse=True)
    assert len(set(magnitudes)) == len(magnitudes)


def test_record_from_x():
    assert record_from_x(0) == 0
    assert record_from_x(1234) == 123
    assert record_from_x(-55) == -5


def test_format_int_comma():
    assert format_int_comma(0) == "0"
    assert format_int_comma(999) == "999"
    assert format_int_comma(1000) == "1,000"
    assert format_int_comma(1234567) == "1,234,567"
