from hydroplan.utils.rounding import round_half_up, round_half_up_to


def test_round_half_up_rounds_halves_upward():
    assert round_half_up(2.5) == 3
    assert round_half_up(654.5) == 655
    assert round_half_up(0.49) == 0


def test_round_half_up_to_decimals():
    assert round_half_up_to(0.75, 1) == 0.8
    assert round_half_up_to(33.333, 1) == 33.3


def test_round_half_up_to_keeps_values_too_large_to_scale():
    assert round_half_up_to(1e308, 1) == 1e308
