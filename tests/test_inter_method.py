from __future__ import annotations

import numpy as np

from pyimgaug.augmenters.default import InterMethod, get_inter_method


def test_auto_picks_cubic_area_or_linear() -> None:
    rng = np.random.default_rng(0)
    assert get_inter_method(9, 10, 10, 20, 20, rng) == InterMethod.CUBIC
    assert get_inter_method(9, 20, 20, 10, 10, rng) == InterMethod.AREA
    assert get_inter_method(9, 10, 20, 20, 10, rng) == InterMethod.LINEAR
    assert get_inter_method(9, 10, 10, 10, 10, rng) == InterMethod.LINEAR


def test_explicit_method_passes_through() -> None:
    rng = np.random.default_rng(0)
    for sizes in [(10, 10, 20, 20), (20, 20, 10, 10), (5, 7, 5, 7)]:
        assert get_inter_method(3, *sizes, rng) == 3
        assert get_inter_method(1, *sizes, rng) == 1


def test_random_draws_each_concrete_method() -> None:
    rng = np.random.default_rng(123)
    seen = {get_inter_method(10, 10, 10, 20, 20, rng) for _ in range(300)}
    assert seen == {0, 1, 2, 3, 4}


def test_auto_and_explicit_do_not_consume_randomness() -> None:
    a = np.random.default_rng(5)
    b = np.random.default_rng(5)
    get_inter_method(9, 10, 10, 20, 20, a)
    get_inter_method(2, 10, 10, 20, 20, a)
    assert a.random() == b.random()
