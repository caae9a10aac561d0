import math

import numpy as np
import pytest

from voidfill.spatial import FixedRadiusSearch


def test_search_returns_values_and_distances_within_radius():
    frs = FixedRadiusSearch(2.0)
    frs.insert(0.0, 0.0, 1.0)
    frs.insert(1.0, 1.0, 2.0)
    frs.insert(5.0, 5.0, 3.0)

    found = sorted(frs.search(0.0, 0.0))

    assert [v for v, _ in found] == [1.0, 2.0]
    assert found[0][1] == pytest.approx(0.0)
    assert found[1][1] == pytest.approx(math.sqrt(2.0))


def test_search_empty_index():
    frs = FixedRadiusSearch(5)
    assert len(frs) == 0
    assert frs.search(1.0, 1.0) == []


def test_search_nothing_in_range():
    frs = FixedRadiusSearch(1.5)
    frs.insert(10.0, 10.0, 4.0)
    assert frs.search(0.0, 0.0) == []


def test_duplicates_are_kept():
    frs = FixedRadiusSearch(1.0)
    frs.insert(0.0, 0.0, 1.0)
    frs.insert(0.0, 0.0, 1.0)
    assert len(frs) == 2
    assert len(frs.search(0.5, 0.0)) == 2


def test_insert_after_search_is_visible():
    frs = FixedRadiusSearch(3.0)
    frs.insert(0.0, 0.0, 1.0)
    assert len(frs.search(1.0, 0.0)) == 1

    frs.insert(2.0, 0.0, 5.0)
    assert sorted(v for v, _ in frs.search(1.0, 0.0)) == [1.0, 5.0]


def test_search_many_matches_search():
    frs = FixedRadiusSearch(3.0)
    frs.extend([0, 1, 2, 8], [0, 0, 0, 8], [1.0, 2.0, 3.0, 4.0])

    results = frs.search_many([0, 4, 8], 1)

    assert len(results) == 3
    for x, (values, dists) in zip([0, 4, 8], results):
        assert sorted(zip(values.tolist(), dists.tolist())) == sorted(frs.search(x, 1))

    values, dists = results[2]
    assert values.size == 0 and dists.size == 0


def test_larger_radius_only_adds_samples():
    rng = np.random.default_rng(42)
    xs, ys = rng.uniform(0, 50, 200), rng.uniform(0, 50, 200)
    zs = np.arange(200, dtype=float)

    small, large = FixedRadiusSearch(3), FixedRadiusSearch(7)
    small.extend(xs, ys, zs)
    large.extend(xs, ys, zs)

    for qx, qy in [(10, 10), (25, 25), (49, 1)]:
        near = {v for v, _ in small.search(qx, qy)}
        far = {v for v, _ in large.search(qx, qy)}
        assert near <= far


@pytest.mark.parametrize("radius", [0, -1])
def test_radius_must_be_positive(radius):
    with pytest.raises(ValueError):
        FixedRadiusSearch(radius)


def test_extend_length_mismatch():
    frs = FixedRadiusSearch(1)
    with pytest.raises(ValueError):
        frs.extend([0, 1], [0], [1, 2])
