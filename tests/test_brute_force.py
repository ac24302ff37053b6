import numpy as np
import pytest

from scalar_nn.errors import InsufficientDataError, InvalidIndexError
from scalar_nn.search import BruteForceSearcher, NormType, UnivariateNeighbourSearcher
from scalar_nn.search.utils import k_smallest


@pytest.fixture(params=[NormType.MAX_NORM, NormType.EUCLIDEAN_SQUARED])
def norm_type(request):
    return request.param


def test_brute_force_scenarios():
    s = BruteForceSearcher([0.0, 1.0, 2.0, 5.0])
    assert s.count_points_within_or_on_r(1, 1.0) == 2
    assert s.count_points_strictly_within_r(1, 1.0) == 0
    assert s.count_points_within_or_on_r(0, float("inf")) == 3

    res = s.find_nearest_neighbour(3)
    assert (res.index, res.norm) == (2, 3.0)


def test_brute_force_errors():
    with pytest.raises(InsufficientDataError):
        BruteForceSearcher([1.0])
    s = BruteForceSearcher([1.0, 2.0])
    with pytest.raises(InsufficientDataError):
        s.find_k_nearest_neighbours(2, 0)
    with pytest.raises(InvalidIndexError):
        s.find_nearest_neighbour(2)


def test_univariate_matches_brute_force_on_continuous_data(norm_type):
    rng = np.random.default_rng(3)
    X = rng.standard_normal(200)
    uni = UnivariateNeighbourSearcher(X, norm_type=norm_type)
    ref = BruteForceSearcher(X, norm_type=norm_type)

    for idx in range(len(X)):
        assert uni.find_nearest_neighbour(idx) == ref.find_nearest_neighbour(idx)

        a = uni.find_k_nearest_neighbours(7, idx)
        b = ref.find_k_nearest_neighbours(7, idx)
        assert a.indices.tolist() == b.indices.tolist()
        np.testing.assert_array_equal(a.norms, b.norms)

        r = float(b.kth.norm)
        assert uni.count_points_within_or_on_r(idx, r) == ref.count_points_within_or_on_r(idx, r)
        assert uni.count_points_strictly_within_r(idx, r) == ref.count_points_strictly_within_r(idx, r)


def test_univariate_matches_brute_force_norms_with_many_ties(norm_type):
    rng = np.random.default_rng(11)
    X = rng.integers(0, 6, size=60).astype(np.float64)
    uni = UnivariateNeighbourSearcher(X, norm_type=norm_type)
    ref = BruteForceSearcher(X, norm_type=norm_type)

    for idx in range(len(X)):
        assert uni.find_nearest_neighbour(idx).norm == ref.find_nearest_neighbour(idx).norm
        for k in (1, 5, 20):
            np.testing.assert_array_equal(
                uni.find_k_nearest_neighbours(k, idx).norms,
                ref.find_k_nearest_neighbours(k, idx).norms,
            )
        for r in (0.0, 1.0, 2.5, 4.0):
            assert uni.count_points_within_or_on_r(idx, r) == ref.count_points_within_or_on_r(idx, r)
            assert uni.count_points_strictly_within_r(idx, r) == ref.count_points_strictly_within_r(idx, r)


def test_k_smallest_orders_ascending_with_index_order_on_ties():
    idx, d = k_smallest(np.array([3.0, 1.0, 2.0, 1.0, 0.5]), 5)
    assert idx.tolist() == [4, 1, 3, 2, 0]
    np.testing.assert_array_equal(d, [0.5, 1.0, 1.0, 2.0, 3.0])


def test_k_smallest_caps_at_available():
    idx, d = k_smallest(np.array([2.0, 1.0]), 5)
    assert idx.tolist() == [1, 0]
    with pytest.raises(ValueError):
        k_smallest(np.array([1.0]), 0)
