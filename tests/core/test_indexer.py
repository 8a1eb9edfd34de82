import math

import pytest

np = pytest.importorskip("numpy")

from cmac.core import ReceptiveFieldIndexer, association_index
from cmac.errors import IndexOutOfRangeError, InvalidParametersError


def test_association_index_matches_linear_rescale() -> None:
    # g=2, w=5 => associated_vec_size=4, domain [0, 4)
    assert association_index(1.0, 0.0, 4.0, 4) == 1
    assert association_index(0.0, 0.0, 4.0, 4) == 1
    assert association_index(2.0, 0.0, 4.0, 4) == 2
    assert association_index(3.999, 0.0, 4.0, 4) == 2


@pytest.mark.parametrize("num_weights,generalization_factor", [(5, 2), (35, 2), (35, 7), (10, 1)])
def test_indices_stay_inside_valid_range(num_weights: int, generalization_factor: int) -> None:
    avs = num_weights + 1 - generalization_factor
    indexer = ReceptiveFieldIndexer(avs)
    xs = np.linspace(-3.0, 5.0, 200, endpoint=False)
    for x in xs:
        idx = indexer.index(float(x), -3.0, 5.0)
        assert 1 <= idx <= avs - 2


def test_build_table_keeps_duplicate_inputs_by_position() -> None:
    indexer = ReceptiveFieldIndexer(34)
    data = [(1.0, 0.0), (3.0, 1.0), (1.0, 5.0)]
    table = indexer.build_table(data, 0.0, 6.0)
    assert table.dtype == np.int64
    assert len(table) == 3
    assert table[0] == table[2]
    assert table[1] > table[0]


def test_inputs_outside_bounds_are_rejected() -> None:
    indexer = ReceptiveFieldIndexer(4)
    with pytest.raises(IndexOutOfRangeError):
        indexer.index(4.0, 0.0, 4.0)
    with pytest.raises(IndexOutOfRangeError):
        indexer.index(-0.1, 0.0, 4.0)
    with pytest.raises(IndexOutOfRangeError):
        indexer.build_table([(float("nan"), 0.0)], 0.0, 4.0)


def test_invalid_bounds_raise() -> None:
    indexer = ReceptiveFieldIndexer(4)
    with pytest.raises(InvalidParametersError):
        indexer.index(1.0, 2.0, 2.0)
    with pytest.raises(ValueError):
        indexer.build_table([(1.0, 0.0)], 3.0, 1.0)


@pytest.mark.parametrize(
    "lower,upper,avs",
    [(-9.190312436384449, 0.4643709623483616, 127), (0.0, 2 * math.pi, 34), (0.0, 1.0, 4), (-1e-3, 1e9, 1000)],
)
def test_input_just_below_upper_stays_in_top_window(lower: float, upper: float, avs: int) -> None:
    indexer = ReceptiveFieldIndexer(avs)
    x = math.nextafter(upper, -math.inf)
    idx = indexer.index(x, lower, upper)
    assert 1 <= idx <= avs - 2
    table = indexer.build_table([(x, 0.0), (lower, 0.0)], lower, upper)
    assert table.tolist() == [idx, 1]


def test_two_slot_association_always_maps_to_first_window() -> None:
    indexer = ReceptiveFieldIndexer(2)
    assert indexer.index(0.0, 0.0, 4.0) == 1
    assert indexer.index(math.nextafter(4.0, -math.inf), 0.0, 4.0) == 1


def test_single_slot_association_has_no_valid_window() -> None:
    indexer = ReceptiveFieldIndexer(1)
    with pytest.raises(InvalidParametersError):
        indexer.index(0.0, 0.0, 4.0)
    with pytest.raises(InvalidParametersError):
        indexer.build_table([(2.0, 0.0)], 0.0, 4.0)
