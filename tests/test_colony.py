import numpy as np
import pytest

from antsys import ACOConfig, ColonyState, InvalidDimension


def test_pheromone_starts_at_tau0_with_zero_diagonal(asym_costs):
    state = ColonyState(asym_costs, ACOConfig(tau0=0.25))
    assert state.n == 5
    assert np.all(np.diag(state.tau) == 0.0)
    off = ~np.eye(5, dtype=bool)
    assert np.all(state.tau[off] == 0.25)


def test_visibility_is_reciprocal_of_cost(asym_costs):
    state = ColonyState(asym_costs, ACOConfig())
    assert state.eta[0, 1] == pytest.approx(1 / 3)
    assert state.eta[3, 0] == pytest.approx(1.0)
    assert state.eta[4, 2] == pytest.approx(1 / 8)


def test_cost_and_visibility_are_read_only(small_costs):
    state = ColonyState(small_costs, ACOConfig())
    with pytest.raises(ValueError):
        state.D[0, 1] = 5.0
    with pytest.raises(ValueError):
        state.eta[0, 1] = 5.0


def test_input_matrix_is_copied(small_costs):
    src = np.array(small_costs, dtype=float)
    state = ColonyState(src, ACOConfig())
    src[0, 1] = 99.0
    assert state.D[0, 1] == 1.0


@pytest.mark.parametrize("bad", [
    [[0, 1, 2], [1, 0, 1]],
    [[0, 1], [1, 0, 3]],
    [],
    [1, 2, 3],
    np.zeros((2, 3)),
])
def test_non_square_matrix_is_rejected(bad):
    with pytest.raises(InvalidDimension):
        ColonyState(bad, ACOConfig())


def test_invalid_dimension_is_a_value_error():
    assert issubclass(InvalidDimension, ValueError)


@pytest.mark.parametrize("start", [-1, 3, 10])
def test_start_outside_range_is_rejected(small_costs, start):
    with pytest.raises(IndexError):
        ColonyState(small_costs, ACOConfig(start=start))


def test_last_city_is_a_valid_start(small_costs):
    assert ColonyState(small_costs, ACOConfig(start=2)).cfg.start == 2
