import pytest
from pydantic import ValidationError

from bb_optimizer.errors import InvalidInput, OutOfSearchBounds
from bb_optimizer.instances import generate_random_problem
from bb_optimizer.mip.branch_and_bound import IntegerSearch, SearchBounds

FRACTIONAL = [[7.0, 44.0, 132.0], [13.0, 11.0, 250.0]]


def make_search(constraints, objective, var_cap=100, **kwargs) -> IntegerSearch:
    bounds = SearchBounds.from_problem(constraints, objective, **kwargs)
    return IntegerSearch(bounds, var_cap=var_cap)


@pytest.mark.parametrize("legacy", [False, True])
def test_search_finds_best_integer_point(legacy):
    search = make_search(FRACTIONAL, [3.0, 4.0], legacy_bound_check=legacy)
    result = search.search()

    assert result.objective_value == pytest.approx(54.0)
    assert result.point == [18, 0]
    assert result.nodes_explored > 0


def test_round_trip_of_reported_point():
    search = make_search(FRACTIONAL, [3.0, 4.0])
    result = search.search()

    assert search.evaluate_objective(result.point) == pytest.approx(result.objective_value)
    assert search.within_bounds(result.point)


def test_zero_bound_returns_origin():
    result = make_search([[1.0, 1.0, 0.0]], [3.0, 4.0]).search()

    assert result.objective_value == 0.0
    assert result.point == [0, 0]


def test_origin_outside_bounds_raises():
    bounds = SearchBounds(coefficients=((1.0, 1.0),), bounds=(-1.0,), objective=(1.0, 1.0))
    with pytest.raises(OutOfSearchBounds):
        IntegerSearch(bounds).search()


def test_legacy_bound_check_reuses_first_row_coefficient():
    constraints = [[1.0, 1.0, 10.0], [1.0, 5.0, 10.0]]
    independent = make_search(constraints, [1.0, 1.0])
    legacy = make_search(constraints, [1.0, 1.0], legacy_bound_check=True)

    assert independent.bounds.coefficients == ((1.0, 1.0), (1.0, 5.0))
    assert legacy.bounds.coefficients == ((1.0, 1.0), (1.0, 1.0))
    assert legacy.within_bounds((0, 3))
    assert not independent.within_bounds((0, 3))


def test_from_problem_takes_leading_rows_and_variables():
    constraints = [[1.0, 2.0, 3.0, 10.0], [4.0, 5.0, 6.0, 20.0], [7.0, 8.0, 9.0, 30.0]]
    bounds = SearchBounds.from_problem(constraints, [1.0, 2.0, 3.0])

    assert bounds.coefficients == ((1.0, 2.0), (4.0, 5.0))
    assert bounds.bounds == (10.0, 20.0)
    assert bounds.objective == (1.0, 2.0)

    all_rows = SearchBounds.from_problem(constraints, [1.0, 2.0, 3.0], num_vars=3, num_rows=None)
    assert len(all_rows.coefficients) == 3
    assert all_rows.num_vars == 3


def test_from_problem_rejects_single_variable():
    with pytest.raises(InvalidInput):
        SearchBounds.from_problem([[2.0, 3.0]], [1.0])


def test_search_bounds_are_frozen():
    bounds = SearchBounds.from_problem(FRACTIONAL, [3.0, 4.0])
    with pytest.raises(ValidationError):
        bounds.bounds = (0.0, 0.0)


@pytest.mark.parametrize("cap, expected", [(0, 0.0), (1, 7.0), (2, 14.0), (100, 54.0)])
def test_variable_cap_limits_search(cap, expected):
    result = make_search(FRACTIONAL, [3.0, 4.0], var_cap=cap).search()

    assert result.objective_value == pytest.approx(expected)
    assert max(result.point) <= cap


def test_best_value_non_decreasing_in_cap():
    caps = [0, 1, 2, 5, 10, 50, 100]
    values = [make_search([[1.0, 1.0, 1000.0]], [1.0, 1.0], var_cap=cap).search().objective_value for cap in caps]

    assert values == [2.0 * cap for cap in caps]
    assert values == sorted(values)


def test_three_variable_search():
    search = make_search([[1.0, 1.0, 1.0, 3.0]], [1.0, 1.0, 1.0], num_vars=3)
    result = search.search()

    assert result.objective_value == pytest.approx(3.0)
    assert len(result.point) == 3
    assert sum(result.point) == 3


@pytest.mark.parametrize("seed", range(10))
def test_search_points_respect_bounds_and_cap(seed):
    problem = generate_random_problem(2, 2, seed)
    search = make_search(problem.constraints, problem.objective, var_cap=5)
    result = search.search()

    assert search.within_bounds(result.point)
    assert all(0 <= value <= 5 for value in result.point)
    assert search.evaluate_objective(result.point) == pytest.approx(result.objective_value)
