import pytest

from bb_optimizer.errors import InvalidInput
from bb_optimizer.lp.parser import parse_problem_text


def test_parser_outputs_dense_rows():
    spec = "maximize 3x + 4y subject to 7x + 44y <= 132, 13x + 11y <= 250, x,y >= 0"
    problem = parse_problem_text(spec)

    assert problem.objective == [3.0, 4.0]
    assert problem.constraints == [[7.0, 44.0, 132.0], [13.0, 11.0, 250.0]]


def test_parser_orders_variables_by_first_appearance():
    problem = parse_problem_text("maximize x subject to x + z <= 4; z >= 0")

    assert problem.objective == [1.0, 0.0]
    assert problem.constraints == [[1.0, 1.0, 4.0]]


def test_parser_moves_constants_to_bound():
    problem = parse_problem_text("max 2x1 + x2 s.t. x1 + x2 + 2 <= 5")

    assert problem.objective == [2.0, 1.0]
    assert problem.constraints == [[1.0, 1.0, 3.0]]


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "minimize x subject to x <= 1",
        "maximize x subject to x >= 1",
        "maximize x subject to x == 1",
        "maximize x",
        "maximize subject to x <= 1",
        "maximize x subject to x <= ten",
    ],
)
def test_parser_rejects_unsupported_models(spec):
    with pytest.raises(InvalidInput):
        parse_problem_text(spec)
