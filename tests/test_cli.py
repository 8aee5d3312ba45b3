import json
from pathlib import Path

import pytest

from bb_optimizer.cli import main, read_problem
from bb_optimizer.errors import InvalidInput

EXAMPLES = Path(__file__).parent.parent / "examples"


def make_input(answers):
    replies = iter(answers)
    prompts = []

    def input_fn(prompt: str) -> str:
        prompts.append(prompt)
        return next(replies)

    return input_fn, prompts


def test_read_problem_prompt_sequence():
    input_fn, prompts = make_input(["2", "2", "7", "44", "132", "13", "11", "250", "3", "4"])
    problem = read_problem(input_fn=input_fn, write=lambda text: None)

    assert problem.constraints == [[7.0, 44.0, 132.0], [13.0, 11.0, 250.0]]
    assert problem.objective == [3.0, 4.0]
    assert prompts[:2] == ["Enter the number of constraints: ", "Enter the number of variables: "]
    assert len(prompts) == 10


@pytest.mark.parametrize("answers", [["two"], ["0"], ["1", "1", "1", "abc"]])
def test_read_problem_rejects_bad_input(answers):
    input_fn, _ = make_input(answers)
    with pytest.raises(InvalidInput):
        read_problem(input_fn=input_fn, write=lambda text: None)


def test_main_runs_search_for_fractional_model(capsys):
    assert main(["--model", str(EXAMPLES / "fractional_lp.json")]) == 0
    out = capsys.readouterr().out

    assert "Optimal objective value: 54" in out
    assert "x1 = 18" in out
    assert "x2 = 0" in out


def test_main_reports_no_optimization_needed(capsys):
    assert main(["--expr", "maximize x + y subject to x <= 5, y <= 5"]) == 0
    assert capsys.readouterr().out.strip() == "No optimization needed"


def test_main_json_output(capsys):
    assert main(["--model", str(EXAMPLES / "fractional_lp.json"), "--json", "--cap", "2"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["status"] == "optimal"
    assert payload["objective_value"] == pytest.approx(14.0)
    assert payload["search"]["point"] == [2, 2]


def test_main_reports_failures(capsys):
    assert main(["--expr", "maximize y subject to x - y <= 1"]) == 1
    assert "Unbounded" in capsys.readouterr().err

    assert main(["--expr", "minimize x subject to x <= 1"]) == 1
    assert "maximize" in capsys.readouterr().err

    assert main(["--model", str(EXAMPLES / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("error:")
