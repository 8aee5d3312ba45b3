import re
from collections import OrderedDict
from typing import Dict, List, Tuple

from ..errors import InvalidInput
from ..schemas import LPProblem

_TOKEN_SPLIT = re.compile(r",|;|\band\b", re.IGNORECASE)
_COMPARATOR = re.compile(r"(<=|>=|==|=)")
# "x, y >= 0" splits into "x" and "y >= 0"
_BARE_VARIABLE = re.compile(r"^[A-Za-z_][\w]*$")
_NONNEGATIVE = re.compile(r"^([A-Za-z_][\w]*)\s*>=\s*0(?:\.0*)?$")
_TERM_PATTERN = re.compile(r"([+-]?\s*\d*\.?\d*)\s*([A-Za-z_][\w]*)")
_NUMBER_PATTERN = re.compile(r"[+-]?\s*\d+(?:\.\d+)?")


def parse_problem_text(spec: str, name: str = "parsed") -> LPProblem:
    """
    Small rule-based parser for toy models like:
      "maximize 3x + 4y subject to 7x + 44y <= 132, 13x + 11y <= 250, x,y >= 0"
    Only maximisation and <= rows are accepted; non-negativity clauses are implied
    and skipped. Variables are ordered by first appearance.
    """

    if not spec or not spec.strip():
        raise InvalidInput("Specification is empty.")

    normalized = " ".join(spec.replace("\n", " ").split())
    pieces = re.split(r"subject to|such that|s\.t\.", normalized, flags=re.IGNORECASE)
    objective_part = pieces[0].strip()
    constraints_part = pieces[1].strip() if len(pieces) > 1 else ""

    match = re.match(r"(maximize|maximise|max)\s*(.*)", objective_part, flags=re.IGNORECASE)
    if not match:
        raise InvalidInput("Objective must start with 'maximize'.")
    objective_expr_str = match.group(2).strip()
    if not objective_expr_str:
        raise InvalidInput("Objective expression is missing.")

    objective_coeffs, _ = _parse_linear_expr(objective_expr_str)
    variable_names = OrderedDict((var, None) for var in objective_coeffs)

    rows: List[Tuple[Dict[str, float], float]] = []
    tokens = [tok.strip() for tok in _TOKEN_SPLIT.split(constraints_part) if tok.strip()]
    for token in tokens:
        if _BARE_VARIABLE.match(token):
            variable_names.setdefault(token, None)
            continue
        nonneg = _NONNEGATIVE.match(token)
        if nonneg:
            variable_names.setdefault(nonneg.group(1), None)
            continue

        comp_match = _COMPARATOR.search(token)
        if not comp_match:
            raise InvalidInput(f"Could not parse constraint segment '{token}'.")
        if comp_match.group(1) != "<=":
            raise InvalidInput(f"Only '<=' constraints are supported, got '{token}'.")
        lhs_str = token[: comp_match.start()].strip()
        rhs_str = token[comp_match.end() :].strip()
        if not lhs_str or not rhs_str:
            raise InvalidInput(f"Incomplete constraint expression '{token}'.")
        coeffs, constant = _parse_linear_expr(lhs_str)
        try:
            rhs_value = float(rhs_str)
        except ValueError as exc:
            raise InvalidInput(f"Right-hand side '{rhs_str}' is not numeric.") from exc
        rows.append((coeffs, rhs_value - constant))
        for var_name in coeffs:
            variable_names.setdefault(var_name, None)

    if not rows:
        raise InvalidInput("At least one '<=' constraint is required.")

    names = list(variable_names)
    constraints = [[coeffs.get(var, 0.0) for var in names] + [rhs] for coeffs, rhs in rows]
    objective = [objective_coeffs.get(var, 0.0) for var in names]
    return LPProblem(name=name, constraints=constraints, objective=objective)


def _parse_linear_expr(expr_str: str) -> Tuple[Dict[str, float], float]:
    expr_clean = expr_str.replace("*", "")
    coeffs: Dict[str, float] = OrderedDict()
    spans: List[Tuple[int, int]] = []

    for match in _TERM_PATTERN.finditer(expr_clean):
        coef_text = match.group(1).replace(" ", "")
        var_name = match.group(2)
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            try:
                coef = float(coef_text)
            except ValueError as exc:
                raise InvalidInput(f"Bad coefficient '{coef_text}' for '{var_name}'.") from exc
        coeffs[var_name] = coeffs.get(var_name, 0.0) + coef
        spans.append(match.span())

    remaining = list(expr_clean)
    for start, end in spans:
        for idx in range(start, end):
            remaining[idx] = " "
    remaining_str = "".join(remaining)

    constant = 0.0
    for num_match in _NUMBER_PATTERN.finditer(remaining_str):
        text = num_match.group(0).replace(" ", "")
        if text:
            constant += float(text)

    return coeffs, constant
