"""Functions built into the interpreter."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from beach.evaluation.results import EvaluationError
from beach.nodes import BoolValue, Function, FunctionParameter, Intrinsic, UIntValue, Value


def get_intrinsic_functions() -> Dict[str, Function]:
    """Return the built-in functions keyed by their id."""
    functions = [
        Intrinsic(
            id="print",
            name="print",
            parameters=[FunctionParameter(name="value")],
            return_type=None,
        )
    ]
    return {function.id: function for function in functions}


def _print(value: Value) -> None:
    if isinstance(value, BoolValue):
        print("true" if value.value else "false")
    elif isinstance(value, UIntValue):
        print(value.value)
    else:
        raise EvaluationError(f"cannot print {value!r}")


def evaluate_intrinsic_function(
    function_id: str, parameters: Mapping[str, Value]
) -> Optional[Value]:
    """Run the built-in function ``function_id`` with bound parameters."""
    if function_id == "print":
        try:
            value = parameters["value"]
        except KeyError:
            raise EvaluationError("print expects a `value` parameter") from None
        _print(value)
        return None
    raise EvaluationError("unknown intrinsic function")