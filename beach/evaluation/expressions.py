"""Evaluation of expressions, operations and function calls."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from beach.evaluation.intrinsics import evaluate_intrinsic_function
from beach.evaluation.results import EvaluationError, Returned
from beach.nodes import (
    UINT_MAX,
    BinaryOperation,
    BinaryOperator,
    BoolValue,
    CustomFunction,
    Expression,
    Function,
    FunctionCall,
    Intrinsic,
    Node,
    Operation,
    UIntValue,
    UnaryOperation,
    UnaryOperator,
    Value,
    ValueLiteral,
    VariableAccess,
)

Functions = Mapping[str, Function]
Variables = Mapping[str, Value]


def evaluate_expression(
    expression: Expression,
    functions: Functions,
    local_variables: Variables,
    call_stack: List[str],
) -> Value:
    """Compute the value of an expression."""
    match expression:
        case ValueLiteral(value=value):
            return value
        case FunctionCall():
            return evaluate_function_call(expression, functions, local_variables, call_stack)
        case UnaryOperation() | BinaryOperation():
            return evaluate_operation(expression, functions, local_variables, call_stack)
        case VariableAccess(name=name):
            try:
                return local_variables[name]
            except KeyError:
                raise EvaluationError("variable should exist") from None
    raise EvaluationError(f"unknown expression {expression!r}")


def _lookup(functions: Functions, function_id: str) -> Function:
    try:
        return functions[function_id]
    except KeyError:
        raise EvaluationError(f"unknown function {function_id}") from None


def evaluate_function_call(
    function_call: FunctionCall,
    functions: Functions,
    local_variables: Variables,
    call_stack: List[str],
) -> Value:
    """Call a function whose result is used as a value."""
    function = _lookup(functions, function_call.function_id)
    if function.is_void:
        raise EvaluationError("Function expected to be value, but is void")
    result = call_function(
        function, list(function_call.parameters), local_variables, functions, call_stack
    )
    if result is None:
        raise EvaluationError("function has a non void return type")
    return result


def evaluate_operation(
    operation: Operation,
    functions: Functions,
    local_variables: Variables,
    call_stack: List[str],
) -> Value:
    """Compute a unary or binary operation."""
    if isinstance(operation, UnaryOperation):
        value = evaluate_expression(operation.value, functions, local_variables, call_stack)
        if operation.operator is UnaryOperator.NOT:
            return not_(value)
        raise EvaluationError(f"unknown unary operator {operation.operator!r}")

    left = evaluate_expression(operation.left, functions, local_variables, call_stack)
    right = evaluate_expression(operation.right, functions, local_variables, call_stack)
    if operation.operator is BinaryOperator.PLUS:
        return plus(left, right)
    if operation.operator is BinaryOperator.GREATER_THAN:
        return greater_than(left, right)
    raise EvaluationError(f"unknown binary operator {operation.operator!r}")


def not_(value: Value) -> BoolValue:
    """Negate a boolean value."""
    return BoolValue(not value.expect_bool("not only operates on booleans").value)


def plus(left: Value, right: Value) -> UIntValue:
    """Add two unsigned integers."""
    total = (
        left.expect_uint("plus only operates on uint").value
        + right.expect_uint("plus only operates on uint").value
    )
    if total > UINT_MAX:
        raise EvaluationError("attempt to add with overflow")
    return UIntValue(total)


def greater_than(left: Value, right: Value) -> BoolValue:
    """Compare two unsigned integers."""
    return BoolValue(
        left.expect_uint("greater_than only operates on uint").value
        > right.expect_uint("greater_than only operates on uint").value
    )


def call_function(
    function: Function,
    parameter_expressions: Sequence[Expression],
    local_variables: Variables,
    functions: Functions,
    call_stack: List[str],
) -> Optional[Value]:
    """Evaluate arguments in the caller's scope and run ``function`` with them."""
    if len(parameter_expressions) != len(function.parameters):
        raise EvaluationError(
            f"Expected {len(function.parameters)} parameters, "
            f"but found {len(parameter_expressions)} for {function.name}"
        )

    values = [
        evaluate_expression(expression, functions, local_variables, call_stack)
        for expression in parameter_expressions
    ]
    bound: Dict[str, Value] = {
        parameter.name: value for parameter, value in zip(function.parameters, values)
    }

    if isinstance(function, CustomFunction):
        return evaluate_custom_function(function.id, function.body, bound, call_stack, functions)
    if isinstance(function, Intrinsic):
        return evaluate_intrinsic_function(function.id, bound)
    raise EvaluationError(f"cannot call {function!r}")


def evaluate_custom_function(
    function_id: str,
    body: Sequence[Node],
    parameters: Variables,
    call_stack: List[str],
    functions: Functions,
) -> Optional[Value]:
    """Run a program-defined function body and return its result, if any."""
    from beach.evaluation.statements import evaluate_nodes

    call_stack.append(function_id)
    try:
        result = evaluate_nodes(body, parameters, call_stack, functions)
    finally:
        call_stack.pop()
    if isinstance(result, Returned):
        return result.value
    return None