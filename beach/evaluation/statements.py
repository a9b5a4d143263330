"""Evaluation of statements, statement blocks and whole programs."""

from __future__ import annotations

from typing import Dict, List, MutableMapping, Sequence

from beach.evaluation.expressions import Functions, Variables, call_function, evaluate_expression
from beach.evaluation.intrinsics import get_intrinsic_functions
from beach.evaluation.results import EvaluationError, NodeResult, Returned, is_return
from beach.nodes import (
    Ast,
    BoolValue,
    Expression,
    Function,
    FunctionCall,
    FunctionReturn,
    IfStatement,
    Node,
    Value,
    VariableDeclaration,
)


def evaluate_ast(ast: Ast) -> NodeResult:
    """Run a whole program, with the built-in functions available."""
    functions: Dict[str, Function] = {**get_intrinsic_functions(), **ast.functions}
    call_stack: List[str] = []
    return evaluate_nodes(ast.nodes, {}, call_stack, functions)


def evaluate_nodes(
    nodes: Sequence[Node],
    local_variables: Variables,
    call_stack: List[str],
    functions: Functions,
) -> NodeResult:
    """Run a block in its own scope, stopping at the first return."""
    scope: Dict[str, Value] = dict(local_variables)
    for node in nodes:
        result = evaluate_node(node, scope, call_stack, functions)
        if is_return(result):
            return result
    return None


def _lookup(functions: Functions, function_id: str) -> Function:
    try:
        return functions[function_id]
    except KeyError:
        raise EvaluationError(f"unknown function {function_id}") from None


def evaluate_node(
    node: Node,
    local_variables: MutableMapping[str, Value],
    call_stack: List[str],
    functions: Functions,
) -> NodeResult:
    """Run one statement; declarations are stored in ``local_variables``."""
    match node:
        case VariableDeclaration(var_name=var_name, value=value):
            local_variables[var_name] = evaluate_expression(
                value, functions, local_variables, call_stack
            )
            return None
        case FunctionReturn(return_value=return_value):
            if return_value is None:
                return Returned(None)
            return Returned(
                evaluate_expression(return_value, functions, local_variables, call_stack)
            )
        case FunctionCall(function_id=function_id, parameters=parameters):
            function = _lookup(functions, function_id)
            call_function(function, list(parameters), local_variables, functions, call_stack)
            return None
        case IfStatement():
            return evaluate_if_statement(node, functions, local_variables, call_stack)
    raise EvaluationError(f"unknown statement {node!r}")


def _check(
    expression: Expression,
    functions: Functions,
    local_variables: Variables,
    call_stack: List[str],
) -> bool:
    value = evaluate_expression(expression, functions, local_variables, call_stack)
    if not isinstance(value, BoolValue):
        raise EvaluationError(
            f"Expected if statement check value to be boolean, but found {value!r}"
        )
    return value.value


def evaluate_if_statement(
    if_statement: IfStatement,
    functions: Functions,
    local_variables: Variables,
    call_stack: List[str],
) -> NodeResult:
    """Run the first branch whose check holds, or the else block."""
    if _check(if_statement.check_expression, functions, local_variables, call_stack):
        return evaluate_nodes(if_statement.if_block, local_variables, call_stack, functions)

    for else_if_block in if_statement.else_if_blocks:
        if _check(else_if_block.check, functions, local_variables, call_stack):
            return evaluate_nodes(else_if_block.block, local_variables, call_stack, functions)

    if if_statement.else_block is not None:
        return evaluate_nodes(if_statement.else_block, local_variables, call_stack, functions)

    return None