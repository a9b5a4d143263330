"""Fluent builders for expressions, function calls and operations."""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from beach.nodes import (
    BinaryOperation,
    BinaryOperator,
    Expression,
    FunctionCall,
    Operation,
    UnaryOperation,
    UnaryOperator,
    Value,
    ValueLiteral,
    VariableAccess,
    to_value,
)


class BuilderError(Exception):
    """Raised when a builder is finished before all required parts are set."""


class ExpressionBuilder:
    """Builds a single expression."""

    def function_call(
        self, function_call_fn: Callable[[FunctionCallBuilder], FunctionCall]
    ) -> FunctionCall:
        return function_call_fn(FunctionCallBuilder())

    def variable(self, variable_name: str) -> VariableAccess:
        return VariableAccess(variable_name)

    def value_literal(self, value: Union[Value, bool, int]) -> ValueLiteral:
        return ValueLiteral(to_value(value))

    def operation(self, operation_fn: Callable[[OperationBuilder], Operation]) -> Operation:
        return operation_fn(OperationBuilder())


ExpressionFn = Callable[[ExpressionBuilder], Expression]


class FunctionCallBuilder:
    """Builds a function call step by step."""

    def __init__(self) -> None:
        self._function_id: Optional[str] = None
        self._parameters: Optional[List[Expression]] = None

    def function_id(self, function_id: str) -> FunctionCallBuilder:
        self._function_id = function_id
        return self

    def parameter(self, expression_fn: ExpressionFn) -> FunctionCallBuilder:
        expression = expression_fn(ExpressionBuilder())
        if self._parameters is None:
            self._parameters = []
        self._parameters.append(expression)
        return self

    def no_parameters(self) -> FunctionCallBuilder:
        self._parameters = []
        return self

    def build(self) -> FunctionCall:
        if self._function_id is None:
            raise BuilderError("function id to be set")
        if self._parameters is None:
            raise BuilderError("parameters to be set")
        return FunctionCall(self._function_id, list(self._parameters))


class OperationBuilder:
    """Builds unary and binary operations."""

    def not_(self, expression_fn: ExpressionFn) -> UnaryOperation:
        return UnaryOperation(UnaryOperator.NOT, expression_fn(ExpressionBuilder()))

    def greater_than(self, left_fn: ExpressionFn, right_fn: ExpressionFn) -> BinaryOperation:
        return BinaryOperation(
            BinaryOperator.GREATER_THAN,
            left_fn(ExpressionBuilder()),
            right_fn(ExpressionBuilder()),
        )

    def plus(self, left_fn: ExpressionFn, right_fn: ExpressionFn) -> BinaryOperation:
        return BinaryOperation(
            BinaryOperator.PLUS,
            left_fn(ExpressionBuilder()),
            right_fn(ExpressionBuilder()),
        )