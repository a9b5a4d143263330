"""Fluent builders for statements, function declarations and whole programs."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple, Union

from beach.builders.expressions import (
    BuilderError,
    ExpressionBuilder,
    ExpressionFn,
    FunctionCallBuilder,
)
from beach.nodes import (
    Ast,
    CustomFunction,
    ElseIfBlock,
    Expression,
    FunctionCall,
    FunctionDeclaration,
    FunctionParameter,
    FunctionReturn,
    IfStatement,
    Node,
    Type,
    VariableDeclaration,
)

_UNSET = object()

ParameterSpec = Union[FunctionParameter, Tuple[Type, str]]


def _to_parameter(parameter: ParameterSpec) -> FunctionParameter:
    if isinstance(parameter, FunctionParameter):
        return parameter
    param_type, param_name = parameter
    return FunctionParameter(name=param_name, param_type=param_type)


class AstBuilder:
    """Collects top-level statements and function declarations into an ``Ast``."""

    def __init__(self) -> None:
        self._functions: List[FunctionDeclaration] = []
        self._nodes: List[Node] = []

    def statement(self, statement_fn: Callable[[StatementBuilder], Node]) -> AstBuilder:
        self._nodes.append(statement_fn(StatementBuilder()))
        return self

    def function_declaration(
        self,
        function_declaration_fn: Callable[[FunctionDeclarationBuilder], FunctionDeclaration],
    ) -> AstBuilder:
        self._functions.append(function_declaration_fn(FunctionDeclarationBuilder()))
        return self

    def build(self) -> Ast:
        functions = {
            declaration.id: CustomFunction(
                id=declaration.id,
                name=declaration.name,
                parameters=list(declaration.parameters),
                return_type=declaration.return_type,
                body=list(declaration.body),
            )
            for declaration in self._functions
        }
        return Ast(functions=functions, nodes=list(self._nodes))


AstFn = Callable[[AstBuilder], Ast]


class FunctionDeclarationBuilder:
    """Builds a function declaration; ``body`` finishes it."""

    def __init__(self) -> None:
        self._id: Optional[str] = None
        self._name: Optional[str] = None
        self._parameters: Optional[List[FunctionParameter]] = None
        self._return_type: object = _UNSET

    def name(self, name: str) -> FunctionDeclarationBuilder:
        self._id = name
        self._name = name
        return self

    def parameters(self, parameters: Iterable[ParameterSpec]) -> FunctionDeclarationBuilder:
        self._parameters = [_to_parameter(parameter) for parameter in parameters]
        return self

    def return_type(self, return_type: Type) -> FunctionDeclarationBuilder:
        self._return_type = return_type
        return self

    def void(self) -> FunctionDeclarationBuilder:
        self._return_type = None
        return self

    def body(self, builder: AstFn) -> FunctionDeclaration:
        body = builder(AstBuilder()).nodes
        if self._id is None or self._name is None:
            raise BuilderError("function name should be set")
        if self._parameters is None:
            raise BuilderError("function parameters should be set")
        if self._return_type is _UNSET:
            raise BuilderError("function return type should be set")
        return FunctionDeclaration(
            id=self._id,
            name=self._name,
            parameters=self._parameters,
            return_type=self._return_type,  # type: ignore[arg-type]
            body=body,
        )


class IfStatementBuilder:
    """Builds an if statement with optional else-if and else blocks."""

    def __init__(self) -> None:
        self._check_expression: Optional[Expression] = None
        self._body: Optional[Ast] = None
        self._else_if_blocks: List[Tuple[Expression, Ast]] = []
        self._else_block: Optional[Ast] = None

    def check_expression(self, expression_fn: ExpressionFn) -> IfStatementBuilder:
        self._check_expression = expression_fn(ExpressionBuilder())
        return self

    def body(self, body_fn: AstFn) -> IfStatementBuilder:
        self._body = body_fn(AstBuilder())
        return self

    def else_if(self, check_fn: ExpressionFn, body_fn: AstFn) -> IfStatementBuilder:
        check = check_fn(ExpressionBuilder())
        body = body_fn(AstBuilder())
        self._else_if_blocks.append((check, body))
        return self

    def else_block(self, body_fn: AstFn) -> IfStatementBuilder:
        self._else_block = body_fn(AstBuilder())
        return self

    def build(self) -> IfStatement:
        if self._check_expression is None:
            raise BuilderError("check expression to be set")
        if self._body is None:
            raise BuilderError("body to be set")
        return IfStatement(
            check_expression=self._check_expression,
            if_block=list(self._body.nodes),
            else_if_blocks=[
                ElseIfBlock(check=check, block=list(ast.nodes))
                for check, ast in self._else_if_blocks
            ],
            else_block=None if self._else_block is None else list(self._else_block.nodes),
        )


class VariableDeclarationBuilder:
    """Builds a variable declaration; ``with_assignment`` finishes it."""

    def __init__(self) -> None:
        self._var_name: Optional[str] = None
        self._var_type: object = _UNSET

    def declare_type(self, var_type: Type) -> VariableDeclarationBuilder:
        self._var_type = var_type
        return self

    def infer_type(self) -> VariableDeclarationBuilder:
        self._var_type = None
        return self

    def name(self, name: str) -> VariableDeclarationBuilder:
        self._var_name = name
        return self

    def with_assignment(self, value_fn: ExpressionFn) -> VariableDeclaration:
        if self._var_name is None:
            raise BuilderError("variable declaration name should be set")
        if self._var_type is _UNSET:
            raise BuilderError("variable declaration type should be set")
        return VariableDeclaration(
            var_type=self._var_type,  # type: ignore[arg-type]
            var_name=self._var_name,
            value=value_fn(ExpressionBuilder()),
        )


class StatementBuilder:
    """Builds a single statement."""

    def return_void(self) -> FunctionReturn:
        return FunctionReturn(return_value=None)

    def var_declaration(
        self, var_declaration_fn: Callable[[VariableDeclarationBuilder], Node]
    ) -> Node:
        return var_declaration_fn(VariableDeclarationBuilder())

    def if_statement(self, if_statement_fn: Callable[[IfStatementBuilder], Node]) -> Node:
        return if_statement_fn(IfStatementBuilder())

    def function_call(
        self, function_call_fn: Callable[[FunctionCallBuilder], FunctionCall]
    ) -> FunctionCall:
        return function_call_fn(FunctionCallBuilder())

    def return_value(self, expression_fn: ExpressionFn) -> FunctionReturn:
        return FunctionReturn(return_value=expression_fn(ExpressionBuilder()))