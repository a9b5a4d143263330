"""Syntax tree types for beach programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

UINT_MAX = 2**32 - 1


class Type(enum.Enum):
    """The value types of the language."""

    UINT = "UInt"
    BOOLEAN = "Boolean"

    def __str__(self) -> str:
        return self.value


class Value:
    """Base class of runtime values."""

    def expect_uint(self, message: str) -> UIntValue:
        """Return this value as an unsigned integer or raise ``TypeError``."""
        if isinstance(self, UIntValue):
            return self
        raise TypeError(message)

    def expect_bool(self, message: str) -> BoolValue:
        """Return this value as a boolean or raise ``TypeError``."""
        if isinstance(self, BoolValue):
            return self
        raise TypeError(message)


@dataclass(frozen=True)
class UIntValue(Value):
    """A 32-bit unsigned integer value."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"UInt value must be an int, got {self.value!r}")
        if not 0 <= self.value <= UINT_MAX:
            raise ValueError(f"UInt value out of range: {self.value}")

    @property
    def type(self) -> Type:
        return Type.UINT


@dataclass(frozen=True)
class BoolValue(Value):
    """A boolean value."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Boolean value must be a bool, got {self.value!r}")

    @property
    def type(self) -> Type:
        return Type.BOOLEAN


class UnaryOperator(enum.Enum):
    NOT = "not"


class BinaryOperator(enum.Enum):
    PLUS = "plus"
    GREATER_THAN = "greater_than"


@dataclass
class ValueLiteral:
    """A literal value in an expression."""

    value: Value


@dataclass
class VariableAccess:
    """A read of a named variable."""

    name: str


@dataclass
class FunctionCall:
    """A call of a function by id; usable both as expression and statement."""

    function_id: str
    parameters: List[Expression] = field(default_factory=list)


@dataclass
class UnaryOperation:
    operator: UnaryOperator
    value: Expression


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: Expression
    right: Expression


Operation = Union[UnaryOperation, BinaryOperation]
Expression = Union[ValueLiteral, VariableAccess, FunctionCall, UnaryOperation, BinaryOperation]


@dataclass
class VariableDeclaration:
    """Declaration of a variable; ``var_type`` of ``None`` means the type is inferred."""

    var_type: Optional[Type]
    var_name: str
    value: Expression


@dataclass
class FunctionReturn:
    """A return statement; ``return_value`` of ``None`` returns nothing."""

    return_value: Optional[Expression] = None


@dataclass
class ElseIfBlock:
    check: Expression
    block: List[Node] = field(default_factory=list)


@dataclass
class IfStatement:
    check_expression: Expression
    if_block: List[Node] = field(default_factory=list)
    else_if_blocks: List[ElseIfBlock] = field(default_factory=list)
    else_block: Optional[List[Node]] = None


Node = Union[VariableDeclaration, FunctionReturn, FunctionCall, IfStatement]


@dataclass(frozen=True)
class FunctionParameter:
    """A function parameter; ``param_type`` of ``None`` accepts any type."""

    name: str
    param_type: Optional[Type] = None

    @property
    def accepts_any(self) -> bool:
        return self.param_type is None


@dataclass
class FunctionDeclaration:
    """A declared function; ``return_type`` of ``None`` means void."""

    id: str
    name: str
    parameters: List[FunctionParameter]
    return_type: Optional[Type]
    body: List[Node]


@dataclass
class Function:
    """A callable function; ``return_type`` of ``None`` means void."""

    id: str
    name: str
    parameters: List[FunctionParameter]
    return_type: Optional[Type]

    @property
    def is_void(self) -> bool:
        return self.return_type is None


@dataclass
class CustomFunction(Function):
    """A function defined in a program."""

    body: List[Node] = field(default_factory=list)


@dataclass
class Intrinsic(Function):
    """A function provided by the interpreter."""


@dataclass
class Ast:
    """A whole program: its functions and its top-level statements."""

    functions: Dict[str, Function] = field(default_factory=dict)
    nodes: List[Node] = field(default_factory=list)


def to_value(raw: Union[bool, int, Value]) -> Value:
    """Convert a Python bool or int into a runtime value."""
    if isinstance(raw, Value):
        return raw
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, int):
        return UIntValue(raw)
    raise TypeError(f"cannot convert {raw!r} to a value")


def literal(raw: Union[bool, int, Value]) -> ValueLiteral:
    """Build a literal expression from a Python bool or int."""
    return ValueLiteral(to_value(raw))