# beach

The core of the Beach language in Python: the abstract syntax tree, fluent
builders for putting trees together, and an evaluator that walks a tree and
runs it.

Beach is small. It has 32-bit unsigned integers and booleans, variables that
are either declared with a type or inferred, `if` / `else if` / `else`,
functions that return a value or return nothing, the operations not, plus and
greater-than, and one built-in function, `print`.

## Installing

```
pip install .
```

Python 3.10 or later is needed. The package has no dependencies outside the
standard library. To run the tests, install the `test` extra and run `pytest`.

## Layout

- `beach.nodes` holds the tree itself:
  - `Type` (`Type.UINT`, `Type.BOOLEAN`), the runtime values `UIntValue` and
    `BoolValue` (both subclasses of `Value`, with `expect_uint()` and
    `expect_bool()`), and the helpers `to_value()` and `literal()` that turn a
    Python `int` or `bool` into a value or a literal expression;
  - the expressions `ValueLiteral`, `VariableAccess`, `FunctionCall`,
    `UnaryOperation` (with `UnaryOperator.NOT`) and `BinaryOperation` (with
    `BinaryOperator.PLUS` and `BinaryOperator.GREATER_THAN`);
  - the statements `VariableDeclaration` (a `var_type` of `None` means
    inferred), `FunctionReturn`, `FunctionCall` and `IfStatement` with its
    `ElseIfBlock`s;
  - `FunctionParameter` (a `param_type` of `None` accepts any type),
    `FunctionDeclaration`, `Function` with its subclasses `CustomFunction` and
    `Intrinsic` (a `return_type` of `None` means void), and `Ast`, which maps
    function ids to functions and holds the top-level statements.
- `beach.builders.expressions` has `ExpressionBuilder`,
  `FunctionCallBuilder`, `OperationBuilder` (`not_`, `plus`, `greater_than`)
  and `BuilderError`.
- `beach.builders.statements` has `AstBuilder`, `StatementBuilder`,
  `VariableDeclarationBuilder`, `IfStatementBuilder` and
  `FunctionDeclarationBuilder`.
- `beach.evaluation.results` has `Returned`, `is_return()` and
  `EvaluationError`.
- `beach.evaluation.intrinsics` has `get_intrinsic_functions()` and
  `evaluate_intrinsic_function()`.
- `beach.evaluation.expressions` evaluates expressions, operations and
  function calls: `evaluate_expression()`, `evaluate_operation()`,
  `evaluate_function_call()`, `call_function()`,
  `evaluate_custom_function()`, `not_()`, `plus()` and `greater_than()`.
- `beach.evaluation.statements` runs statements and programs:
  `evaluate_ast()`, `evaluate_nodes()`, `evaluate_node()` and
  `evaluate_if_statement()`.

## Building and running a program

Each builder method takes a function that is handed a fresh builder and hands
back the finished piece. This program declares a function and calls `print`
with its result:

```python
from beach.builders.statements import AstBuilder
from beach.evaluation.statements import evaluate_ast
from beach.nodes import Type

ast = (
    AstBuilder()
    .function_declaration(
        lambda fn: fn.name("answer")
        .parameters([])
        .return_type(Type.UINT)
        .body(
            lambda body: body.statement(
                lambda s: s.return_value(
                    lambda e: e.operation(
                        lambda op: op.plus(
                            lambda left: left.value_literal(40),
                            lambda right: right.value_literal(2),
                        )
                    )
                )
            ).build()
        )
    )
    .statement(
        lambda s: s.function_call(
            lambda call: call.function_id("print")
            .parameter(
                lambda p: p.function_call(
                    lambda inner: inner.function_id("answer").no_parameters().build()
                )
            )
            .build()
        )
    )
    .build()
)

evaluate_ast(ast)  # prints 42
```

`print` writes an integer as digits and a boolean as `true` or `false`.
`evaluate_ast()` returns `None` when the program runs to its end, or a
`Returned` holding the value of a top-level return.

Every block runs in a copy of the enclosing scope, so variables declared in an
`if` branch are gone after it. A function body sees only its own parameters.

## Errors

Evaluation assumes a tree that has already been type checked. It raises
`EvaluationError` for an unknown variable or function, a call with the wrong
number of arguments, a void function used as a value, a non-boolean `if`
check, and an addition that overflows 32 bits. An operation applied to a
value of the wrong type raises `TypeError`. A `UIntValue` outside
0 to 2**32 - 1 raises `ValueError`. A builder finished before every required
part has been set raises `BuilderError`.

## What is not here

The package works on trees only. It has no reader for program text (no lexer
or parser), no type checker, and no command-line program for running `.bch`
files; trees are put together with the builders or the node classes directly.