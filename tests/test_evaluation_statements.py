import pytest

from beach.evaluation.results import EvaluationError, Returned
from beach.evaluation.statements import (
    evaluate_ast,
    evaluate_if_statement,
    evaluate_node,
    evaluate_nodes,
)
from beach.nodes import (
    Ast,
    BinaryOperation,
    BinaryOperator,
    BoolValue,
    CustomFunction,
    ElseIfBlock,
    FunctionCall,
    FunctionParameter,
    FunctionReturn,
    IfStatement,
    Type,
    UIntValue,
    VariableAccess,
    VariableDeclaration,
    literal,
)


def _void_function(name, parameters=None, body=None):
    return CustomFunction(
        id=name,
        name=name,
        parameters=parameters or [],
        return_type=None,
        body=body or [],
    )


def test_evaluate_nodes_no_return():
    nodes = [
        VariableDeclaration(var_type=None, var_name="my_var", value=literal(True)),
        FunctionCall("my_function", [VariableAccess("my_var")]),
    ]
    functions = {
        "my_function": _void_function(
            "my_function", [FunctionParameter(name="param", param_type=Type.BOOLEAN)]
        )
    }
    call_stack = []
    result = evaluate_nodes(nodes, {}, call_stack, functions)
    assert result is None
    assert call_stack == []


def test_evaluate_nodes_return_value():
    nodes = [
        VariableDeclaration(var_type=None, var_name="my_var", value=literal(True)),
        IfStatement(
            check_expression=literal(True),
            if_block=[FunctionReturn(VariableAccess("my_var"))],
        ),
        FunctionReturn(literal(False)),
    ]
    result = evaluate_nodes(nodes, {}, [], {})
    assert result == Returned(BoolValue(True))


def test_evaluate_nodes_does_not_leak_declarations():
    outer = {"x": UIntValue(1)}
    nodes = [VariableDeclaration(var_type=None, var_name="y", value=literal(2))]
    evaluate_nodes(nodes, outer, [], {})
    assert outer == {"x": UIntValue(1)}


def test_ast_evaluate(capsys):
    ast = Ast(
        functions={"function_1": _void_function("function_1")},
        nodes=[
            FunctionCall("function_1", []),
            FunctionCall("print", [literal(10)]),
        ],
    )
    result = evaluate_ast(ast)
    assert result is None
    assert capsys.readouterr().out == "10\n"


def test_ast_evaluate_prints_booleans(capsys):
    ast = Ast(nodes=[FunctionCall("print", [literal(True)])])
    evaluate_ast(ast)
    assert capsys.readouterr().out == "true\n"


def test_ast_evaluate_recursive_sum(capsys):
    # add_to_ten(n) returns n when n > 9, else add_to_ten(n + 1)
    body = [
        IfStatement(
            check_expression=BinaryOperation(
                BinaryOperator.GREATER_THAN, VariableAccess("n"), literal(9)
            ),
            if_block=[FunctionReturn(VariableAccess("n"))],
        ),
        FunctionReturn(
            FunctionCall(
                "add_to_ten",
                [BinaryOperation(BinaryOperator.PLUS, VariableAccess("n"), literal(1))],
            )
        ),
    ]
    function = CustomFunction(
        id="add_to_ten",
        name="add_to_ten",
        parameters=[FunctionParameter(name="n", param_type=Type.UINT)],
        return_type=Type.UINT,
        body=body,
    )
    ast = Ast(
        functions={"add_to_ten": function},
        nodes=[FunctionCall("print", [FunctionCall("add_to_ten", [literal(3)])])],
    )
    evaluate_ast(ast)
    assert capsys.readouterr().out == "10\n"


def test_variable_declaration():
    node = VariableDeclaration(var_type=None, var_name="my_var", value=literal(True))
    local_variables = {}
    result = evaluate_node(node, local_variables, [], {})
    assert result is None
    assert local_variables == {"my_var": BoolValue(True)}


def test_function_return_with_value():
    result = evaluate_node(FunctionReturn(literal(True)), {}, [], {})
    assert result == Returned(BoolValue(True))


def test_function_return_void():
    result = evaluate_node(FunctionReturn(None), {}, [], {})
    assert result == Returned(None)


def test_function_call():
    functions = {"my_function": _void_function("my_function")}
    call_stack = []
    result = evaluate_node(FunctionCall("my_function", []), {}, call_stack, functions)
    assert result is None
    assert call_stack == []


def test_function_call_unknown_function():
    with pytest.raises(EvaluationError):
        evaluate_node(FunctionCall("missing", []), {}, [], {})


def test_node_if_statement_return():
    node = IfStatement(check_expression=literal(True), if_block=[FunctionReturn(literal(10))])
    result = evaluate_node(node, {}, [], {})
    assert result == Returned(UIntValue(10))


def test_node_if_statement_no_return():
    node = IfStatement(check_expression=literal(True))
    local_variables = {}
    result = evaluate_node(node, local_variables, [], {})
    assert result is None
    assert local_variables == {}


def test_if_statement_true():
    statement = IfStatement(check_expression=literal(True), if_block=[FunctionReturn(literal(1))])
    assert evaluate_if_statement(statement, {}, {}, []) == Returned(UIntValue(1))


def test_if_statement_false_no_else():
    statement = IfStatement(
        check_expression=literal(False), if_block=[FunctionReturn(literal(1))]
    )
    assert evaluate_if_statement(statement, {}, {}, []) is None


def test_if_statement_else():
    statement = IfStatement(
        check_expression=literal(False),
        if_block=[FunctionReturn(literal(1))],
        else_block=[FunctionReturn(literal(2))],
    )
    assert evaluate_if_statement(statement, {}, {}, []) == Returned(UIntValue(2))


def test_else_if_statement():
    statement = IfStatement(
        check_expression=literal(False),
        if_block=[FunctionReturn(literal(1))],
        else_if_blocks=[ElseIfBlock(check=literal(True), block=[FunctionReturn(literal(3))])],
        else_block=[FunctionReturn(literal(2))],
    )
    assert evaluate_if_statement(statement, {}, {}, []) == Returned(UIntValue(3))


def test_if_statement_incorrect_check():
    statement = IfStatement(check_expression=literal(10), if_block=[FunctionReturn(literal(1))])
    with pytest.raises(EvaluationError, match="Expected if statement check value to be boolean"):
        evaluate_if_statement(statement, {}, {}, [])


def test_else_if_statement_incorrect_check():
    statement = IfStatement(
        check_expression=literal(False),
        if_block=[FunctionReturn(literal(1))],
        else_if_blocks=[ElseIfBlock(check=literal(10), block=[FunctionReturn(literal(3))])],
    )
    with pytest.raises(EvaluationError, match="Expected if statement check value to be boolean"):
        evaluate_if_statement(statement, {}, {}, [])


def test_if_statement_reads_outer_variables():
    statement = IfStatement(
        check_expression=VariableAccess("flag"),
        if_block=[FunctionReturn(VariableAccess("count"))],
    )
    local_variables = {"flag": BoolValue(True), "count": UIntValue(7)}
    assert evaluate_if_statement(statement, {}, local_variables, []) == Returned(UIntValue(7))