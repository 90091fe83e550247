from typing import List
from ..syntax import ast
from .types import Object, Integer, ReturnValue, Error, Environment, NULL, is_error, RETURN_VALUE_OBJ
from ..prelude import eval_prefix, eval_infix, is_truthy, native_bool_to_boolean

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

def eval_node(node: ast.Node, env: Environment) -> Object:
    # Statements
    if isinstance(node, ast.Program):
        return eval_program(node.statements, env)
    if isinstance(node, ast.BlockStatement):
        return eval_block(node.statements, env)
    if isinstance(node, ast.ExpressionStatement):
        if node.expression is None: return NULL
        return eval_node(node.expression, env)
    if isinstance(node, ast.LetStatement):
        return eval_let(node, env)
    if isinstance(node, ast.ReturnStatement):
        if node.return_value is None:
            return ReturnValue(NULL)
        val = eval_node(node.return_value, env)
        if is_error(val): return val
        return ReturnValue(val)
    if isinstance(node, ast.IfStatement):
        return eval_if(node, env)

    # Expressions
    if isinstance(node, ast.IntegerLiteral):
        return Integer(node.value)
    if isinstance(node, ast.Boolean):
        return native_bool_to_boolean(node.value)
    if isinstance(node, ast.Identifier):
        return eval_identifier(node, env)
    if isinstance(node, ast.PrefixExpression):
        right = eval_node(node.right, env)
        if is_error(right): return right
        return eval_prefix(node.operator, right)
    if isinstance(node, ast.InfixExpression):
        # right operand first
        right = eval_node(node.right, env)
        left = eval_node(node.left, env)
        if is_error(right): return right
        if is_error(left): return left
        return eval_infix(node.operator, left, right)

    raise RuntimeError(f"Unknown node: {node!r}")

def eval_program(stmts: List[ast.Stmt], env: Environment) -> Object:
    result: Object = NULL
    for i, stmt in enumerate(stmts):
        log(f"Evaluating stmt {i}: {stmt}")
        result = eval_node(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            return result
    return result

def eval_block(stmts: List[ast.Stmt], env: Environment) -> Object:
    result: Object = NULL
    for stmt in stmts:
        result = eval_node(stmt, env)
        if result.kind == RETURN_VALUE_OBJ or is_error(result):
            return result
    return result

def eval_let(node: ast.LetStatement, env: Environment) -> Object:
    if node.value is None:
        return NULL
    val = eval_node(node.value, env)
    if is_error(val): return val
    log(f"  bind {node.name.value} = {val.inspect()}")
    env.set(node.name.value, val)
    return NULL

def eval_if(node: ast.IfStatement, env: Environment) -> Object:
    cond = eval_node(node.condition, env)
    if is_error(cond): return cond
    if is_truthy(cond):
        return eval_node(node.consequence, env)
    if node.alternative is not None:
        return eval_node(node.alternative, env)
    return NULL

def eval_identifier(node: ast.Identifier, env: Environment) -> Object:
    val = env.get(node.value)
    if val is None:
        return Error(f"identifier not found: {node.value}")
    return val

def evaluate(program: ast.Program, env: Environment) -> Object:
    return eval_node(program, env)
