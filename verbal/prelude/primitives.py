from ..runtime.types import Object, Integer, Error
from . import arithmetic, logic

def eval_prefix(op: str, right: Object) -> Object:
    if op == "!": return logic.eval_bang(right)
    if op == "-": return arithmetic.eval_minus_prefix(right)
    return Error(f"unknown operator: {op}{right.kind}")

def eval_infix(op: str, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return arithmetic.eval_integer_infix(op, left, right)
    # Booleans and null are singletons, so identity is value equality here.
    # Integers never reach this point.
    if op == "==": return logic.native_bool_to_boolean(left is right)
    if op == "!=": return logic.native_bool_to_boolean(left is not right)
    if left.kind != right.kind:
        return Error(f"type mismatch: {left.kind} {op} {right.kind}")
    return Error(f"unknown operator: {left.kind} {op} {right.kind}")
