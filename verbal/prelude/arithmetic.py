from ..runtime.types import Object, Integer, Error
from ..z3_ops import bitvec
from .logic import native_bool_to_boolean

INT_OPS = ["+", "-", "*", "/", "<", ">", "==", "!="]

def eval_integer_infix(op: str, left: Integer, right: Integer) -> Object:
    if op not in INT_OPS:
        return Error(f"unknown operator: {left.kind} {op} {right.kind}")
    if op == "/" and right.value == 0:
        return Error("division by zero")

    res = bitvec.eval_bitvec(op, left.value, right.value)
    if isinstance(res, bool):
        return native_bool_to_boolean(res)
    return Integer(res)

def eval_minus_prefix(right: Object) -> Object:
    if not isinstance(right, Integer):
        return Error(f"unknown operator: -{right.kind}")
    return Integer(bitvec.neg(right.value))
