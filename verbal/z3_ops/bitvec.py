import z3

WIDTH = 64
INT64_MIN = -(1 << (WIDTH - 1))
INT64_MAX = (1 << (WIDTH - 1)) - 1

def fits_int64(val: int) -> bool:
    return INT64_MIN <= val <= INT64_MAX

def to_bv(val: int) -> z3.BitVecRef:
    return z3.BitVecVal(val, WIDTH)

def from_z3(ref) -> int:
    simp = z3.simplify(ref)
    if isinstance(simp, z3.BitVecNumRef):
        return simp.as_signed_long()
    raise RuntimeError(f"Z3 result not concrete: {simp}")

def is_true(ref) -> bool:
    return z3.is_true(z3.simplify(ref))

def neg(va: int) -> int:
    return from_z3(-to_bv(va))

def eval_bitvec(op: str, va: int, vb: int):
    """Signed 64-bit operation; arithmetic returns int, comparisons return bool."""
    za = to_bv(va)
    zb = to_bv(vb)

    if op == "+": return from_z3(za + zb)
    if op == "-": return from_z3(za - zb)
    if op == "*": return from_z3(za * zb)
    # z3's / on bit-vectors is signed division, truncating toward zero
    if op == "/": return from_z3(za / zb)

    if op == "<": return is_true(za < zb)
    if op == ">": return is_true(za > zb)
    if op == "==": return is_true(za == zb)
    if op == "!=": return is_true(za != zb)

    raise RuntimeError(f"Unknown bitvec op: {op}")
