from . import arithmetic, logic, primitives

eval_prefix = primitives.eval_prefix
eval_infix = primitives.eval_infix
is_truthy = logic.is_truthy
native_bool_to_boolean = logic.native_bool_to_boolean
