from ..runtime.types import Object, Boolean, TRUE, FALSE, NULL

def native_bool_to_boolean(b: bool) -> Boolean:
    return TRUE if b else FALSE

def is_truthy(obj: Object) -> bool:
    if obj is NULL or obj is FALSE: return False
    return True

def eval_bang(right: Object) -> Boolean:
    return native_bool_to_boolean(not is_truthy(right))
