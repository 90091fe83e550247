from .types import (
    Object, Integer, Boolean, Null, ReturnValue, Error, Environment, ParseFailure,
    TRUE, FALSE, NULL, new_environment, new_enclosed_environment,
)
from .evaluator import evaluate, eval_node

__all__ = [
    "Object", "Integer", "Boolean", "Null", "ReturnValue", "Error", "Environment", "ParseFailure",
    "TRUE", "FALSE", "NULL", "new_environment", "new_enclosed_environment",
    "evaluate", "eval_node",
]
