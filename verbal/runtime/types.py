from dataclasses import dataclass
from typing import Dict, List, Optional

# ======================================
# Values
# ======================================

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"

class Object:
    kind: str = ""

    def inspect(self) -> str:
        raise NotImplementedError

    def __str__(self): return self.inspect()

@dataclass(eq=False)
class Integer(Object):
    value: int
    kind = INTEGER_OBJ
    def inspect(self) -> str: return str(self.value)

class Boolean(Object):
    """Only TRUE and FALSE below should ever exist; == on them is identity."""
    kind = BOOLEAN_OBJ

    def __init__(self, value: bool):
        self.value = value

    def inspect(self) -> str: return "true" if self.value else "false"
    def __repr__(self): return f"Boolean({self.value})"

class Null(Object):
    kind = NULL_OBJ
    def inspect(self) -> str: return "null"
    def __repr__(self): return "Null()"

@dataclass(eq=False)
class ReturnValue(Object):
    value: Object
    kind = RETURN_VALUE_OBJ
    def inspect(self) -> str: return self.value.inspect()

@dataclass(eq=False)
class Error(Object):
    message: str
    kind = ERROR_OBJ
    def inspect(self) -> str: return f"ERROR: {self.message}"

TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()

def is_error(obj: Optional[Object]) -> bool:
    return obj is not None and obj.kind == ERROR_OBJ

# ======================================
# Environment
# ======================================

class Environment:
    def __init__(self, outer: Optional['Environment'] = None):
        self.store: Dict[str, Object] = {}
        self.outer = outer

    def get(self, name: str) -> Optional[Object]:
        val = self.store.get(name)
        if val is None and self.outer is not None:
            return self.outer.get(name)
        return val

    def set(self, name: str, val: Object) -> Object:
        self.store[name] = val
        return val

    def contains(self, name: str) -> bool: return self.get(name) is not None
    def names(self) -> List[str]: return list(self.store)

    def __repr__(self):
        return f"Environment({sorted(self.store)}, outer={self.outer is not None})"

def new_environment() -> Environment:
    return Environment()

def new_enclosed_environment(outer: Environment) -> Environment:
    return Environment(outer)

class ParseFailure(Exception):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
