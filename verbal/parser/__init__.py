from .engine import Parser, LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL
from .main import parse

__all__ = ["Parser", "parse", "LOWEST", "EQUALS", "LESSGREATER", "SUM", "PRODUCT", "PREFIX", "CALL"]
