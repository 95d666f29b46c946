class LispError(Exception):
    """ Base class for all ducklisp errors"""
    pass

class LispSyntaxError(LispError):
    """ Raised when source text has unbalanced parentheses or is empty"""

class UnboundSymbolError(LispError):
    """ Raised when a symbol is looked up or set before it is bound"""

class ArgumentError(LispError):
    """ Raised when a primitive or special form gets the wrong number or type of arguments"""

class ApplyError(LispError):
    """ Raised when a value that is not a function is called"""

class DivisionByZeroError(LispError, ZeroDivisionError):
    """ Raised when / is given a zero divisor"""

class StackExhaustionError(LispError, RecursionError):
    """ Raised when evaluation nests deeper than the host stack allows"""
