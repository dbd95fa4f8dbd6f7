from enum import Enum


class ErrorKind(Enum):
    SYNTAX = "syntax"
    UNBOUND_SYMBOL = "unbound-symbol"
    ARITY_MISMATCH = "arity-mismatch"
    NATIVE = "native"


class SprigError(Exception):
    """ Base class for all Sprig errors"""
    kind: ErrorKind

    @property
    def message(self) -> str:
        return str(self)


class SprigSyntaxError(SprigError):
    """ Raised when a token or atom tree cannot be read"""
    kind = ErrorKind.SYNTAX


class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is looked up before it is bound"""
    kind = ErrorKind.UNBOUND_SYMBOL


class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = ErrorKind.ARITY_MISMATCH


class SprigNativeError(SprigError):
    """ Raised when a builtin or side effector fails or misbehaves"""
    kind = ErrorKind.NATIVE
