class LispError(Exception):
    """ Base class for all conslisp errors"""
    pass


class LispUnknownSymbol(LispError):
    """ Raised when a symbol is evaluated or set before it is bound"""

    def __init__(self, name):
        super().__init__(f"Unknown symbol {name}")
        self.name = name


class LispInvalidCall(LispError):
    """ Raised when the head of a call does not evaluate to a callable"""

    def __init__(self, type_name: str):
        super().__init__(f"Cannot call a value of type {type_name}")
        self.type_name = type_name


class LispInvalidSymbol(LispError):
    """ Raised when something other than a symbol is used as a name"""

class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a function are incorrect"""
