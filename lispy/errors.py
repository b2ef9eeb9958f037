class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when the reader meets unbalanced or truncated input"""
    pass

class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is looked up or set before it is bound"""
    pass

class LispyInvalidSymbol(LispyError):
    """ Raised when something other than a usable symbol is used as a name"""

class LispyApplicationError(LispyError):
    """ Raised when a value cannot be applied, or a primitive rejects its arguments"""

class LispyArityError(LispyApplicationError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class LispyTypeError(LispyApplicationError):
    """ Raised when the types of arguments passed to a function are incorrect"""
