class LispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class LispLexError(LispError):
    """ Raised when the source text contains an unrecognised token"""

class LispSyntaxError(LispError):
    """ Raised when tokens do not form a well-formed expression"""

class LispEOFError(LispSyntaxError):
    """ Raised when the input ends before an expression is read"""

class LispArityError(LispError):
    """ Raised when a function or special form gets the wrong number of arguments"""

class LispTypeError(LispError):
    """ Raised when an operand has the wrong kind of expression"""

class LispNameError(LispError):
    """ Raised when let/fn targets a reserved word"""

class LispValueError(LispError):
    """ Raised when a no-value result is used where a value is required"""

class LispScopeError(LispError):
    """ Raised when the scope stack has no frame to define into"""
