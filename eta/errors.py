class EtaError(Exception):
    """ Base class for all Eta errors"""
    kind = "EvalError"

    @property
    def message(self) -> str:
        return str(self)


class EtaSyntaxError(EtaError):
    """ Raised when the reader meets malformed input"""
    kind = "SyntaxError"


class EtaUnboundSymbol(EtaError):
    """ Raised when a symbol is used before it is bound"""
    kind = "UnboundSymbol"


class EtaTypeError(EtaError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = "TypeMismatch"


class EtaArityError(EtaError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "ArityMismatch"


class EtaNotCallable(EtaError):
    """ Raised when the head of an application is not a procedure"""
    kind = "NotCallable"


class EtaNoMatchingClause(EtaError):
    """ Raised when no cond clause has a true test"""
    kind = "NoMatchingClause"


class EtaArithmeticError(EtaError):
    """ Raised on division by zero"""
    kind = "ArithmeticError"


class EtaRecursionError(EtaError):
    """ Raised when non-tail recursion exhausts the Python stack"""
    kind = "RecursionDepth"


class QuitRequested(Exception):
    """ Signal raised by (quit); not an error, the host loop should stop"""
