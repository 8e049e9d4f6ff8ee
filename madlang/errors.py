from typing import Optional


class MadlangError(Exception):
    """Base class for Madlang runtime failures.

    ``str(error)`` is the user-facing diagnostic; ``detail`` names the
    operator, variable or call involved and is only written to the debug log.
    """
    message = 'Error: runtime error'

    def __init__(self, detail: Optional[str] = None):
        super().__init__(self.message)
        self.detail = detail


class TypeMismatch(MadlangError):
    """Wrong value kind or wrong argument count."""
    message = 'Error: type mismatch'


class UnboundReference(MadlangError):
    """Name never declared in any enclosing scope, or not callable."""
    message = 'Error: unbound reference'


class ArithmeticFault(MadlangError):
    """Division or modulo by zero."""
    message = 'Error: arithmetic error'


class StackExhausted(MadlangError):
    """Host call stack exhausted by unbounded recursion."""
    message = 'Error: stack overflow'


class UnexpectedReturn(Exception):
    """A return escaped every function call boundary.

    Not a MadlangError: it marks a defect in the program's
    structure or the evaluator, never an ordinary language failure.
    """
    def __init__(self):
        super().__init__('Error: unexpected return')
