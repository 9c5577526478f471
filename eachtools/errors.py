import inspect
import threading

from tblib import pickling_support


@pickling_support.install
class EvaluationError(Exception):
    """Raised when a callback fails while an operation traverses a source."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from callbacks invoked by EachTools are
            propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through EachTools
              code, might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def format_stack(skip=1):
    """Render the current call stack, outermost frame first.

    The `skip` innermost frames are left out.
    """
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        out += "  File \"{}\", line {}, in {}\n".format(
            frame.filename, frame.lineno, frame.function)
        for line in frame.code_context or []:
            out += "    " + line.lstrip()

    return out
