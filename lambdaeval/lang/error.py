"""Error handling for the lambdaeval language. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be reported by ErrorHandler. position is the 0-indexed offset of the
    offending character in the input line, or None if the error has no meaningful position.
    """

    def __init__(self, msg, position=None, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.position = position
        self.internal = internal


class LexError(GenericException):
    """Malformed token, oversized numeric literal, or ambiguous identifier adjacency."""


class ParseError(GenericException):
    """Unexpected token, missing punctuation, or trailing input."""


class ValidationError(GenericException):
    """Malformed binding name."""


class UnknownNameError(GenericException):
    """Reference to a name that was never bound."""

    def __init__(self, name, position=None):
        super().__init__(f"unknown name '{name}'", position)
        self.name = name


class CyclicDefinitionError(GenericException):
    """A definition that refers back to itself, directly or through other definitions."""

    def __init__(self, name, position=None):
        super().__init__(f"'{name}' is defined in terms of itself", position)
        self.name = name


class NormalizationError(GenericException):
    """Reduction did not reach a normal form within the step budget."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report lambdaeval errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, color=True):
        self.fatal = fatal
        self.color = color
        self.errors = 0
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def paint(self, text, color):
        """Colors and bolds text, unless color output is disabled."""
        if not self.color:
            return text
        return colored(text, color, attrs=["bold"])

    def diagnose(self, error, line):
        """Returns line, a caret under the offending character and the error message, one per line."""
        padding = "".join(char if char == "\t" else " " for char in line[:error.position])
        caret = padding + self.paint("^", ErrorHandler.ERROR)
        label = self.paint(f"Error (column {error.position + 1}):", ErrorHandler.ERROR)
        return f"{line}\n{caret}\n{label} {error.msg}"

    def warn(self, msg):
        """Prints a runtime warning."""
        print(self.paint("warning:", ErrorHandler.WARNING) + " " + msg)

    def throw(self, error):
        """Reports error using self.traceback, a dict of file: (line, line_num) representing origination of error."""
        self.errors += 1

        error_msg = ""
        offending = None
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line is not None:
                if line_num is not None:
                    error_msg += f"File '{file}', line {line_num}:\n"
                offending = line

        if error.internal or error.position is None or offending is None:
            label = self.paint("Error:", ErrorHandler.ERROR)
            if error.internal:
                label = self.paint("[internal]", ErrorHandler.ERROR) + " " + label
            error_msg += f"{label} {error.msg}"
        else:
            error_msg += self.diagnose(error, offending)
        print(error_msg)

        if self.fatal:
            sys.exit(1)
        for file in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.remove_line(file)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("normal form might exist, but maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
