"""Named definitions for a session. Definitions are stored exactly as parsed and only expanded when an expression that
uses them is evaluated, so a name may be used in a definition before it is itself defined.
"""

from lambdaeval.lang.error import CyclicDefinitionError, UnknownNameError, ValidationError
from lambdaeval.pure.lexical import is_digit, is_upper
from lambdaeval.pure.term import Application, BoundVariable, FreeVariable, Function, Name, names


def validate_name(name, offset=0):
    """Raises a ValidationError unless name is an uppercase letter followed by uppercase letters/digits. The error
    position is the offset of the offending character within name, plus offset.
    """
    if not name:
        raise ValidationError("name cannot be empty", offset)

    for idx, char in enumerate(name):
        if not (is_upper(char) or (idx > 0 and is_digit(char))):
            raise ValidationError(f"invalid name '{name}'", offset + idx)


class Namespace:
    """Mapping of names to the (unexpanded) terms bound to them."""

    def __init__(self):
        self.definitions = {}

    def define(self, name, term):
        """Binds term to name. Returns whether an existing definition was overwritten."""
        validate_name(name)
        overwritten = name in self.definitions
        self.definitions[name] = term
        return overwritten

    def expand(self, term):
        """Returns term with every Name replaced, recursively, by its definition."""
        return self._expand(term, [], None)

    def is_cyclic(self, name):
        """Whether expanding name would eventually reach name again, following stored definitions. Undefined names are
        treated as leaves.
        """
        seen = set()
        pending = [name]
        while pending:
            current = pending.pop()
            if current not in self.definitions:
                continue
            for child in names(self.definitions[current]):
                if child == name:
                    return True
                if child not in seen:
                    seen.add(child)
                    pending.append(child)
        return False

    def _expand(self, term, active, origin):
        """active is the chain of names being expanded on the current path; origin is the Name written in the term
        originally passed to expand, which is where any error is reported.
        """
        if isinstance(term, Name):
            reference = origin if origin is not None else term
            if term.name in active:
                raise CyclicDefinitionError(term.name, reference.position)
            if term.name not in self.definitions:
                raise UnknownNameError(term.name, reference.position)

            active.append(term.name)
            try:
                return self._expand(self.definitions[term.name], active, reference)
            finally:
                active.pop()

        elif isinstance(term, Application):
            return Application(self._expand(term.function, active, origin), self._expand(term.argument, active, origin))
        elif isinstance(term, Function):
            return Function(self._expand(term.body, active, origin))
        elif isinstance(term, BoundVariable):
            return BoundVariable(term.index)
        elif isinstance(term, FreeVariable):
            return FreeVariable(term.char)
        raise TypeError(f"not a term: {term!r}")

    def __contains__(self, name):
        return name in self.definitions

    def __getitem__(self, name):
        return self.definitions[name]

    def __iter__(self):
        return iter(self.definitions)

    def __len__(self):
        return len(self.definitions)
