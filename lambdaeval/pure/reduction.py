"""Normal-order beta reduction of binder-distance terms.

Substituting an argument for BoundVariable(0) in a Function body needs two index corrections:
    1. the argument is copied under `depth` extra binders, so its free indices go up by `depth`
    2. the redex's lambda disappears, so indices in the body pointing past it go down by one
Applying only one of them (or applying them to the wrong side) silently binds free variables to the wrong lambda.

Sources: https://en.wikipedia.org/wiki/De_Bruijn_index#Formal_definition,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from lambdaeval.lang.error import GenericException, NormalizationError
from lambdaeval.pure.term import Application, BoundVariable, FreeVariable, Function, Name


def _unexpanded(term):
    return GenericException(f"name '{term.name}' reached reduction unexpanded", internal=True)


def shift(term, by, cutoff=0):
    """Returns a copy of term with every index at or above cutoff (i.e. free in term) incremented by `by`."""
    if isinstance(term, BoundVariable):
        return BoundVariable(term.index + by) if term.index >= cutoff else BoundVariable(term.index)
    elif isinstance(term, FreeVariable):
        return FreeVariable(term.char)
    elif isinstance(term, Application):
        return Application(shift(term.function, by, cutoff), shift(term.argument, by, cutoff))
    elif isinstance(term, Function):
        return Function(shift(term.body, by, cutoff + 1))
    elif isinstance(term, Name):
        raise _unexpanded(term)
    raise TypeError(f"not a term: {term!r}")


def substitute(body, depth, argument):
    """Replaces the variable bound `depth` binders above body by argument, removing that binder."""
    if isinstance(body, BoundVariable):
        if body.index == depth:
            return shift(argument, depth)
        elif body.index > depth:
            return BoundVariable(body.index - 1)
        return BoundVariable(body.index)
    elif isinstance(body, FreeVariable):
        return FreeVariable(body.char)
    elif isinstance(body, Application):
        return Application(substitute(body.function, depth, argument), substitute(body.argument, depth, argument))
    elif isinstance(body, Function):
        return Function(substitute(body.body, depth + 1, argument))
    elif isinstance(body, Name):
        raise _unexpanded(body)
    raise TypeError(f"not a term: {body!r}")


class NormalOrderReducer:
    """Implements normal-order (leftmost-outermost) reduction to full beta normal form, including under lambdas.

    There is no guarantee of termination: terms without a normal form reduce forever unless max_steps is set, in which
    case a NormalizationError is raised once more than max_steps contractions have been made.
    """

    def __init__(self, max_steps=None):
        self.max_steps = max_steps
        self.steps = 0

    def _contract(self, function, argument):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise NormalizationError(f"no normal form found within {self.max_steps} reduction steps")
        return substitute(function.body, 0, argument)

    def reduce_to_head(self, term):
        """Reduces term until it is a Function, a variable, or an Application whose left side does not reduce to a
        Function. Arguments and bodies are left alone.
        """
        while isinstance(term, Application):
            function = self.reduce_to_head(term.function)
            if not isinstance(function, Function):
                return Application(function, term.argument)
            term = self._contract(function, term.argument)

        if isinstance(term, Name):
            raise _unexpanded(term)
        return term

    def reduce_full(self, term):
        """Reduces term to beta normal form."""
        term = self.reduce_to_head(term)
        if isinstance(term, Function):
            return Function(self.reduce_full(term.body))
        elif isinstance(term, Application):
            return Application(self.reduce_full(term.function), self.reduce_full(term.argument))
        return term


def normalize(term, max_steps=None):
    """Returns the beta normal form of term, which must not contain Name nodes."""
    return NormalOrderReducer(max_steps).reduce_full(term)
