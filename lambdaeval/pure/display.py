"""Pretty-printing of terms back to source syntax.

Lambdas get their display letter from how deeply they are nested: the outermost lambda is `a`, the one inside it `b`,
and so on, so alpha-equivalent terms always print identically. Past `z` every lambda prints as PLACEHOLDER.
"""

from lambdaeval.pure.term import Application, BoundVariable, FreeVariable, Function, Name

PLACEHOLDER = "?"


def binder_name(depth):
    """Display letter of the lambda at depth (0 for the outermost)."""
    if 0 <= depth < 26:
        return chr(ord("a") + depth)
    return PLACEHOLDER


def render(term, depth=0):
    """Returns term as text. Arguments are parenthesized only if they are Applications, lambdas only if they are a
    direct child of an Application.
    """
    if isinstance(term, FreeVariable):
        return term.char
    elif isinstance(term, BoundVariable):
        return binder_name(depth - term.index - 1)
    elif isinstance(term, Name):
        return term.name
    elif isinstance(term, Function):
        return f"\\{binder_name(depth)}.{render(term.body, depth + 1)}"
    elif isinstance(term, Application):
        function = render(term.function, depth)
        if isinstance(term.function, Function):
            function = f"({function})"

        argument = render(term.argument, depth)
        if isinstance(term.argument, (Application, Function)):
            argument = f"({argument})"
        return f"{function} {argument}"
    raise TypeError(f"not a term: {term!r}")
