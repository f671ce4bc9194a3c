"""Lambda calculus terms using binder-distance (De Bruijn) indices.

Terms are immutable values. A variable is either bound, in which case it only stores how many binders to jump over to
reach its lambda (0 is the nearest enclosing Function), or free, in which case it keeps its letter. Functions store no
parameter name at all.

```
λx.x        =>  Function(BoundVariable(0))
λx.λy.x     =>  Function(Function(BoundVariable(1)))
λx.y        =>  Function(FreeVariable("y"))
I y         =>  Application(Name("I"), FreeVariable("y"))
```

Name nodes are references into a Namespace and must be expanded before a term is reduced.
"""

import sys
from dataclasses import dataclass, field
from typing import Union

# reduction, expansion and display all recurse on term depth: numerals alone nest once per unit
RECURSION_LIMIT = 20000

if sys.getrecursionlimit() < RECURSION_LIMIT:
    sys.setrecursionlimit(RECURSION_LIMIT)


@dataclass(frozen=True)
class FreeVariable:
    """Single-letter variable with no enclosing binder of that letter."""
    char: str


@dataclass(frozen=True)
class BoundVariable:
    """Variable bound by the index-th enclosing Function."""
    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"variable index must be non-negative, got {self.index}")


@dataclass(frozen=True)
class Application:
    """function applied to argument."""
    function: "Term"
    argument: "Term"


@dataclass(frozen=True)
class Function:
    """Single-parameter abstraction. The body refers to the parameter as BoundVariable(0)."""
    body: "Term"


@dataclass(frozen=True)
class Name:
    """Unresolved reference to a named definition. position is where the reference was written (diagnostics only)."""
    name: str
    position: int = field(default=0, compare=False)


Term = Union[FreeVariable, BoundVariable, Application, Function, Name]


def is_closed(term, depth=0):
    """Whether term has no free variables (free letters or indices pointing past the outermost Function)."""
    if isinstance(term, FreeVariable):
        return False
    elif isinstance(term, BoundVariable):
        return term.index < depth
    elif isinstance(term, Application):
        return is_closed(term.function, depth) and is_closed(term.argument, depth)
    elif isinstance(term, Function):
        return is_closed(term.body, depth + 1)
    elif isinstance(term, Name):
        return True
    raise TypeError(f"not a term: {term!r}")


def names(term):
    """Returns the set of names referenced directly by term."""
    if isinstance(term, Name):
        return {term.name}
    elif isinstance(term, Application):
        return names(term.function) | names(term.argument)
    elif isinstance(term, Function):
        return names(term.body)
    return set()
