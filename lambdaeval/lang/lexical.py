"""Lexical analysis for the lambdaeval language, a shallow wrapper around pure lambda calculus. Note that this module
does not read input files, but rather classifies single preprocessed lines.

All grammar can be loosely defined as follows:

```
<named_func> ::= <NAME> ":=" <λ-term>      ; stored unexpanded, only reduced when used later on
<exec_stmt>  ::= <λ-term>                  ; expanded, reduced and outputted

<comment>    ::= ";;" <char>*
```

Comments are handled in session.py: there is no dedicated Grammar class for comments.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lambdaeval.lang.namespace import validate_name
from lambdaeval.lang.numerical import number
from lambdaeval.pure.display import render
from lambdaeval.pure.grammar import parse
from lambdaeval.pure.reduction import NormalOrderReducer
from lambdaeval.pure.term import Term

DECLARE = ":="


@dataclass
class Binding:
    """Result of a NamedFunc: term was bound to name."""
    name: str
    term: Term
    overwritten: bool = False

    def __str__(self):
        return f"bound {self.name} to {render(self.term)}"


@dataclass
class Evaluation:
    """Result of an ExecStmt: term (as written) reduced to normal_form, which encodes numeral if not None."""
    term: Term
    normal_form: Term
    numeral: Optional[int]
    steps: int = 0

    def __str__(self):
        report = f"Church numeral for: {self.numeral}" if self.numeral is not None else "Not a Church numeral"
        return f"{render(self.normal_form)}\n{report}"


class Grammar(ABC):
    """Superclass representing any statement in the lambdaeval language."""

    def __init__(self, expr):
        """Assumes check_grammar has been run."""
        self.expr = expr
        self._cls = type(self).__name__

    @staticmethod
    @abstractmethod
    def check_grammar(expr):
        """This method should check expr's top-level grammar and return whether or not it is this statement."""

    @abstractmethod
    def execute(self, namespace, max_steps=None):
        """Runs the statement against namespace and returns its result."""

    @classmethod
    def infer(cls, expr):
        """Infers the type of expr and returns an object of the matching subclass. Subclasses are tried in definition
        order, so the catch-all ExecStmt must be defined last.
        """
        for subclass in cls.__subclasses__():
            if subclass.check_grammar(expr):
                return subclass(expr)
        raise ValueError(f"'{expr}' is not a statement")

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and other.expr == self.expr

    def __hash__(self):
        return hash(self.expr)


class NamedFunc(Grammar):
    """NamedFuncs represent binding statements in lambdaeval: <NAME> := <λ-term>. Only the first ':=' splits the
    line, and every position reported while checking it is relative to the whole line.
    """

    def __init__(self, expr):
        super().__init__(expr)

        split = expr.index(DECLARE)
        lval = expr[:split]
        self.name = lval.strip()
        validate_name(self.name, offset=len(lval) - len(lval.lstrip()))

        self.term = parse(expr[split + len(DECLARE):], offset=split + len(DECLARE))

    @staticmethod
    def check_grammar(expr):
        return DECLARE in expr

    def execute(self, namespace, max_steps=None):
        overwritten = namespace.define(self.name, self.term)
        return Binding(self.name, self.term, overwritten)

    def __repr__(self):
        return f"{self._cls}(name='{self.name}', term={self.term!r})"


class ExecStmt(Grammar):
    """Any line that is not a binding: a λ-term to expand, reduce and report."""

    def __init__(self, expr):
        super().__init__(expr)
        self.term = parse(expr)

    @staticmethod
    def check_grammar(expr):
        return True

    def execute(self, namespace, max_steps=None):
        reducer = NormalOrderReducer(max_steps)
        normal_form = reducer.reduce_full(namespace.expand(self.term))
        return Evaluation(self.term, normal_form, number(normal_form), reducer.steps)
