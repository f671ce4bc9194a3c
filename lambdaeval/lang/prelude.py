"""Named combinators loaded into a session before any user input.

Booleans select one of two arguments, pairs hand both components to a selector, and lists are nested pairs ending in
NIL. Definitions may use names defined further down: they are only expanded when an expression is evaluated.
"""

from lambdaeval.pure.grammar import parse

PRELUDE = {
    "I": r"\x.x",

    # arithmetic on Church numerals
    "SUCC": r"\nfx.f (n f x)",
    "ADD": r"\mnfx.m f (n f x)",
    "MUL": r"\mnf.m (n f)",
    "POW": r"\be.e b",
    "PRED": r"\nfx.n (\gh.h (g f)) (\u.x) (\u.u)",
    "SUB": r"\mn.n PRED m",

    # booleans and logic
    "TRUE": r"\xy.x",
    "FALSE": r"\xy.y",
    "AND": r"\pq.p q p",
    "OR": r"\pq.p p q",
    "NOT": r"\p.p FALSE TRUE",
    "IF": r"\pab.p a b",
    "ISZERO": r"\n.n (\x.FALSE) TRUE",
    "LEQ": r"\mn.ISZERO (SUB m n)",
    "EQ": r"\mn.AND (LEQ m n) (LEQ n m)",

    # pairs
    "PAIR": r"\xyf.f x y",
    "FIRST": r"\p.p TRUE",
    "SECOND": r"\p.p FALSE",

    # lists
    "NIL": r"\x.TRUE",
    "CONS": "PAIR",
    "HEAD": "FIRST",
    "TAIL": "SECOND",
    "ISNIL": r"\l.l (\ht.FALSE)",

    # recursion
    "Y": r"\f.(\x.f (x x)) (\x.f (x x))",
    "FOLD": r"Y (\rfal.ISNIL l a (f (HEAD l) (r f a (TAIL l))))",
}


def load(namespace, prelude=None):
    """Parses and defines every entry of prelude (PRELUDE by default) in namespace."""
    if prelude is None:
        prelude = PRELUDE

    for name, source in prelude.items():
        namespace.define(name, parse(source))
