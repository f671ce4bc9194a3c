"""Natural numbers encoded as Church numerals. Note that operations are not implemented here (see lang/prelude.py),
numerals are plain terms: n is λf.λx.f (f ... (f x)) with n applications of f.

Source: https://en.wikipedia.org/wiki/Church_encoding#Calculation_with_Church_numerals
"""

from typing import Optional

from lambdaeval.pure.term import Application, BoundVariable, Function


def cnumber(num):
    """Returns the Church numeral term for natural number num (cnum = Church numeral)."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ValueError(f"expected natural number, got {num!r}")

    body = BoundVariable(0)
    for _ in range(num):
        body = Application(BoundVariable(1), body)
    return Function(Function(body))


def number(cnum) -> Optional[int]:
    """Returns the natural number encoded by cnum. If cnum isn't a Church numeral, returns None."""
    for _ in range(2):
        if not isinstance(cnum, Function):
            return None
        cnum = cnum.body

    num = 0
    while isinstance(cnum, Application):
        if cnum.function != BoundVariable(1):
            return None
        cnum = cnum.argument
        num += 1

    return num if cnum == BoundVariable(0) else None
