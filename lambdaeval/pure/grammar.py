r"""Recursive-descent parser for pure lambda calculus, resolving variables to binder-distance indices as it goes.

Formally, the accepted grammar is

```
<node>        ::= "\" <letter> <lambda_tail>      ; abstraction, body extends as far right as possible
                | <application>
<lambda_tail> ::= "." <node>
                | <letter> <lambda_tail>          ; currying shorthand: \xy.M = \x.\y.M
<application> ::= <unit> <unit>*                  ; associating by left: a b c d = (((a b) c) d)
<unit>        ::= "(" <node> ")" | <letter> | <name> | <number>
```

Letters are looked up in a scope table while parsing: a letter bound by an enclosing lambda becomes
BoundVariable(distance to that lambda), anything else becomes a FreeVariable. Numbers are expanded to Church numerals
on the spot.

Sources: https://opendsa-server.cs.vt.edu/ODSA/Books/PL/html/Syntax.html,
         https://en.wikipedia.org/wiki/De_Bruijn_index
"""

from lambdaeval.lang.error import ParseError
from lambdaeval.lang.numerical import cnumber
from lambdaeval.pure.lexical import Kind, Lexer
from lambdaeval.pure.term import Application, BoundVariable, FreeVariable, Function, Name

UNIT_START = (Kind.OPEN_PAREN, Kind.LETTER, Kind.NAME, Kind.NUMBER)


class Parser:
    """Parses a single term from source. The scope table and depth only live as long as one parse."""

    def __init__(self, source, offset=0):
        self.tokens = Lexer(source, offset)
        self.current = next(self.tokens)

        self.scope = {}  # letter: depth of the innermost lambda binding it
        self.depth = 0

    def parse(self):
        """Parses the whole source as one term. Trailing tokens are an error."""
        node = self.node()
        if self.current.kind is not Kind.END:
            raise ParseError("expected end of input", self.current.position)
        return node

    def advance(self):
        token = self.current
        if token.kind is not Kind.END:
            self.current = next(self.tokens)
        return token

    def expect(self, kind):
        if self.current.kind is not kind:
            raise ParseError(f"expected {kind.value}", self.current.position)
        return self.advance()

    def node(self):
        if self.current.kind is Kind.LAMBDA:
            self.advance()
            return self.lambda_tail(self.expect(Kind.LETTER).value)
        return self.application()

    def lambda_tail(self, letter):
        """Parses the rest of an abstraction binding letter, with letter in scope for the body."""
        self.depth += 1
        previous = self.scope.get(letter)
        self.scope[letter] = self.depth
        try:
            if self.current.kind is Kind.LETTER:
                body = self.lambda_tail(self.advance().value)
            else:
                self.expect(Kind.DOT)
                body = self.node()
        finally:
            if previous is None:
                del self.scope[letter]
            else:
                self.scope[letter] = previous
            self.depth -= 1

        return Function(body)

    def application(self):
        result = self.unit()
        while self.current.kind in UNIT_START:
            result = Application(result, self.unit())
        return result

    def unit(self):
        token = self.current
        if token.kind is Kind.OPEN_PAREN:
            self.advance()
            node = self.node()
            self.expect(Kind.CLOSE_PAREN)
            return node

        elif token.kind is Kind.LETTER:
            self.advance()
            if token.value in self.scope:
                return BoundVariable(self.depth - self.scope[token.value])
            return FreeVariable(token.value)

        elif token.kind is Kind.NAME:
            self.advance()
            return Name(token.value, token.position)

        elif token.kind is Kind.NUMBER:
            self.advance()
            return cnumber(token.value)

        elif token.kind is Kind.END:
            raise ParseError("unexpected end of input", token.position)
        raise ParseError(f"unexpected token {token}", token.position)


def parse(source, offset=0):
    """Parses source into a Term. Raises LexError or ParseError, with positions shifted by offset."""
    return Parser(source, offset).parse()
