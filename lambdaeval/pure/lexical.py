"""Lexical analysis for pure lambda calculus terms.

Tokens are:

```
<letter>  ::= "a" | ... | "z"                  ; variable, always a single character
<name>    ::= <upper> (<upper> | <digit>)*     ; reference to a named definition
<number>  ::= <digit>+                         ; Church numeral literal
<builtin> ::= "\" | "λ" | "." | "(" | ")"
```

Whitespace separates tokens but is otherwise ignored. Adjacent tokens that could be read more than one way (`x1`,
`xY`, `3x`, `FOOx`) are rejected instead of being split silently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from lambdaeval.lang.error import LexError

# largest value the numeral decoder can report (unsigned 32 bit)
MAX_NUMERAL = 2 ** 32 - 1

WHITESPACE = " \t\n\r\f\v"


class Kind(Enum):
    LETTER = "letter"
    NAME = "name"
    NUMBER = "number"
    DOT = "'.'"
    LAMBDA = "'\\'"
    OPEN_PAREN = "'('"
    CLOSE_PAREN = "')'"
    END = "end of input"


BUILTINS = {
    ".": Kind.DOT,
    "\\": Kind.LAMBDA,
    "λ": Kind.LAMBDA,
    "(": Kind.OPEN_PAREN,
    ")": Kind.CLOSE_PAREN,
}


@dataclass(frozen=True)
class Token:
    kind: Kind
    value: Optional[Union[str, int]] = None
    position: int = 0

    def __str__(self):
        if self.kind is Kind.END:
            return self.kind.value
        if self.kind in (Kind.LETTER, Kind.NAME, Kind.NUMBER):
            return f"'{self.value}'"
        return self.kind.value


def is_lower(char):
    return "a" <= char <= "z"


def is_upper(char):
    return "A" <= char <= "Z"


def is_digit(char):
    return "0" <= char <= "9"


class Lexer:
    """Iterator of Tokens over source, ending with exactly one END token. offset is added to every reported position,
    so that a fragment of a longer line can be lexed with positions relative to the whole line.
    """

    def __init__(self, source, offset=0):
        self.source = source
        self.offset = offset
        self.idx = 0
        self.done = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.done:
            raise StopIteration

        self._skip_whitespace()
        if self.idx >= len(self.source):
            self.done = True
            return Token(Kind.END, position=self._pos(self.idx))

        char = self.source[self.idx]
        if is_digit(char):
            return self._number()
        elif is_lower(char):
            return self._letter()
        elif is_upper(char):
            return self._name()
        elif char in BUILTINS:
            self.idx += 1
            return Token(BUILTINS[char], char, self._pos(self.idx - 1))

        raise LexError(f"invalid token '{char}'", self._pos(self.idx))

    def _pos(self, idx):
        return self.offset + idx

    def _peek(self):
        """Character at the current index, or '' past the end of source."""
        return self.source[self.idx] if self.idx < len(self.source) else ""

    def _skip_whitespace(self):
        while self.idx < len(self.source) and self.source[self.idx] in WHITESPACE:
            self.idx += 1

    def _number(self):
        start = self.idx
        value = 0
        while is_digit(self._peek()):
            value = value * 10 + int(self._peek())
            self.idx += 1

        follower = self._peek()
        if is_lower(follower) or is_upper(follower):
            raise LexError("invalid number", self._pos(self.idx))
        if value > MAX_NUMERAL:
            raise LexError("integer literal too large", self._pos(start))
        return Token(Kind.NUMBER, value, self._pos(start))

    def _letter(self):
        char = self._peek()
        self.idx += 1

        follower = self._peek()
        if is_digit(follower) or is_upper(follower):
            raise LexError(f"'{char}' cannot be directly followed by '{follower}'", self._pos(self.idx))
        return Token(Kind.LETTER, char, self._pos(self.idx - 1))

    def _name(self):
        start = self.idx
        while is_upper(self._peek()) or is_digit(self._peek()):
            self.idx += 1

        if is_lower(self._peek()):
            raise LexError("names cannot contain lowercase letters", self._pos(self.idx))
        return Token(Kind.NAME, self.source[start:self.idx], self._pos(start))


def tokenize(source, offset=0):
    """Returns all tokens of source, including the final END token."""
    return list(Lexer(source, offset))
