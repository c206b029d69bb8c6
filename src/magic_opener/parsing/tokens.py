"""String-cursor matching primitives used by the remote URL parser."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A prefix to match, either exactly or ignoring ASCII case."""

    text: str
    case_fold: bool = False

    @classmethod
    def literal(cls, text: str) -> "Token":
        return cls(text)

    @classmethod
    def fold(cls, text: str) -> "Token":
        return cls(text, case_fold=True)

    def strip_from(self, data: str) -> str | None:
        """Return `data` without this token as prefix, or None if it doesn't start with it."""
        if not self.case_fold:
            if data.startswith(self.text):
                return data[len(self.text):]
            return None

        size = len(self.text)
        prefix = data[:size]
        # A short prefix is a non-match
        if len(prefix) < size or not prefix.isascii():
            return None
        if prefix.lower() != self.text.lower():
            return None
        return data[size:]


def span(text: str, predicate: Callable[[str], bool]) -> tuple[str, str]:
    """Split `text` into its maximal prefix of chars matching `predicate` and the rest."""
    for index, char in enumerate(text):
        if not predicate(char):
            return text[:index], text[index:]
    return text, ""


class Cursor:
    """View over the unconsumed suffix of a string.

    Every successful match reassigns `remaining` to a shorter suffix;
    a failed match leaves it untouched.
    """

    def __init__(self, data: str) -> None:
        self.remaining = data

    def consume(self, token: Token) -> bool:
        rest = token.strip_from(self.remaining)
        if rest is None:
            return False
        self.remaining = rest
        return True

    def consume_seq(self, tokens: Iterable[Token]) -> bool:
        """Consume all of `tokens` in order, or none of them."""
        original = self.remaining
        for token in tokens:
            if not self.consume(token):
                self.remaining = original
                return False
        return True

    def maybe_consume(self, token: Token) -> None:
        self.consume(token)

    def advance_to(self, rest: str) -> None:
        self.remaining = rest

    @property
    def at_end(self) -> bool:
        return not self.remaining
