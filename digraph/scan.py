"""Token readers for serialized edge lists."""

from typing import Iterable, Iterator, TextIO, Tuple

from digraph.errors import LoadFailure

Token = Tuple[int, str]


def read_tokens(stream: TextIO) -> Iterator[Token]:
    """Yield (line number, token) for each whitespace-separated token."""
    for lineno, line in enumerate(stream, start=1):
        for token in line.split():
            yield lineno, token


def read_ints(source: str, tokens: Iterable[Token]) -> Iterator[int]:
    """Convert tokens from read_tokens to integers, one at a time.

    Only tokens actually requested are converted, so the caller can stop and
    inspect what is left in the underlying token stream. Raises LoadFailure
    naming the source and line if a token is not an integer.
    """
    for lineno, token in tokens:
        try:
            yield int(token)
        except ValueError:
            raise LoadFailure(
                source, f"line {lineno}: expected integer, got {token!r}"
            ) from None
