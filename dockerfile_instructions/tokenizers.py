"""Primitive tokenizers shared by every instruction parser.

A tokenizer is a function taking a ``Cursor`` and returning the cursor
after the match together with a ``Span`` over the matched text. A
tokenizer that cannot match raises ``TokenizeError`` at the position it
was given. Tokenizers never copy the input.
"""

import re
from typing import Callable, Pattern, Tuple

from .exceptions import TokenizeError
from .models import Cursor, Span

Tokenizer = Callable[[Cursor], Tuple[Cursor, Span]]

# Whitespace other than the line terminators CR and LF
_SPACE0 = re.compile(r"[^\S\r\n]*")
_SPACES = re.compile(r"[^\S\r\n]+")
_MULTISPACE = re.compile(r"\s*")
_ALPHA = re.compile(r"[A-Za-z]+")
_NOT_NEWLINE = re.compile(r"[^\r\n]*")
_NOT_SPACE = re.compile(r"\S+")


def _match(pattern: Pattern[str], expected: str) -> Tokenizer:
    """Build a tokenizer from a regex anchored at the cursor."""
    def tokenize(cursor: Cursor) -> Tuple[Cursor, Span]:
        match = pattern.match(cursor.text, cursor.offset)
        if match is None:
            raise TokenizeError(expected, cursor)
        rem = cursor.advance_to(match.end())
        return rem, cursor.span_to(rem)

    tokenize.__name__ = expected.replace(" ", "_")
    return tokenize


multispace0 = _match(_MULTISPACE, "whitespace")
space0 = _match(_SPACE0, "spaces")
space1 = _match(_SPACES, "one or more spaces")
alpha1 = _match(_ALPHA, "an instruction keyword")
consume_until_newline = _match(_NOT_NEWLINE, "end of line")
consume_until_space = _match(_NOT_SPACE, "a non-space token")


def delimited(before: Tokenizer, inner: Tokenizer, after: Tokenizer) -> Tokenizer:
    """Run three tokenizers in sequence and keep the middle match."""
    def tokenize(cursor: Cursor) -> Tuple[Cursor, Span]:
        rem, _ = before(cursor)
        rem, value = inner(rem)
        rem, _ = after(rem)
        return rem, value

    return tokenize


def space_wrapped(inner: Tokenizer) -> Tokenizer:
    """Skip any whitespace, run ``inner``, then require one or more spaces."""
    return delimited(multispace0, inner, space1)


def ws(inner: Tokenizer) -> Tokenizer:
    """Wrap ``inner`` so that whitespace around it is insignificant.

    Whitespace (newlines included) is skipped before and after ``inner``,
    and trailing whitespace is trimmed from the value it matched.
    """
    wrapped = delimited(multispace0, inner, multispace0)

    def tokenize(cursor: Cursor) -> Tuple[Cursor, Span]:
        rem, value = wrapped(cursor)
        return rem, value.rstrip()

    return tokenize


def trimmed_line(inner: Tokenizer) -> Tokenizer:
    """Wrap ``inner`` so that it only matches on the current line.

    Spaces before ``inner`` are skipped but a line break is not, so an
    argument never continues on the next line. Whitespace after ``inner``
    is skipped across line breaks and trimmed from the value.
    """
    wrapped = delimited(space0, inner, multispace0)

    def tokenize(cursor: Cursor) -> Tuple[Cursor, Span]:
        rem, value = wrapped(cursor)
        return rem, value.rstrip()

    return tokenize
