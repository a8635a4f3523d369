"""Custom exceptions for Dockerfile instruction parsing."""

import copyreg
from typing import Optional

from .config import settings
from .models import Cursor


class DockerfileParseError(Exception):
    """Base class for Dockerfile parse errors."""

    def __init__(self, message: str, cursor: Cursor, fragment_width: Optional[int] = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the failure
            cursor: Position at which the failure was detected
            fragment_width: Max characters of offending text to report
        """
        if fragment_width is None:
            fragment_width = settings.FRAGMENT_WIDTH

        self.message = message
        self.cursor = cursor
        self.offset = cursor.offset
        self.line, self.column = cursor.location()
        self.fragment = cursor.current_line()[:fragment_width]
        super().__init__(
            f"{message} at line {self.line}, column {self.column}: {self.fragment!r}"
        )

    def __reduce__(self):
        # Subclass constructors take different arguments, so restore the
        # attributes instead of calling __init__ again
        return copyreg.__newobj__, (type(self),), {**self.__dict__, "args": self.args}


class TokenizeError(DockerfileParseError):
    """Error raised when a primitive tokenizer does not match."""

    def __init__(self, expected: str, cursor: Cursor) -> None:
        """Initialize the error.

        Args:
            expected: What the tokenizer expected to find
            cursor: Position of the mismatch
        """
        self.expected = expected
        super().__init__(f"Expected {expected}", cursor)


class MalformedKeywordError(DockerfileParseError):
    """Error raised when no instruction keyword can be separated from its argument."""


class UnrecognizedInstructionError(DockerfileParseError):
    """Error raised when a keyword has no registered instruction."""

    def __init__(self, keyword: str, cursor: Cursor) -> None:
        """Initialize the error.

        Args:
            keyword: Keyword as written in the source
            cursor: Position at which the keyword starts
        """
        self.keyword = keyword
        super().__init__(f"Unrecognized instruction '{keyword}'", cursor)


class MalformedArgumentError(DockerfileParseError):
    """Error raised when an instruction's argument does not follow its rule."""

    def __init__(self, keyword: str, reason: str, cursor: Cursor) -> None:
        """Initialize the error.

        Args:
            keyword: Instruction keyword
            reason: Reason for the failure
            cursor: Position of the argument
        """
        self.keyword = keyword
        self.reason = reason
        super().__init__(f"Malformed {keyword.upper()} argument: {reason}", cursor)
