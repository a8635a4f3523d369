"""Data models for Dockerfile instruction parsing."""

import re
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Tuple, Type, TypeVar

_LINE_END = re.compile(r"[\r\n]")
_NON_SPACE = re.compile(r"\S")

I = TypeVar("I", bound="Instruction")


@dataclass(frozen=True)
class Span:
    """A view of ``source[start:end]`` that does not copy the source."""

    source: str = field(repr=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def rstrip(self, chars: Optional[str] = None) -> "Span":
        """Return the span with trailing ``chars`` dropped, whitespace by default."""
        end = self.end
        while end > self.start and (
            self.source[end - 1].isspace() if chars is None else self.source[end - 1] in chars
        ):
            end -= 1
        return Span(self.source, self.start, end)


@dataclass(frozen=True)
class Cursor:
    """Position in a caller-owned input buffer.

    The remainder of the input is ``text[offset:]``. Advancing a cursor
    only moves the offset, the buffer itself is shared by every cursor
    derived from it.
    """

    text: str = field(repr=False)
    offset: int = 0

    @property
    def rest(self) -> str:
        """The unconsumed input, materialized as a string."""
        return self.text[self.offset:]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or an empty string at end of input."""
        return self.text[self.offset:self.offset + 1]

    def advance_to(self, offset: int) -> "Cursor":
        return Cursor(self.text, offset)

    def span_to(self, other: "Cursor") -> Span:
        """Span covering the input between this cursor and ``other``."""
        return Span(self.text, self.offset, other.offset)

    def is_blank(self) -> bool:
        """Check if only whitespace remains."""
        return _NON_SPACE.search(self.text, self.offset) is None

    def location(self) -> Tuple[int, int]:
        """Get the 1-based line and column of the cursor."""
        line = self.text.count("\n", 0, self.offset) + 1
        line_start = self.text.rfind("\n", 0, self.offset) + 1
        return line, self.offset - line_start + 1

    def current_line(self) -> str:
        """Text from the cursor to the end of its line."""
        match = _LINE_END.search(self.text, self.offset)
        end = match.start() if match else len(self.text)
        return self.text[self.offset:end]


@dataclass(frozen=True)
class Instruction:
    """Base class of every parsed Dockerfile instruction.

    Subclasses are the variants of the instruction union. Each declares
    its ``keyword`` and exposes its payload through ``argument``.
    """

    keyword: ClassVar[str] = ""

    @property
    def argument(self) -> str:
        """Payload text of the instruction. Subclasses must override it."""
        raise NotImplementedError

    def to_line(self) -> str:
        """Render the instruction back to a single Dockerfile line."""
        return f"{self.keyword} {self.argument}"


@dataclass(frozen=True)
class From(Instruction):
    """FROM instruction: the base image of a build."""

    keyword: ClassVar[str] = "FROM"

    image: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    @property
    def argument(self) -> str:
        return self.image


@dataclass(frozen=True)
class Run(Instruction):
    """RUN instruction: a shell command executed at build time."""

    keyword: ClassVar[str] = "RUN"

    command: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    @property
    def argument(self) -> str:
        return self.command


@dataclass(frozen=True)
class Dockerfile:
    """Ordered instructions of a Dockerfile, in document order."""

    instructions: Tuple[Instruction, ...] = ()

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    @property
    def base_image(self) -> Optional[str]:
        """Image of the first FROM instruction, if any."""
        for inst in self.of_kind(From):
            return inst.image
        return None

    def of_kind(self, kind: Type[I]) -> Tuple[I, ...]:
        """Get the instructions of a single kind, in document order."""
        return tuple(inst for inst in self.instructions if isinstance(inst, kind))

    def to_text(self) -> str:
        """Render the Dockerfile, one instruction per line."""
        return "".join(f"{inst.to_line()}\n" for inst in self.instructions)
