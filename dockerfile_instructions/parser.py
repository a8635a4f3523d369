"""Instruction parser: keyword dispatch and per-instruction strategies."""

from typing import Callable, Dict, List, Optional, Tuple, Union

from loguru import logger

from .exceptions import (
    MalformedArgumentError,
    MalformedKeywordError,
    TokenizeError,
    UnrecognizedInstructionError,
)
from .models import Cursor, From, Instruction, Run, Span
from .tokenizers import Tokenizer, alpha1, consume_until_newline, multispace0, space_wrapped, trimmed_line

logger = logger.bind(name=__name__)

Strategy = Callable[[Cursor], Tuple[Cursor, Instruction]]

keyword_token = space_wrapped(alpha1)

# Lowercase keyword -> strategy. Filled at import time by @instruction.
_REGISTRY: Dict[str, Strategy] = {}


def register_instruction(keyword: str, strategy: Strategy, replace: bool = False) -> Strategy:
    """Register the parsing strategy of an instruction kind.

    Args:
        keyword: Instruction keyword, in any case
        strategy: Function parsing the argument that follows the keyword
        replace: Allow overriding an existing registration

    Returns:
        Strategy: The registered strategy, unchanged

    Raises:
        ValueError: If the keyword is not alphabetic or is already registered
    """
    name = keyword.lower()
    if not name.isalpha() or not name.isascii():
        raise ValueError(f"Instruction keyword must be alphabetic: {keyword!r}")
    if name in _REGISTRY and not replace:
        raise ValueError(f"Instruction '{keyword.upper()}' is already registered")

    _REGISTRY[name] = strategy
    logger.debug(f"Registered instruction {name.upper()} -> {strategy.__name__}")
    return strategy


def unregister_instruction(keyword: str) -> None:
    """Remove an instruction kind from the registry."""
    _REGISTRY.pop(keyword.lower(), None)


def instruction(keyword: str, replace: bool = False) -> Callable[[Strategy], Strategy]:
    """Decorator form of ``register_instruction``."""
    def decorator(strategy: Strategy) -> Strategy:
        return register_instruction(keyword, strategy, replace=replace)
    return decorator


def get_strategy(keyword: str) -> Optional[Strategy]:
    """Look up the strategy of a keyword, ignoring case."""
    return _REGISTRY.get(keyword.lower())


def registered_keywords() -> List[str]:
    """Get the registered keywords, uppercased and sorted."""
    return sorted(name.upper() for name in _REGISTRY)


def parse_argument(keyword: str, rule: Tokenizer, cursor: Cursor) -> Tuple[Cursor, Span]:
    """Apply an instruction's argument rule at ``cursor``.

    Args:
        keyword: Keyword of the instruction being parsed
        rule: Tokenizer extracting the argument
        cursor: Position right after the keyword's separating space

    Returns:
        Tuple[Cursor, Span]: Remainder and argument

    Raises:
        MalformedArgumentError: If the rule does not match
    """
    try:
        return rule(cursor)
    except TokenizeError as e:
        raise MalformedArgumentError(keyword, f"expected {e.expected}", e.cursor) from e


def parse_keyword(cursor: Cursor) -> Tuple[Cursor, Span]:
    """Recognize an instruction keyword and its separating space.

    Returns:
        Tuple[Cursor, Span]: Position of the argument and the keyword

    Raises:
        MalformedKeywordError: If no keyword starts here or no space follows it
    """
    start, _ = multispace0(cursor)
    try:
        return keyword_token(start)
    except TokenizeError as e:
        # Reported at the keyword start so the fragment shows the whole word
        raise MalformedKeywordError(f"Malformed instruction keyword, expected {e.expected}", start) from e


def parse_instruction(source: Union[str, Cursor]) -> Tuple[Cursor, Instruction]:
    """Parse the next instruction of a Dockerfile.

    Args:
        source: Dockerfile text, or the remainder returned by a previous call

    Returns:
        Tuple[Cursor, Instruction]: Unconsumed remainder and the parsed instruction

    Raises:
        MalformedKeywordError: If no keyword followed by a space is found
        UnrecognizedInstructionError: If the keyword has no registered strategy
        MalformedArgumentError: If the instruction's argument rule fails
    """
    cursor = source if isinstance(source, Cursor) else Cursor(source)

    try:
        rem, keyword = parse_keyword(cursor)
    except MalformedKeywordError as e:
        logger.debug(f"Malformed keyword at offset {e.offset}: {e.message}")
        raise

    strategy = get_strategy(keyword.text)
    if strategy is None:
        logger.debug(f"No instruction registered for '{keyword.text}' at offset {keyword.start}")
        raise UnrecognizedInstructionError(keyword.text, cursor.advance_to(keyword.start))

    logger.debug(f"Dispatching {keyword.text.upper()} at offset {keyword.start} to {strategy.__name__}")
    try:
        return strategy(rem)
    except MalformedArgumentError as e:
        logger.debug(f"Malformed {e.keyword} argument at offset {e.offset}: {e.reason}")
        raise


rest_of_line = trimmed_line(consume_until_newline)


@instruction(From.keyword)
def parse_from(cursor: Cursor) -> Tuple[Cursor, From]:
    """Parse the image of a FROM instruction: the trimmed rest of the line."""
    rem, image = parse_argument(From.keyword, rest_of_line, cursor)
    return rem, From(image.text, span=image)


@instruction(Run.keyword)
def parse_run(cursor: Cursor) -> Tuple[Cursor, Run]:
    """Parse the command of a RUN instruction: the trimmed rest of the line."""
    rem, command = parse_argument(Run.keyword, rest_of_line, cursor)
    return rem, Run(command.text, span=command)
