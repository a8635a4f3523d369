"""Dockerfile instruction parser.

This package turns Dockerfile-like build scripts into typed instructions.
``parse_instruction`` consumes one instruction and returns it with the
remaining input; ``parse_dockerfile`` repeats it over a whole document.
New instruction kinds are added with the ``instruction`` decorator.
"""

from loguru import logger

# Silent until the application opts in with configure_logging()
logger.disable(__name__)

from .config import ParserSettings, configure_logging, settings
from .document import iter_instructions, parse_dockerfile, parse_dockerfile_file
from .exceptions import (
    DockerfileParseError,
    MalformedArgumentError,
    MalformedKeywordError,
    TokenizeError,
    UnrecognizedInstructionError,
)
from .models import Cursor, Dockerfile, From, Instruction, Run, Span
from .parser import (
    get_strategy,
    instruction,
    parse_instruction,
    register_instruction,
    registered_keywords,
    unregister_instruction,
)

__all__ = [
    "ParserSettings",
    "configure_logging",
    "settings",
    "iter_instructions",
    "parse_dockerfile",
    "parse_dockerfile_file",
    "DockerfileParseError",
    "MalformedArgumentError",
    "MalformedKeywordError",
    "TokenizeError",
    "UnrecognizedInstructionError",
    "Cursor",
    "Dockerfile",
    "From",
    "Instruction",
    "Run",
    "Span",
    "get_strategy",
    "instruction",
    "parse_instruction",
    "register_instruction",
    "registered_keywords",
    "unregister_instruction",
]
