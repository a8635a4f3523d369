"""Assembly of whole Dockerfiles from successive instruction parses."""

from pathlib import Path
from typing import Iterator, Optional, Union

from loguru import logger

from .config import settings
from .models import Cursor, Dockerfile, Instruction
from .parser import parse_instruction

logger = logger.bind(name=__name__)


def iter_instructions(text: str) -> Iterator[Instruction]:
    """Yield the instructions of ``text`` in document order.

    Each instruction is parsed from the remainder left by the previous one.
    Iteration stops when only whitespace remains; the first parse error is
    raised as is.
    """
    cursor = Cursor(text)
    while not cursor.is_blank():
        cursor, inst = parse_instruction(cursor)
        yield inst


def parse_dockerfile(text: str) -> Dockerfile:
    """Parse Dockerfile content into its instructions.

    Args:
        text: Dockerfile content as string

    Returns:
        Dockerfile: Parsed instructions, in document order

    Raises:
        DockerfileParseError: On the first instruction that fails to parse
    """
    dockerfile = Dockerfile(tuple(iter_instructions(text)))
    logger.debug(f"Parsed {len(dockerfile)} instructions")
    return dockerfile


def parse_dockerfile_file(path: Union[str, Path], encoding: Optional[str] = None) -> Dockerfile:
    """Read a Dockerfile from disk and parse it.

    Args:
        path: Path to the Dockerfile
        encoding: File encoding, defaults to the configured one

    Returns:
        Dockerfile: Parsed instructions

    Raises:
        FileNotFoundError: If the Dockerfile doesn't exist
        DockerfileParseError: If the content fails to parse
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dockerfile not found: {path}")

    logger.debug(f"Reading Dockerfile {path}")
    return parse_dockerfile(path.read_text(encoding=encoding or settings.ENCODING))
