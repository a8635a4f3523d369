"""Test configuration and fixtures."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

import pytest

from dockerfile_instructions.models import Cursor, Instruction
from dockerfile_instructions.parser import (
    parse_argument,
    register_instruction,
    unregister_instruction,
)
from dockerfile_instructions.tokenizers import consume_until_space, trimmed_line

SAMPLE_DOCKERFILE = """
FROM python:3.12-slim

RUN apt-get update && apt-get install -y gcc
RUN pip install -r requirements.txt

FROM nginx:alpine
RUN echo "done"
"""


@dataclass(frozen=True)
class Expose(Instruction):
    """Stricter instruction kind used to exercise custom registrations."""

    keyword: ClassVar[str] = "EXPOSE"

    port: str

    @property
    def argument(self) -> str:
        return self.port


def parse_expose(cursor: Cursor) -> Tuple[Cursor, Expose]:
    rem, port = parse_argument(Expose.keyword, trimmed_line(consume_until_space), cursor)
    return rem, Expose(port.text)


@pytest.fixture
def sample_dockerfile() -> str:
    """Provide a small multi-stage Dockerfile."""
    return SAMPLE_DOCKERFILE


@pytest.fixture
def expose_instruction():
    """Register an EXPOSE instruction for the duration of a test."""
    register_instruction(Expose.keyword, parse_expose)
    yield Expose
    unregister_instruction(Expose.keyword)
