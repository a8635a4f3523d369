"""Tests for the instruction and cursor models."""

import dataclasses

import pytest

from dockerfile_instructions.models import Cursor, Dockerfile, From, Run, Span


def test_cursor_location():
    """Test line and column are 1-based."""
    text = "FROM a\n\n  RUN b"
    assert Cursor(text, 0).location() == (1, 1)
    assert Cursor(text, 5).location() == (1, 6)
    assert Cursor(text, 7).location() == (2, 1)
    assert Cursor(text, 10).location() == (3, 3)


def test_cursor_current_line():
    """Test the current line stops before any line terminator."""
    text = "RUN a\r\nRUN b"
    assert Cursor(text, 0).current_line() == "RUN a"
    assert Cursor(text, 4).current_line() == "a"
    assert Cursor(text, 7).current_line() == "RUN b"
    assert Cursor(text, len(text)).current_line() == ""


def test_cursor_rest_and_blank():
    """Test remainder helpers."""
    cursor = Cursor("RUN a\n  \n", 5)
    assert cursor.rest == "\n  \n"
    assert cursor.is_blank()
    assert not cursor.at_end
    assert cursor.peek() == "\n"
    assert Cursor("", 0).is_blank()
    assert Cursor("", 0).peek() == ""
    assert not Cursor("  x", 0).is_blank()


def test_span_view():
    """Test spans slice the source lazily."""
    source = "RUN  echo hi  "
    span = Span(source, 5, 14)
    assert span.text == "echo hi  "
    assert str(span.rstrip(" ")) == "echo hi"
    assert len(span.rstrip(" ")) == 7
    assert Span(source, 0, 0).rstrip(" ").text == ""


def test_span_rstrip_defaults_to_whitespace():
    """Test trailing whitespace of any kind is dropped by default."""
    source = "make \t\f\v\xa0"
    assert Span(source, 0, len(source)).rstrip().text == "make"
    assert Span(source, 0, len(source)).rstrip(" ").text == source


def test_instruction_equality_ignores_span():
    """Test instructions compare by argument only."""
    parsed = From("ubuntu", span=Span("FROM ubuntu", 5, 11))
    assert parsed == From("ubuntu")
    assert parsed != Run("ubuntu")


def test_instructions_are_immutable():
    """Test instructions cannot be modified after parsing."""
    inst = Run("make")
    with pytest.raises(dataclasses.FrozenInstanceError):
        inst.command = "make install"


def test_to_line():
    """Test instructions render as keyword, space, argument."""
    assert From("ubuntu:22.04").to_line() == "FROM ubuntu:22.04"
    assert Run('echo "x"').to_line() == 'RUN echo "x"'


def test_dockerfile_accessors():
    """Test Dockerfile sequence helpers."""
    dockerfile = Dockerfile((From("node:16"), Run("npm ci"), From("nginx"), Run("nginx -t")))

    assert len(dockerfile) == 4
    assert dockerfile[1] == Run("npm ci")
    assert list(dockerfile)[0] == From("node:16")
    assert dockerfile.base_image == "node:16"
    assert dockerfile.of_kind(From) == (From("node:16"), From("nginx"))
    assert dockerfile.of_kind(Run) == (Run("npm ci"), Run("nginx -t"))
    assert dockerfile.to_text() == "FROM node:16\nRUN npm ci\nFROM nginx\nRUN nginx -t\n"


def test_empty_dockerfile():
    """Test an empty Dockerfile has no base image."""
    dockerfile = Dockerfile()
    assert len(dockerfile) == 0
    assert dockerfile.base_image is None
    assert dockerfile.to_text() == ""
