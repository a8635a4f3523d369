"""Example script demonstrating how to parse a Dockerfile."""

from pprint import pprint

from loguru import logger

from dockerfile_instructions import (
    DockerfileParseError,
    From,
    Run,
    configure_logging,
    parse_instruction,
)
from dockerfile_instructions.models import Cursor


def parse_all(text: str) -> list:
    """Parse a Dockerfile step by step, feeding back each remainder.

    Args:
        text: Dockerfile content

    Returns:
        List of dicts describing each instruction
    """
    results = []
    cursor = Cursor(text)
    while not cursor.is_blank():
        cursor, inst = parse_instruction(cursor)
        line, _ = Cursor(text, inst.span.start).location()
        results.append({"type": inst.keyword, "value": inst.argument, "line": line})
    return results


def main():
    """Run the example."""
    logger.remove()  # Remove default handler
    configure_logging()

    dockerfile = """FROM python:3.12-slim

RUN pip install -r requirements.txt
run   python -m compileall /app
"""

    print("\nParsing Dockerfile:")
    print("=" * 50)
    print(dockerfile)

    try:
        results = parse_all(dockerfile)
        print("\nInstructions:")
        print("=" * 50)
        pprint(results)
        print(f"\nFROM count: {sum(r['type'] == From.keyword for r in results)}")
        print(f"RUN count: {sum(r['type'] == Run.keyword for r in results)}")

        # Unknown instructions stop parsing with a located error
        parse_all(dockerfile + "COPY . /app\n")
    except DockerfileParseError as e:
        print(f"\nError parsing Dockerfile: {e}")


if __name__ == "__main__":
    main()
