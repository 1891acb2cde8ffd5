"""Minimal line parser: whitespace splitting only."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    args: tuple[str, ...] = field(default_factory=tuple)


def _tokenize(line: str) -> list[str]:
    # Runs of spaces are not collapsed; each extra space yields an empty token.
    return line.strip().split(" ")


def parse_line(line: str) -> ParsedCommand:
    name, *args = _tokenize(line)
    return ParsedCommand(name=name, args=tuple(args))


__all__ = ["ParsedCommand", "parse_line"]
