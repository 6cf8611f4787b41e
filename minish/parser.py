"""Minimal line parser for conditionals, redirections and pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class RedirectMode(Enum):
    APPEND = ">>"
    TRUNCATE = ">"
    READ = "<"

    @property
    def operator(self) -> str:
        return self.value


# ">>" must be tried before ">" so an append is never read as a truncate.
_REDIRECT_PRIORITY = (RedirectMode.APPEND, RedirectMode.TRUNCATE, RedirectMode.READ)


@dataclass
class CommandNode:
    text: str
    tokens: list[str] = field(default_factory=list)


@dataclass
class RedirectNode:
    command: str
    target: str
    mode: RedirectMode


@dataclass
class PipelineNode:
    stages: list[list[str]]


@dataclass
class ConditionalNode:
    groups: list[list["Node"]]


Node = Union[CommandNode, RedirectNode, PipelineNode, ConditionalNode]


def tokenize(text: str) -> list[str]:
    return text.split()


def parse_line(line: str) -> Node:
    """Classify ``line`` and build its parse tree.

    The first matching rule wins: ``&&``/``||`` make a conditional, then
    ``>``/``<`` a redirection, then ``|`` a pipeline, otherwise a plain
    command. Parsing never fails; malformed pieces surface when run.
    """

    text = line.strip()
    if "&&" in text or "||" in text:
        return _parse_conditional(text)
    if ">" in text or "<" in text:
        return _parse_redirect(text)
    if "|" in text:
        return PipelineNode(stages=[tokenize(segment) for segment in text.split("|")])
    return CommandNode(text=text, tokens=tokenize(text))


def _parse_conditional(text: str) -> ConditionalNode:
    groups: list[list[Node]] = []
    for and_part in text.split("&&"):
        alternatives = (part.strip() for part in and_part.split("||"))
        groups.append([parse_line(part) for part in alternatives if part])
    return ConditionalNode(groups=groups)


def _parse_redirect(text: str) -> RedirectNode:
    for mode in _REDIRECT_PRIORITY:
        if mode.operator in text:
            command, target = text.split(mode.operator, 1)
            return RedirectNode(command=command.strip(), target=target.strip(), mode=mode)
    raise ValueError(f"No redirection operator in {text!r}")


__all__ = [
    "CommandNode",
    "ConditionalNode",
    "Node",
    "PipelineNode",
    "RedirectMode",
    "RedirectNode",
    "parse_line",
    "tokenize",
]
