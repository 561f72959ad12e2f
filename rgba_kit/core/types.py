"""Shared types for rgba-kit: Command and Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rgba_kit.core.env import Settings


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='mix', help='Blend two colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument('into')

        @command.run
        def run(report, args, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function adding argparse arguments."""
        self._args_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any, settings: Settings) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args, settings)


@dataclass
class Report:
    """Accumulates per-colour results for text/JSON output."""

    command: str = ''
    subjects: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, subject: str, data: dict[str, Any]) -> None:
        """Add (or extend) the results for a subject."""
        self.subjects.setdefault(subject, {}).update(data)

    def record_pass(self, subject: str) -> None:
        self.pass_count += 1

    def record_fail(self, subject: str) -> None:
        self.fail_count += 1


def positive_int(text: str) -> int:
    """argparse type: an integer >= 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {value}')
    return value


def non_negative_int(text: str) -> int:
    """argparse type: an integer >= 0."""
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f'must not be negative, got {value}')
    return value
