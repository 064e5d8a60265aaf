"""Shared types for contrast-tool: colours, test cases, results, errors, Command."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ContrastError(Exception):
    """Base class for every error raised by contrast_checker."""


class ColourFormatError(ContrastError, ValueError):
    """A colour string could not be parsed."""


class InvalidHexError(ColourFormatError):
    """A hex colour string has the wrong length or non-hex characters."""


class CaseDataError(ContrastError, ValueError):
    """A test case or token table is malformed."""


class ResolutionError(ContrastError, LookupError):
    """The token resolver cannot satisfy a role name."""

    def __init__(self, role: str, is_dark: bool, reason: str = 'unknown role'):
        self.role = role
        self.is_dark = is_dark
        self.reason = reason
        theme = 'dark' if is_dark else 'light'
        super().__init__(f'{role!r} ({theme}): {reason}')


@dataclass(frozen=True)
class PerceptualColor:
    """An OKLCH coordinate. Not range-checked: conversion saturates instead."""

    lightness: float  # 0..1
    chroma: float  # >= 0
    hue: float  # degrees


@dataclass(frozen=True)
class RGB8:
    """An 8-bit sRGB colour. Channels must be ints in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            # bool is an int subclass but never a channel value
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'RGB8.{name} must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'RGB8.{name} out of range [0, 255]: {value}')

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b


# What a resolver may hand back for a role: a parsed colour or a colour string.
ColourValue = Union[PerceptualColor, RGB8, str]

ColorTokenResolver = Callable[[str, bool], ColourValue]


class TextSize(Enum):
    NORMAL = 'normal'
    LARGE = 'large'  # 18pt regular or 14pt bold


class Context(Enum):
    LIGHT = 'light'
    DARK = 'dark'
    BOTH = 'both'

    @property
    def is_dark(self) -> bool:
        return self is Context.DARK


@dataclass(frozen=True)
class TestCase:
    """One declared foreground/background pairing to audit."""

    __test__ = False  # not a pytest class

    foreground: str
    background: str
    description: str
    min_ratio: float = 4.5
    context: Context = Context.BOTH

    def __post_init__(self) -> None:
        for name in ('foreground', 'background'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise CaseDataError(f'TestCase.{name} must be a non-empty string, got {value!r}')
        if not isinstance(self.description, str):
            raise CaseDataError(f'TestCase.description must be a string, got {self.description!r}')
        if isinstance(self.min_ratio, bool) or not isinstance(self.min_ratio, (int, float)):
            raise CaseDataError(f'TestCase.min_ratio must be a number, got {self.min_ratio!r}')
        if not 1.0 <= self.min_ratio <= 21.0:
            raise CaseDataError(f'TestCase.min_ratio must be within [1, 21], got {self.min_ratio}')
        if not isinstance(self.context, Context):
            raise CaseDataError(f'TestCase.context must be a Context, got {self.context!r}')


class Recommendation(str, Enum):
    """Remediation attached to a failing audit result."""

    ADD_OVERLAY = 'add-overlay'
    ALTERNATE_VARIANT = 'alternate-variant'
    RECONSIDER_PAIRING = 'reconsider-pairing'
    RESOLUTION_ERROR = 'resolution-error'


class AdjustmentAction(str, Enum):
    ALREADY_COMPLIANT = 'already-compliant'
    LIGHTEN = 'lighten'
    DARKEN = 'darken'
    RECONSIDER_PAIRING = 'reconsider-pairing'


@dataclass(frozen=True)
class Adjustment:
    """Outcome of a foreground adjustment search."""

    action: AdjustmentAction
    adjusted: RGB8 | None  # only ever set to a colour verified against the target
    ratio: float  # ratio of `adjusted` if set, otherwise of the last colour tried
    iterations: int = 0


@dataclass(frozen=True)
class ContrastResult:
    """One evaluated case. `case.context` is always LIGHT or DARK here."""

    case: TestCase
    ratio: float | None  # None when the roles could not be resolved
    passes: bool
    recommendation: Recommendation | None = None
    error: str | None = None


@dataclass(frozen=True)
class AuditSummary:
    total: int = 0
    passed: int = 0
    failed: int = 0
    critical_failures: tuple[ContrastResult, ...] = ()


@dataclass(frozen=True)
class AuditReport:
    """Results in input order plus their summary. Recomputed on every run."""

    results: tuple[ContrastResult, ...] = ()
    summary: AuditSummary = field(default_factory=AuditSummary)


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='contrast', help='Contrast ratio of two colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument('fg')

        @command.run
        def run(args):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable[[Any], int | None] | None = None
        self._arguments_fn: Callable[[Any], None] | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse configuration function."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function, returning its exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        code = self._run_fn(args)
        return 0 if code is None else code
