"""Token resolvers: a plain table-backed one, and a caller-owned prefetch pass.

TokenTable maps role names to colour strings per theme. Dark lookups try the
dark table first and fall back to the light (shared) table, so a dark theme
only has to list the roles it overrides.

prefetch() resolves every role a batch of cases needs exactly once and returns
a ResolvedTokens snapshot that is itself a resolver. Use it in front of a slow
or networked resolver so the audit itself never waits on I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from contrast_checker.core.audit import expand_cases
from contrast_checker.core.types import CaseDataError, ColorTokenResolver, ColourValue, ResolutionError, TestCase


class TokenTable:
    """Resolve role names against light and dark token mappings."""

    def __init__(self, light: Mapping[str, str], dark: Mapping[str, str] | None = None):
        self.light = dict(_check_table(light, 'light'))
        self.dark = dict(_check_table(dark or {}, 'dark'))

    def __call__(self, role: str, is_dark: bool) -> str:
        return self.resolve(role, is_dark)

    def resolve(self, role: str, is_dark: bool) -> str:
        if is_dark and role in self.dark:
            return self.dark[role]
        if role in self.light:
            return self.light[role]
        raise ResolutionError(role, is_dark)

    def roles(self) -> set[str]:
        return set(self.light) | set(self.dark)

    def __repr__(self) -> str:
        return f'TokenTable(light={len(self.light)} roles, dark={len(self.dark)} roles)'


def _check_table(table: object, theme: str) -> Mapping[str, str]:
    if not isinstance(table, Mapping):
        raise CaseDataError(f'{theme} token table must be an object, got {type(table).__name__}')
    for role, value in table.items():
        if not isinstance(role, str) or not isinstance(value, str):
            raise CaseDataError(f'{theme} token {role!r} must map a string to a colour string, got {value!r}')
    return table


class ResolvedTokens:
    """An immutable snapshot of resolved roles, usable as a resolver."""

    def __init__(
        self,
        values: Mapping[tuple[str, bool], ColourValue],
        errors: Mapping[tuple[str, bool], ResolutionError],
    ):
        self._values = dict(values)
        self._errors = dict(errors)

    def __call__(self, role: str, is_dark: bool) -> ColourValue:
        key = (role, is_dark)
        if key in self._values:
            return self._values[key]
        if key in self._errors:
            raise self._errors[key]
        raise ResolutionError(role, is_dark, 'not prefetched')

    def __len__(self) -> int:
        return len(self._values)

    @property
    def errors(self) -> dict[tuple[str, bool], ResolutionError]:
        return dict(self._errors)


def prefetch(cases: Iterable[TestCase], resolve: ColorTokenResolver) -> ResolvedTokens:
    """Resolve every (role, theme) pair the cases need, once each."""
    values: dict[tuple[str, bool], ColourValue] = {}
    errors: dict[tuple[str, bool], ResolutionError] = {}
    for case in expand_cases(cases):
        is_dark = case.context.is_dark
        for role in (case.foreground, case.background):
            key = (role, is_dark)
            if key in values or key in errors:
                continue
            try:
                values[key] = resolve(role, is_dark)
            except ResolutionError as exc:
                errors[key] = exc
    return ResolvedTokens(values, errors)
