"""JSON loader for audit files: test cases, token tables, critical marker.

Layout:

    {
      "name": "Modern Hearth",
      "critical": {"marker": "coral", "context": "dark"},
      "tokens": {"light": {"role": "oklch(58% 0.08 200)"}, "dark": {...}},
      "cases": [
        {"foreground": "accent-coral", "background": "dark-surface",
         "description": "Coral accent on dark mode surface",
         "min_ratio": 4.5, "context": "dark"}
      ]
    }

Only "cases" is required. A case may give "text_size": "large" instead of
"min_ratio" (AA for that size). Any structural problem raises CaseDataError.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from typing import Any

from contrast_checker.core.conformance import threshold
from contrast_checker.core.tokens import TokenTable
from contrast_checker.core.types import CaseDataError, Context, TestCase, TextSize

DEFAULT_AUDIT = 'modern_hearth.json'


@dataclass(frozen=True)
class AuditSpec:
    """A parsed audit file."""

    name: str
    cases: tuple[TestCase, ...] = ()
    tokens: TokenTable | None = None
    critical_marker: str | None = None
    critical_context: Context | None = None
    source: str | None = field(default=None, compare=False)  # path it was read from


def parse_audit_file(path: str) -> AuditSpec:
    """Parse an audit file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_audit_string(text, source=path)


def load_default_audit() -> AuditSpec:
    """The audit bundled with the package."""
    text = resources.files('contrast_checker.data').joinpath(DEFAULT_AUDIT).read_text(encoding='utf-8')
    return parse_audit_string(text, source=DEFAULT_AUDIT)


def parse_audit_string(text: str, source: str | None = None) -> AuditSpec:
    """Parse an audit spec from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CaseDataError(f'{source or "audit"}: invalid JSON: {exc}') from exc
    if not isinstance(data, dict):
        raise CaseDataError(f'{source or "audit"}: top level must be an object')

    raw_cases = data.get('cases')
    if not isinstance(raw_cases, list):
        raise CaseDataError(f'{source or "audit"}: "cases" must be a list')
    cases = tuple(_parse_case(raw, i) for i, raw in enumerate(raw_cases))

    marker, context = _parse_critical(data.get('critical'))
    return AuditSpec(
        name=str(data.get('name') or 'unnamed'),
        cases=cases,
        tokens=_parse_tokens(data.get('tokens')),
        critical_marker=marker,
        critical_context=context,
        source=source,
    )


def parse_context(value: Any) -> Context:
    """'light' | 'dark' | 'both' (any case) -> Context."""
    if isinstance(value, Context):
        return value
    try:
        return Context(str(value).strip().lower())
    except ValueError:
        raise CaseDataError(f'Unknown context {value!r}. Expected light, dark or both') from None


def _parse_case(raw: Any, index: int) -> TestCase:
    if not isinstance(raw, dict):
        raise CaseDataError(f'case {index}: must be an object')
    missing = [k for k in ('foreground', 'background') if k not in raw]
    if missing:
        raise CaseDataError(f'case {index}: missing {", ".join(missing)}')

    if 'min_ratio' in raw:
        min_ratio = raw['min_ratio']
    elif 'text_size' in raw:
        try:
            size = TextSize(str(raw['text_size']).lower())
        except ValueError:
            raise CaseDataError(f'case {index}: unknown text_size {raw["text_size"]!r}') from None
        min_ratio = threshold('AA', size)
    else:
        min_ratio = threshold('AA', TextSize.NORMAL)

    description = raw.get('description') or f'{raw["foreground"]} on {raw["background"]}'
    try:
        return TestCase(
            foreground=raw['foreground'],
            background=raw['background'],
            description=description,
            min_ratio=min_ratio,
            context=parse_context(raw.get('context', 'both')),
        )
    except CaseDataError as exc:
        raise CaseDataError(f'case {index}: {exc}') from exc


def _parse_tokens(raw: Any) -> TokenTable | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise CaseDataError('"tokens" must be an object with "light" and optional "dark" tables')
    return TokenTable(light=raw.get('light', {}), dark=raw.get('dark', {}))


def _parse_critical(raw: Any) -> tuple[str | None, Context | None]:
    if raw is None:
        return None, None
    if isinstance(raw, str):
        return raw, None
    if not isinstance(raw, dict) or not isinstance(raw.get('marker'), str):
        raise CaseDataError('"critical" must be a marker string or {"marker": ..., "context": ...}')
    context = raw.get('context')
    return raw['marker'], parse_context(context) if context is not None else None
