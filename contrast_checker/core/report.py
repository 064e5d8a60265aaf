"""Report builder — records, text, Markdown and JSON output for audit results.

The audit itself only produces structured values. All human-readable wording
for recommendations and adjustments lives here.
"""

import json
from datetime import datetime, timezone
from typing import Any

from contrast_checker.core.colorspace import rgb8_to_hex
from contrast_checker.core.types import Adjustment, AdjustmentAction, AuditReport, ContrastResult, Recommendation

_RECOMMENDATION_TEXT = {
    Recommendation.ADD_OVERLAY: 'Add a veil/overlay token to increase contrast',
    Recommendation.ALTERNATE_VARIANT: 'Use a darker background or lighter foreground variant',
    Recommendation.RECONSIDER_PAIRING: 'Major contrast issue - consider an alternative colour pairing',
    Recommendation.RESOLUTION_ERROR: 'Colour token could not be resolved',
}

_ADJUSTMENT_TEXT = {
    AdjustmentAction.ALREADY_COMPLIANT: 'Contrast already meets requirements',
    AdjustmentAction.LIGHTEN: 'Lighten foreground colour',
    AdjustmentAction.DARKEN: 'Darken foreground colour',
    AdjustmentAction.RECONSIDER_PAIRING: 'Consider using a veil overlay or changing the colour pairing',
}

_TABLE_HEADER = '| Test | Context | Ratio | Required | Status |\n|------|---------|-------|----------|--------|'


def describe_recommendation(recommendation: Recommendation | None) -> str:
    return _RECOMMENDATION_TEXT[recommendation] if recommendation is not None else ''


def describe_adjustment(adjustment: Adjustment) -> str:
    text = _ADJUSTMENT_TEXT[adjustment.action]
    if adjustment.adjusted is not None:
        text += f' to {rgb8_to_hex(adjustment.adjusted)} ({adjustment.ratio:.2f}:1)'
    return text


def _ratio(result: ContrastResult) -> str:
    return f'{result.ratio:.2f}:1' if result.ratio is not None else 'n/a'


def to_record(result: ContrastResult) -> dict[str, Any]:
    """One machine-readable record per result. `ratio` is left unrounded."""
    case = result.case
    return {
        'description': case.description,
        'foreground': case.foreground,
        'background': case.background,
        'context': case.context.value,
        'ratio': result.ratio,
        'min_ratio': case.min_ratio,
        'passes': result.passes,
        'recommendation': result.recommendation.value if result.recommendation else None,
        'error': result.error,
    }


def to_records(report: AuditReport) -> list[dict[str, Any]]:
    return [to_record(r) for r in report.results]


def format_json(report: AuditReport, name: str | None = None) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if name:
        obj['name'] = name
    obj['results'] = to_records(report)
    summary = report.summary
    obj['summary'] = {
        'total': summary.total,
        'passed': summary.passed,
        'failed': summary.failed,
        'critical_failures': [to_record(r) for r in summary.critical_failures],
    }
    return json.dumps(obj, indent=2)


def format_text(report: AuditReport, name: str | None = None) -> str:
    """Format report as human-readable text."""
    lines = []
    header = 'contrast-tool audit'
    if name:
        header += f' — {name}'
    lines.append(header)
    lines.append('')

    for result in report.results:
        case = result.case
        mark = '✓' if result.passes else '✗'
        lines.append(
            f'{mark} {case.description} ({case.context.value}): {_ratio(result)} / {case.min_ratio}:1 required'
        )
        if result.error:
            lines.append(f'    error: {result.error}')
        if not result.passes and result.recommendation:
            lines.append(f'    → {describe_recommendation(result.recommendation)}')

    summary = report.summary
    if summary.total > 0:
        lines.append('')
        lines.append(f'PASS {summary.passed}/{summary.total}  FAIL {summary.failed}/{summary.total}')
    if summary.critical_failures:
        lines.append(f'CRITICAL {len(summary.critical_failures)}')
    return '\n'.join(lines)


def _markdown_row(result: ContrastResult) -> str:
    case = result.case
    status = '✅' if result.passes else '❌'
    return f'| {case.description} | {case.context.value} | {_ratio(result)} | {case.min_ratio}:1 | {status} |'


def format_markdown(report: AuditReport, name: str | None = None, generated: datetime | None = None) -> str:
    """Format report as a Markdown document with summary and result tables."""
    generated = generated or datetime.now(timezone.utc)
    summary = report.summary
    pct = round(summary.passed / summary.total * 100) if summary.total else 0

    lines = ['# WCAG Contrast Audit Report', '']
    lines.append(f'Date: {generated.isoformat()}')
    if name:
        lines.append(f'Theme: {name}')
    lines.append('')
    lines.append('## Summary')
    lines.append(f'- Total Tests: {summary.total}')
    lines.append(f'- Passed: {summary.passed} ({pct}%)')
    lines.append(f'- Failed: {summary.failed}')

    if summary.critical_failures:
        lines.append('')
        lines.append('### ⚠️ Critical Failures')
        lines.append(_TABLE_HEADER)
        lines.extend(_markdown_row(r) for r in summary.critical_failures)

    lines.append('')
    lines.append('## All Test Results')
    lines.append(_TABLE_HEADER)
    for result in report.results:
        lines.append(_markdown_row(result))
        if not result.passes and result.recommendation:
            lines.append(f'| → Recommendation: {describe_recommendation(result.recommendation)} | | | | |')
    return '\n'.join(lines) + '\n'
