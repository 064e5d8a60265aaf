"""Batch contrast audit over declared test cases.

Each TestCase names a foreground and a background role. Cases declared for
BOTH contexts run twice, light then dark. For every concrete case the roles are
resolved through the caller's resolver, converted to RGB8, and compared against
the case's `min_ratio`.

Failing cases get a lightweight recommendation based on how far short they
fall, rather than a full adjustment search (see core.suggest for that):

    deficit < 0.5   ADD_OVERLAY          a veil/overlay closes the gap
    deficit < 1.5   ALTERNATE_VARIANT    use the lighter/darker variant
    otherwise       RECONSIDER_PAIRING

A role the resolver cannot satisfy fails only its own case, with
RESOLUTION_ERROR. The rest of the batch still runs.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from contrast_checker.core.colorspace import to_rgb8
from contrast_checker.core.luminance import contrast_ratio
from contrast_checker.core.types import (
    AuditReport,
    AuditSummary,
    ColourFormatError,
    ColorTokenResolver,
    Context,
    ContrastResult,
    Recommendation,
    ResolutionError,
    TestCase,
)

logger = logging.getLogger(__name__)

CriticalPredicate = Callable[[ContrastResult], bool]

OVERLAY_DEFICIT = 0.5
VARIANT_DEFICIT = 1.5


def expand_cases(cases: Iterable[TestCase]) -> list[TestCase]:
    """Replace every BOTH case with a LIGHT and a DARK copy, keeping order."""
    expanded = []
    for case in cases:
        if case.context is Context.BOTH:
            expanded.append(dataclasses.replace(case, context=Context.LIGHT))
            expanded.append(dataclasses.replace(case, context=Context.DARK))
        else:
            expanded.append(case)
    return expanded


def recommend(deficit: float) -> Recommendation:
    if deficit < OVERLAY_DEFICIT:
        return Recommendation.ADD_OVERLAY
    if deficit < VARIANT_DEFICIT:
        return Recommendation.ALTERNATE_VARIANT
    return Recommendation.RECONSIDER_PAIRING


def evaluate_case(case: TestCase, resolve: ColorTokenResolver) -> ContrastResult:
    """Evaluate one concrete (LIGHT or DARK) case."""
    if case.context is Context.BOTH:
        raise ValueError('evaluate_case needs a concrete context, expand BOTH first')
    is_dark = case.context.is_dark
    try:
        fg = to_rgb8(resolve(case.foreground, is_dark))
        bg = to_rgb8(resolve(case.background, is_dark))
    except (ResolutionError, ColourFormatError) as exc:
        logger.debug('Resolution failed for %r (%s): %s', case.description, case.context.value, exc)
        return ContrastResult(
            case=case,
            ratio=None,
            passes=False,
            recommendation=Recommendation.RESOLUTION_ERROR,
            error=str(exc),
        )

    ratio = contrast_ratio(fg, bg)
    passes = ratio >= case.min_ratio
    return ContrastResult(
        case=case,
        ratio=ratio,
        passes=passes,
        recommendation=None if passes else recommend(case.min_ratio - ratio),
    )


def summarize(results: Sequence[ContrastResult], critical: CriticalPredicate | None = None) -> AuditSummary:
    passed = sum(1 for r in results if r.passes)
    critical_failures = tuple(r for r in results if not r.passes and critical is not None and critical(r))
    return AuditSummary(
        total=len(results),
        passed=passed,
        failed=len(results) - passed,
        critical_failures=critical_failures,
    )


def run_audit(
    cases: Iterable[TestCase],
    resolve: ColorTokenResolver,
    *,
    critical: CriticalPredicate | None = None,
    workers: int | None = None,
) -> AuditReport:
    """Evaluate every case and build the report.

    `workers` > 1 evaluates cases on a thread pool. Results keep input order
    either way.
    """
    concrete = expand_cases(cases)
    if workers is not None and workers > 1 and len(concrete) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = tuple(executor.map(lambda case: evaluate_case(case, resolve), concrete))
    else:
        results = tuple(evaluate_case(case, resolve) for case in concrete)
    return AuditReport(results=results, summary=summarize(results, critical))


def _context_matches(result: ContrastResult, context: Context | None) -> bool:
    return context is None or context is Context.BOTH or result.case.context is context


def description_marker(marker: str, context: Context | None = None) -> CriticalPredicate:
    """Critical when the description contains `marker` (case-insensitive)."""
    needle = marker.lower()

    def predicate(result: ContrastResult) -> bool:
        return needle in result.case.description.lower() and _context_matches(result, context)

    return predicate


def role_marker(marker: str, context: Context | None = None) -> CriticalPredicate:
    """Critical when either role name contains `marker` (case-insensitive)."""
    needle = marker.lower()

    def predicate(result: ContrastResult) -> bool:
        roles = (result.case.foreground.lower(), result.case.background.lower())
        return any(needle in role for role in roles) and _context_matches(result, context)

    return predicate
