"""Run a WCAG contrast audit over the test cases in an audit file.

Reads a JSON audit file (test cases, light/dark token tables and an optional
critical marker). Without a FILE argument, uses $CONTRAST_AUDIT_FILE, then the
bundled Modern Hearth audit.

Cases declared for "both" contexts run once per theme. Every role is resolved
once up front, then each pair is scored and compared against its min_ratio.
Failing pairs get a recommendation scaled to how far short they fall.

Critical failures are failing results whose description (or, with
--critical-field role, a role name) contains the marker, optionally limited to
one theme. Any critical failure exits 1 so CI can gate on it.

Example:
    contrast-tool audit
    contrast-tool audit theme.json --markdown --out contrast-audit-report.md
    contrast-tool audit theme.json --json --critical coral --critical-context dark
    contrast-tool audit theme.json --fail-on-any
"""

import argparse
import sys

from contrast_checker.core.audit import CriticalPredicate, description_marker, role_marker, run_audit
from contrast_checker.core.casefile import AuditSpec, load_default_audit, parse_audit_file, parse_context
from contrast_checker.core.env import int_setting, setting
from contrast_checker.core.report import format_json, format_markdown, format_text
from contrast_checker.core.tokens import prefetch
from contrast_checker.core.types import AuditReport, CaseDataError, Command

command = Command(
    name='audit',
    help='Run the contrast audit over an audit file. Exit 1 on critical failures.',
)


def add_audit_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that runs an audit."""
    parser.add_argument('file', nargs='?', help='Audit JSON file (default: $CONTRAST_AUDIT_FILE or bundled)')
    parser.add_argument('-c', '--critical', metavar='MARKER', help='Marker for critical failures (e.g. coral)')
    parser.add_argument(
        '--critical-context',
        choices=['light', 'dark', 'any'],
        default=None,
        help='Only count critical failures in this theme',
    )
    parser.add_argument(
        '--critical-field',
        choices=['description', 'role'],
        default='description',
        help='Match the marker against the description (default) or role names',
    )
    parser.add_argument('-w', '--workers', type=int, default=None, metavar='N', help='Evaluate on N threads')


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    add_audit_arguments(parser)
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    fmt.add_argument('-m', '--markdown', action='store_true', help='Output a Markdown report')
    parser.add_argument('-o', '--out', metavar='PATH', help='Also write the report to PATH')
    parser.add_argument('--fail-on-any', action='store_true', help='Exit 1 on any failure, not just critical ones')


def load_spec(path: str | None) -> AuditSpec:
    path = path or setting('AUDIT_FILE')
    spec = parse_audit_file(path) if path else load_default_audit()
    if spec.tokens is None:
        raise CaseDataError(f'{spec.source or spec.name}: no "tokens" table to resolve roles against')
    return spec


def critical_predicate(spec: AuditSpec, args: argparse.Namespace) -> CriticalPredicate | None:
    """Command line first, then CONTRAST_CRITICAL_*, then the audit file."""
    marker = args.critical or setting('CRITICAL_MARKER') or spec.critical_marker
    if not marker:
        return None
    raw_context = args.critical_context or setting('CRITICAL_CONTEXT')
    if raw_context is None:
        context = spec.critical_context
    elif raw_context == 'any':
        context = None
    else:
        context = parse_context(raw_context)
    if getattr(args, 'critical_field', 'description') == 'role':
        return role_marker(marker, context)
    return description_marker(marker, context)


def execute_audit(args: argparse.Namespace) -> tuple[AuditSpec, AuditReport]:
    spec = load_spec(args.file)
    workers = args.workers if args.workers is not None else int_setting('WORKERS', 1)
    resolver = prefetch(spec.cases, spec.tokens)
    report = run_audit(spec.cases, resolver, critical=critical_predicate(spec, args), workers=workers)
    return spec, report


@command.run
def run(args: argparse.Namespace) -> int:
    spec, report = execute_audit(args)

    if args.json:
        output = format_json(report, name=spec.name)
    elif args.markdown:
        output = format_markdown(report, name=spec.name)
    else:
        output = format_text(report, name=spec.name)
    print(output)

    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write(output if output.endswith('\n') else output + '\n')
        print(f'contrast-tool: report saved to {args.out}', file=sys.stderr)

    # CI gate runs after output so the report is visible on failure
    critical = report.summary.critical_failures
    if critical:
        print(f'\nFAIL: {len(critical)} critical contrast failure(s):', file=sys.stderr)
        for result in critical:
            print(f'  {result.case.description} ({result.case.context.value})', file=sys.stderr)
        return 1
    if args.fail_on_any and report.summary.failed:
        print(f'\nFAIL: {report.summary.failed} contrast failure(s)', file=sys.stderr)
        return 1
    return 0
