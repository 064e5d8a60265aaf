"""Tests for contrast_checker.core.casefile — JSON audit file loading."""

import json
import os

import pytest
from contrast_checker.core.audit import run_audit
from contrast_checker.core.casefile import load_default_audit, parse_audit_file, parse_audit_string
from contrast_checker.core.types import CaseDataError, Context, Recommendation

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
SAMPLE_AUDIT = os.path.join(FIXTURES_DIR, 'sample_audit.json')


def _audit(cases, **extra):
    return json.dumps({'cases': cases, **extra})


class TestParseAuditFile:
    def test_loads_sample(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        assert spec.name == 'Sample'
        assert spec.source == SAMPLE_AUDIT

    def test_cases(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        assert len(spec.cases) == 4
        first = spec.cases[0]
        assert (first.foreground, first.background) == ('ink', 'surface')
        assert first.context is Context.BOTH

    def test_text_size_large_sets_aa_large(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        assert spec.cases[3].min_ratio == 3.0

    def test_tokens(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        assert spec.tokens is not None
        assert spec.tokens('ink', True) == '#ffffff'
        assert spec.tokens('ink', False) == '#000000'

    def test_critical(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        assert spec.critical_marker == 'accent'
        assert spec.critical_context is Context.DARK


class TestParseAuditString:
    def test_defaults(self):
        spec = parse_audit_string(_audit([{'foreground': 'a', 'background': 'b'}]))
        case = spec.cases[0]
        assert case.min_ratio == 4.5
        assert case.context is Context.BOTH
        assert case.description == 'a on b'
        assert spec.tokens is None
        assert spec.critical_marker is None
        assert spec.name == 'unnamed'

    def test_context_case_insensitive(self):
        spec = parse_audit_string(_audit([{'foreground': 'a', 'background': 'b', 'context': 'DARK'}]))
        assert spec.cases[0].context is Context.DARK

    def test_critical_string_shorthand(self):
        spec = parse_audit_string(_audit([], critical='coral'))
        assert spec.critical_marker == 'coral'
        assert spec.critical_context is None

    def test_empty_cases(self):
        assert parse_audit_string(_audit([])).cases == ()

    @pytest.mark.parametrize(
        'text',
        [
            'not json',
            '[]',
            '{}',
            '{"cases": {}}',
            _audit(['ink on surface']),
            _audit([{'foreground': 'a'}]),
            _audit([{'foreground': 'a', 'background': 'b', 'context': 'dusk'}]),
            _audit([{'foreground': 'a', 'background': 'b', 'min_ratio': 30}]),
            _audit([{'foreground': 'a', 'background': 'b', 'text_size': 'huge'}]),
            _audit([], tokens=['#fff']),
            _audit([], critical={'context': 'dark'}),
        ],
    )
    def test_malformed_raises(self, text):
        with pytest.raises(CaseDataError):
            parse_audit_string(text)

    def test_error_names_case_index(self):
        text = _audit([{'foreground': 'a', 'background': 'b'}, {'foreground': 'a'}])
        with pytest.raises(CaseDataError, match='case 1'):
            parse_audit_string(text)


class TestSampleAudit:
    def test_report(self):
        spec = parse_audit_file(SAMPLE_AUDIT)
        report = run_audit(spec.cases, spec.tokens)
        assert report.summary.total == 5
        assert report.summary.passed == 3
        assert report.summary.failed == 2
        grey = report.results[2]
        assert grey.case.description == 'Grey caption on surface'
        assert grey.recommendation is Recommendation.ADD_OVERLAY


class TestDefaultAudit:
    def test_bundled_audit_loads(self):
        spec = load_default_audit()
        assert spec.name == 'Modern Hearth'
        assert len(spec.cases) == 13
        assert spec.critical_marker == 'coral'
        assert spec.critical_context is Context.DARK

    def test_every_role_resolves(self):
        spec = load_default_audit()
        report = run_audit(spec.cases, spec.tokens)
        assert report.summary.total == 15
        assert all(r.recommendation is not Recommendation.RESOLUTION_ERROR for r in report.results)
        assert all(r.ratio is not None for r in report.results)
