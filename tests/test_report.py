"""Tests for colour_by_value.core.report — text and JSON formatting."""

import datetime
import json

from colour_by_value.core.report import format_json, format_text
from colour_by_value.core.style import EMPTY_STYLE, StyleBundle, derive_random_style
from colour_by_value.core.types import Report


def _report() -> Report:
    report = Report(workbook_path='/data/people.xlsx', sheet='Staff', range_spec='A1:A3')
    report.set_value('A1', 'Apple')
    report.add('A1', 'formatted', StyleBundle(background='#FEE2E2', foreground='#991B1B', bold=True).as_dict())
    report.record_styled('A1')
    report.set_value('A2', None)
    report.add('A2', 'formatted', EMPTY_STYLE.as_dict())
    report.record_skipped('A2')
    report.set_value('A3', ['x'])
    report.record_error('A3', 'Cannot derive a style from a list value')
    return report


class TestReport:
    def test_counts(self):
        report = _report()
        assert (report.styled_count, report.skipped_count, report.error_count) == (1, 1, 1)

    def test_error_counted_once_per_cell(self):
        report = Report()
        report.record_error('A1', 'first')
        report.record_error('A1', 'second')
        assert report.error_count == 1
        assert report.cells['A1']['error'] == 'second'

    def test_modes_accumulate(self):
        report = Report()
        report.add('A1', 'census', {'index': 3})
        report.add('A1', 'preview', {'x': 1})
        assert set(report.cells['A1']['modes']) == {'census', 'preview'}


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'colour-by-value: people.xlsx — Staff!A1:A3 (3 cells)'

    def test_colour_line_names_palette_entries(self):
        text = format_text(_report())
        assert "── A1 'Apple'" in text
        assert '  formatted: bg #FEE2E2 (red100)  fg #991B1B (red800)  bold' in text

    def test_empty_cell_default_text(self):
        text = format_text(_report())
        assert '  formatted: bg #FFFFFF (white)  fg default' in text

    def test_error_line(self):
        assert '  error: Cannot derive a style from a list value' in format_text(_report())

    def test_totals(self):
        assert 'STYLED 1/3 cells  SKIPPED 1/3 (empty)  ERRORS 1' in format_text(_report())

    def test_off_palette_colour_names_nearest_entry(self):
        report = Report(workbook_path='log.xlsx')
        report.set_value('A1', 'x')
        report.add('A1', 'discrete', StyleBundle(background='#FECACB', foreground='#123456').as_dict())
        text = format_text(report)
        # one step from red200; #123456 is far from every palette entry
        assert 'bg #FECACB (~red200)  fg #123456' in text

    def test_hsl_colours_show_css(self):
        report = Report(workbook_path='tags.csv')
        report.set_value('#1', 'a')
        report.add('#1', 'random', derive_random_style('a', bold=True).as_dict())
        text = format_text(report)
        assert 'bg hsl(97, 77%, 62%)' in text
        assert 'fg hsl(277, 97%, 85%)' in text
        assert text.rstrip().splitlines()[-1].startswith('STYLED')

    def test_condition_line(self):
        report = Report(workbook_path='log.xlsx', sheet='Log', range_spec='A1')
        report.set_value('A1', 'Error: disk')
        data = {'condition': 'contains', 'target': 'error', 'matched': True, 'background': '#FEF08A'}
        report.add('A1', 'condition', data)
        assert "  condition: contains 'error' ✓" in format_text(report)

    def test_census_and_saved_lines(self):
        report = Report(workbook_path='p.xlsx', sheet='S', range_spec='A1', output_path='out/p.styled.xlsx')
        report.set_value('A1', 'x')
        report.add('A1', 'census', {'index': 7, 'foreground_index': 2})
        report.add_summary('census', {'samples': 1, 'palette_size': 32, 'reachable': 1, 'chi2': 31.0})
        text = format_text(report)
        assert '  census: palette index 7' in text
        assert 'census: 1/32 background colours used across 1 values  chi2=31.0' in text
        assert text.endswith('saved: out/p.styled.xlsx')


class TestFormatJson:
    def test_structure(self):
        data = json.loads(format_json(_report()))
        assert data['workbook'] == '/data/people.xlsx'
        assert data['sheet'] == 'Staff'
        assert data['range'] == 'A1:A3'
        assert [c['address'] for c in data['cells']] == ['A1', 'A2', 'A3']
        assert data['cells'][0]['modes']['formatted']['background'] == '#FEE2E2'
        assert data['cells'][2]['error'].startswith('Cannot derive')
        assert data['summary'] == {'total': 3, 'styled': 1, 'skipped': 1, 'errors': 1}
        assert 'output' not in data
        assert 'summary_by_mode' not in data

    def test_dates_serialised(self):
        report = Report()
        report.set_value('A1', datetime.date(2024, 3, 9))
        data = json.loads(format_json(report))
        assert data['cells'][0]['value'] == '2024-03-09'

    def test_summary_by_mode(self):
        report = Report(output_path='out/x.styled.xlsx')
        report.add_summary('preview', {'file': 'out/S_preview.png'})
        data = json.loads(format_json(report))
        assert data['summary_by_mode']['preview']['file'] == 'out/S_preview.png'
        assert data['output'] == 'out/x.styled.xlsx'
