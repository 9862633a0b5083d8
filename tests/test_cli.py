"""Tests for the decode-metar command."""

import json

import pytest

from metar_decoder.cli import main, build_parser
from metar_decoder.sources.files import MetarFileFormat


class TestArguments:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(['in.TXT', 'out.json'])
        assert args.input_globs == ['in.TXT']
        assert args.output == 'out.json'
        assert args.file_format == MetarFileFormat.NOAA_METAR_CYCLES
        assert args.anchor_time is None
        assert not args.pretty_print

    def test_invalid_anchor(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['-a', '2023-13-45', 'in.TXT', 'out.json'])

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['-f', 'csv', 'in.TXT', 'out.json'])


class TestMain:
    """Test running the command."""

    def test_cycles(self, cycles_file, tmp_path):
        output = tmp_path / 'out.json'
        assert main(['-q', str(cycles_file), str(output)]) == 0

        data = json.loads(output.read_text())
        assert [entry['station_id'] for entry in data] == ['LFBD', 'KJFK', 'EGLL']
        assert data[0]['observation_time'] == {'value_type': 'date_time', 'value': '2023-05-12T16:00:00Z'}

    def test_plain_with_anchor(self, plain_file, tmp_path):
        output = tmp_path / 'out.json'
        assert main(['-q', '-p', '-f', 'plain', '-a', '2023-05-10', str(plain_file), str(output)]) == 0

        data = json.loads(output.read_text())
        assert len(data) == 2
        assert data[1]['is_corrected'] is True
        assert data[1]['observation_time']['value'] == '2023-05-12T16:00:00Z'

    def test_csv(self, plain_file, tmp_path):
        output = tmp_path / 'out.csv'
        assert main(['-q', '--csv', '-f', 'plain', str(plain_file), str(output)]) == 0
        assert output.read_text().startswith('report_type,station_id')

    def test_no_input(self, tmp_path):
        assert main(['-q', str(tmp_path / '*.TXT'), str(tmp_path / 'out.json')]) == 1
