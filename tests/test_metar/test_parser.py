"""Tests for whole report decoding."""

import logging
from datetime import date, datetime

import pytest

from metar_decoder.exceptions import MetarDecodeError
from metar_decoder.metar.models import (
    Value,
    ValueType,
    Unit,
    CloudLayer,
    CloudCover,
    WeatherDescriptor,
    WeatherPhenomenon,
    WeatherIntensity,
    SeaState,
)
from metar_decoder.metar.parser import MetarDecoder, decode_metar


def _exact(value, units):
    return {'value_type': 'exact', 'value': value, 'units': units}


LFBD_EXPECTED = {
    'report_type': 'METAR',
    'station_id': 'LFBD',
    'observation_time': {'value_type': 'date_time', 'value': '2023-05-12T16:00:00Z'},
    'is_corrected': False,
    'is_automated': False,
    'wind_from_direction': _exact(330, 'degT'),
    'wind_from_direction_range': {
        'value_type': 'range',
        'value': [_exact(270, None), _exact(40, None)],
        'units': 'degT',
    },
    'wind_speed': _exact(15, 'kt'),
    'wind_gust': _exact(32, 'kt'),
    'prevailing_visibility': {'value_type': 'above', 'value': 10000, 'units': 'm'},
    'minimum_visibility': None,
    'directional_visibilities': [],
    'runway_visual_ranges': [
        {'runway': '23', 'visual_range': _exact(1100, 'm'), 'trend': 'decreasing'},
    ],
    'present_weather': [
        {
            'intensity': 'heavy',
            'is_in_vicinity': False,
            'descriptors': ['thunderstorm'],
            'phenomena': ['rain'],
        },
        {
            'intensity': 'moderate',
            'is_in_vicinity': False,
            'descriptors': ['patches'],
            'phenomena': ['fog'],
        },
    ],
    'clouds': [
        {'cover': 'few', 'height': _exact(2000, 'ft'), 'cloud_type': None},
        {'cover': 'scattered', 'height': _exact(3000, 'ft'), 'cloud_type': 'cumulonimbus'},
        {'cover': 'broken', 'height': _exact(4500, 'ft'), 'cloud_type': None},
    ],
    'ceiling': _exact(4500, 'ft'),
    'temperature': _exact(18, 'degC'),
    'dew_point': _exact(15, 'degC'),
    'pressure': _exact(1012, 'hPa'),
    'recent_weather': [
        {
            'intensity': 'moderate',
            'is_in_vicinity': False,
            'descriptors': ['shower'],
            'phenomena': ['rain'],
        },
    ],
    'wind_shears': [],
    'sea_surface_temperature': None,
    'sea_state': None,
    'wave_height': None,
    'trends': [
        {
            'indicator': 'temporary',
            'from_time': None,
            'until_time': None,
            'at_time': None,
            'wind_from_direction': None,
            'wind_from_direction_range': None,
            'wind_speed': None,
            'wind_gust': None,
            'prevailing_visibility': _exact(4000, 'm'),
            'minimum_visibility': None,
            'directional_visibilities': [],
            'present_weather': [
                {
                    'intensity': 'moderate',
                    'is_in_vicinity': False,
                    'descriptors': ['shower'],
                    'phenomena': ['rain'],
                },
            ],
            'no_significant_weather': False,
            'clouds': [
                {'cover': 'broken', 'height': _exact(1500, 'ft'), 'cloud_type': 'towering_cumulus'},
            ],
        },
    ],
    'remarks': 'AO2',
}


class TestGoldenReport:
    """Test the LFBD report end to end."""

    def test_lfbd(self, lfbd_report):
        metar = decode_metar(lfbd_report, anchor=date(2023, 5, 10))
        expected = dict(LFBD_EXPECTED, report=lfbd_report)
        assert metar.to_dict() == expected

    def test_lfbd_without_anchor(self, lfbd_report):
        metar = decode_metar(lfbd_report)
        assert metar.to_dict()['observation_time'] == {
            'value_type': 'day_time',
            'value': [12, '16:00:00Z'],
        }

    def test_purity(self, lfbd_report):
        first = MetarDecoder.decode(lfbd_report, anchor=date(2023, 5, 10))
        second = MetarDecoder.decode(lfbd_report, anchor=date(2023, 5, 10))
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_decodes_share_no_lists(self, lfbd_report):
        first = decode_metar(lfbd_report)
        second = decode_metar(lfbd_report)
        assert first.clouds is not second.clouds
        assert first.present_weather is not second.present_weather
        assert first.trends[0].clouds is not second.trends[0].clouds

        first.clouds.clear()
        assert len(second.clouds) == 3

    def test_report_kept_verbatim(self):
        raw = "  LFBD 121600Z 33015KT  9999 FEW020 18/15 Q1012=  "
        metar = decode_metar(raw)
        assert metar.report == raw.strip()


class TestHeaderFlags:
    """Test correction and automation flags."""

    def test_cca_prefix(self):
        metar = decode_metar("CCA LFBD 121600Z 33015KT 9999 FEW020 18/15 Q1012")
        assert metar.station_id == "LFBD"
        assert metar.is_corrected is True
        assert metar.wind_speed == Value.exact(15, Unit.KNOT)

    @pytest.mark.parametrize("code", ["CCA", "CCM", "CCZ"])
    def test_correction_codes(self, code):
        metar = decode_metar(f"{code} LFBD 121600Z 33015KT")
        assert metar.is_corrected is True

    def test_flags_default_false(self):
        metar = decode_metar("LFBD 121600Z 33015KT")
        assert metar.is_corrected is False
        assert metar.is_automated is False

    def test_auto(self):
        metar = decode_metar("METAR LFBD 121600Z AUTO 33015KT")
        assert metar.is_automated is True

    def test_no_header(self):
        with pytest.raises(MetarDecodeError) as exc_info:
            decode_metar("33015KT 9999 FEW020")
        assert exc_info.value.report == "33015KT 9999 FEW020"

    def test_empty(self):
        with pytest.raises(MetarDecodeError):
            decode_metar("")

    def test_nil_report(self):
        metar = decode_metar("LFBD 121600Z NIL")
        assert metar.station_id == "LFBD"
        assert metar.wind_speed is None
        assert metar.clouds == []


class TestTolerance:
    """Test that malformed groups do not abort decoding."""

    def test_invalid_day(self, caplog):
        with caplog.at_level(logging.WARNING):
            metar = decode_metar("LFBD 321600Z 33015KT 9999 FEW020 18/15 Q1012", anchor=date(2023, 5, 10))
        assert metar.observation_time is None
        assert metar.station_id == "LFBD"
        assert metar.wind_speed == Value.exact(15, Unit.KNOT)
        assert metar.prevailing_visibility == Value.above(10000, Unit.METRE)
        assert metar.temperature == Value.exact(18, Unit.DEGREE_CELSIUS)
        assert metar.pressure == Value.exact(1012, Unit.HECTOPASCAL)
        assert "Invalid observation day" in caplog.text

    def test_invalid_hour(self):
        metar = decode_metar("LFBD 122600Z 33015KT 9999")
        assert metar.observation_time is None
        assert metar.wind_speed == Value.exact(15, Unit.KNOT)

    def test_unknown_groups_skipped(self):
        metar = decode_metar("LFBD 121600Z 33015KT XYZZY 9999 /// FOO FEW020 18/15 Q1012")
        assert metar.prevailing_visibility == Value.above(10000, Unit.METRE)
        assert metar.clouds[0].cover == CloudCover.FEW
        assert metar.pressure == Value.exact(1012, Unit.HECTOPASCAL)

    def test_repeated_pressure_keeps_first(self):
        metar = decode_metar("LFBD 121600Z 33015KT 9999 18/15 Q1012 A2988")
        assert metar.pressure == Value.exact(1012, Unit.HECTOPASCAL)

    def test_color_state_ignored(self):
        metar = decode_metar("EGXX 121600Z 33015KT 9999 FEW020 18/15 Q1012 BLU")
        assert metar.pressure == Value.exact(1012, Unit.HECTOPASCAL)

    @pytest.mark.parametrize("visibility", ["1/0SM", "1 1/0SM", "0/0 SM", "M1/00SM"])
    def test_zero_denominator_visibility(self, visibility):
        metar = decode_metar(f"KJFK 121651Z 18008KT {visibility} BR OVC005 12/11 A2990")
        assert metar.station_id == "KJFK"
        assert metar.wind_speed == Value.exact(8, Unit.KNOT)
        assert metar.present_weather[0].phenomena == (WeatherPhenomenon.MIST,)
        assert metar.ceiling == Value.exact(500, Unit.FOOT)
        assert metar.temperature == Value.exact(12, Unit.DEGREE_CELSIUS)
        assert metar.pressure == Value.exact(29.9, Unit.INCH_OF_MERCURY)


class TestReportSections:
    """Test sections as they appear in real reports."""

    def test_us_report(self):
        metar = decode_metar(
            "METAR KJFK 121651Z 18008KT 1 1/2SM -RA BR OVC005 12/11 A2990 RMK AO2 SLP125",
            anchor=date(2023, 5, 12),
        )
        assert metar.prevailing_visibility == Value.exact(1.5, Unit.STATUTE_MILE)
        assert metar.present_weather[0].intensity == WeatherIntensity.LIGHT
        assert metar.present_weather[1].phenomena == (WeatherPhenomenon.MIST,)
        assert metar.ceiling == Value.exact(500, Unit.FOOT)
        assert metar.pressure == Value.exact(29.9, Unit.INCH_OF_MERCURY)
        assert metar.remarks == "AO2 SLP125"
        assert metar.observation_time.date_time == datetime(2023, 5, 12, 16, 51)

    def test_detached_miles(self):
        metar = decode_metar("KJFK 121651Z 18008KT 1 SM BR OVC005 12/11 A2990")
        assert metar.prevailing_visibility == Value.exact(1, Unit.STATUTE_MILE)
        assert metar.present_weather[0].phenomena == (WeatherPhenomenon.MIST,)

    def test_direction_range_apart_from_wind(self):
        metar = decode_metar("LFBD 121600Z 33015KT 9999 270V040 FEW020")
        assert metar.wind_from_direction_range == Value.range(
            Value.exact(270), Value.exact(40), Unit.DEGREE_TRUE
        )

    def test_cavok(self):
        metar = decode_metar("LFPG 211230Z 24005KT CAVOK 20/10 Q1015 NOSIG")
        assert metar.prevailing_visibility == Value.above(10000, Unit.METRE)
        assert metar.clouds == [CloudLayer(cover=CloudCover.CEILING_OK)]
        assert metar.ceiling == Value.unlimited(Unit.FOOT)
        assert len(metar.trends) == 1
        assert metar.trends[0].to_dict()['indicator'] == 'no_significant_change'

    def test_ceiling_indefinite(self):
        metar = decode_metar("LFBD 121600Z 33015KT 0100 FG VV/// 05/05 Q1012")
        assert metar.ceiling == Value.indefinite(Unit.FOOT)

    def test_no_clouds_no_ceiling(self):
        metar = decode_metar("LFBD 121600Z 33015KT 9999 18/15 Q1012")
        assert metar.ceiling is None

    def test_empty_cloud_groups_dropped(self):
        metar = decode_metar("LFBD 121600Z AUTO 33015KT 9999 ////// FEW020 18/15 Q1012")
        assert len(metar.clouds) == 1

    def test_supplementary(self):
        metar = decode_metar(
            "LGAV 121600Z 33015KT 9999 FEW020 18/15 Q1012 RETS WS R03L W19/S4"
        )
        assert metar.recent_weather[0].descriptors == (WeatherDescriptor.THUNDERSTORM,)
        assert metar.wind_shears[0].runway == "03L"
        assert metar.sea_surface_temperature == Value.exact(19, Unit.DEGREE_CELSIUS)
        assert metar.sea_state == SeaState.MODERATE

    def test_minimum_and_directional_visibility(self):
        metar = decode_metar("LFBD 121600Z 33015KT 4000 1200 2000NE BR BKN010 10/09 Q1012")
        assert metar.minimum_visibility == Value.exact(1200, Unit.METRE)
        assert len(metar.directional_visibilities) == 1

    def test_multiple_trends(self):
        metar = decode_metar(
            "LFBD 121600Z 33015KT 9999 FEW020 18/15 Q1012 BECMG FM1700 25020KT TEMPO TSRA RMK X"
        )
        assert [t.indicator.value for t in metar.trends] == ['becoming', 'temporary']
        assert metar.trends[0].wind_speed == Value.exact(20, Unit.KNOT)
        assert metar.trends[1].present_weather[0].descriptors == (WeatherDescriptor.THUNDERSTORM,)
        assert metar.remarks == "X"


class TestRangeInvariant:
    """Test that decoded ranges never nest."""

    REPORTS = [
        "LFBD 121600Z 33015G32KT 270V040 9999 R23/M0050VP1500U FEW020 18/15 Q1012",
        "KJFK 121651Z VRB03KT 180V240 P6SM R04R/0600V1200FT BKN250 12/11 A2990",
        "LFBD 121600Z 33015KT 9999 TEMPO 25020KT 200V300 4000",
    ]

    @pytest.mark.parametrize("report", REPORTS)
    def test_no_nested_ranges(self, report):
        metar = decode_metar(report)
        values = [
            metar.wind_from_direction_range,
            metar.prevailing_visibility,
            metar.minimum_visibility,
        ]
        values += [rvr.visual_range for rvr in metar.runway_visual_ranges]
        values += [t.wind_from_direction_range for t in metar.trends]

        ranges = [v for v in values if v is not None and v.value_type == ValueType.RANGE]
        assert ranges
        for value in ranges:
            for bound in value.value:
                assert bound.value_type != ValueType.RANGE
