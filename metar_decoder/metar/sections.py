"""
Decoders for the individual sections of a METAR report.

Every decoder takes the list of report groups and a cursor. It either
returns the decoded section together with the cursor moved past the groups
it consumed, or None when the groups at the cursor are not of its kind.
Decoders never raise on report content.
"""

import re
import logging
from datetime import date, datetime
from typing import Optional, List, Tuple, Union

from metar_decoder.metar.datetime_resolver import DateTimeResolver
from metar_decoder.metar.models import (
    Value,
    Unit,
    Header,
    Wind,
    Visibility,
    Temperature,
    SeaConditions,
    ReportType,
    DirectionalVisibility,
    RunwayVisualRange,
    WeatherCondition,
    WeatherIntensity,
    CloudLayer,
    CloudCover,
    WindShear,
    TrendChange,
    TrendIndicator,
    DIRECTION_OCTANTS,
    RVR_TRENDS,
    WEATHER_INTENSITIES,
    WEATHER_DESCRIPTORS,
    WEATHER_PHENOMENA,
    CLOUD_COVERS,
    CLOUD_TYPES,
    SEA_STATES,
)

logger = logging.getLogger(__name__)

_DESCRIPTORS = '|'.join(WEATHER_DESCRIPTORS)
_PHENOMENA = '|'.join(WEATHER_PHENOMENA)

# 9999 means 10 km or more
_MAX_METRIC_VISIBILITY = Value.exact(9999, Unit.METRE)
_CAVOK_VISIBILITY = Value.above(10000, Unit.METRE)


def _token(tokens: List[str], idx: int) -> Optional[str]:
    return tokens[idx] if idx < len(tokens) else None


def _optional_value(text: Optional[str], units: Unit) -> Optional[Value]:
    """Parse a value unless it is missing or reported as slashes."""
    if text is None or set(text) == {'/'}:
        return None
    return Value.parse(text, units)


def _celsius(text: Optional[str]) -> Optional[Value]:
    # M is the minus sign here, not "below"
    if text is None or text == '//':
        return None
    if text.startswith('M'):
        return Value.exact(-int(text[1:]), Unit.DEGREE_CELSIUS)
    return Value.exact(int(text), Unit.DEGREE_CELSIUS)


class SectionDecoder:
    """
    Grammar of each report section.

    Example:
        tokens = "33015G32KT 270V040 9999".split()
        wind, idx = SectionDecoder.wind(tokens, 0)    # idx == 2
        vis, idx = SectionDecoder.visibility(tokens, idx)
    """

    CORRECTION_PATTERN = re.compile(r'^(COR|CC[A-Z])$')
    STATION_PATTERN = re.compile(r'^[A-Z][A-Z0-9]{3}$')
    DAY_TIME_PATTERN = re.compile(r'^(?P<day>\d{2})(?P<hour>\d{2})(?P<minute>\d{2})Z?$')

    WIND_PATTERN = re.compile(
        r'^E?(?P<direction>\d{3}|VRB|///)'
        r'(?P<speed>P?\d{2,3}|//)'
        r'(?:G(?P<gust>P?\d{2,3}|//))?'
        r'(?P<units>KT|MPS|KMH)$'
    )
    DIRECTION_RANGE_PATTERN = re.compile(r'^\d{3}V\d{3}$')

    METRIC_VISIBILITY_PATTERN = re.compile(r'^(?P<visibility>[MP]?\d{1,4})(?:NDV)?$')
    MINIMUM_VISIBILITY_PATTERN = re.compile(r'^[MP]?\d{1,4}$')
    DIRECTIONAL_VISIBILITY_PATTERN = re.compile(
        r'^(?P<visibility>[MP]?\d{1,4})(?P<direction>N|NE|E|SE|S|SW|W|NW)$'
    )
    MILES_PATTERN = re.compile(r'^(?P<visibility>[MP]?(?:\d{1,2}|\d/[1-9]\d?))SM$')
    WHOLE_MILES_PATTERN = re.compile(r'^[MP]?\d{1,2}$')
    FRACTION_MILES_PATTERN = re.compile(r'^(?P<fraction>[MP]?\d/[1-9]\d?)(?P<units>SM)?$')

    RVR_PATTERN = re.compile(
        r'^R(?P<runway>\d{2}[A-Z]?)'
        r'/(?P<visual_range>[MP]?\d{4}(?:V[MP]?\d{4})?)'
        r'(?P<units>FT)?'
        r'/?(?P<trend>[UDN])?$'
    )

    WEATHER_PATTERN = re.compile(
        r'^(?P<recent>RE)?'
        r'(?P<intensity>[-+])?'
        r'(?P<vicinity>VC)?'
        rf'(?P<descriptors>(?:{_DESCRIPTORS})*)'
        rf'(?P<phenomena>(?:{_PHENOMENA})*)$'
    )

    CLOUD_PATTERN = re.compile(
        r'^(?P<cover>CLR|SKC|NSC|NCD|FEW|SCT|BKN|OVC|VV|///)'
        r'(?P<height>\d{3}|///)?'
        rf'(?P<cloud>{"|".join(CLOUD_TYPES)}|///)?$'
    )

    TEMPERATURE_PATTERN = re.compile(r'^(?P<temperature>M?\d{2}|//)/(?P<dew_point>M?\d{2}|//)?$')
    PRESSURE_PATTERN = re.compile(r'^(?P<units>[AQ])(?P<pressure>\d{4}|////)$')

    WIND_SHEAR_RUNWAY_PATTERN = re.compile(r'^R(?:WY)?(?P<runway>\d{2}[LCR]?)$')
    SEA_PATTERN = re.compile(
        r'^W(?P<temperature>M?\d{2}|//)/'
        r'(?:S(?P<state>\d|/)|H(?P<height>\d{1,3}|///))$'
    )
    COLOR_PATTERN = re.compile(r'^(?:BLACK|BLU\+?|GRN|WHT|RED|AMB|YLO)+$')

    TREND_TIME_PATTERN = re.compile(r'^(?P<kind>FM|TL|AT)(?P<hour>\d{2})(?P<minute>\d{2})$')

    @classmethod
    def header(
        cls,
        tokens: List[str],
        idx: int,
        anchor: Optional[Union[date, datetime]] = None,
    ) -> Optional[Tuple[Header, int]]:
        """
        Decode the report header.

        Accepts "[METAR|SPECI] [COR|CCx] CCCC DDHHMM[Z] [COR|CCx] [AUTO]".
        An invalid day or time leaves observation_time empty but still
        yields the header.
        """
        header = Header()
        pos = idx

        token = _token(tokens, pos)
        if token in ('METAR', 'SPECI'):
            header.report_type = ReportType(token)
            pos += 1

        token = _token(tokens, pos)
        if token is not None and cls.CORRECTION_PATTERN.match(token):
            header.is_corrected = True
            pos += 1

        station = _token(tokens, pos)
        day_time = _token(tokens, pos + 1)
        if station is None or day_time is None or not cls.STATION_PATTERN.match(station):
            return None
        match = cls.DAY_TIME_PATTERN.match(day_time)
        if not match:
            return None

        header.station_id = station
        header.observation_time = DateTimeResolver.resolve(
            int(match.group('day')),
            int(match.group('hour')),
            int(match.group('minute')),
            anchor=anchor,
        )
        pos += 2

        token = _token(tokens, pos)
        if token is not None and cls.CORRECTION_PATTERN.match(token):
            header.is_corrected = True
            pos += 1

        if _token(tokens, pos) == 'AUTO':
            header.is_automated = True
            pos += 1

        return header, pos

    @classmethod
    def wind(cls, tokens: List[str], idx: int) -> Optional[Tuple[Wind, int]]:
        """Decode a wind group, with the direction range group that may follow it."""
        token = _token(tokens, idx)
        match = cls.WIND_PATTERN.match(token) if token else None
        if not match:
            return None

        units = Unit.from_token(match.group('units'))
        direction = match.group('direction')
        speed = match.group('speed')

        wind = Wind(
            wind_from_direction=_optional_value(direction, Unit.DEGREE_TRUE),
            wind_speed=_optional_value(speed, units),
            wind_gust=_optional_value(match.group('gust'), units),
        )
        if direction == '000' and speed == '00':
            # calm wind has no direction
            wind.wind_from_direction = None

        pos = idx + 1
        direction_range = cls.wind_variability(tokens, pos)
        if direction_range:
            wind.wind_from_direction_range, pos = direction_range

        return wind, pos

    @classmethod
    def wind_variability(cls, tokens: List[str], idx: int) -> Optional[Tuple[Value, int]]:
        """Decode a dddVddd group into a range of directions."""
        token = _token(tokens, idx)
        if token is None or not cls.DIRECTION_RANGE_PATTERN.match(token):
            return None
        return Value.parse(token, Unit.DEGREE_TRUE), idx + 1

    @classmethod
    def visibility(cls, tokens: List[str], idx: int) -> Optional[Tuple[Visibility, int]]:
        """
        Decode prevailing, minimum and directional visibility.

        Statute miles may be split across groups ("1 1/2SM", "1 SM"),
        which are merged into one value.
        """
        token = _token(tokens, idx)
        if token is None:
            return None

        if token == 'CAVOK':
            return Visibility(prevailing_visibility=_CAVOK_VISIBILITY, is_cavok=True), idx + 1

        if token == '////':
            pos = idx + 1
            if _token(tokens, pos) == 'SM':
                pos += 1
            return Visibility(), pos

        miles = cls._statute_miles(tokens, idx)
        if miles:
            prevailing, pos = miles
            return Visibility(prevailing_visibility=prevailing), pos

        match = cls.METRIC_VISIBILITY_PATTERN.match(token)
        if not match:
            return None

        prevailing = Value.parse(match.group('visibility'), Unit.METRE)
        if prevailing == _MAX_METRIC_VISIBILITY:
            prevailing = _CAVOK_VISIBILITY
        visibility = Visibility(prevailing_visibility=prevailing)
        pos = idx + 1

        token = _token(tokens, pos)
        if token is not None and cls.MINIMUM_VISIBILITY_PATTERN.match(token):
            visibility.minimum_visibility = Value.parse(token, Unit.METRE)
            pos += 1

        while True:
            token = _token(tokens, pos)
            match = cls.DIRECTIONAL_VISIBILITY_PATTERN.match(token) if token else None
            if not match:
                break
            visibility.directional_visibilities.append(DirectionalVisibility(
                visibility=Value.parse(match.group('visibility'), Unit.METRE),
                direction=DIRECTION_OCTANTS[match.group('direction')],
            ))
            pos += 1

        return visibility, pos

    @classmethod
    def _statute_miles(cls, tokens: List[str], idx: int) -> Optional[Tuple[Value, int]]:
        token = tokens[idx]

        match = cls.MILES_PATTERN.match(token)
        if match:
            return Value.parse(match.group('visibility'), Unit.STATUTE_MILE), idx + 1

        pos = idx
        number = None
        if cls.WHOLE_MILES_PATTERN.match(token):
            number = token
            pos += 1

        # a fraction, either on its own or completing the whole number
        following = _token(tokens, pos)
        match = cls.FRACTION_MILES_PATTERN.match(following) if following else None
        if match:
            fraction = match.group('fraction')
            if number is None:
                number = fraction
            elif fraction[0] in 'MP':
                return None
            else:
                number = f"{number} {fraction}"
            pos += 1
            if match.group('units'):
                return Value.parse(number, Unit.STATUTE_MILE), pos

        if number is not None and _token(tokens, pos) == 'SM':
            return Value.parse(number, Unit.STATUTE_MILE), pos + 1

        return None

    @classmethod
    def runway_visual_range(cls, tokens: List[str], idx: int) -> Optional[Tuple[RunwayVisualRange, int]]:
        token = _token(tokens, idx)
        match = cls.RVR_PATTERN.match(token) if token else None
        if not match:
            return None

        units = Unit.FOOT if match.group('units') else Unit.METRE
        trend = match.group('trend')
        rvr = RunwayVisualRange(
            runway=match.group('runway'),
            visual_range=Value.parse(match.group('visual_range'), units),
            trend=RVR_TRENDS[trend] if trend else None,
        )
        return rvr, idx + 1

    @classmethod
    def present_weather(cls, tokens: List[str], idx: int) -> Optional[Tuple[WeatherCondition, int]]:
        return cls._weather(tokens, idx, recent=False)

    @classmethod
    def recent_weather(cls, tokens: List[str], idx: int) -> Optional[Tuple[WeatherCondition, int]]:
        return cls._weather(tokens, idx, recent=True)

    @classmethod
    def _weather(cls, tokens: List[str], idx: int, recent: bool) -> Optional[Tuple[WeatherCondition, int]]:
        token = _token(tokens, idx)
        match = cls.WEATHER_PATTERN.match(token) if token else None
        if not match or bool(match.group('recent')) != recent:
            return None

        descriptors = match.group('descriptors')
        phenomena = match.group('phenomena')
        if not descriptors and not phenomena:
            return None

        intensity = match.group('intensity')
        weather = WeatherCondition(
            intensity=WEATHER_INTENSITIES[intensity] if intensity else WeatherIntensity.MODERATE,
            is_in_vicinity=match.group('vicinity') is not None,
            descriptors=tuple(WEATHER_DESCRIPTORS[code] for code in _pairs(descriptors)),
            phenomena=tuple(WEATHER_PHENOMENA[code] for code in _pairs(phenomena)),
        )
        return weather, idx + 1

    @classmethod
    def cloud_layer(cls, tokens: List[str], idx: int) -> Optional[Tuple[CloudLayer, int]]:
        """
        Decode a cloud group.

        A group made only of slashes is still consumed; the returned layer
        is then empty (see CloudLayer.has_some).
        """
        token = _token(tokens, idx)
        match = cls.CLOUD_PATTERN.match(token) if token else None
        if not match:
            return None

        cover = match.group('cover')
        height = _optional_value(match.group('height'), Unit.FOOT)
        cloud = match.group('cloud')

        layer = CloudLayer(
            cover=CLOUD_COVERS.get(cover),
            height=height * 100 if height is not None else None,
            cloud_type=CLOUD_TYPES.get(cloud) if cloud else None,
        )
        return layer, idx + 1

    @classmethod
    def temperature(cls, tokens: List[str], idx: int) -> Optional[Tuple[Temperature, int]]:
        token = _token(tokens, idx)
        match = cls.TEMPERATURE_PATTERN.match(token) if token else None
        if not match:
            return None

        temperature = Temperature(
            temperature=_celsius(match.group('temperature')),
            dew_point=_celsius(match.group('dew_point')),
        )
        return temperature, idx + 1

    @classmethod
    def pressure(cls, tokens: List[str], idx: int) -> Optional[Tuple[Optional[Value], int]]:
        """Decode QNH (Qdddd, hPa) or altimeter setting (Adddd, hundredths of inHg)."""
        token = _token(tokens, idx)
        match = cls.PRESSURE_PATTERN.match(token) if token else None
        if not match:
            return None

        units = Unit.from_token(match.group('units'))
        pressure = _optional_value(match.group('pressure'), units)
        if pressure is not None and units == Unit.INCH_OF_MERCURY:
            pressure = pressure / 100
        return pressure, idx + 1

    @classmethod
    def wind_shear(cls, tokens: List[str], idx: int) -> Optional[Tuple[WindShear, int]]:
        """Decode "WS Rdd", "WS RWYdd" or "WS ALL RWY"."""
        if _token(tokens, idx) != 'WS':
            return None

        following = _token(tokens, idx + 1)
        if following == 'ALL' and _token(tokens, idx + 2) == 'RWY':
            return WindShear(all_runways=True), idx + 3

        match = cls.WIND_SHEAR_RUNWAY_PATTERN.match(following) if following else None
        if not match:
            return None
        return WindShear(runway=match.group('runway')), idx + 2

    @classmethod
    def sea(cls, tokens: List[str], idx: int) -> Optional[Tuple[SeaConditions, int]]:
        """Decode sea surface temperature with sea state (S) or wave height (H, decimetres)."""
        token = _token(tokens, idx)
        match = cls.SEA_PATTERN.match(token) if token else None
        if not match:
            return None

        wave_height = _optional_value(match.group('height'), Unit.METRE)
        sea = SeaConditions(
            sea_surface_temperature=_celsius(match.group('temperature')),
            sea_state=SEA_STATES.get(match.group('state') or ''),
            wave_height=wave_height / 10 if wave_height is not None else None,
        )
        return sea, idx + 1

    @classmethod
    def color(cls, tokens: List[str], idx: int) -> Optional[int]:
        """Skip military colour state groups (BLU, WHT, GRN...)."""
        token = _token(tokens, idx)
        if token is None or not cls.COLOR_PATTERN.match(token):
            return None
        return idx + 1

    @classmethod
    def trend(cls, indicator: TrendIndicator, tokens: List[str]) -> TrendChange:
        """
        Decode the groups of one TREND block.

        Reuses the wind, visibility, weather and cloud grammars of the
        report body; only the attributes present are set.
        """
        change = TrendChange(indicator=indicator)
        unparsed = []
        wind_done = False
        visibility_done = False
        idx = 0

        while idx < len(tokens):
            token = tokens[idx]

            match = cls.TREND_TIME_PATTERN.match(token)
            if match:
                value = DateTimeResolver.resolve_time(int(match.group('hour')), int(match.group('minute')))
                setattr(change, _TREND_TIME_FIELDS[match.group('kind')], value)
                idx += 1
                continue

            if not wind_done:
                decoded = cls.wind(tokens, idx)
                if decoded:
                    wind, idx = decoded
                    change.wind_from_direction = wind.wind_from_direction
                    change.wind_from_direction_range = wind.wind_from_direction_range
                    change.wind_speed = wind.wind_speed
                    change.wind_gust = wind.wind_gust
                    wind_done = True
                    continue

            if not visibility_done:
                decoded = cls.visibility(tokens, idx)
                if decoded:
                    visibility, idx = decoded
                    change.prevailing_visibility = visibility.prevailing_visibility
                    change.minimum_visibility = visibility.minimum_visibility
                    change.directional_visibilities = visibility.directional_visibilities
                    if visibility.is_cavok:
                        change.clouds.append(CloudLayer(cover=CloudCover.CEILING_OK))
                    visibility_done = True
                    continue

            if token == 'NSW':
                change.no_significant_weather = True
                idx += 1
                continue

            decoded = cls.present_weather(tokens, idx)
            if decoded:
                weather, idx = decoded
                change.present_weather.append(weather)
                continue

            decoded = cls.cloud_layer(tokens, idx)
            if decoded:
                layer, idx = decoded
                if layer.has_some():
                    change.clouds.append(layer)
                continue

            if set(token) != {'/'}:
                unparsed.append(token)
            idx += 1

        if unparsed:
            logger.debug("Unparsed %s trend data: %s", indicator.value, " ".join(unparsed))

        return change


_TREND_TIME_FIELDS = {
    'FM': 'from_time',
    'TL': 'until_time',
    'AT': 'at_time',
}


def _pairs(codes: str) -> List[str]:
    return [codes[i:i + 2] for i in range(0, len(codes), 2)]
