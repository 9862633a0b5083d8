"""METAR report data models."""

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Optional, List, Tuple, Dict, Any, Union

from metar_decoder.metar.datetime_resolver import MetarTime, format_time

Number = Union[int, float]


class Unit(Enum):
    """Units attached to decoded quantities, as written in the JSON output."""

    DEGREE_TRUE = "degT"
    KNOT = "kt"
    METRE_PER_SECOND = "m/s"
    KILOMETRE_PER_HOUR = "km/h"
    METRE = "m"
    STATUTE_MILE = "mi"
    FOOT = "ft"
    DEGREE_CELSIUS = "degC"
    HECTOPASCAL = "hPa"
    INCH_OF_MERCURY = "inHg"

    @classmethod
    def from_token(cls, token: str) -> 'Unit':
        """
        Look up the unit used by a report group suffix or prefix.

        Args:
            token: Unit marker as found in a report (e.g. "KT", "SM", "Q")

        Returns:
            Matching Unit

        Raises:
            ValueError: If the marker is unknown
        """
        try:
            return _TOKEN_UNITS[token]
        except KeyError:
            raise ValueError(f"Invalid units, given {token}") from None


_TOKEN_UNITS = {
    'KT': Unit.KNOT,
    'MPS': Unit.METRE_PER_SECOND,
    'KMH': Unit.KILOMETRE_PER_HOUR,
    'SM': Unit.STATUTE_MILE,
    'FT': Unit.FOOT,
    'Q': Unit.HECTOPASCAL,
    'A': Unit.INCH_OF_MERCURY,
}


class ValueType(Enum):
    """Qualifier of a decoded value."""

    EXACT = "exact"
    ABOVE = "above"
    BELOW = "below"
    VARIABLE = "variable"
    RANGE = "range"
    UNLIMITED = "unlimited"
    INDEFINITE = "indefinite"


def parse_number(text: str) -> Number:
    """
    Parse a report number.

    Handles integers ("0800"), fractions ("1/2") and mixed numbers ("1 1/2").
    Integers stay ints, anything with a fraction becomes a float.

    Raises:
        ValueError: If the text is not a number
    """
    text = text.strip()
    if ' ' in text and '/' in text:
        whole, fraction = text.split(None, 1)
        return int(whole) + parse_number(fraction)
    if '/' in text:
        numerator, denominator = text.split('/', 1)
        return int(numerator) / int(denominator)
    return int(text)


@dataclass(frozen=True)
class Value:
    """
    A measured quantity and how it relates to the reported number.

    Range operands are themselves exact, above or below values and never
    ranges. Instances are immutable.

    Example:
        Value.parse("P6", Unit.STATUTE_MILE)   # above 6 mi
        Value.parse("270V040", Unit.DEGREE_TRUE)  # range 270..40 degT
    """

    value_type: ValueType
    value: Any = None
    units: Optional[Unit] = None

    @classmethod
    def exact(cls, value: Number, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.EXACT, value, units)

    @classmethod
    def above(cls, value: Number, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.ABOVE, value, units)

    @classmethod
    def below(cls, value: Number, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.BELOW, value, units)

    @classmethod
    def variable(cls, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.VARIABLE, None, units)

    @classmethod
    def unlimited(cls, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.UNLIMITED, None, units)

    @classmethod
    def indefinite(cls, units: Optional[Unit] = None) -> 'Value':
        return cls(ValueType.INDEFINITE, None, units)

    @classmethod
    def range(cls, low: 'Value', high: 'Value', units: Optional[Unit] = None) -> 'Value':
        """
        Build a range from two bounds.

        Raises:
            ValueError: If a bound is not exact, above or below
        """
        for bound in (low, high):
            if bound.value_type not in _BOUND_TYPES:
                raise ValueError(f"Range bound must be exact, above or below, given {bound.value_type.value}")
        return cls(ValueType.RANGE, (low, high), units)

    @classmethod
    def parse(cls, text: str, units: Optional[Unit] = None) -> 'Value':
        """
        Parse a report value.

        "VRB" is variable, "P" and "M" prefixes mean above and below,
        "aVb" is a range and anything else is an exact number.

        Raises:
            ValueError: If the numeric part cannot be parsed
        """
        if text == 'VRB':
            return cls.variable(units)
        if 'V' in text:
            low, high = text.split('V', 1)
            return cls.range(cls._parse_bound(low), cls._parse_bound(high), units)
        return cls._parse_bound(text, units)

    @classmethod
    def _parse_bound(cls, text: str, units: Optional[Unit] = None) -> 'Value':
        if text.startswith('P'):
            return cls.above(parse_number(text[1:]), units)
        if text.startswith('M'):
            return cls.below(parse_number(text[1:]), units)
        return cls.exact(parse_number(text), units)

    @property
    def is_numeric(self) -> bool:
        return self.value_type in _BOUND_TYPES

    def _map(self, func) -> 'Value':
        if self.value_type == ValueType.RANGE:
            low, high = self.value
            return Value(ValueType.RANGE, (low._map(func), high._map(func)), self.units)
        if self.is_numeric:
            return Value(self.value_type, func(self.value), self.units)
        return self

    def __mul__(self, factor: Number) -> 'Value':
        return self._map(lambda x: x * factor)

    def __truediv__(self, divisor: Number) -> 'Value':
        return self._map(lambda x: x / divisor)

    def to_dict(self) -> dict:
        """Serialize to the tagged {value_type, value, units} form."""
        if self.value_type == ValueType.RANGE:
            value = [bound.to_dict() for bound in self.value]
        else:
            value = self.value
        return {
            'value_type': self.value_type.value,
            'value': value,
            'units': self.units.value if self.units else None,
        }


_BOUND_TYPES = (ValueType.EXACT, ValueType.ABOVE, ValueType.BELOW)


def _dict_or_none(item) -> Optional[dict]:
    return item.to_dict() if item is not None else None


def _enum_or_none(item: Optional[Enum]) -> Optional[str]:
    return item.value if item is not None else None


class ReportType(Enum):
    METAR = "METAR"
    SPECI = "SPECI"


class DirectionOctant(Enum):
    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"


class RunwayVisualRangeTrend(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    NO_CHANGE = "no_change"


class WeatherIntensity(Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class WeatherDescriptor(Enum):
    SHALLOW = "shallow"
    PATCHES = "patches"
    PARTIAL = "partial"
    LOW_DRIFTING = "low_drifting"
    BLOWING = "blowing"
    SHOWER = "shower"
    THUNDERSTORM = "thunderstorm"
    FREEZING = "freezing"


class WeatherPhenomenon(Enum):
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SNOW_GRAINS = "snow_grains"
    ICE_PELLETS = "ice_pellets"
    HAIL = "hail"
    SNOW_PELLETS = "snow_pellets"
    UNKNOWN_PRECIPITATION = "unknown_precipitation"
    MIST = "mist"
    FOG = "fog"
    SMOKE = "smoke"
    VOLCANIC_ASH = "volcanic_ash"
    DUST = "dust"
    SAND = "sand"
    HAZE = "haze"
    DUST_WHIRLS = "dust_whirls"
    SQUALLS = "squalls"
    FUNNEL_CLOUD = "funnel_cloud"
    SANDSTORM = "sandstorm"
    DUSTSTORM = "duststorm"
    ICE_CRYSTALS = "ice_crystals"
    SPRAY = "spray"


class CloudCover(Enum):
    CLEAR = "clear"
    SKY_CLEAR = "sky_clear"
    NIL_SIGNIFICANT_CLOUD = "nil_significant_cloud"
    NO_CLOUD_DETECTED = "no_cloud_detected"
    FEW = "few"
    SCATTERED = "scattered"
    BROKEN = "broken"
    OVERCAST = "overcast"
    VERTICAL_VISIBILITY = "vertical_visibility"
    CEILING_OK = "ceiling_ok"

    @property
    def is_ceiling(self) -> bool:
        """True for covers that constitute a ceiling (BKN, OVC, VV)."""
        return self in (CloudCover.BROKEN, CloudCover.OVERCAST, CloudCover.VERTICAL_VISIBILITY)


class CloudType(Enum):
    ALTOCUMULUS = "altocumulus"
    ALTOCUMULUS_CASTELLANUS = "altocumulus_castellanus"
    ALTOCUMULUS_LENTICULARIS = "altocumulus_lenticularis"
    ALTOSTRATUS = "altostratus"
    CUMULONIMBUS = "cumulonimbus"
    CUMULONIMBUS_MAMMATUS = "cumulonimbus_mammatus"
    CIRROCUMULUS = "cirrocumulus"
    CIRROCUMULUS_LENTICULARIS = "cirrocumulus_lenticularis"
    CIRRUS = "cirrus"
    CIRROSTRATUS = "cirrostratus"
    CUMULUS = "cumulus"
    NIMBOSTRATUS = "nimbostratus"
    STRATOCUMULUS = "stratocumulus"
    STRATOCUMULUS_LENTICULARIS = "stratocumulus_lenticularis"
    STRATUS = "stratus"
    TOWERING_CUMULUS = "towering_cumulus"


class SeaState(Enum):
    """State of the sea surface, WMO code table 3700."""

    CALM_GLASSY = "calm_glassy"
    CALM_RIPPLED = "calm_rippled"
    SMOOTH = "smooth"
    SLIGHT = "slight"
    MODERATE = "moderate"
    ROUGH = "rough"
    VERY_ROUGH = "very_rough"
    HIGH = "high"
    VERY_HIGH = "very_high"
    PHENOMENAL = "phenomenal"


class TrendIndicator(Enum):
    TEMPORARY = "temporary"
    BECOMING = "becoming"
    NO_SIGNIFICANT_CHANGE = "no_significant_change"


# Report code lookup tables, read-only after import.
DIRECTION_OCTANTS: Dict[str, DirectionOctant] = {
    'N': DirectionOctant.NORTH,
    'NE': DirectionOctant.NORTH_EAST,
    'E': DirectionOctant.EAST,
    'SE': DirectionOctant.SOUTH_EAST,
    'S': DirectionOctant.SOUTH,
    'SW': DirectionOctant.SOUTH_WEST,
    'W': DirectionOctant.WEST,
    'NW': DirectionOctant.NORTH_WEST,
}

RVR_TRENDS: Dict[str, RunwayVisualRangeTrend] = {
    'U': RunwayVisualRangeTrend.INCREASING,
    'D': RunwayVisualRangeTrend.DECREASING,
    'N': RunwayVisualRangeTrend.NO_CHANGE,
}

WEATHER_INTENSITIES: Dict[str, WeatherIntensity] = {
    '-': WeatherIntensity.LIGHT,
    '+': WeatherIntensity.HEAVY,
}

WEATHER_DESCRIPTORS: Dict[str, WeatherDescriptor] = {
    'MI': WeatherDescriptor.SHALLOW,
    'BC': WeatherDescriptor.PATCHES,
    'PR': WeatherDescriptor.PARTIAL,
    'DR': WeatherDescriptor.LOW_DRIFTING,
    'BL': WeatherDescriptor.BLOWING,
    'SH': WeatherDescriptor.SHOWER,
    'TS': WeatherDescriptor.THUNDERSTORM,
    'FZ': WeatherDescriptor.FREEZING,
}

WEATHER_PHENOMENA: Dict[str, WeatherPhenomenon] = {
    'DZ': WeatherPhenomenon.DRIZZLE,
    'RA': WeatherPhenomenon.RAIN,
    'SN': WeatherPhenomenon.SNOW,
    'SG': WeatherPhenomenon.SNOW_GRAINS,
    'PL': WeatherPhenomenon.ICE_PELLETS,
    'GR': WeatherPhenomenon.HAIL,
    'GS': WeatherPhenomenon.SNOW_PELLETS,
    'UP': WeatherPhenomenon.UNKNOWN_PRECIPITATION,
    'BR': WeatherPhenomenon.MIST,
    'FG': WeatherPhenomenon.FOG,
    'FU': WeatherPhenomenon.SMOKE,
    'VA': WeatherPhenomenon.VOLCANIC_ASH,
    'DU': WeatherPhenomenon.DUST,
    'SA': WeatherPhenomenon.SAND,
    'HZ': WeatherPhenomenon.HAZE,
    'PO': WeatherPhenomenon.DUST_WHIRLS,
    'SQ': WeatherPhenomenon.SQUALLS,
    'FC': WeatherPhenomenon.FUNNEL_CLOUD,
    'SS': WeatherPhenomenon.SANDSTORM,
    'DS': WeatherPhenomenon.DUSTSTORM,
    'IC': WeatherPhenomenon.ICE_CRYSTALS,
    'PY': WeatherPhenomenon.SPRAY,
}

CLOUD_COVERS: Dict[str, CloudCover] = {
    'CLR': CloudCover.CLEAR,
    'SKC': CloudCover.SKY_CLEAR,
    'NSC': CloudCover.NIL_SIGNIFICANT_CLOUD,
    'NCD': CloudCover.NO_CLOUD_DETECTED,
    'FEW': CloudCover.FEW,
    'SCT': CloudCover.SCATTERED,
    'BKN': CloudCover.BROKEN,
    'OVC': CloudCover.OVERCAST,
    'VV': CloudCover.VERTICAL_VISIBILITY,
}

CLOUD_TYPES: Dict[str, CloudType] = {
    'AC': CloudType.ALTOCUMULUS,
    'ACC': CloudType.ALTOCUMULUS_CASTELLANUS,
    'ACSL': CloudType.ALTOCUMULUS_LENTICULARIS,
    'AS': CloudType.ALTOSTRATUS,
    'CB': CloudType.CUMULONIMBUS,
    'CBMAM': CloudType.CUMULONIMBUS_MAMMATUS,
    'CC': CloudType.CIRROCUMULUS,
    'CCSL': CloudType.CIRROCUMULUS_LENTICULARIS,
    'CI': CloudType.CIRRUS,
    'CS': CloudType.CIRROSTRATUS,
    'CU': CloudType.CUMULUS,
    'NS': CloudType.NIMBOSTRATUS,
    'SC': CloudType.STRATOCUMULUS,
    'SCSL': CloudType.STRATOCUMULUS_LENTICULARIS,
    'ST': CloudType.STRATUS,
    'TCU': CloudType.TOWERING_CUMULUS,
}

SEA_STATES: Dict[str, SeaState] = {str(code): state for code, state in enumerate(SeaState)}

TREND_INDICATORS: Dict[str, TrendIndicator] = {
    'TEMPO': TrendIndicator.TEMPORARY,
    'BECMG': TrendIndicator.BECOMING,
    'NOSIG': TrendIndicator.NO_SIGNIFICANT_CHANGE,
}


@dataclass(frozen=True)
class DirectionalVisibility:
    visibility: Value
    direction: DirectionOctant

    def to_dict(self) -> dict:
        return {
            'visibility': self.visibility.to_dict(),
            'direction': self.direction.value,
        }


@dataclass(frozen=True)
class RunwayVisualRange:
    """Runway visual range for one runway, e.g. R23/1100D."""

    runway: str
    visual_range: Value
    trend: Optional[RunwayVisualRangeTrend] = None

    def to_dict(self) -> dict:
        return {
            'runway': self.runway,
            'visual_range': self.visual_range.to_dict(),
            'trend': _enum_or_none(self.trend),
        }


@dataclass(frozen=True)
class WeatherCondition:
    """
    One present or recent weather group.

    Descriptors and phenomena keep the order in which they appear in the
    group, so "+TSRA" gives descriptors [THUNDERSTORM], phenomena [RAIN].
    """

    intensity: WeatherIntensity = WeatherIntensity.MODERATE
    is_in_vicinity: bool = False
    descriptors: Tuple[WeatherDescriptor, ...] = ()
    phenomena: Tuple[WeatherPhenomenon, ...] = ()

    def to_dict(self) -> dict:
        return {
            'intensity': self.intensity.value,
            'is_in_vicinity': self.is_in_vicinity,
            'descriptors': [d.value for d in self.descriptors],
            'phenomena': [p.value for p in self.phenomena],
        }


@dataclass(frozen=True)
class CloudLayer:
    """
    A single cloud group.

    Height is above ground level, in feet.
    """

    cover: Optional[CloudCover] = None
    height: Optional[Value] = None
    cloud_type: Optional[CloudType] = None

    def has_some(self) -> bool:
        return self.cover is not None or self.height is not None or self.cloud_type is not None

    def to_dict(self) -> dict:
        return {
            'cover': _enum_or_none(self.cover),
            'height': _dict_or_none(self.height),
            'cloud_type': _enum_or_none(self.cloud_type),
        }


@dataclass(frozen=True)
class WindShear:
    """Wind shear warning for one runway, or for all of them."""

    runway: Optional[str] = None
    all_runways: bool = False

    def to_dict(self) -> dict:
        return {
            'runway': self.runway,
            'all_runways': self.all_runways,
        }


@dataclass
class Header:
    report_type: Optional[ReportType] = None
    station_id: Optional[str] = None
    observation_time: Optional[MetarTime] = None
    is_corrected: bool = False
    is_automated: bool = False


@dataclass
class Wind:
    wind_from_direction: Optional[Value] = None
    wind_from_direction_range: Optional[Value] = None
    wind_speed: Optional[Value] = None
    wind_gust: Optional[Value] = None


@dataclass
class Visibility:
    prevailing_visibility: Optional[Value] = None
    minimum_visibility: Optional[Value] = None
    directional_visibilities: List[DirectionalVisibility] = field(default_factory=list)
    is_cavok: bool = False


@dataclass
class Temperature:
    temperature: Optional[Value] = None
    dew_point: Optional[Value] = None


@dataclass
class SeaConditions:
    sea_surface_temperature: Optional[Value] = None
    sea_state: Optional[SeaState] = None
    wave_height: Optional[Value] = None


def _time_or_none(t: Optional[time]) -> Optional[str]:
    return format_time(t) if t is not None else None


@dataclass
class TrendChange:
    """
    A TREND change block (TEMPO, BECMG or NOSIG).

    Only the attributes announced as changing are set; everything else
    stays None or empty. Filled in by SectionDecoder.trend and read-only
    once returned.
    """

    indicator: TrendIndicator
    from_time: Optional[time] = None
    until_time: Optional[time] = None
    at_time: Optional[time] = None

    wind_from_direction: Optional[Value] = None
    wind_from_direction_range: Optional[Value] = None
    wind_speed: Optional[Value] = None
    wind_gust: Optional[Value] = None

    prevailing_visibility: Optional[Value] = None
    minimum_visibility: Optional[Value] = None
    directional_visibilities: List[DirectionalVisibility] = field(default_factory=list)

    present_weather: List[WeatherCondition] = field(default_factory=list)
    no_significant_weather: bool = False

    clouds: List[CloudLayer] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'indicator': self.indicator.value,
            'from_time': _time_or_none(self.from_time),
            'until_time': _time_or_none(self.until_time),
            'at_time': _time_or_none(self.at_time),
            'wind_from_direction': _dict_or_none(self.wind_from_direction),
            'wind_from_direction_range': _dict_or_none(self.wind_from_direction_range),
            'wind_speed': _dict_or_none(self.wind_speed),
            'wind_gust': _dict_or_none(self.wind_gust),
            'prevailing_visibility': _dict_or_none(self.prevailing_visibility),
            'minimum_visibility': _dict_or_none(self.minimum_visibility),
            'directional_visibilities': [v.to_dict() for v in self.directional_visibilities],
            'present_weather': [w.to_dict() for w in self.present_weather],
            'no_significant_weather': self.no_significant_weather,
            'clouds': [c.to_dict() for c in self.clouds],
        }


@dataclass
class Metar:
    """
    Decoded METAR or SPECI report.

    MetarDecoder.decode builds a new instance, lists included, on every call
    and does not touch it afterwards; callers treat it as read-only.

    Attributes:
        report_type: METAR or SPECI when the report carries the prefix
        station_id: ICAO station identifier
        observation_time: Day and time, or full datetime when an anchor was given
        is_corrected: Report is a correction (COR, CCA..CCZ)
        is_automated: Report is fully automated (AUTO)
        wind_from_direction: Mean wind direction in degrees true
        wind_from_direction_range: Range of wind direction variation
        wind_speed: Mean wind speed
        wind_gust: Gust speed
        prevailing_visibility: Prevailing visibility
        minimum_visibility: Minimum visibility
        directional_visibilities: Visibility per direction octant
        runway_visual_ranges: RVR groups in report order
        present_weather: Present weather groups in report order
        clouds: Cloud layers in report order
        ceiling: Lowest BKN/OVC/VV layer height, derived from clouds
        temperature: Air temperature
        dew_point: Dew point temperature
        pressure: QNH (hPa) or altimeter setting (inHg)
        recent_weather: Recent weather groups (RE...)
        wind_shears: Wind shear warnings
        sea_surface_temperature: Sea surface temperature
        sea_state: State of the sea
        wave_height: Significant wave height
        trends: TREND change blocks
        remarks: Verbatim text after RMK
        report: The report text as given to the decoder
    """

    report: str
    station_id: str = ""
    report_type: Optional[ReportType] = None
    observation_time: Optional[MetarTime] = None
    is_corrected: bool = False
    is_automated: bool = False

    # Wind
    wind_from_direction: Optional[Value] = None
    wind_from_direction_range: Optional[Value] = None
    wind_speed: Optional[Value] = None
    wind_gust: Optional[Value] = None

    # Visibility
    prevailing_visibility: Optional[Value] = None
    minimum_visibility: Optional[Value] = None
    directional_visibilities: List[DirectionalVisibility] = field(default_factory=list)
    runway_visual_ranges: List[RunwayVisualRange] = field(default_factory=list)

    # Weather & clouds
    present_weather: List[WeatherCondition] = field(default_factory=list)
    clouds: List[CloudLayer] = field(default_factory=list)
    ceiling: Optional[Value] = None

    # Temperature & pressure
    temperature: Optional[Value] = None
    dew_point: Optional[Value] = None
    pressure: Optional[Value] = None

    # Supplementary information
    recent_weather: List[WeatherCondition] = field(default_factory=list)
    wind_shears: List[WindShear] = field(default_factory=list)
    sea_surface_temperature: Optional[Value] = None
    sea_state: Optional[SeaState] = None
    wave_height: Optional[Value] = None

    trends: List[TrendChange] = field(default_factory=list)
    remarks: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON export."""
        return {
            'report_type': _enum_or_none(self.report_type),
            'station_id': self.station_id,
            'observation_time': _dict_or_none(self.observation_time),
            'is_corrected': self.is_corrected,
            'is_automated': self.is_automated,
            'wind_from_direction': _dict_or_none(self.wind_from_direction),
            'wind_from_direction_range': _dict_or_none(self.wind_from_direction_range),
            'wind_speed': _dict_or_none(self.wind_speed),
            'wind_gust': _dict_or_none(self.wind_gust),
            'prevailing_visibility': _dict_or_none(self.prevailing_visibility),
            'minimum_visibility': _dict_or_none(self.minimum_visibility),
            'directional_visibilities': [v.to_dict() for v in self.directional_visibilities],
            'runway_visual_ranges': [r.to_dict() for r in self.runway_visual_ranges],
            'present_weather': [w.to_dict() for w in self.present_weather],
            'clouds': [c.to_dict() for c in self.clouds],
            'ceiling': _dict_or_none(self.ceiling),
            'temperature': _dict_or_none(self.temperature),
            'dew_point': _dict_or_none(self.dew_point),
            'pressure': _dict_or_none(self.pressure),
            'recent_weather': [w.to_dict() for w in self.recent_weather],
            'wind_shears': [ws.to_dict() for ws in self.wind_shears],
            'sea_surface_temperature': _dict_or_none(self.sea_surface_temperature),
            'sea_state': _enum_or_none(self.sea_state),
            'wave_height': _dict_or_none(self.wave_height),
            'trends': [t.to_dict() for t in self.trends],
            'remarks': self.remarks,
            'report': self.report,
        }

    def __repr__(self) -> str:
        return f"Metar({self.station_id} {self.report!r})"
