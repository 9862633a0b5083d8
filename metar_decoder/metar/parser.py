"""METAR report decoder assembling the section decoders."""

import logging
from datetime import date, datetime
from typing import Optional, List, Union

from metar_decoder.exceptions import MetarDecodeError
from metar_decoder.metar.models import Metar, Value, Unit, CloudLayer, CloudCover
from metar_decoder.metar.sections import SectionDecoder
from metar_decoder.metar.tokenizer import MetarTokenizer

logger = logging.getLogger(__name__)

Anchor = Union[date, datetime]


class MetarDecoder:
    """
    Decode METAR and SPECI reports into Metar objects.

    Groups of the report body are offered to the section decoders in a fixed
    priority order; the first decoder accepting the group at the cursor
    consumes it. Groups nobody accepts are skipped, so a malformed group
    only loses its own information.

    Example:
        metar = MetarDecoder.decode(
            "LFBD 121600Z 33015G32KT 270V040 9999 FEW020 18/15 Q1012",
            anchor=date(2023, 5, 10),
        )
    """

    @classmethod
    def decode(cls, report: str, anchor: Optional[Anchor] = None) -> Metar:
        """
        Decode a single report.

        Args:
            report: Raw report text
            anchor: Date close to the one the report was issued on, used to
                resolve the full observation datetime

        Returns:
            Decoded Metar

        Raises:
            MetarDecodeError: If no station header can be found
        """
        tokens = MetarTokenizer.tokenize(report)
        split = MetarTokenizer.split_sections(tokens)

        metar = Metar(report=report.strip(), remarks=split.remarks)
        header_found = cls._decode_main(metar, split.main, anchor)
        if not header_found:
            raise MetarDecodeError("No station header found", report=metar.report)

        metar.trends = [SectionDecoder.trend(indicator, group) for indicator, group in split.trends]
        metar.ceiling = cls.calculate_ceiling(metar.clouds)
        return metar

    @classmethod
    def _decode_main(cls, metar: Metar, tokens: List[str], anchor: Optional[Anchor]) -> bool:
        header_found = False
        wind_found = False
        visibility_found = False
        temperature_found = False
        pressure_found = False
        sea_found = False
        unparsed = []

        idx = 0
        while idx < len(tokens):
            if not header_found:
                decoded = SectionDecoder.header(tokens, idx, anchor)
                if decoded:
                    header, idx = decoded
                    metar.report_type = header.report_type
                    metar.station_id = header.station_id
                    metar.observation_time = header.observation_time
                    metar.is_corrected = header.is_corrected
                    metar.is_automated = header.is_automated
                    header_found = True
                    continue

            if not wind_found:
                decoded = SectionDecoder.wind(tokens, idx)
                if decoded:
                    wind, idx = decoded
                    metar.wind_from_direction = wind.wind_from_direction
                    metar.wind_from_direction_range = wind.wind_from_direction_range
                    metar.wind_speed = wind.wind_speed
                    metar.wind_gust = wind.wind_gust
                    wind_found = True
                    continue
            elif metar.wind_from_direction_range is None:
                decoded = SectionDecoder.wind_variability(tokens, idx)
                if decoded:
                    metar.wind_from_direction_range, idx = decoded
                    continue

            if not visibility_found:
                decoded = SectionDecoder.visibility(tokens, idx)
                if decoded:
                    visibility, idx = decoded
                    metar.prevailing_visibility = visibility.prevailing_visibility
                    metar.minimum_visibility = visibility.minimum_visibility
                    metar.directional_visibilities = visibility.directional_visibilities
                    if visibility.is_cavok:
                        metar.clouds.append(CloudLayer(cover=CloudCover.CEILING_OK))
                    visibility_found = True
                    continue

            decoded = SectionDecoder.runway_visual_range(tokens, idx)
            if decoded:
                rvr, idx = decoded
                metar.runway_visual_ranges.append(rvr)
                continue

            decoded = SectionDecoder.present_weather(tokens, idx)
            if decoded:
                weather, idx = decoded
                metar.present_weather.append(weather)
                continue

            decoded = SectionDecoder.cloud_layer(tokens, idx)
            if decoded:
                layer, idx = decoded
                if layer.has_some():
                    metar.clouds.append(layer)
                continue

            if not temperature_found:
                decoded = SectionDecoder.temperature(tokens, idx)
                if decoded:
                    temperature, idx = decoded
                    metar.temperature = temperature.temperature
                    metar.dew_point = temperature.dew_point
                    temperature_found = True
                    continue

            decoded = SectionDecoder.pressure(tokens, idx)
            if decoded:
                pressure, idx = decoded
                # later groups repeat the setting in another unit
                if not pressure_found:
                    metar.pressure = pressure
                    pressure_found = True
                continue

            decoded = SectionDecoder.recent_weather(tokens, idx)
            if decoded:
                weather, idx = decoded
                metar.recent_weather.append(weather)
                continue

            decoded = SectionDecoder.wind_shear(tokens, idx)
            if decoded:
                wind_shear, idx = decoded
                metar.wind_shears.append(wind_shear)
                continue

            if not sea_found:
                decoded = SectionDecoder.sea(tokens, idx)
                if decoded:
                    sea, idx = decoded
                    metar.sea_surface_temperature = sea.sea_surface_temperature
                    metar.sea_state = sea.sea_state
                    metar.wave_height = sea.wave_height
                    sea_found = True
                    continue

            new_idx = SectionDecoder.color(tokens, idx)
            if new_idx is not None:
                idx = new_idx
                continue

            token = tokens[idx]
            if set(token) != {'/'}:
                unparsed.append(token)
            idx += 1

        if unparsed:
            logger.debug("Unparsed data: %s, report: %s", " ".join(unparsed), metar.report)

        return header_found

    @staticmethod
    def calculate_ceiling(clouds: List[CloudLayer]) -> Optional[Value]:
        """
        Compute the ceiling from cloud layers.

        The ceiling is the lowest broken, overcast or vertical visibility
        layer. It is unlimited when only non-ceiling covers are reported,
        indefinite when a ceiling layer has no height, and None when there
        are no cloud groups at all.
        """
        heights = []
        has_ceiling_layer = False
        has_cover = False

        for layer in clouds:
            if layer.cover is None:
                continue
            has_cover = True
            if layer.cover.is_ceiling:
                has_ceiling_layer = True
                if layer.height is not None:
                    heights.append(layer.height.value)

        if not has_cover:
            return None
        if not has_ceiling_layer:
            return Value.unlimited(Unit.FOOT)
        if not heights:
            return Value.indefinite(Unit.FOOT)
        return Value.exact(min(heights), Unit.FOOT)


def decode_metar(report: str, anchor: Optional[Anchor] = None) -> Metar:
    """Decode a METAR report; see MetarDecoder.decode."""
    return MetarDecoder.decode(report, anchor=anchor)
