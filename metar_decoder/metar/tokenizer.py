"""Splitting of raw METAR text into groups and report sections."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple

from metar_decoder.metar.models import TrendIndicator, TREND_INDICATORS


class Section(Enum):
    """Section boundary markers."""

    TREND = "TREND"
    REMARK = "RMK"


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited report group."""

    text: str
    section: Optional[Section] = None

    @property
    def is_marker(self) -> bool:
        return self.section is not None


@dataclass
class SectionSplit:
    """
    Report groups grouped by section.

    Attributes:
        main: Groups of the report body, before any trend or remark marker
        trends: One (indicator, groups) pair per TEMPO/BECMG/NOSIG marker
        remarks: Verbatim text after RMK, None when there is no RMK
    """

    main: List[str] = field(default_factory=list)
    trends: List[Tuple[TrendIndicator, List[str]]] = field(default_factory=list)
    remarks: Optional[str] = None


class MetarTokenizer:
    """
    Tokenize METAR text.

    Example:
        tokens = MetarTokenizer.tokenize("LFBD 121600Z 33015KT NOSIG=")
        split = MetarTokenizer.split_sections(tokens)
    """

    WHITESPACE_PATTERN = re.compile(r'\s+')
    # trailing "=" terminators, possibly separated by spaces
    END_PATTERN = re.compile(r'[\s=]*$')

    @classmethod
    def normalize(cls, text: str) -> str:
        """Upper-case, drop NULs, collapse whitespace and strip terminators."""
        text = text.upper().replace('\x00', '')
        text = cls.WHITESPACE_PATTERN.sub(' ', text).strip()
        return cls.END_PATTERN.sub('', text)

    @classmethod
    def tokenize(cls, text: str) -> List[Token]:
        """
        Split report text into tokens, tagging section markers.

        Everything after RMK is returned as plain tokens, untagged.
        """
        normalized = cls.normalize(text)
        if not normalized:
            return []

        tokens = []
        in_remarks = False
        for group in normalized.split(' '):
            if in_remarks:
                tokens.append(Token(group))
            elif group == Section.REMARK.value:
                tokens.append(Token(group, Section.REMARK))
                in_remarks = True
            elif group in TREND_INDICATORS:
                tokens.append(Token(group, Section.TREND))
            else:
                tokens.append(Token(group))
        return tokens

    @classmethod
    def split_sections(cls, tokens: List[Token]) -> SectionSplit:
        split = SectionSplit()
        current = split.main

        for idx, token in enumerate(tokens):
            if token.section == Section.REMARK:
                split.remarks = ' '.join(t.text for t in tokens[idx + 1:])
                break
            if token.section == Section.TREND:
                current = []
                split.trends.append((TREND_INDICATORS[token.text], current))
                continue
            current.append(token.text)

        return split
