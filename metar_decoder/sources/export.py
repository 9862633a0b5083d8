"""Export of decoded reports to JSON and tabular form."""

import json
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from metar_decoder.metar.models import Metar

logger = logging.getLogger(__name__)


def metars_to_json(metars: List[Metar], path: Union[str, Path], pretty: bool = False) -> None:
    """
    Save reports as a JSON array of Metar.to_dict() objects.

    Args:
        metars: Reports to save
        path: Output file
        pretty: Indent the output
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([metar.to_dict() for metar in metars], f, indent=2 if pretty else None)
    logger.info(f"Saved {len(metars)} report(s) to {path}")


def metars_to_dataframe(metars: List[Metar]) -> pd.DataFrame:
    """
    Flatten reports into a DataFrame, one row per report.

    Nested values become dotted columns (e.g. "wind_speed.value",
    "wind_speed.units"); list fields such as clouds stay as lists of dicts.
    """
    if not metars:
        return pd.DataFrame()
    return pd.json_normalize([metar.to_dict() for metar in metars], sep='.')
