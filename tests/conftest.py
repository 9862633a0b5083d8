import pytest
from pathlib import Path

LFBD_REPORT = (
    "METAR LFBD 121600Z 33015G32KT 270V040 9999 R23/1100D +TSRA BCFG "
    "FEW020 SCT030CB BKN045 18/15 Q1012 RESHRA TEMPO 4000 SHRA BKN015TCU RMK AO2"
)


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def lfbd_report() -> str:
    """Return the LFBD report used as golden fixture."""
    return LFBD_REPORT


@pytest.fixture
def cycles_file(test_assets_dir) -> Path:
    return test_assets_dir / 'cycles_16Z.TXT'


@pytest.fixture
def plain_file(test_assets_dir) -> Path:
    return test_assets_dir / 'plain_reports.txt'
