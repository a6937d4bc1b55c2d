"""
Pytest configuration for unit tests.

Provides fixtures that apply to all unit tests:
- Fresh config singletons per test
- Builders for APT_BASE.csv files and cycle archives in tmp_path
- Sample airport records
"""

import io
import zipfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

import nasr_airports.config as config_module
from nasr_airports.models import Airport


APT_BASE_HEADER = [
    'EFF_DATE', 'SITE_NO', 'ARPT_ID', 'ARPT_NAME', 'CITY', 'STATE_CODE',
    'LAT_DECIMAL', 'LONG_DECIMAL', 'FUEL_TYPES'
]


@pytest.fixture(autouse=True, scope="function")
def reset_config_singletons():
    """
    Reset cached config singletons around every test.

    Prevents environment overrides made by one test (monkeypatch.setenv)
    from leaking into the next through get_app_config().
    """
    config_module._app_config = None
    config_module._config = None
    yield
    config_module._app_config = None
    config_module._config = None


def _csv_line(values: List[str]) -> str:
    out = []
    for value in values:
        if ',' in value or '"' in value:
            value = '"' + value.replace('"', '""') + '"'
        out.append(value)
    return ','.join(out)


def build_apt_base_csv(rows: List[Dict[str, str]], header: Optional[List[str]] = None) -> str:
    """Render APT_BASE.csv text; missing keys become empty cells."""
    header = header or APT_BASE_HEADER
    lines = [_csv_line(header)]
    for row in rows:
        lines.append(_csv_line([row.get(col, '') for col in header]))
    return '\n'.join(lines) + '\n'


def build_cycle_zip_bytes(members: Dict[str, str]) -> bytes:
    """Build an in-memory ZIP archive from {member_name: text}."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as zf:
        for name, text in members.items():
            zf.writestr(name, text)
    return buffer.getvalue()


SAMPLE_ROWS = [
    {
        'ARPT_ID': 'OSH', 'ARPT_NAME': 'WITTMAN RGNL', 'CITY': 'OSHKOSH',
        'STATE_CODE': 'WI', 'LAT_DECIMAL': '43.98444444',
        'LONG_DECIMAL': '-88.55694444', 'FUEL_TYPES': '100LL,JET A',
    },
    {
        'ARPT_ID': '0A9', 'ARPT_NAME': 'ELIZABETHTON MUNI', 'CITY': 'ELIZABETHTON',
        'STATE_CODE': 'TN', 'LAT_DECIMAL': '36.37122222',
        'LONG_DECIMAL': '-82.17341667', 'FUEL_TYPES': '100LL,MOGAS',
    },
    {
        'ARPT_ID': '3CK', 'ARPT_NAME': 'LAKE IN THE HILLS', 'CITY': 'LAKE IN THE HILLS',
        'STATE_CODE': 'IL', 'LAT_DECIMAL': '42.20686111',
        'LONG_DECIMAL': '-88.32305556', 'FUEL_TYPES': '',
    },
]


@pytest.fixture
def sample_rows() -> List[Dict[str, str]]:
    return [dict(row) for row in SAMPLE_ROWS]


@pytest.fixture
def make_apt_csv(tmp_path):
    """Helper to write an APT_BASE.csv file."""
    def _make(rows: List[Dict[str, str]], header: Optional[List[str]] = None,
              name: str = 'APT_BASE.csv', encoding: str = 'utf-8') -> Path:
        path = tmp_path / name
        path.write_text(build_apt_base_csv(rows, header), encoding=encoding)
        return path
    return _make


@pytest.fixture
def make_cycle_zip(tmp_path):
    """Helper to write a cycle archive containing APT_BASE.csv (and extras)."""
    def _make(rows: List[Dict[str, str]], member_name: str = 'APT_BASE.csv',
              directory: Optional[Path] = None, extra: Optional[Dict[str, str]] = None) -> Path:
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        members = {member_name: build_apt_base_csv(rows)}
        members.update(extra or {})
        zip_path = directory / 'cycle.zip'
        zip_path.write_bytes(build_cycle_zip_bytes(members))
        return zip_path
    return _make


def make_airport(arpt_id: str, lat: float, lon: float,
                 mogas: bool = False, avgas: bool = False, jet: bool = False,
                 name: Optional[str] = None) -> Airport:
    return Airport(
        arpt_id=arpt_id,
        name=name or f"{arpt_id} FIELD",
        city="CITY",
        state="WI",
        icao=f"K{arpt_id}",
        lat=lat,
        lon=lon,
        fuel={'mogas': mogas, '100ll': avgas, 'jet_a': jet},
    )


@pytest.fixture
def sample_airports() -> List[Airport]:
    """Airports around Oshkosh plus one far away and one without fuel."""
    return [
        make_airport('LAX', 33.9425, -118.4081, avgas=True, jet=True),    # far
        make_airport('OSH', 43.9844, -88.5569, avgas=True, jet=True),     # center
        make_airport('FLD', 43.7711, -88.4884, mogas=True),               # ~15 mi
        make_airport('ATW', 44.2581, -88.5191, avgas=True),               # ~19 mi
        make_airport('NOF', 44.0000, -88.6000),                           # no fuel
    ]


@pytest.fixture
def airport_factory():
    """Factory for Airport records: airport_factory('OSH', lat, lon, avgas=True)."""
    return make_airport


@pytest.fixture
def zip_bytes_factory():
    """Factory for in-memory archives: zip_bytes_factory({'APT_BASE.csv': text})."""
    return build_cycle_zip_bytes


@pytest.fixture
def apt_csv_text():
    """Renderer for APT_BASE.csv text: apt_csv_text(rows)."""
    return build_apt_base_csv
