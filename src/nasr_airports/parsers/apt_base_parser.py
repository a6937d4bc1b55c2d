"""
Parser for NASR APT_BASE.csv airport base records.

Only the columns needed by the map are read. Every value is read as text
so identifiers like '0A9' and empty cells survive unchanged; coordinates
and fuel flags are derived afterwards.
"""

from pathlib import Path
from typing import Dict, List, Optional
import logging

import pandas as pd

from nasr_airports.config import get_config
from nasr_airports.models import Airport

logger = logging.getLogger(__name__)

COL_ID = 'ARPT_ID'
COL_LAT = 'LAT_DECIMAL'
COL_LON = 'LONG_DECIMAL'
COL_NAME = 'ARPT_NAME'
COL_CITY = 'CITY'
COL_STATE = 'STATE_CODE'
COL_FUEL = 'FUEL_TYPES'

REQUIRED_COLUMNS = [COL_ID, COL_LAT, COL_LON, COL_NAME, COL_CITY, COL_STATE, COL_FUEL]


def parse_fuel(value: Optional[str], fuel_types: Optional[Dict[str, str]] = None) -> Dict[str, bool]:
    """
    Detect available fuels in a FUEL_TYPES value.

    Args:
        value: Raw FUEL_TYPES cell (e.g. '100LL,A,MOGAS')
        fuel_types: fuel key -> keyword (defaults to config/fuel_types.yaml)

    Returns:
        {fuel_key: bool} in configured order

    Example:
        >>> parse_fuel('100LL,A')
        {'mogas': False, '100ll': True, 'jet_a': False}
        >>> parse_fuel('100LL,JET A,MOGAS')
        {'mogas': True, '100ll': True, 'jet_a': True}
    """
    if fuel_types is None:
        fuel_types = get_config().keywords()

    upper = (value or '').upper()
    return {key: keyword.upper() in upper for key, keyword in fuel_types.items()}


def _read_header(csv_path: Path) -> List[str]:
    return list(pd.read_csv(
        csv_path,
        nrows=0,
        index_col=False,
        encoding='utf-8-sig',
        encoding_errors='replace',
        engine='python',
    ).columns)


def _read_apt_base(csv_path: Path) -> pd.DataFrame:
    width = len(_read_header(csv_path))

    def trim_row(fields: List[str]) -> List[str]:
        # Rows with trailing extra fields keep their leading columns
        return fields[:width]

    return pd.read_csv(
        csv_path,
        dtype=str,
        keep_default_na=False,
        index_col=False,
        usecols=lambda c: c in REQUIRED_COLUMNS,
        encoding='utf-8-sig',
        encoding_errors='replace',
        on_bad_lines=trim_row,
        engine='python',
    )


def _to_float(series: pd.Series) -> pd.Series:
    # Unparseable or non-finite coordinates become 0.0
    values = pd.to_numeric(series.str.strip(), errors='coerce')
    return values.replace([float('inf'), float('-inf')], float('nan')).fillna(0.0)


def parse_airports(
    csv_path: Path,
    fuel_types: Optional[Dict[str, str]] = None,
    icao_prefix: str = 'K'
) -> List[Airport]:
    """
    Parse APT_BASE.csv into Airport records.

    Args:
        csv_path: Path to the extracted APT_BASE.csv
        fuel_types: fuel key -> keyword (defaults to config/fuel_types.yaml)
        icao_prefix: Prefix for the derived ICAO code

    Returns:
        List of Airport records in file order

    Raises:
        ValueError: If required columns are missing
        FileNotFoundError: If csv_path does not exist

    Example:
        >>> airports = parse_airports(Path('data/temp/APT_BASE.csv'))
        >>> airports[0].icao
        'K00A'
    """
    csv_path = Path(csv_path)
    if fuel_types is None:
        fuel_types = get_config().keywords()

    # Short rows come back as NaN
    df = _read_apt_base(csv_path).fillna('')

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required columns in {csv_path.name}: {missing}. "
            f"Found columns: {list(df.columns)}"
        )

    df[COL_ID] = df[COL_ID].str.strip()
    blank_ids = df[COL_ID] == ''
    if blank_ids.any():
        logger.warning(f"Skipping {int(blank_ids.sum())} rows with blank {COL_ID}")
        df = df[~blank_ids]

    lats = _to_float(df[COL_LAT])
    lons = _to_float(df[COL_LON])

    airports = [
        Airport(
            arpt_id=arpt_id,
            name=name,
            city=city,
            state=state,
            icao=f"{icao_prefix}{arpt_id}",
            lat=float(lat),
            lon=float(lon),
            fuel=parse_fuel(fuel, fuel_types),
        )
        for arpt_id, name, city, state, fuel, lat, lon in zip(
            df[COL_ID], df[COL_NAME], df[COL_CITY], df[COL_STATE], df[COL_FUEL], lats, lons
        )
    ]

    logger.info(f"Parsed {len(airports)} airports from {csv_path.name}")
    return airports
