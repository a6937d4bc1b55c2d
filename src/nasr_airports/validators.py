"""
Reusable field validators for Pydantic models.

These validators work with the fuel types in config/fuel_types.yaml and can be
used with Pydantic @field_validator decorator for automatic input validation.
"""

from typing import List
from nasr_airports.config import get_config


def validate_fuel_types(keys: List[str]) -> List[str]:
    """
    Validate fuel keys against config/fuel_types.yaml.

    Args:
        keys: List of fuel keys to validate (e.g., ['mogas', '100ll'])

    Returns:
        The validated list of keys (unchanged if all valid)

    Raises:
        ValueError: If any key is not configured, listing the invalid keys

    Example:
        >>> validate_fuel_types(['100ll'])
        ['100ll']
        >>> validate_fuel_types(['diesel'])  # Raises ValueError
    """
    # Empty selection is valid (it just matches nothing)
    if not keys:
        return keys

    config = get_config()

    invalid = [k for k in keys if not config.is_valid_fuel_type(k)]

    if invalid:
        raise ValueError(
            f"Invalid fuel types: {invalid}\n"
            f"Valid fuel types: {list(config.fuel_types.keys())}\n"
            f"Use FuelTypes.list_available() to see all options."
        )

    return keys


def validate_arpt_id(arpt_id: str) -> str:
    """
    Validate an FAA location identifier (3-4 alphanumeric characters).

    Args:
        arpt_id: Identifier to validate (e.g., 'OSH', '3CK')

    Returns:
        The identifier, stripped and upper-cased

    Raises:
        ValueError: If the identifier is not 3-4 alphanumeric characters

    Example:
        >>> validate_arpt_id(' osh ')
        'OSH'
    """
    code = (arpt_id or '').strip().upper()
    if not code.isalnum() or not 3 <= len(code) <= 4:
        raise ValueError(
            f"Airport ID must be 3-4 alphanumeric characters, got: '{arpt_id}'\n"
            f"Example: 'OSH' (Wittman Regional)"
        )
    return code


def validate_latitude(lat: float) -> float:
    """Validate latitude is within [-90, 90]."""
    if lat < -90 or lat > 90:
        raise ValueError(f"Latitude {lat} is out of valid range (-90 to 90)")
    return lat


def validate_longitude(lon: float) -> float:
    """Validate longitude is within [-180, 180]."""
    if lon < -180 or lon > 180:
        raise ValueError(f"Longitude {lon} is out of valid range (-180 to 180)")
    return lon


def validate_radius_miles(radius: float) -> float:
    """
    Validate a search radius in statute miles.

    Raises:
        ValueError: If radius is not positive
    """
    if radius <= 0:
        raise ValueError(f"Radius must be positive, got: {radius}")
    return radius
