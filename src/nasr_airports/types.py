"""
Discovery helper classes for exploring airport reference data.

Provides user-facing APIs to discover the configured fuel types and
the supported map search modes.
"""

from typing import Dict, List
from nasr_airports.config import get_config


class FuelTypes:
    """
    Helper class for discovering configured fuel types.

    All methods use the centralized configuration from fuel_types.yaml
    and return copies to prevent accidental mutations.

    Example:
        >>> FuelTypes.list_available()
        {'mogas': 'Mogas', '100ll': '100LL', 'jet_a': 'Jet A'}

        >>> FuelTypes.is_valid('100ll')
        True
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        """
        List all fuel keys with their display labels.

        Returns:
            Dictionary mapping fuel keys to labels, in configured order
        """
        config = get_config()
        return {key: config.get_label(key) for key in config.fuel_types}

    @staticmethod
    def keys() -> List[str]:
        """List fuel keys in configured order."""
        return list(get_config().fuel_types.keys())

    @staticmethod
    def get_label(key: str) -> str:
        """
        Get display label for a fuel key.

        Raises:
            ValueError: If key is not found

        Example:
            >>> FuelTypes.get_label('jet_a')
            'Jet A'
        """
        try:
            return get_config().get_label(key)
        except KeyError as e:
            raise ValueError(f"Unknown fuel type: {key}") from e

    @staticmethod
    def get_keyword(key: str) -> str:
        """
        Get the FUEL_TYPES keyword matched for a fuel key.

        Raises:
            ValueError: If key is not found
        """
        try:
            return get_config().get_keyword(key)
        except KeyError as e:
            raise ValueError(f"Unknown fuel type: {key}") from e

    @staticmethod
    def is_valid(key: str) -> bool:
        """Check if a fuel key is configured."""
        return get_config().is_valid_fuel_type(key)


class SearchModes:
    """
    Map search modes.

    - view: airports inside the visible map bounds
    - radius: airports within a radius of the search center
    - all: every airport, no spatial filter
    """

    VIEW = 'view'
    RADIUS = 'radius'
    ALL = 'all'

    @staticmethod
    def list_available() -> Dict[str, str]:
        return {
            SearchModes.VIEW: 'in view',
            SearchModes.RADIUS: 'within radius',
            SearchModes.ALL: 'total',
        }

    @staticmethod
    def is_valid(mode: str) -> bool:
        return mode in SearchModes.list_available()
