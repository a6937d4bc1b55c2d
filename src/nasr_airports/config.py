"""
Configuration management using Pydantic Settings.

Automatically loads configuration from config/fuel_types.yaml and environment variables.
Provides type-safe access to:
- Fuel type reference data (keys, FUEL_TYPES keywords, display labels)
- NASR subscription settings (base URL, anchor cycle, cycle length)
- Local work and publish directories
"""

from datetime import date
from pathlib import Path
from typing import Dict, Optional
import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_file(filename: str) -> Path:
    """Resolve config/<filename> from project root, then from the working directory."""
    current_file = Path(__file__)
    project_root = current_file.parent.parent.parent  # src/nasr_airports/config.py -> root
    config_path = project_root / 'config' / filename

    if not config_path.exists():
        config_path = Path('config') / filename

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found at {config_path}. "
            f"Ensure config/{filename} exists in project root."
        )
    return config_path


class FuelTypesConfig(BaseSettings):
    """
    Configuration automatically loaded from config/fuel_types.yaml.

    Each fuel type has a short key (used as the key in the published
    ``fuel`` object), a keyword searched for in the upper-cased
    FUEL_TYPES column, and a human-readable label.

    Attributes:
        fuel_types: Mapping of fuel key -> {'keyword': ..., 'label': ...}

    Example:
        >>> config = FuelTypesConfig()
        >>> config.is_valid_fuel_type('100ll')
        True
        >>> config.get_keyword('jet_a')
        'JET'
    """

    fuel_types: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Fuel keys with FUEL_TYPES keyword and display label"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load configuration from config/fuel_types.yaml if not already provided.

        Values passed explicitly (e.g., from tests) take precedence.
        """
        if data:
            return data

        config_path = _find_config_file('fuel_types.yaml')

        with open(config_path, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        # YAML may hand back non-string scalars (e.g. keyword: 100)
        fuel_types = {
            str(key): {k: str(v) for k, v in (entry or {}).items()}
            for key, entry in (yaml_data.get('fuel_types') or {}).items()
        }
        return {'fuel_types': fuel_types}

    def is_valid_fuel_type(self, key: Optional[str]) -> bool:
        """
        Check if a fuel key is configured.

        Args:
            key: Fuel key to validate (e.g., 'mogas')

        Returns:
            True if key is configured, False otherwise
        """
        if key is None:
            return False
        return key in self.fuel_types

    def get_keyword(self, key: str) -> str:
        """
        Get the FUEL_TYPES keyword for a fuel key.

        Raises:
            KeyError: If key is not configured
        """
        if key not in self.fuel_types:
            raise KeyError(f"Unknown fuel type: {key}")
        return self.fuel_types[key]['keyword'].upper()

    def get_label(self, key: str) -> str:
        """Get display label for a fuel key (falls back to the key itself)."""
        if key not in self.fuel_types:
            raise KeyError(f"Unknown fuel type: {key}")
        return self.fuel_types[key].get('label', key)

    def keywords(self) -> Dict[str, str]:
        """Return fuel key -> keyword mapping in configured order."""
        return {key: self.get_keyword(key) for key in self.fuel_types}


# Singleton pattern - loaded once, cached forever
_config: Optional[FuelTypesConfig] = None


def get_config() -> FuelTypesConfig:
    """
    Get global fuel type config instance (lazy-loaded singleton).

    Returns:
        Singleton FuelTypesConfig instance

    Example:
        >>> config = get_config()
        >>> config2 = get_config()
        >>> config is config2
        True
    """
    global _config
    if _config is None:
        _config = FuelTypesConfig()
    return _config


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        NASR_BASE_URL: Directory URL holding the 28-day APT CSV archives
        NASR_ANCHOR_DATE: A known cycle effective date (YYYY-MM-DD)
        NASR_CYCLE_LENGTH_DAYS: Cycle length in days
        WORK_DIR: Scratch directory for the archive and extracted CSV
        OUTPUT_DIR: Publish directory for airports.json
        FUEL_ONLY: Drop airports without any detected fuel

    Example:
        >>> config = get_app_config()
        >>> config.nasr_cycle_length_days
        28
        >>> config.output_path
        PosixPath('public/airports.json')
    """

    nasr_base_url: str = Field(
        default="https://nfdc.faa.gov/webContent/28DaySub/extra/",
        description="Base URL of the NASR 28-day subscription extras directory"
    )

    # Corresponds to 25_Dec_2025_APT_CSV.zip
    nasr_anchor_date: date = Field(
        default=date(2025, 12, 25),
        description="Known NASR cycle effective date used as the cycle anchor"
    )

    nasr_cycle_length_days: int = Field(
        default=28,
        gt=0,
        description="Length of a NASR publication cycle in days"
    )

    apt_base_member: str = Field(
        default="APT_BASE.csv",
        description="Archive member holding airport base records"
    )

    icao_prefix: str = Field(
        default="K",
        description="Prefix prepended to ARPT_ID to form the ICAO code"
    )

    work_dir: str = Field(
        default="data/temp",
        description="Directory for the downloaded archive and extracted CSV"
    )

    output_dir: str = Field(
        default="public",
        description="Directory the static JSON is published to"
    )

    output_filename: str = Field(
        default="airports.json",
        description="Published airport data file name"
    )

    manifest_filename: str = Field(
        default="manifest.json",
        description="Published manifest file name"
    )

    http_timeout_sec: float = Field(
        default=60.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )

    fuel_only: bool = Field(
        default=False,
        description="Only publish airports with at least one detected fuel"
    )

    keep_downloads: bool = Field(
        default=False,
        description="Keep the downloaded archive in work_dir after a successful run"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @property
    def base_url(self) -> str:
        """Base URL normalized to end with a slash."""
        return self.nasr_base_url if self.nasr_base_url.endswith('/') else self.nasr_base_url + '/'

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.output_filename

    @property
    def manifest_path(self) -> Path:
        return Path(self.output_dir) / self.manifest_filename


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access for efficiency.

    Returns:
        Singleton AppConfig instance
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
