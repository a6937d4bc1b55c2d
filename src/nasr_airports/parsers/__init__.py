"""
Parsing modules for NASR APT CSV archives.

- archive: locate and extract APT_BASE.csv (case-insensitive member match)
- apt_base_parser: CSV rows -> Airport records, fuel keyword detection
"""

from .archive import list_members, find_member, extract_member
from .apt_base_parser import parse_airports, parse_fuel, REQUIRED_COLUMNS

__all__ = [
    'list_members',
    'find_member',
    'extract_member',
    'parse_airports',
    'parse_fuel',
    'REQUIRED_COLUMNS',
]
