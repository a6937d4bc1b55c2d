"""
ZIP archive helpers for NASR APT CSV archives.

The APT CSV archive bundles several CSV files (APT_BASE, APT_RWY, APT_RMK,
...). Only APT_BASE.csv is needed. Member names are matched
case-insensitively because the FAA has shipped both spellings.
"""

import shutil
import zipfile
from pathlib import Path
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def list_members(zip_path: Path) -> List[str]:
    """Names of all members in the archive."""
    with zipfile.ZipFile(zip_path, 'r') as zip_ref:
        return zip_ref.namelist()


def find_member(zip_path: Path, member_name: str) -> Optional[str]:
    """
    Find the archive member whose name equals ``member_name`` ignoring case.

    Returns:
        The member name as stored in the archive, or None
    """
    target = member_name.lower()
    for name in list_members(zip_path):
        if name.lower() == target:
            return name
    return None


def extract_member(
    zip_path: Path,
    member_name: str = 'APT_BASE.csv',
    dest_dir: Optional[Path] = None
) -> Path:
    """
    Extract a single member from the archive.

    Args:
        zip_path: Path to the cycle archive
        member_name: Member to extract (matched case-insensitively)
        dest_dir: Output directory (defaults to the archive's directory)

    Returns:
        Path to the extracted file, always named ``member_name``

    Raises:
        FileNotFoundError: If the archive has no such member

    Example:
        >>> extract_member(Path('data/temp/cycle.zip'))
        PosixPath('data/temp/APT_BASE.csv')
    """
    zip_path = Path(zip_path)
    dest_dir = Path(dest_dir) if dest_dir is not None else zip_path.parent
    dest_dir.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(zip_path, 'r') as zip_ref:
        all_files = zip_ref.namelist()
        stored_name = next(
            (name for name in all_files if name.lower() == member_name.lower()),
            None
        )

        if stored_name is None:
            error_msg = (
                f"{member_name} not found in ZIP {zip_path.name}. "
                f"Contents: {all_files}"
            )
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        out_path = dest_dir / member_name
        with zip_ref.open(stored_name) as src, open(out_path, 'wb') as out:
            shutil.copyfileobj(src, out)

    logger.debug(f"Extracted {stored_name} from {zip_path.name} to {out_path}")
    return out_path
