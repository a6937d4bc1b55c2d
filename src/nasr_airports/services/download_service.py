"""
NASR Download Service

Handles downloading the APT CSV archive for a NASR cycle with:
- Streamed HTTP download to the work directory
- ZIP validation (the server answers missing cycles with HTML pages)
- Single fallback from the NEXT cycle to the CURRENT cycle
- Fail-fast error handling once the fallback is exhausted
"""

import time
import zipfile
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import logging

import requests

from nasr_airports.config import get_app_config, AppConfig
from nasr_airports.models import NasrCycle
from nasr_airports.services.cycle_service import CycleService

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "cycle.zip"
_CHUNK_SIZE = 1024 * 1024


@dataclass
class DownloadResult:
    """Result of fetching a cycle archive."""
    cycle: NasrCycle
    zip_path: Path
    status: str  # 'next', 'current'
    attempted_urls: List[str] = field(default_factory=list)
    download_time_sec: Optional[float] = None
    zip_size_mb: Optional[float] = None

    @property
    def fallback_used(self) -> bool:
        return self.status == 'current'


def download(url: str, path: Path, timeout: float = 60.0) -> Path:
    """
    Download ``url`` to ``path``.

    Args:
        url: URL to fetch
        path: Destination file (parent directories are created)
        timeout: Request timeout in seconds

    Returns:
        The destination path

    Raises:
        RuntimeError: If the server answers with a status other than 200
        requests.RequestException: On transport errors
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with requests.get(url, stream=True, timeout=timeout) as resp:
        if resp.status_code != 200:
            raise RuntimeError(f"HTTP {resp.status_code}: {url}")

        with open(path, 'wb') as out:
            for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
                if chunk:
                    out.write(chunk)

    return path


def is_zip_valid(path: Path) -> bool:
    """True if ``path`` exists and opens as a ZIP archive."""
    try:
        with zipfile.ZipFile(path, 'r'):
            return True
    except (zipfile.BadZipFile, OSError):
        return False


class NasrDownloadService:
    """
    Service for downloading NASR APT CSV archives.

    Tries the NEXT cycle first (the FAA posts archives ahead of their
    effective date) and falls back once to the CURRENT cycle.

    Usage:
        service = NasrDownloadService(work_dir="data/temp")
        result = service.fetch_cycle_archive()
        print(result.cycle.url, result.zip_path)
    """

    def __init__(
        self,
        work_dir: Optional[str] = None,
        cycle_service: Optional[CycleService] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Initialize download service.

        Args:
            work_dir: Directory for the downloaded archive (overrides config)
            cycle_service: Cycle arithmetic (defaults to CycleService(config))
            config: Application config (defaults to get_app_config())
        """
        config = config or get_app_config()
        self.work_dir = Path(work_dir or config.work_dir)
        self.timeout = config.http_timeout_sec
        self._cycles = cycle_service or CycleService(config)

    @property
    def zip_path(self) -> Path:
        return self.work_dir / ARCHIVE_NAME

    def _try_download(self, cycle: NasrCycle) -> Optional[Exception]:
        """Download a cycle archive; return the failure instead of raising."""
        try:
            download(cycle.url, self.zip_path, timeout=self.timeout)
        except (requests.RequestException, RuntimeError, OSError) as e:
            return e
        return None

    def _remove_partial(self) -> None:
        self.zip_path.unlink(missing_ok=True)

    def fetch_cycle_archive(self, now: Optional[datetime] = None) -> DownloadResult:
        """
        Download the newest available cycle archive.

        Args:
            now: Reference time for cycle computation (defaults to UTC now)

        Returns:
            DownloadResult with the cycle used and the archive path

        Raises:
            RuntimeError: If the current cycle cannot be downloaded
            ValueError: If the current cycle download is not a valid ZIP
        """
        logger.info("Calculating NASR cycle dates...")

        next_cycle = self._cycles.build_cycle(self._cycles.compute_next_cycle(now))
        attempted = [next_cycle.url]
        logger.info(f"Trying NEXT cycle: {next_cycle.url}")

        start_time = time.time()
        error = self._try_download(next_cycle)

        if error is None and is_zip_valid(self.zip_path):
            return self._result(next_cycle, 'next', attempted, start_time)

        reason = error if error is not None else "not a valid ZIP"
        logger.warning(
            f"Next cycle not available ({reason}). Falling back to CURRENT cycle."
        )
        self._remove_partial()

        current_cycle = self._cycles.build_cycle(
            self._cycles.previous_cycle(next_cycle.effective_date)
        )
        attempted.append(current_cycle.url)
        logger.info(f"Current cycle URL: {current_cycle.url}")

        start_time = time.time()
        error = self._try_download(current_cycle)

        if error is not None:
            logger.error(f"Failed to download current cycle {current_cycle.url}: {error}")
            self._remove_partial()
            raise RuntimeError(
                f"failed to download current cycle: {error}"
            ) from error

        if not is_zip_valid(self.zip_path):
            error_msg = "Downloaded current cycle but it is NOT a valid ZIP."
            logger.error(f"{error_msg} ({current_cycle.url})")
            self._remove_partial()
            raise ValueError(error_msg)

        return self._result(current_cycle, 'current', attempted, start_time)

    def _result(
        self,
        cycle: NasrCycle,
        status: str,
        attempted: List[str],
        start_time: float
    ) -> DownloadResult:
        download_time = time.time() - start_time
        zip_size_mb = self.zip_path.stat().st_size / (1024 * 1024)

        logger.info(
            f"Downloaded {cycle.zip_name} ({status} cycle): "
            f"{zip_size_mb:.2f} MB in {download_time:.2f}s"
        )

        return DownloadResult(
            cycle=cycle,
            zip_path=self.zip_path,
            status=status,
            attempted_urls=attempted,
            download_time_sec=download_time,
            zip_size_mb=zip_size_mb
        )
