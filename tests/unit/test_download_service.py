"""
Unit tests for NasrDownloadService

Tests download functionality with mocked external dependencies:
- Mock requests.get() (no live FAA calls)
- Real ZIP archives written to tmp_path
"""

import pytest
from datetime import date, datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from nasr_airports.config import AppConfig
from nasr_airports.services.download_service import (
    NasrDownloadService,
    DownloadResult,
    download,
    is_zip_valid,
)


BASE_URL = "https://nfdc.faa.gov/webContent/28DaySub/extra/"
NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
NEXT_URL = BASE_URL + "22_Jan_2026_APT_CSV.zip"
CURRENT_URL = BASE_URL + "25_Dec_2025_APT_CSV.zip"


# ============================================================================
# FIXTURES
# ============================================================================

def make_response(status: int = 200, content: bytes = b'') -> MagicMock:
    """Mock streamed requests response usable as a context manager."""
    resp = MagicMock()
    resp.status_code = status
    resp.iter_content.return_value = [content]
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


@pytest.fixture
def work_dir(tmp_path):
    return tmp_path / "work"


@pytest.fixture
def config(work_dir):
    return AppConfig(
        nasr_base_url=BASE_URL,
        nasr_anchor_date=date(2025, 12, 25),
        work_dir=str(work_dir),
        http_timeout_sec=5,
    )


@pytest.fixture
def service(config):
    return NasrDownloadService(config=config)


@pytest.fixture
def valid_zip(zip_bytes_factory, apt_csv_text, sample_rows):
    return zip_bytes_factory({'APT_BASE.csv': apt_csv_text(sample_rows)})


def responder(routes):
    """side_effect for requests.get that answers by URL."""
    def _get(url, **kwargs):
        answer = routes[url]
        if isinstance(answer, Exception):
            raise answer
        return answer
    return _get


# ============================================================================
# download() / is_zip_valid()
# ============================================================================

class TestDownload:

    def test_writes_response_body(self, tmp_path):
        target = tmp_path / "nested" / "file.bin"

        with patch('nasr_airports.services.download_service.requests.get',
                   return_value=make_response(200, b'payload')) as mock_get:
            result = download("https://example.test/file.bin", target, timeout=7)

        assert result == target
        assert target.read_bytes() == b'payload'
        mock_get.assert_called_once_with("https://example.test/file.bin", stream=True, timeout=7)

    def test_non_200_raises(self, tmp_path):
        with patch('nasr_airports.services.download_service.requests.get',
                   return_value=make_response(404)):
            with pytest.raises(RuntimeError, match="HTTP 404: https://example.test/x.zip"):
                download("https://example.test/x.zip", tmp_path / "x.zip")

    def test_transport_error_propagates(self, tmp_path):
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=requests.ConnectionError("refused")):
            with pytest.raises(requests.ConnectionError):
                download("https://example.test/x.zip", tmp_path / "x.zip")


class TestIsZipValid:

    def test_valid_zip(self, tmp_path, valid_zip):
        path = tmp_path / "ok.zip"
        path.write_bytes(valid_zip)

        assert is_zip_valid(path) is True

    def test_html_error_page(self, tmp_path):
        path = tmp_path / "bad.zip"
        path.write_bytes(b"<html><body>Not Found</body></html>")

        assert is_zip_valid(path) is False

    def test_missing_file(self, tmp_path):
        assert is_zip_valid(tmp_path / "missing.zip") is False


# ============================================================================
# fetch_cycle_archive()
# ============================================================================

class TestFetchCycleArchive:

    def test_work_dir_created_on_download(self, service, work_dir, valid_zip):
        assert not work_dir.exists()
        assert service.zip_path == work_dir / "cycle.zip"

        with patch('nasr_airports.services.download_service.requests.get',
                   return_value=make_response(200, valid_zip)):
            service.fetch_cycle_archive(NOW)

        assert work_dir.exists()

    def test_next_cycle_available(self, service, valid_zip):
        with patch('nasr_airports.services.download_service.requests.get',
                   return_value=make_response(200, valid_zip)) as mock_get:
            result = service.fetch_cycle_archive(NOW)

        assert isinstance(result, DownloadResult)
        assert result.status == 'next'
        assert result.fallback_used is False
        assert result.cycle.effective_date == date(2026, 1, 22)
        assert result.attempted_urls == [NEXT_URL]
        assert result.zip_path.read_bytes() == valid_zip
        assert result.zip_size_mb is not None
        mock_get.assert_called_once()
        assert mock_get.call_args[0][0] == NEXT_URL

    def test_falls_back_when_next_returns_404(self, service, valid_zip):
        routes = {
            NEXT_URL: make_response(404),
            CURRENT_URL: make_response(200, valid_zip),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)):
            result = service.fetch_cycle_archive(NOW)

        assert result.status == 'current'
        assert result.fallback_used is True
        assert result.cycle.effective_date == date(2025, 12, 25)
        assert result.attempted_urls == [NEXT_URL, CURRENT_URL]
        assert is_zip_valid(result.zip_path)

    def test_falls_back_when_next_is_not_a_zip(self, service, valid_zip):
        routes = {
            NEXT_URL: make_response(200, b"<html>coming soon</html>"),
            CURRENT_URL: make_response(200, valid_zip),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)):
            result = service.fetch_cycle_archive(NOW)

        assert result.status == 'current'
        assert result.zip_path.read_bytes() == valid_zip

    def test_falls_back_on_connection_error(self, service, valid_zip):
        routes = {
            NEXT_URL: requests.ConnectionError("reset"),
            CURRENT_URL: make_response(200, valid_zip),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)):
            result = service.fetch_cycle_archive(NOW)

        assert result.status == 'current'

    def test_current_download_failure_raises(self, service):
        routes = {
            NEXT_URL: make_response(404),
            CURRENT_URL: make_response(500),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)):
            with pytest.raises(RuntimeError, match="failed to download current cycle") as exc_info:
                service.fetch_cycle_archive(NOW)

        assert "HTTP 500" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_current_invalid_zip_raises(self, service):
        routes = {
            NEXT_URL: make_response(404),
            CURRENT_URL: make_response(200, b"<html>maintenance</html>"),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)):
            with pytest.raises(ValueError, match="NOT a valid ZIP"):
                service.fetch_cycle_archive(NOW)

        assert not service.zip_path.exists()

    def test_only_one_fallback_attempt(self, service):
        routes = {
            NEXT_URL: make_response(404),
            CURRENT_URL: make_response(404),
        }
        with patch('nasr_airports.services.download_service.requests.get',
                   side_effect=responder(routes)) as mock_get:
            with pytest.raises(RuntimeError):
                service.fetch_cycle_archive(NOW)

        assert mock_get.call_count == 2

    def test_uses_configured_timeout(self, service, valid_zip):
        with patch('nasr_airports.services.download_service.requests.get',
                   return_value=make_response(200, valid_zip)) as mock_get:
            service.fetch_cycle_archive(NOW)

        assert mock_get.call_args.kwargs['timeout'] == 5

    def test_work_dir_argument_overrides_config(self, config, tmp_path):
        service = NasrDownloadService(work_dir=str(tmp_path / "other"), config=config)

        assert service.zip_path == tmp_path / "other" / "cycle.zip"
