import datetime
import os
import warnings
from pathlib import Path
from typing import Optional

import requests
from urllib3.exceptions import InsecureRequestWarning

from dlstats.config import StatsConfig
from dlstats.errors import FetchError
from dlstats.utils import logger

# ============================================================
# Results file download (fetch-or-reuse daily cache)
# ============================================================
class ResultsFetcher:
    """Downloads the results file once per day and keeps it in the results directory"""

    HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Accept': 'text/plain, */*; q=0.01',
    }

    def __init__(self, config: StatsConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        # verification is a property of this client only, never of requests' defaults
        self.session.verify = config.verify_tls
        if not config.verify_tls:
            logger.warning(f"TLS certificate verification disabled for {config.repo_url}")

    def cache_path(self, day: Optional[datetime.date] = None) -> Path:
        day = day or datetime.date.today()
        return self.config.results_dir / self.config.result_filename(day)

    def download_latest(self, today: Optional[datetime.date] = None) -> Path:
        """Return today's cached file, downloading it first when missing"""
        path = self.cache_path(today)
        logger.info(f"Looking for {path}")

        if path.exists():
            logger.info(f"Latest file with results already exists in {path}")
            return path

        logger.info(f"Latest file with results does not exist, downloading {self.config.repo_url} to {path}")
        content = self._fetch()
        self._write(path, content)
        return path

    def _fetch(self) -> bytes:
        try:
            with warnings.catch_warnings():
                if not self.config.verify_tls:
                    warnings.simplefilter('ignore', InsecureRequestWarning)
                response = self.session.get(
                    self.config.repo_url,
                    headers=self.HEADERS,
                    timeout=self.config.api_timeout,
                )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Cannot download {self.config.repo_url}: {e}") from e

        logger.debug(f"Downloaded {len(response.content)} bytes")
        return response.content

    def _write(self, path: Path, content: bytes):
        """Atomic write: temp file then replace"""
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = path.with_suffix('.tmp')
        try:
            with open(temp_file, 'wb') as f:
                f.write(content)
            os.replace(temp_file, path)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise


def find_latest_cached_file(config: StatsConfig) -> Optional[Path]:
    """Newest cached results file, by the date embedded in its name"""
    if not config.results_dir.is_dir():
        return None

    prefix, _, suffix = config.result_file_format.partition('{}')
    candidates = []
    for path in config.results_dir.glob(f"{prefix}*{suffix}"):
        stamp = path.name[len(prefix):len(path.name) - len(suffix)]
        try:
            day = datetime.date.fromisoformat(stamp)
        except ValueError:
            continue
        candidates.append((day, path))

    if not candidates:
        return None
    return max(candidates)[1]
