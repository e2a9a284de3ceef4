from dataclasses import dataclass, fields
from pathlib import Path
import sys

# ============================================================
# PyInstaller bundle path handling
# ============================================================
def _get_base_path() -> Path:
    """Directory next to the executable (bundle) or the project root (dev)"""
    if getattr(sys, 'frozen', False):
        # PyInstaller bundle: keep results next to the binary, not in _MEIPASS
        return Path(sys.executable).resolve().parent
    else:
        return Path(__file__).resolve().parent.parent

# ============================================================
# Constants
# ============================================================
APP_CONFIG = {
    'APP_NAME': 'DL Stats',
    'VERSION': '1.0',
    'REPO_URL': 'http://www.mbnet.com.pl/dl.txt',
    'RESULT_FILE_FORMAT': '{}-dl.txt',
    'RESULTS_DIR': _get_base_path() / 'results',
    'WINDOW_DAYS': 367,
    'MIN_NUMBER': 1,
    'MAX_NUMBER': 49,
    'API_TIMEOUT': 10,
    'VERIFY_TLS': False,
}


@dataclass(frozen=True)
class StatsConfig:
    """Run configuration handed to the fetcher and the statistics core"""
    repo_url: str
    results_dir: Path
    result_file_format: str = '{}-dl.txt'
    window_days: int = 367
    min_number: int = 1
    max_number: int = 49
    api_timeout: float = 10
    verify_tls: bool = False

    def __post_init__(self):
        if self.min_number > self.max_number:
            raise ValueError(
                f"min_number ({self.min_number}) must not exceed max_number ({self.max_number})")
        if self.window_days < 0:
            raise ValueError(f"window_days must be >= 0, got {self.window_days}")

    @classmethod
    def from_app_config(cls, **overrides) -> 'StatsConfig':
        """APP_CONFIG defaults, with any non-None override applied"""
        values = {
            'repo_url': APP_CONFIG['REPO_URL'],
            'results_dir': Path(APP_CONFIG['RESULTS_DIR']),
            'result_file_format': APP_CONFIG['RESULT_FILE_FORMAT'],
            'window_days': APP_CONFIG['WINDOW_DAYS'],
            'min_number': APP_CONFIG['MIN_NUMBER'],
            'max_number': APP_CONFIG['MAX_NUMBER'],
            'api_timeout': APP_CONFIG['API_TIMEOUT'],
            'verify_tls': APP_CONFIG['VERIFY_TLS'],
        }
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise TypeError(f"Unknown config option: {key}")
            if value is not None:
                values[key] = value
        values['results_dir'] = Path(values['results_dir'])
        return cls(**values)

    def result_filename(self, day) -> str:
        """Cache file name for a given download day"""
        return self.result_file_format.format(day.isoformat())
