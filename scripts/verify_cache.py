"""
Lists cached results files and the latest draw of the newest one.

Imports the dlstats package: install the checkout first (pip install -e .).
"""
from dlstats.config import StatsConfig
from dlstats.core.parser import parse_results_file
from dlstats.core.series import sort_results
from dlstats.net.client import find_latest_cached_file


def verify(config: StatsConfig = None):
    config = config or StatsConfig.from_app_config()
    if not config.results_dir.is_dir():
        print(f"Results directory not found at {config.results_dir}")
        return

    cached = sorted(config.results_dir.glob(config.result_file_format.format('*')))
    print(f"Cached files: {len(cached)}")
    for path in cached:
        print(f"  {path.name} ({path.stat().st_size} bytes)")

    latest = find_latest_cached_file(config)
    if latest is None:
        return

    try:
        results = sort_results(parse_results_file(latest))
    except OSError as e:
        print(f"Error reading {latest}: {e}")
        return

    print(f"Total draws in {latest.name}: {len(results)}")
    if results:
        print(f"Latest draw: {results[-1].format_line()}")


if __name__ == "__main__":
    verify()
