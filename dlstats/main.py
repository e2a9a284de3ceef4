import argparse
import datetime
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from dlstats.config import APP_CONFIG, StatsConfig
from dlstats.core.parser import parse_results_file
from dlstats.core.report import print_stats
from dlstats.core.series import default_window, sort_results
from dlstats.core.stats import get_numbers_statistics, rank_stats
from dlstats.data.exporter import StatsExporter
from dlstats.errors import DLStatsError, FetchError, NoResultsError, WindowNotFoundError
from dlstats.net.client import ResultsFetcher, find_latest_cached_file
from dlstats.utils import logger, set_verbose


def exception_hook(exctype, value, traceback_obj):
    """Global exception handler"""
    traceback_str = ''.join(traceback.format_tb(traceback_obj))
    logger.critical(f"Uncaught exception:\n{exctype.__name__}: {value}\n\n{traceback_str}")
    sys.__excepthook__(exctype, value, traceback_obj)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='dlstats',
        description='Frequency of drawn numbers over a rolling window of published results.')
    ap.add_argument('--url', dest='repo_url', default=None,
                    help=f"results file URL (default: {APP_CONFIG['REPO_URL']})")
    ap.add_argument('--results-dir', type=str, default=None,
                    help='directory holding the daily results files')
    ap.add_argument('--window-days', type=int, default=None,
                    help=f"window length in days before the end date (default: {APP_CONFIG['WINDOW_DAYS']})")
    ap.add_argument('--min', dest='min_number', type=int, default=None,
                    help=f"lowest number counted (default: {APP_CONFIG['MIN_NUMBER']})")
    ap.add_argument('--max', dest='max_number', type=int, default=None,
                    help=f"highest number counted (default: {APP_CONFIG['MAX_NUMBER']})")
    ap.add_argument('--end-date', type=datetime.date.fromisoformat, default=None,
                    help='last day of the window, YYYY-MM-DD (default: date of the latest draw)')
    ap.add_argument('--verify-tls', action='store_true', default=None,
                    help='verify the server certificate')
    ap.add_argument('--offline', action='store_true',
                    help='use the newest cached file, never download')
    ap.add_argument('--export', default=None,
                    help='also write the ranked table to a .csv, .json or .xlsx file')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap


def run(config: StatsConfig, end_date: Optional[datetime.date] = None,
        offline: bool = False, export_path: Optional[str] = None) -> int:
    logger.info(f"Repo URL {config.repo_url}")
    logger.info(f"Saving downloaded results to {config.results_dir}")

    config.results_dir.mkdir(parents=True, exist_ok=True)

    if offline:
        pathname = find_latest_cached_file(config)
        if pathname is None:
            raise FetchError(f"No cached results file in {config.results_dir}")
        logger.info(f"Offline mode, using {pathname}")
    else:
        pathname = ResultsFetcher(config).download_latest()

    parsed = parse_results_file(pathname)
    if not parsed:
        raise NoResultsError(f"No results found in {pathname}")

    parsed = sort_results(parsed)
    start_date, end_date = default_window(parsed, config.window_days, end_date)

    logger.info(f"Start date {start_date.isoformat()}")
    logger.info(f"End date {end_date.isoformat()}")

    stats = get_numbers_statistics(
        start_date,
        end_date,
        config.min_number,
        config.max_number,
        parsed)

    if stats is None:
        raise WindowNotFoundError(f"No draws on both {start_date.isoformat()} and {end_date.isoformat()}")

    ranked = rank_stats(stats)

    logger.info("Sorted results:")
    print_stats(ranked)

    if export_path and not StatsExporter.export(ranked, export_path, start_date, end_date):
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    sys.excepthook = exception_hook

    ap = build_parser()
    args = ap.parse_args(argv)
    if args.export and Path(args.export).suffix.lower() not in StatsExporter.SUPPORTED:
        ap.error(f"--export must end in one of {', '.join(StatsExporter.SUPPORTED)}")
    set_verbose(args.verbose)

    try:
        config = StatsConfig.from_app_config(
            repo_url=args.repo_url,
            results_dir=args.results_dir,
            window_days=args.window_days,
            min_number=args.min_number,
            max_number=args.max_number,
            verify_tls=args.verify_tls,
        )
        return run(config, end_date=args.end_date, offline=args.offline, export_path=args.export)
    except (DLStatsError, OSError, ValueError) as e:
        logger.critical(f"{type(e).__name__}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
