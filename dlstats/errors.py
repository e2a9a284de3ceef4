class DLStatsError(Exception):
    """Base class for fatal errors of a statistics run"""


class FetchError(DLStatsError):
    """Results file could not be downloaded"""


class NoResultsError(DLStatsError):
    """Results file holds no parsable draws"""


class WindowNotFoundError(DLStatsError):
    """A window boundary date has no published draw"""
