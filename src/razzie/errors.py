"""Exceptions raised by the ingestion and configuration layers.

Aggregation code never raises on data content; these errors surface at
application startup, before any request is served.
"""


class RazzieError(Exception):
    """Base class for all razzie errors."""


class ConfigurationError(RazzieError):
    """Required configuration is missing or invalid."""


class CsvSourceError(RazzieError):
    """The movie CSV file cannot be opened."""


class CsvFormatError(RazzieError):
    """The movie CSV file is readable but malformed."""
