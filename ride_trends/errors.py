"""
Exceptions raised by the ride trends pipeline.

Every error carries enough context (column, months, file) for the caller to
act on it without re-running the step.
"""


class PipelineError(Exception):
    """Base class for all pipeline errors."""


class SchemaError(PipelineError):
    """Input table does not have the expected columns."""

    def __init__(self, message, missing=None, source=None):
        super().__init__(message)
        self.missing = list(missing or [])
        self.source = source


class GapFillError(PipelineError):
    """Monthly table cannot be completed by interpolation."""

    def __init__(self, message, column=None, months=None):
        super().__init__(message)
        self.column = column
        self.months = list(months or [])


class SeriesError(PipelineError):
    """Monthly table cannot be turned into a fixed-frequency series."""


class ForecastError(PipelineError):
    """Decomposition or model fitting cannot proceed on the given series."""
