class AnalysisError(Exception):
    """Base exception for remote analysis service failures."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the analysis service cannot be reached or times out."""


class AnalysisResponseError(AnalysisError):
    """Raised on a non-2xx status or a body that is not a JSON object."""
