class DocScanError(Exception):
    """Base class for failures that abort an analysis request."""


class ConfigurationError(DocScanError):
    """Required configuration (e.g. the API key) is missing."""


class InferenceError(DocScanError):
    """The inference API call failed: HTTP error status, timeout or network error."""
