"""Error taxonomy for page fetching."""


class FetchError(Exception):
    """Base class for failures reported by a page fetcher."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class NetworkError(FetchError):
    """Transport or remote failure. Always recoverable via retry."""


class ContractViolationError(RuntimeError):
    """Raised when a fetch completes with neither a page nor an error."""
