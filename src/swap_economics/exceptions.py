"""Exception hierarchy for swap_economics.

The calculator itself never raises for numeric input; these cover the
configuration boundary, where a broken constants table is a real error.
"""


class SwapEconomicsError(Exception):
    """Base exception for all swap_economics errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EconomicsConfigError(SwapEconomicsError):
    """An economics table could not be read or failed validation."""

    def __init__(self, message: str, path: str | None = None):
        details = {}
        if path:
            details["path"] = path
        super().__init__(message, details)
        self.path = path
