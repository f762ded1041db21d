from __future__ import annotations


class ValidationError(ValueError):
    """A transaction cannot be aggregated (negative amount, missing expense category, ...)."""


class RemoteGenerationError(RuntimeError):
    """The external text generator failed or returned something other than a JSON list of strings."""


class UnauthorizedError(PermissionError):
    """No caller identity; the report pipeline must not run."""


class LedgerProviderError(RuntimeError):
    pass
