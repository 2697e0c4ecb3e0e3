# app/core/errors.py
from app.core.config import REQUIRED_KEYS


class BackendStartupError(Exception):
    """Base class for failures that stop the backend from starting."""


class ConfigurationError(BackendStartupError):
    """
    Raised when Supabase configuration is missing or unusable.

    `missing` names required keys that are not set. `detail` carries the
    client library's complaint when a value is set but rejected.
    """

    def __init__(self, missing=(), detail: str = None):
        self.missing = tuple(missing)
        self.required = REQUIRED_KEYS
        self.detail = detail
        if detail:
            message = f"Invalid Supabase configuration: {detail}"
        else:
            message = f"Missing Supabase environment variables: {', '.join(self.missing)}"
        super().__init__(message)


class ConnectivityError(BackendStartupError):
    """
    Raised when the startup session check against Supabase fails.

    Network, authentication and service-side failures all end up here;
    the original exception is kept on `cause` for diagnostics.
    """

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to connect to database: {cause}")
