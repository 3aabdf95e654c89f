"""
Errors raised while fetching league models.
"""
from typing import Optional


class ModelFetchError(Exception):
    """Base class for model fetch errors."""

    def __init__(self, league_code: str, message: str):
        super().__init__(message)
        self.league_code = league_code


class FetchFailure(ModelFetchError):
    """
    Raised when the model could not be downloaded.

    status_code is the HTTP status of a non-success response, or None when
    the request never got a response (unreachable host, unusable URL).
    """

    def __init__(self, league_code: str, url: str, status_code: Optional[int] = None):
        if status_code is None:
            message = f"Failed to fetch model for '{league_code}' from {url}: request could not be sent"
        else:
            message = f"Failed to fetch model for '{league_code}'. Status: {status_code}"
        super().__init__(league_code, message)
        self.url = url
        self.status_code = status_code


class DecodeFailure(ModelFetchError):
    """Raised when the downloaded payload is not valid Base64."""

    def __init__(self, league_code: str, reason: str):
        super().__init__(league_code, f"Invalid Base64 model payload for '{league_code}': {reason}")
        self.reason = reason
