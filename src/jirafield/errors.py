"""Errors raised by the Jira request functions.

Every failure is raised to the caller; nothing is retried or swallowed.
"""
from typing import Optional


def http_error_message(status: int, body: str) -> str:
    return f"HTTP error! Status: {status}, Body: {body}"


class JiraClientError(Exception):
    """Base class for all client failures."""


class HTTPError(JiraClientError):
    """The server answered with a non-2xx status."""

    def __init__(self, status: int, body: str = ""):
        super().__init__(http_error_message(status, body))
        self.status = status
        self.body = body


class TransportError(JiraClientError):
    """The request never produced a response (connection refused, timeout, bad URL)."""


class DecodeError(JiraClientError):
    """A success response whose body is not the expected JSON."""

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body
