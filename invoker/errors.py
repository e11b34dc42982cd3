"""
Error kinds raised by the search request invoker
"""


class InvokerError(Exception):
    """Base class for invoker failures"""

    def __init__(self, url, message):
        super().__init__(message)
        self.url = url


class NetworkError(InvokerError):
    """The request could not complete (connection refused, DNS failure, ...)"""

    def __init__(self, url, cause):
        super().__init__(url, f"Request to {url} failed: {cause}")
        self.cause = cause


class DecodeError(InvokerError):
    """The response body was not valid JSON"""

    def __init__(self, url, status_code, body):
        preview = body[:200] if body else ""
        super().__init__(url, f"Response from {url} (status {status_code}) is not valid JSON: {preview!r}")
        self.status_code = status_code
        self.body = body
