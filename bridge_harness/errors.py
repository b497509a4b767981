"""
Error types raised by the chain fixture and the API client.

Not-found on the settlement side is reported as ``None``; everything else
that can go wrong surfaces as one of these exceptions.
"""


class HarnessError(Exception):
    """Base class for all harness errors."""

    pass


class MissingBlockError(HarnessError):
    """Raised when an execution block id is not present in the fixture."""

    def __init__(self, block_id: str | None = None):
        message = f"Missing block: {block_id}" if block_id else "Missing block"
        super().__init__(message)
        self.block_id = block_id


class CapabilityNotImplementedError(HarnessError, NotImplementedError):
    """Raised by capabilities the emulator deliberately does not model."""

    def __init__(self, capability: str):
        super().__init__(f"{capability} is not implemented by the chain fixture")
        self.capability = capability


class ClientError(HarnessError):
    """Base class for errors talking to a remote API."""

    def __init__(self, message: str, endpoint: str):
        super().__init__(message)
        self.endpoint = endpoint


class TransportError(ClientError):
    """Raised when a request could not be sent or its response not received."""

    def __init__(self, endpoint: str, source: Exception):
        super().__init__(f"Request to {endpoint} failed: {source}", endpoint)
        self.source = source


class HttpStatusError(ClientError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, endpoint: str, status_code: int, response_text: str):
        super().__init__(
            f"Request to {endpoint} returned status {status_code}\n"
            f"Response text: {response_text}",
            endpoint,
        )
        self.status_code = status_code
        self.response_text = response_text


class DecodeError(ClientError):
    """Raised when a response body does not match the expected structure."""

    def __init__(self, endpoint: str, source: Exception, response_text: str):
        super().__init__(
            f"Failed to decode response from {endpoint}: {source}\n"
            f"Response text: {response_text}",
            endpoint,
        )
        self.source = source
        self.response_text = response_text


class PaginationError(ClientError):
    """Raised when a collection exceeds its configured page bound."""

    def __init__(self, endpoint: str, pages: int):
        super().__init__(
            f"Pagination of {endpoint} exceeded {pages} pages", endpoint
        )
        self.pages = pages
