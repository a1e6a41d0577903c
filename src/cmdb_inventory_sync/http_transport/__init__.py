"""HTTP transport exports."""

from .json_transport import HttpRequestError, JsonTransport

__all__ = ["HttpRequestError", "JsonTransport"]
