from typing import Any
from dataclasses import dataclass


# typedefs for commonly used things
Address = str
HexString = str

JSON_RPC = dict[str, Any]


@dataclass
class RpcErrorInfo:
    """
    Dataclass storing the "error" object of a json rpc response
    """

    code: int
    message: str
    data: Any = None


def json_type_name(value: Any) -> str:
    """
    Name the JSON type of a decoded value, as reported in UnexpectedResultType.

    Args:
        value: decoded JSON value

    Returns:
        one of "null", "bool", "number", "string", "array", "object"
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class PersonalApiError(Exception):
    """Base exception for everything raised by this package"""


class ConfigError(PersonalApiError):
    """Exception raised while loading client configuration"""


class RawTransactionError(PersonalApiError):
    """Exception raised while building a transaction from caller input"""


class InvalidAddress(RawTransactionError):
    """Exception raised when an address is not 40 hex characters"""

    def __init__(self, address: Any) -> None:
        super().__init__(f"Invalid address: {address!r}")
        self.address = address


class InvalidAmount(RawTransactionError):
    """Exception raised when an amount, gas or nonce is malformed"""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


class NodeError(PersonalApiError):
    """Exception raised when the node returns an error or an unexpected result"""

    def __init__(self, message: str, error: RpcErrorInfo | None = None) -> None:
        super().__init__(message)
        self.error = error


class UnexpectedResultType(NodeError):
    """Exception raised when a response's "result" is absent or of the wrong type"""

    def __init__(self, method: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Method '{method}' expected a result of type '{expected}', got '{actual}'"
        )
        self.method = method
        self.expected = expected
        self.actual = actual


class InvalidAccountError(NodeError):
    """Exception raised when the node returns a malformed account address"""


class RpcConnectionError(PersonalApiError, ConnectionError):
    """Exception raised when the transport cannot reach the node"""
