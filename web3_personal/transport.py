import logging
from typing import Any, Optional, Protocol

import requests
from web3 import HTTPProvider

from .common import JSON_RPC, NodeError, RpcConnectionError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """
    Anything able to send one JSON RPC call and return the decoded response.

    Implementations raise RpcConnectionError when the node cannot be reached.
    """

    def invoke(self, method: str, params: Optional[list[Any]] = None) -> JSON_RPC:
        ...


class HTTPTransport:
    """
    JSON RPC over HTTP, using web3's HTTPProvider.

    The provider's own retries are switched off: a failed call is reported
    once, and retrying is left to the caller.
    """

    def __init__(self, endpoint: str, timeout: float = 30.0) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.provider = HTTPProvider(
            endpoint,
            request_kwargs={"timeout": timeout},
            exception_retry_configuration=None,
        )

    def invoke(self, method: str, params: Optional[list[Any]] = None) -> JSON_RPC:
        try:
            response = self.provider.make_request(method, params or [])  # type: ignore
        except requests.exceptions.RequestException as e:
            logger.warning("Could not reach %s calling %s: %s", self.endpoint, method, e)
            raise RpcConnectionError(f"Could not reach {self.endpoint}: {e}") from e
        except ValueError as e:
            raise NodeError(f"Malformed response to '{method}': {e}") from e

        if not isinstance(response, dict):
            raise NodeError(f"Malformed response to '{method}': {response!r}")
        return dict(response)

    def __repr__(self) -> str:
        return f"HTTPTransport({self.endpoint!r})"
