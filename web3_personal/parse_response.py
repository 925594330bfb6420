import re
from typing import Any

from .common import (
    InvalidAccountError,
    JSON_RPC,
    NodeError,
    RpcErrorInfo,
    UnexpectedResultType,
    json_type_name,
)


class ResultParser:
    """
    Base class for turning a JSON RPC response into a typed result.

    Each subclass accepts exactly one shape of "result". After instantiation,
    parse using the parse() method.
    """

    expected: str = ""

    def get_error(self, response: JSON_RPC) -> RpcErrorInfo | None:
        """
        Fetch the "error" object out of a JSON RPC response, if there is one.

        Arguments:
            response: decoded JSON RPC response

        Returns:
            structured error, or None if the call succeeded
        """
        error = response.get("error")
        if error is None:
            return None
        if not isinstance(error, dict):
            return RpcErrorInfo(code=-1, message=str(error))
        return RpcErrorInfo(
            code=error.get("code", -1),
            message=error.get("message", ""),
            data=error.get("data"),
        )

    def accepts(self, result: Any) -> bool:
        raise NotImplementedError()

    def check(self, method: str, result: Any) -> None:
        """
        Additional validation of a result of the right type. Does nothing by default.
        """

    def parse(self, method: str, response: JSON_RPC) -> Any:
        """
        Extract and type-check the "result" of a JSON RPC response.

        Arguments:
            method: RPC method which produced the response (used in errors)
            response: decoded JSON RPC response

        Returns:
            the result value

        Raises:
            NodeError: if the node returned an error object
            UnexpectedResultType: if "result" is absent or of the wrong type
        """
        error = self.get_error(response)
        if error is not None:
            raise NodeError(
                f"Method '{method}' failed with error {error.code}: {error.message}",
                error,
            )

        result = response.get("result")
        if not self.accepts(result):
            raise UnexpectedResultType(method, self.expected, json_type_name(result))

        self.check(method, result)
        return result


class StringResultParser(ResultParser):
    expected = "string"

    def accepts(self, result: Any) -> bool:
        return isinstance(result, str)


class BoolResultParser(ResultParser):
    expected = "bool"

    def accepts(self, result: Any) -> bool:
        return isinstance(result, bool)


class AccountResultParser(StringResultParser):
    """
    Parser for a newly created account address.

    Accepts 40 to 42 lowercase hex characters, with an optional 0x prefix.
    """

    pattern = re.compile(r"^(0x)?[a-f0-9]{40,42}$")

    def check(self, method: str, result: Any) -> None:
        if not self.pattern.match(result):
            raise InvalidAccountError(
                f"Method '{method}' returned an invalid account address: {result!r}"
            )
