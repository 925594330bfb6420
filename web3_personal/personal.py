import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from .common import Address, HexString, PersonalApiError, RawTransactionError
from .loader import config_from_yaml
from .parse_response import (
    AccountResultParser,
    BoolResultParser,
    ResultParser,
    StringResultParser,
)
from .raw_transaction import RawTransaction
from .schemas import SendEthereumRequest
from .transport import HTTPTransport, Transport

logger = logging.getLogger(__name__)


class PersonalClient:
    """
    High-level interface to a node's personal_* API.

    Every call sends one request through the transport and checks the shape
    of the "result" before returning it. Nothing is retried: transport
    failures reach the caller as RpcConnectionError.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self.string_parser = StringResultParser()
        self.bool_parser = BoolResultParser()
        self.account_parser = AccountResultParser()

    @classmethod
    def from_file(cls, config: str):
        settings = config_from_yaml(config)
        return cls(HTTPTransport(settings.endpoint, settings.timeout))

    def call(
        self, method: str, params: Optional[list[Any]], parser: ResultParser
    ) -> Any:
        """
        Invoke an RPC method and parse its response.

        Arguments:
            method: RPC method name, e.g. "personal_unlockAccount"
            params: RPC params (may contain secrets, so they are never logged)
            parser: parser for the expected result shape

        Returns:
            the type-checked result
        """
        logger.debug("Calling %s", method)
        response = self.transport.invoke(method, params)
        try:
            return parser.parse(method, response)
        except PersonalApiError as e:
            logger.warning("%s failed: %s", method, e)
            raise

    def new_account(self, password: str) -> Address:
        """Create an account on the node, returning its address."""
        return self.call("personal_newAccount", [password], self.account_parser)

    def import_raw_key(self, private_key: str, password: str) -> Address:
        """Import a hex private key into the node, returning the account address."""
        return self.call(
            "personal_importRawKey", [private_key, password], self.string_parser
        )

    def unlock(self, address: Address, password: str) -> bool:
        return self.call(
            "personal_unlockAccount", [address, password], self.bool_parser
        )

    def transaction(self, from_: Address, to: Address) -> RawTransaction:
        """
        Start building a transaction between two addresses.

        Raises:
            InvalidAddress: if either address is not 40 hex characters
        """
        return RawTransaction(from_, to)

    def send(self, tx: RawTransaction, password: str) -> HexString:
        """
        Have the node sign and send a transaction from an account it holds.

        Arguments:
            tx: transaction to send
            password: password of the sending account

        Returns:
            transaction hash
        """
        return self.call(
            "personal_sendTransaction", [tx.serialize(), password], self.string_parser
        )

    def send_ethereum(
        self, data: Union[SendEthereumRequest, Mapping[str, Any]], password: str
    ) -> HexString:
        """
        Send ether in one call.

        Arguments:
            data: request, or a mapping with "from", "to", "amount" (ether),
                "gas", "gasPrice" (gwei) and optionally "nonce"
            password: password of the sending account

        Returns:
            transaction hash

        Raises:
            RawTransactionError: if the request is malformed (nothing is sent)
        """
        if not isinstance(data, SendEthereumRequest):
            try:
                data = SendEthereumRequest.model_validate(dict(data))
            except ValidationError as e:
                raise RawTransactionError(f"Invalid transaction request: {e}") from e
        return self.send(RawTransaction.from_request(data), password)
