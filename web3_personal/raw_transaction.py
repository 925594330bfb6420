import re
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Union

from hexbytes import HexBytes

from .common import Address, HexString, InvalidAddress, InvalidAmount, JSON_RPC
from .units import (
    AmountLike,
    eth_to_wei_hex,
    gwei_to_wei_hex,
    to_hex,
    validate_amount,
    validate_quantity,
)

if TYPE_CHECKING:
    from .schemas import SendEthereumRequest


ADDRESS_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


def validate_address(address: Any) -> Address:
    """
    Check that an address is 40 hex characters, optionally 0x-prefixed.

    Raises:
        InvalidAddress: if the address does not match
    """
    if not isinstance(address, str) or not ADDRESS_PATTERN.match(address):
        raise InvalidAddress(address)
    return address


class RawTransaction:
    """
    Builder for a transaction to be signed by the node (personal_sendTransaction).

    ``from`` and ``to`` are fixed at construction. Every setter validates its
    input immediately and returns the transaction, so calls can be chained:

    .. code-block:: python

        tx = RawTransaction(sender, receiver).set_amount("1.5").set_gas(21000)

    Optional fields which were never set are left out of :meth:`serialize`,
    so that the node picks their defaults.
    """

    def __init__(self, from_: Address, to: Address) -> None:
        self._from = validate_address(from_)
        self._to = validate_address(to)
        self.value: HexString = "0x0"
        self.gas: Optional[int] = None
        self.gas_price: Optional[Decimal] = None
        self.nonce: Optional[int] = None
        self.data: Optional[HexString] = None

    @classmethod
    def from_request(cls, request: "SendEthereumRequest") -> "RawTransaction":
        """
        Build a transaction from a structured sendEthereum request.

        Args:
            request: validated request (see :class:`SendEthereumRequest`)

        Returns:
            transaction with amount, gas, gas price, and nonce (if given) set
        """
        tx = cls(request.from_, request.to)
        tx.set_amount(request.amount)
        tx.set_gas(request.gas)
        tx.set_gas_price(request.gas_price)
        if request.nonce is not None:
            tx.set_nonce(request.nonce)
        return tx

    @property
    def from_(self) -> Address:
        return self._from

    @property
    def to(self) -> Address:
        return self._to

    def set_amount(self, eth_amount: AmountLike) -> "RawTransaction":
        """Set the value to send, given in ether."""
        self.value = eth_to_wei_hex(eth_amount)
        return self

    def set_gas(self, units: Union[int, str]) -> "RawTransaction":
        gas = validate_quantity(units, "gas")
        if gas == 0:
            raise InvalidAmount("gas", units)
        self.gas = gas
        return self

    def set_gas_price(self, gwei_amount: AmountLike) -> "RawTransaction":
        """Set the gas price, given in gwei."""
        self.gas_price = validate_amount(gwei_amount, "gasPrice")
        return self

    def set_nonce(self, n: Union[int, str]) -> "RawTransaction":
        self.nonce = validate_quantity(n, "nonce")
        return self

    def set_data(self, data: HexString) -> "RawTransaction":
        if not isinstance(data, str):
            raise InvalidAmount("data", data)
        try:
            HexBytes(data)
        except ValueError:
            raise InvalidAmount("data", data)
        self.data = data
        return self

    def serialize(self) -> JSON_RPC:
        """
        Build the transaction object sent as the first param of personal_sendTransaction.

        Returns:
            dictionary with "from", "to" and "value", plus "gas", "gasPrice",
            "nonce" and "data" for the fields which were set
        """
        transaction: JSON_RPC = {
            "from": self._from,
            "to": self._to,
            "value": self.value,
        }

        if self.data:
            transaction["data"] = self.data
        if self.gas is not None:
            transaction["gas"] = to_hex(self.gas)
        if self.gas_price is not None:
            transaction["gasPrice"] = gwei_to_wei_hex(self.gas_price)
        if self.nonce is not None:
            transaction["nonce"] = to_hex(self.nonce)

        return transaction

    def __repr__(self) -> str:
        return f"RawTransaction({self.serialize()!r})"
