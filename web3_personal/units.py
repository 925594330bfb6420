"""
Unit conversion between human units (ether, gwei) and the wire unit (wei, hex).

All arithmetic goes through :class:`decimal.Decimal`; binary floats are
rejected outright so that no rounding can creep into an amount.
"""

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from web3 import Web3

from .common import HexString, InvalidAmount

AmountLike = Union[Decimal, int, str]

AMOUNT_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?$")
QUANTITY_PATTERN = re.compile(r"^[0-9]+$")

# places after the point which still make up a whole wei
UNIT_DECIMALS = {"ether": 18, "gwei": 9}


def validate_amount(amount: AmountLike, field: str = "amount") -> Decimal:
    """
    Check that an amount is a well-formed, non-negative decimal.

    Args:
        amount: amount as a Decimal, int, or decimal string (e.g. "1.5")
        field: name reported in the error

    Returns:
        the amount as a Decimal

    Raises:
        InvalidAmount: if the amount is a float, a bool, negative, or not decimal
    """
    if isinstance(amount, (bool, float)):
        raise InvalidAmount(field, amount)
    if isinstance(amount, Decimal):
        if not amount.is_finite():
            raise InvalidAmount(field, amount)
        text = format(amount, "f")
    elif isinstance(amount, (int, str)):
        text = str(amount)
    else:
        raise InvalidAmount(field, amount)

    if not AMOUNT_PATTERN.match(text):
        raise InvalidAmount(field, amount)
    try:
        return Decimal(text)
    except InvalidOperation:
        raise InvalidAmount(field, amount)


def validate_quantity(value: Union[int, str], field: str = "quantity") -> int:
    """
    Check that a gas or nonce value is a non-negative integer.

    Args:
        value: integer, or string of decimal digits
        field: name reported in the error

    Returns:
        the value as an int

    Raises:
        InvalidAmount: if the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidAmount(field, value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidAmount(field, value)
        return value
    if isinstance(value, str) and QUANTITY_PATTERN.match(value):
        return int(value)
    raise InvalidAmount(field, value)


def _to_wei(amount: AmountLike, unit: str, field: str) -> int:
    value = validate_amount(amount, field)
    try:
        with localcontext() as ctx:
            ctx.prec = 999
            value = value.quantize(
                Decimal(1).scaleb(-UNIT_DECIMALS[unit]), rounding=ROUND_DOWN
            )
    except InvalidOperation:
        raise InvalidAmount(field, amount)
    try:
        return int(Web3.to_wei(value, unit))
    except ValueError:
        # above 2**256 - 1
        raise InvalidAmount(field, amount)


def eth_to_wei(amount: AmountLike) -> int:
    """Convert ether to wei (x 10**18), truncating any fractional wei."""
    return _to_wei(amount, "ether", "amount")


def gwei_to_wei(amount: AmountLike) -> int:
    """Convert gwei to wei (x 10**9), truncating any fractional wei."""
    return _to_wei(amount, "gwei", "gasPrice")


def to_hex(value: int) -> HexString:
    """
    Encode a non-negative integer as a json rpc quantity.

    Lowercase, 0x-prefixed, no leading zeros; zero is encoded as "0x0".
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidAmount("quantity", value)
    return Web3.to_hex(value)


def eth_to_wei_hex(amount: AmountLike) -> HexString:
    return to_hex(eth_to_wei(amount))


def gwei_to_wei_hex(amount: AmountLike) -> HexString:
    return to_hex(gwei_to_wei(amount))
