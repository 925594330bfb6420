from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .raw_transaction import validate_address
from .units import validate_amount, validate_quantity


class SendEthereumRequest(BaseModel):
    """
    Structured input for sending ether through a node-held account.

    Accepts the loose mapping used by personal_sendTransaction callers
    (``from``, ``to``, ``amount``, ``gas``, ``gasPrice``, optional ``nonce``).
    ``amount`` is in ether and ``gasPrice`` in gwei; both must be decimal
    strings, ints, or Decimals, never floats. Malformed fields raise
    InvalidAddress or InvalidAmount straight out of validation.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(alias="from")
    to: str
    amount: Decimal
    gas: int
    gas_price: Decimal = Field(alias="gasPrice")
    nonce: Optional[int] = None

    @field_validator("from_", "to", mode="before")
    @classmethod
    def check_address(cls, value: Any) -> str:
        return validate_address(value)

    @field_validator("amount", mode="before")
    @classmethod
    def check_amount(cls, value: Any) -> Decimal:
        return validate_amount(value, "amount")

    @field_validator("gas_price", mode="before")
    @classmethod
    def check_gas_price(cls, value: Any) -> Decimal:
        return validate_amount(value, "gasPrice")

    @field_validator("gas", mode="before")
    @classmethod
    def check_gas(cls, value: Any) -> int:
        return validate_quantity(value, "gas")

    @field_validator("nonce", mode="before")
    @classmethod
    def check_nonce(cls, value: Any) -> Optional[int]:
        # an empty nonce means "let the node pick"
        if value is None or value == "":
            return None
        return validate_quantity(value, "nonce")
