from .common import (
    ConfigError,
    InvalidAccountError,
    InvalidAddress,
    InvalidAmount,
    NodeError,
    PersonalApiError,
    RawTransactionError,
    RpcConnectionError,
    UnexpectedResultType,
)
from .personal import PersonalClient
from .raw_transaction import RawTransaction
from .schemas import SendEthereumRequest
from .transport import HTTPTransport, Transport
