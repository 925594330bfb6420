from typing import Any
from pydantic import BaseModel


class NewAccountRequest(BaseModel):
    password: str


class ImportRawKeyRequest(BaseModel):
    private_key: str
    password: str


class UnlockRequest(BaseModel):
    address: str
    password: str


class SendEthereumBody(BaseModel):
    transaction: dict[str, Any]
    password: str


class RequestResponse(BaseModel):
    success: bool
    message: str
    result: Any = None
