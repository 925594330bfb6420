import os
from typing import Any, Callable, Generator
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import ORJSONResponse
from web3_personal import PersonalApiError, PersonalClient, RpcConnectionError

from .schemas import (
    ImportRawKeyRequest,
    NewAccountRequest,
    RequestResponse,
    SendEthereumBody,
    UnlockRequest,
)

app = FastAPI(default_response_class=ORJSONResponse)


def get_personal_client() -> Generator[PersonalClient, None, None]:
    client = PersonalClient.from_file(
        os.environ.get("WEB3_PERSONAL_CONFIG", "api/data/config.yml")
    )
    try:
        yield client
    finally:
        pass


def run(operation: Callable[[], Any]) -> RequestResponse:
    try:
        return RequestResponse(success=True, message="", result=operation())
    except RpcConnectionError as e:
        raise HTTPException(502, str(e))
    except PersonalApiError as e:
        return RequestResponse(success=False, message=str(e))


@app.post("/accounts", response_model=RequestResponse)
def new_account(
    request: NewAccountRequest,
    client: PersonalClient = Depends(get_personal_client),
) -> RequestResponse:
    return run(lambda: client.new_account(request.password))


@app.post("/accounts/import", response_model=RequestResponse)
def import_raw_key(
    request: ImportRawKeyRequest,
    client: PersonalClient = Depends(get_personal_client),
) -> RequestResponse:
    return run(lambda: client.import_raw_key(request.private_key, request.password))


@app.post("/accounts/unlock", response_model=RequestResponse)
def unlock(
    request: UnlockRequest,
    client: PersonalClient = Depends(get_personal_client),
) -> RequestResponse:
    return run(lambda: client.unlock(request.address, request.password))


@app.post("/transactions", response_model=RequestResponse)
def send_ethereum(
    request: SendEthereumBody,
    client: PersonalClient = Depends(get_personal_client),
) -> RequestResponse:
    return run(lambda: client.send_ethereum(request.transaction, request.password))
