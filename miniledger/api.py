"""
api.py - HTTP transport for MiniLedger.

POST /transactions turns a JSON payload into a Transaction, hands it to
handle_transaction and renders the outcome. Malformed payloads are
rejected by pydantic with a 422 before reaching the engine. Rejections
are rendered as {"error": {"code", "message"}} with a status per kind.

The transaction route is a plain `def`, so FastAPI runs it in its
threadpool and concurrent requests contend on the registry lock.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt, StrictStr

from miniledger.config import MAX_UINT64
from miniledger.engine import handle_transaction
from miniledger.errors import TransactionError, TransactionRejected
from miniledger.registry import AccountRegistry
from miniledger.transaction import Transaction

logger = logging.getLogger(__name__)

# Every TransactionError member must have an entry here
ERROR_STATUS = {
    TransactionError.AMOUNT_IS_ZERO: status.HTTP_400_BAD_REQUEST,
    TransactionError.SENDER_IS_RECEIVER: status.HTTP_400_BAD_REQUEST,
    TransactionError.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    TransactionError.INSUFFICIENT_FUNDS: status.HTTP_409_CONFLICT,
    TransactionError.INVALID_NONCE: status.HTTP_409_CONFLICT,
}


class TransactionRequest(BaseModel):
    """Wire shape of an incoming transaction."""
    sender: StrictStr = Field(min_length=1)
    receiver: StrictStr = Field(min_length=1)
    amount: StrictInt = Field(ge=0, le=MAX_UINT64)
    nonce: StrictInt = Field(ge=0, le=MAX_UINT64)

    def to_transaction(self) -> Transaction:
        return Transaction.from_dict(self.model_dump())


def create_app(registry: AccountRegistry = None) -> FastAPI:
    """Build the FastAPI app around a registry (a fresh one if not given)."""
    app = FastAPI(title="MiniLedger API", version="0.1.0")
    app.state.registry = registry if registry is not None else AccountRegistry()

    _register_routes(app)
    _register_error_handlers(app)
    return app


def _register_routes(app: FastAPI) -> None:

    @app.post("/transactions", status_code=status.HTTP_200_OK)
    def submit_transaction(payload: TransactionRequest, request: Request):
        """Validate and apply a transaction."""
        registry = request.app.state.registry
        tx = payload.to_transaction()

        handle_transaction(tx, registry)

        return {
            "status": "accepted",
            "tx_hash": tx.hash(),
            "sender": registry.snapshot(tx.sender),
            "receiver": registry.snapshot(tx.receiver),
        }

    @app.get("/accounts/{account_id}")
    def get_account(account_id: str, request: Request):
        """Current balance and nonce of an account."""
        account = request.app.state.registry.snapshot(account_id)
        if account is None:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=_error_body(
                    TransactionError.ACCOUNT_NOT_FOUND.value,
                    f"Account {account_id} not found",
                ),
            )
        return account

    @app.get("/health")
    def health_check(request: Request):
        """Liveness probe."""
        return {
            "status": "healthy",
            "accounts": len(request.app.state.registry),
        }


def _register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(TransactionRejected)
    async def transaction_rejected_handler(request: Request, exc: TransactionRejected):
        return JSONResponse(
            status_code=ERROR_STATUS[exc.error],
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )


def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}
