"""Payment routes.

``/success``, ``/fail`` and ``/cancel`` are called by the gateway after the
hosted checkout, not by the signed-in browser session.
"""

from urllib.parse import urlencode

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Form, status
from fastapi.responses import RedirectResponse

from inkwell.application.usecase.payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentUseCase,
    GetTransactionRequest,
    GetTransactionUseCase,
    InitiateCheckoutRequest,
    InitiateCheckoutResponse,
    InitiateCheckoutUseCase,
    ListTransactionsRequest,
    ListTransactionsResponse,
    ListTransactionsUseCase,
    TransactionItem,
)
from inkwell.config import Settings
from inkwell.domain.service import SessionGuard
from inkwell.domain.value import Email

router = APIRouter(tags=["payments"], route_class=DishkaRoute)


def _frontend_redirect(
    settings: Settings, path: str, transaction_id: str
) -> RedirectResponse:
    query = urlencode({"transaction_id": transaction_id})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}{path}?{query}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/payment", response_model=InitiateCheckoutResponse)
async def initiate_checkout(
    request: InitiateCheckoutRequest,
    initiate_checkout_use_case: FromDishka[InitiateCheckoutUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> InitiateCheckoutResponse:
    """Start a hosted checkout.

    Requires authentication. The client redirects the customer to the
    returned redirect_url.

    Raises:
        UnauthorizedError: If not authenticated
        ForbiddenError: If the customer is not the signed-in user
        GatewayError: If the gateway refuses the session (nothing is stored)
    """
    claims = session_guard.authenticate(auth_token)

    return await initiate_checkout_use_case.execute(request, subject=claims.subject)


@router.post("/success/{transaction_id}")
async def payment_success(
    transaction_id: str,
    confirm_payment_use_case: FromDishka[ConfirmPaymentUseCase],
    settings: FromDishka[Settings],
    val_id: str | None = Form(default=None),
) -> RedirectResponse:
    """Gateway success callback.

    Marks the transaction paid after verifying ``val_id`` with the gateway,
    then sends the customer to the frontend success page. Repeated callbacks
    are harmless.
    """
    result = await confirm_payment_use_case.execute(
        ConfirmPaymentRequest(transaction_id=transaction_id, validation_id=val_id)
    )
    return _frontend_redirect(
        settings, settings.payment.success_redirect_path, result.transaction_id
    )


@router.post("/fail/{transaction_id}")
async def payment_fail(
    transaction_id: str,
    get_transaction_use_case: FromDishka[GetTransactionUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Gateway failure callback. The transaction stays pending."""
    transaction = await get_transaction_use_case.execute(
        GetTransactionRequest(transaction_id=transaction_id)
    )
    logfire.info("Payment failed at gateway", transaction_id=transaction.transaction_id)
    return _frontend_redirect(
        settings, settings.payment.fail_redirect_path, transaction.transaction_id
    )


@router.post("/cancel/{transaction_id}")
async def payment_cancel(
    transaction_id: str,
    get_transaction_use_case: FromDishka[GetTransactionUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Gateway cancel callback. The transaction stays pending."""
    transaction = await get_transaction_use_case.execute(
        GetTransactionRequest(transaction_id=transaction_id)
    )
    logfire.info(
        "Payment cancelled by customer", transaction_id=transaction.transaction_id
    )
    return _frontend_redirect(
        settings, settings.payment.cancel_redirect_path, transaction.transaction_id
    )


@router.get("/payment/{transaction_id}", response_model=TransactionItem)
async def get_transaction(
    transaction_id: str,
    get_transaction_use_case: FromDishka[GetTransactionUseCase],
) -> TransactionItem:
    """Get a transaction's status by its (unguessable) id."""
    return await get_transaction_use_case.execute(
        GetTransactionRequest(transaction_id=transaction_id)
    )


@router.get("/payments", response_model=ListTransactionsResponse)
async def list_transactions(
    list_transactions_use_case: FromDishka[ListTransactionsUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> ListTransactionsResponse:
    """List the signed-in user's transactions, newest first."""
    claims = session_guard.authenticate(auth_token)

    return await list_transactions_use_case.execute(
        ListTransactionsRequest(email=Email(claims.subject))
    )
