"""STK Push request body construction."""

from typing import Any, Dict

from src.domain.entities import Credentials, StkPushRequest, TRANSACTION_TYPE_PAYBILL

from .security import generate_password


def build_stk_push_payload(
    credentials: Credentials,
    request: StkPushRequest,
    timestamp: str,
) -> Dict[str, Any]:
    """
    Build the JSON body for ``/mpesa/stkpush/v1/processrequest``.

    The shortcode is both the business and the receiving party; the
    customer's phone is both the paying party and the prompted number.
    """
    return {
        "BusinessShortCode": credentials.shortcode,
        "Password": generate_password(
            credentials.shortcode, credentials.passkey, timestamp
        ),
        "Timestamp": timestamp,
        "TransactionType": TRANSACTION_TYPE_PAYBILL,
        "Amount": request.amount,
        "PartyA": request.phone,
        "PartyB": credentials.shortcode,
        "PhoneNumber": request.phone,
        "CallBackURL": credentials.callback_url,
        "AccountReference": request.account_reference,
        "TransactionDesc": request.transaction_desc,
    }
