"""Callback service - acknowledges asynchronous gateway notifications."""

from typing import Any

import structlog

from src.core.metrics import record_callback
from src.domain.entities import StkCallback

logger = structlog.get_logger(__name__)


class CallbackService:
    """
    Logs gateway callbacks.

    Callbacks are not stored, forwarded or matched against earlier
    push requests.
    """

    def handle(self, payload: Any) -> StkCallback:
        callback = StkCallback.from_payload(payload)
        record_callback(callback.outcome)

        if callback.is_recognized:
            logger.info(
                "stk_callback_received",
                merchant_request_id=callback.merchant_request_id,
                checkout_request_id=callback.checkout_request_id,
                result_code=callback.result_code,
                result_desc=callback.result_desc,
                metadata=callback.metadata_dict(),
                payload=payload,
            )
        else:
            logger.info("callback_received", payload=payload)

        return callback
