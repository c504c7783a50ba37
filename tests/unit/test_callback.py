"""
Unit tests for callback parsing and handling.

Parsing must never raise, whatever the gateway (or anyone else) posts.
"""

import pytest

from src.application.services import CallbackService
from src.domain.entities import CallbackMetadataItem, StkCallback


SUCCESS_PAYLOAD = {
    "Body": {
        "stkCallback": {
            "MerchantRequestID": "29115-34620561-1",
            "CheckoutRequestID": "ws_CO_191220191020363925",
            "ResultCode": 0,
            "ResultDesc": "The service request is processed successfully.",
            "CallbackMetadata": {
                "Item": [
                    {"Name": "Amount", "Value": 1.00},
                    {"Name": "MpesaReceiptNumber", "Value": "NLJ7RT61SV"},
                    {"Name": "Balance"},
                    {"Name": "PhoneNumber", "Value": 254708374149},
                ]
            },
        }
    }
}


def test_parses_successful_callback():
    callback = StkCallback.from_payload(SUCCESS_PAYLOAD)

    assert callback.merchant_request_id == "29115-34620561-1"
    assert callback.checkout_request_id == "ws_CO_191220191020363925"
    assert callback.result_code == 0
    assert callback.outcome == "success"
    assert callback.is_recognized
    assert callback.metadata_dict() == {
        "Amount": 1.00,
        "MpesaReceiptNumber": "NLJ7RT61SV",
        "Balance": None,
        "PhoneNumber": 254708374149,
    }
    assert CallbackMetadataItem(name="Balance") in callback.metadata


def test_parses_cancelled_callback():
    callback = StkCallback.from_payload(
        {"Body": {"stkCallback": {"CheckoutRequestID": "ws_1", "ResultCode": 1032, "ResultDesc": "Request cancelled by user."}}}
    )

    assert callback.result_code == 1032
    assert callback.outcome == "failed"
    assert callback.metadata == []


def test_string_result_code_is_parsed():
    callback = StkCallback.from_payload({"Body": {"stkCallback": {"ResultCode": "1"}}})

    assert callback.result_code == 1
    assert callback.outcome == "failed"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "",
        "text",
        0,
        [],
        {},
        {"Body": None},
        {"Body": []},
        {"Body": {"stkCallback": "x"}},
        {"Body": {"stkCallback": {"ResultCode": True}}},
        {"Body": {"stkCallback": {"ResultCode": "abc"}}},
        {"Body": {"stkCallback": {"ResultCode": "--1"}}},
        {"Body": {"stkCallback": {"ResultCode": "\u00b2"}}},
        {"Body": {"stkCallback": {"ResultCode": 1.5}}},
        {"Body": {"stkCallback": {"CallbackMetadata": {"Item": "x"}}}},
        {"Body": {"stkCallback": {"CallbackMetadata": {"Item": [1, None, {"Value": 2}]}}}},
    ],
)
def test_unrecognized_payloads_never_raise(payload):
    callback = StkCallback.from_payload(payload)

    assert callback.result_code is None
    assert callback.outcome == "unknown"
    assert callback.metadata == []


@pytest.mark.parametrize("payload", [SUCCESS_PAYLOAD, {"anything": [1, 2]}, "raw text", None])
def test_callback_service_handles_any_payload(payload):
    service = CallbackService()

    result = service.handle(payload)

    assert isinstance(result, StkCallback)
