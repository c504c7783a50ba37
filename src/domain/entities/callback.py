"""StkCallback entity - a read-only view over a gateway callback payload."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CallbackMetadataItem:
    name: str
    value: Any = None


@dataclass(frozen=True)
class StkCallback:
    """
    Summary of an STK Push result callback.

    The gateway posts ``{"Body": {"stkCallback": {...}}}``. Anything that
    does not match that shape produces an empty summary; parsing never
    raises.
    """

    merchant_request_id: Optional[str] = None
    checkout_request_id: Optional[str] = None
    result_code: Optional[int] = None
    result_desc: Optional[str] = None
    metadata: List[CallbackMetadataItem] = field(default_factory=list)

    @property
    def is_recognized(self) -> bool:
        return self.checkout_request_id is not None or self.result_code is not None

    @property
    def outcome(self) -> str:
        """success / failed / unknown, from the result code."""
        if self.result_code is None:
            return "unknown"
        return "success" if self.result_code == 0 else "failed"

    def metadata_dict(self) -> Dict[str, Any]:
        return {item.name: item.value for item in self.metadata}

    @classmethod
    def from_payload(cls, payload: Any) -> "StkCallback":
        if not isinstance(payload, dict):
            return cls()

        body = payload.get("Body")
        stk = body.get("stkCallback") if isinstance(body, dict) else None
        if not isinstance(stk, dict):
            return cls()

        result_code = _as_int(stk.get("ResultCode"))

        items = []
        meta = stk.get("CallbackMetadata")
        raw_items = meta.get("Item") if isinstance(meta, dict) else None
        if isinstance(raw_items, list):
            for item in raw_items:
                if isinstance(item, dict) and "Name" in item:
                    items.append(
                        CallbackMetadataItem(name=str(item["Name"]), value=item.get("Value"))
                    )

        return cls(
            merchant_request_id=_as_str(stk.get("MerchantRequestID")),
            checkout_request_id=_as_str(stk.get("CheckoutRequestID")),
            result_code=result_code,
            result_desc=_as_str(stk.get("ResultDesc")),
            metadata=items,
        )


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
