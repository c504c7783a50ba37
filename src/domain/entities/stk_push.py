"""StkPushRequest entity."""

from dataclasses import dataclass
from typing import Any, List

TRANSACTION_TYPE_PAYBILL = "CustomerPayBillOnline"


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


@dataclass(frozen=True)
class StkPushRequest:
    """A single payment prompt to push to a customer's phone."""

    phone: str | None
    amount: int | float | None
    account_reference: str | None
    transaction_desc: str | None

    # Names as they appear in the inbound request body
    FIELD_NAMES = {
        "phone": "phone",
        "amount": "amount",
        "account_reference": "reference",
        "transaction_desc": "description",
    }

    def missing_fields(self) -> List[str]:
        """Return the inbound names of any absent or blank fields."""
        return [
            name
            for attr, name in self.FIELD_NAMES.items()
            if _is_missing(getattr(self, attr))
        ]
