"""STK Push Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import StkPushRequest


class StkPushRequestSchema(BaseModel):
    """
    Schema for POST /stkpush request body.

    Every field is optional at the schema level so that absent fields are
    reported together, by name, rather than as individual type errors.
    """

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "phone": "254712345678",
                    "amount": 100,
                    "reference": "INV001",
                    "description": "Test",
                }
            ]
        },
    )

    phone: Optional[str] = Field(
        None,
        description="Customer phone number in 2547XXXXXXXX format",
        examples=["254712345678"],
    )
    amount: Optional[int | float] = Field(
        None,
        description="Amount to charge",
        examples=[100],
    )
    reference: Optional[str] = Field(
        None,
        description="Account reference shown to the customer",
        examples=["INV001"],
    )
    description: Optional[str] = Field(
        None,
        description="Transaction description",
        examples=["Test"],
    )

    def to_entity(self) -> StkPushRequest:
        return StkPushRequest(
            phone=self.phone,
            amount=self.amount,
            account_reference=self.reference,
            transaction_desc=self.description,
        )
