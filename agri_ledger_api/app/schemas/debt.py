"""
Pydantic models for debt data.

``DebtBase`` holds the client supplied fields shared by creation and
update requests; ``DebtRead`` adds the identifier and creation
timestamp assigned by the service.  Empty names and a zero amount are
accepted here on purpose and rejected by the service, which decides
how each operation reports the failure.  Integer fields are strict:
booleans, floats and numeric strings are refused with 422.
"""

from pydantic import BaseModel, Field

from agri_ledger_api.app.core.ids import U64_MAX


class DebtBase(BaseModel):
    debtor: str = Field(..., max_length=256, examples=["alice"])
    creditor: str = Field(..., max_length=256, examples=["bob"])
    amount: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[100])


class DebtCreate(DebtBase):
    """Schema for creating or replacing a debt."""
    pass


class DebtRead(DebtBase):
    """Schema for reading a debt."""

    id: int
    # Nanoseconds since the Unix epoch.
    created_at: int

    model_config = {
        "from_attributes": True,
    }
