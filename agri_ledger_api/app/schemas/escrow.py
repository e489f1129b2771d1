"""
Pydantic models for escrows.

An escrow secures an existing debt and is stored under that debt's
identifier; it has no identifier of its own.
"""

from pydantic import BaseModel, Field

from agri_ledger_api.app.core.ids import U64_MAX


class EscrowCreate(BaseModel):
    debt_id: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[1])
    amount: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[50])


class EscrowRead(EscrowCreate):
    created_at: int

    model_config = {
        "from_attributes": True,
    }
