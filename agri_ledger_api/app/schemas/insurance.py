"""
Pydantic models for crop insurance policies and claims.

Coverage dates are opaque unsigned integers chosen by the client and
are not checked for ordering.  Claims reference a policy by its
identifier; the claimed amount is not compared with the coverage.
"""

from pydantic import BaseModel, Field

from agri_ledger_api.app.core.ids import U64_MAX


class CropInsuranceBase(BaseModel):
    farmer: str = Field(..., max_length=256, examples=["farmerA"])
    crop_type: str = Field(..., max_length=256, examples=["wheat"])
    coverage_amount: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[1000])
    coverage_start_date: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[100])
    coverage_end_date: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[200])


class CropInsuranceCreate(CropInsuranceBase):
    """Schema for purchasing a crop insurance policy."""
    pass


class CropInsuranceRead(CropInsuranceBase):
    id: int

    model_config = {
        "from_attributes": True,
    }


class InsuranceClaimCreate(BaseModel):
    """Schema for submitting a claim against a policy."""

    insurance_id: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[2])
    claim_amount: int = Field(..., ge=0, le=U64_MAX, strict=True, examples=[1500])


class InsuranceClaimRead(InsuranceClaimCreate):
    # Identifier the claim is stored under, used with GET /insurance-claims/{id}.
    id: int
    claim_date: int

    model_config = {
        "from_attributes": True,
    }
