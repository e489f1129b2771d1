"""
Insurance claim endpoints for API v1.

A claim is accepted for any amount as long as the referenced policy
exists; the response carries the claim id for later lookups.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from agri_ledger_api.app.api.deps import get_insurance_claim_service
from agri_ledger_api.app.core.errors import NotFoundError
from agri_ledger_api.app.core.ids import U64_MAX
from agri_ledger_api.app.schemas.insurance import InsuranceClaimCreate, InsuranceClaimRead
from agri_ledger_api.app.services.insurance_claim_service import InsuranceClaimService

router = APIRouter()


@router.get("/{claim_id}", response_model=InsuranceClaimRead)
async def get_insurance_claim(
    claim_id: int = Path(..., ge=0, le=U64_MAX, description="Claim identifier"),
    service: InsuranceClaimService = Depends(get_insurance_claim_service),
) -> InsuranceClaimRead:
    try:
        return service.get_insurance_claim(claim_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=InsuranceClaimRead, status_code=status.HTTP_201_CREATED)
async def submit_insurance_claim(
    claim: InsuranceClaimCreate,
    service: InsuranceClaimService = Depends(get_insurance_claim_service),
) -> InsuranceClaimRead:
    """Submit a claim against an existing policy.  Returns 404 if it does not exist."""
    try:
        return service.submit_insurance_claim(claim)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
