"""
Top‑level router for version 1 of the API.

This router aggregates the per‑domain routers under a unified prefix.
When a new record kind is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import crop_insurance, debts, escrows, insurance_claims

router = APIRouter()

router.include_router(debts.router, prefix="/debts", tags=["debts"])
router.include_router(escrows.router, prefix="/escrows", tags=["escrows"])
router.include_router(crop_insurance.router, prefix="/crop-insurance", tags=["crop-insurance"])
router.include_router(insurance_claims.router, prefix="/insurance-claims", tags=["insurance-claims"])
