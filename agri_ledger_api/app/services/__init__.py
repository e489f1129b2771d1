"""
Service layer abstraction.

Each service encapsulates the business logic for one domain and works
against the ``LedgerState`` it is constructed with, so the same code
runs on the SQLite and the in‑memory backends.  Every operation is a
single synchronous step: validate, resolve references, allocate an
identifier if creating, store, return.
"""

from .debt_service import DebtService
from .escrow_service import EscrowService
from .crop_insurance_service import CropInsuranceService
from .insurance_claim_service import InsuranceClaimService

__all__ = [
    "DebtService",
    "EscrowService",
    "CropInsuranceService",
    "InsuranceClaimService",
]
