"""
Input checks shared by the services.

Each check returns ``True`` when the payload is acceptable.  The
services decide how a failed check is reported: some operations
return an empty result, others raise ``InvalidInputError``.
Referential checks (does the debt or policy exist) happen in the
services themselves, after these field checks.
"""

from agri_ledger_api.app.schemas.debt import DebtCreate
from agri_ledger_api.app.schemas.escrow import EscrowCreate
from agri_ledger_api.app.schemas.insurance import CropInsuranceCreate


def _has_text(*values: str) -> bool:
    return all(value != "" for value in values)


def _is_positive(*amounts: int) -> bool:
    return all(amount > 0 for amount in amounts)


def is_valid_debt(data: DebtCreate) -> bool:
    """Debtor and creditor must be non‑empty and the amount non‑zero."""
    return _has_text(data.debtor, data.creditor) and _is_positive(data.amount)


def is_valid_escrow(data: EscrowCreate) -> bool:
    return _is_positive(data.amount)


def is_valid_crop_insurance(data: CropInsuranceCreate) -> bool:
    """Farmer and crop type must be non‑empty and the coverage non‑zero.

    Coverage dates are not checked, not even for ordering.
    """
    return _has_text(data.farmer, data.crop_type) and _is_positive(data.coverage_amount)
