"""
Business logic for debts.

Debts are the only records that can be changed after creation.  An
update replaces debtor, creditor and amount but keeps the identifier
and the original creation timestamp.

Note the two failure conventions: ``add_debt`` answers invalid input
with ``None`` and no detail, while ``update_debt`` raises
``InvalidInputError``.
"""

import logging
from typing import Optional

from agri_ledger_api.app.core.errors import InvalidInputError, NotFoundError
from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.schemas.debt import DebtCreate, DebtRead
from agri_ledger_api.app.services.validation import is_valid_debt


class DebtService:
    """Service for creating, reading and replacing debts."""

    def __init__(self, state: LedgerState) -> None:
        self.state = state

    def get_debt(self, debt_id: int) -> DebtRead:
        """Retrieve a debt by ID or raise ``NotFoundError``."""
        debt = self.state.debts.get(debt_id)
        if debt is None:
            raise NotFoundError(f"a debt with id={debt_id} not found")
        return debt

    def add_debt(self, data: DebtCreate) -> Optional[DebtRead]:
        """Store a new debt and return it.

        Returns ``None`` when the debtor or creditor is empty or the
        amount is zero; no identifier is consumed in that case.
        """
        logger = logging.getLogger(__name__)
        if not is_valid_debt(data):
            logger.debug("Rejected debt payload")
            return None
        with self.state.transaction():
            debt_id = self.state.ids.next_id()
            debt = DebtRead(id=debt_id, created_at=self.state.now(), **data.model_dump())
            self.state.debts.put(debt_id, debt)
        logger.info("Created debt %s", debt_id)
        return debt

    def update_debt(self, debt_id: int, data: DebtCreate) -> DebtRead:
        """Replace the fields of an existing debt.

        The payload is validated before the lookup, so an invalid
        payload for a missing debt reports ``InvalidInputError``.
        """
        logger = logging.getLogger(__name__)
        if not is_valid_debt(data):
            raise InvalidInputError("Invalid input data")
        with self.state.transaction():
            current = self.state.debts.get(debt_id)
            if current is None:
                raise NotFoundError(
                    f"couldn't update a debt with id={debt_id}. debt not found"
                )
            debt = current.model_copy(update=data.model_dump())
            self.state.debts.put(debt_id, debt)
        logger.info("Updated debt %s", debt_id)
        return debt
