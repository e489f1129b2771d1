"""Agri Ledger API client.

This module defines a thin client around the REST API served by
``agri_ledger_api``.  It exposes one method per service operation:

* :meth:`get_debt`, :meth:`add_debt`, :meth:`update_debt`
* :meth:`get_escrow`, :meth:`create_escrow`
* :meth:`get_crop_insurance`, :meth:`purchase_crop_insurance`
* :meth:`get_insurance_claim`, :meth:`submit_insurance_claim`

Every method returns a tuple ``(data, error)``.  On success ``data``
is the decoded record and ``error`` is ``None``.  ``add_debt`` and
``purchase_crop_insurance`` may also succeed with ``data`` set to
``None``: the server answers invalid input for these two operations
with an empty result instead of an error.  On failure ``data`` is
``None`` and ``error`` is a dictionary with ``status_code`` (404 for
a missing record, 400 for invalid input) and ``message``.

The client uses the ``requests`` library internally and supports an
optional bearer token for deployments behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class AgriLedgerAPI:
    """Client for interacting with the Agri Ledger API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.  A ``null`` response body yields ``(None, None)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Debts
    # ------------------------------------------------------------------
    def get_debt(self, debt_id: int) -> Result:
        return self._request("GET", f"/debts/{debt_id}")

    def add_debt(self, debtor: str, creditor: str, amount: int) -> Result:
        """Create a debt.  ``(None, None)`` means the server rejected the input."""
        return self._request(
            "POST", "/debts/", json_body={"debtor": debtor, "creditor": creditor, "amount": amount}
        )

    def update_debt(self, debt_id: int, debtor: str, creditor: str, amount: int) -> Result:
        return self._request(
            "PUT",
            f"/debts/{debt_id}",
            json_body={"debtor": debtor, "creditor": creditor, "amount": amount},
        )

    # ------------------------------------------------------------------
    # Escrows
    # ------------------------------------------------------------------
    def get_escrow(self, debt_id: int) -> Result:
        return self._request("GET", f"/escrows/{debt_id}")

    def create_escrow(self, debt_id: int, amount: int) -> Result:
        return self._request("POST", "/escrows/", json_body={"debt_id": debt_id, "amount": amount})

    # ------------------------------------------------------------------
    # Crop insurance and claims
    # ------------------------------------------------------------------
    def get_crop_insurance(self, insurance_id: int) -> Result:
        return self._request("GET", f"/crop-insurance/{insurance_id}")

    def purchase_crop_insurance(
        self,
        farmer: str,
        crop_type: str,
        coverage_amount: int,
        coverage_start_date: int,
        coverage_end_date: int,
    ) -> Result:
        """Buy a policy.  ``(None, None)`` means the server rejected the input."""
        return self._request(
            "POST",
            "/crop-insurance/",
            json_body={
                "farmer": farmer,
                "crop_type": crop_type,
                "coverage_amount": coverage_amount,
                "coverage_start_date": coverage_start_date,
                "coverage_end_date": coverage_end_date,
            },
        )

    def get_insurance_claim(self, claim_id: int) -> Result:
        return self._request("GET", f"/insurance-claims/{claim_id}")

    def submit_insurance_claim(self, insurance_id: int, claim_amount: int) -> Result:
        return self._request(
            "POST",
            "/insurance-claims/",
            json_body={"insurance_id": insurance_id, "claim_amount": claim_amount},
        )
