from __future__ import annotations

import json

import requests

from agri_ledger_client import AgriLedgerAPI


class FakeResponse:
    def __init__(self, status_code: int, payload=None):
        self.status_code = status_code
        self.content = b"" if payload is ... else json.dumps(payload).encode("utf-8")
        self.text = self.content.decode("utf-8")

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses: FakeResponse):
        self._responses = list(responses)
        self.calls: list[dict] = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        return self._responses.pop(0)


def test_add_debt_posts_payload_and_decodes_record():
    record = {"id": 1, "debtor": "alice", "creditor": "bob", "amount": 100, "created_at": 5}
    session = FakeSession(FakeResponse(201, record))
    api = AgriLedgerAPI(base_url="http://ledger.local/", session=session, api_key="tok")

    data, error = api.add_debt("alice", "bob", 100)

    assert (data, error) == (record, None)
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://ledger.local/api/v1/debts/"
    assert call["json"] == {"debtor": "alice", "creditor": "bob", "amount": 100}
    assert call["headers"]["Authorization"] == "Bearer tok"


def test_empty_result_is_not_an_error():
    api = AgriLedgerAPI(base_url="http://ledger.local", session=FakeSession(FakeResponse(200, None)))
    assert api.purchase_crop_insurance("", "wheat", 1000, 1, 2) == (None, None)


def test_not_found_carries_status_and_message():
    session = FakeSession(FakeResponse(404, {"detail": "a debt with id=999 not found"}))
    api = AgriLedgerAPI(base_url="http://ledger.local", session=session)

    data, error = api.get_debt(999)

    assert data is None
    assert error == {"status_code": 404, "message": "a debt with id=999 not found"}
    assert session.calls[0]["url"] == "http://ledger.local/api/v1/debts/999"


def test_invalid_input_on_update():
    session = FakeSession(FakeResponse(400, {"detail": "Invalid input data"}))
    api = AgriLedgerAPI(base_url="http://ledger.local", session=session)

    _, error = api.update_debt(1, "alice", "bob", 0)

    assert error["status_code"] == 400
    assert session.calls[0]["method"] == "PUT"


def test_connection_error_is_reported():
    class BrokenSession:
        def request(self, **kwargs):
            raise requests.ConnectionError("refused")

    api = AgriLedgerAPI(base_url="http://ledger.local", session=BrokenSession())
    data, error = api.get_escrow(1)
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_client_against_app(client):
    """The client speaks the same paths and payloads as the server."""

    class TestClientSession:
        def request(self, method, url, json=None, headers=None, timeout=None):
            resp = client.request(method, url.replace("http://testserver", ""), json=json, headers=headers)
            return FakeResponse(resp.status_code, resp.json() if resp.content else ...)

    api = AgriLedgerAPI(base_url="http://testserver", session=TestClientSession())

    debt, _ = api.add_debt("alice", "bob", 100)
    escrow, _ = api.create_escrow(debt["id"], 50)
    policy, _ = api.purchase_crop_insurance("farmerA", "wheat", 1000, 100, 200)
    claim, _ = api.submit_insurance_claim(policy["id"], 1500)

    assert api.get_debt(debt["id"]) == (debt, None)
    assert api.get_escrow(debt["id"]) == (escrow, None)
    assert api.get_crop_insurance(policy["id"]) == (policy, None)
    assert api.get_insurance_claim(claim["id"]) == (claim, None)
    assert api.add_debt("", "bob", 1) == (None, None)
    assert api.create_escrow(404, 1)[1]["status_code"] == 404
