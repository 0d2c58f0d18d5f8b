"""
Integration tests for daily receivables snapshots.
"""
import pytest

from accounts_api.ledger import upsert
from accounts_api.models import DailyReceivablesModel


def _post(client, **fields):
    payload = {"report_date": "2024-01-01", **fields}
    return client.post("/daily-receivables", json=payload)


class TestUpsert:
    def test_create(self, client):
        resp = _post(client, opening_balance="100", closing_balance=150, report_data={"rows": [1, 2]})
        assert resp.status_code == 201
        body = resp.json()
        assert body["report_date"] == "2024-01-01"
        assert body["opening_balance"] == 100.0
        assert body["closing_balance"] == 150.0
        assert body["report_data"] == {"rows": [1, 2]}
        assert body["status"] == "open"

    def test_second_post_updates_same_row(self, client):
        _post(client, opening_balance=100)
        resp = _post(client, opening_balance=250)
        assert resp.status_code == 200
        assert resp.json()["opening_balance"] == 250.0

        rows = client.get("/daily-receivables").json()
        assert len(rows) == 1
        assert rows[0]["opening_balance"] == 250.0

    def test_update_keeps_unsent_fields(self, client):
        _post(client, opening_balance=100, report_data={"a": 1})
        body = _post(client, closing_balance=80).json()
        assert body["opening_balance"] == 100.0
        assert body["report_data"] == {"a": 1}

    def test_missing_date(self, client):
        resp = client.post("/daily-receivables", json={"opening_balance": 1})
        assert resp.status_code == 400
        assert "report_date" in resp.json()["detail"]

    @pytest.mark.parametrize("data", [[1, 2], "text", 5, None])
    def test_non_object_report_data(self, client, data):
        resp = _post(client, report_data=data)
        assert resp.json()["report_data"] == {}

    def test_blank_balances_are_zero(self, client):
        body = _post(client, opening_balance="", closing_balance=None).json()
        assert body["opening_balance"] == 0
        assert body["closing_balance"] == 0

    def test_lost_insert_race_becomes_update(self, client, db, monkeypatch):
        _post(client, opening_balance=100)

        real_find = upsert.find_by_key
        calls = []

        def stale_find(*args, **kwargs):
            calls.append(args)
            if len(calls) == 1:
                return None  # lookup ran before the other writer committed
            return real_find(*args, **kwargs)

        monkeypatch.setattr(upsert, "find_by_key", stale_find)
        resp = _post(client, opening_balance=300)
        assert resp.status_code == 200
        assert resp.json()["opening_balance"] == 300.0
        assert db.query(DailyReceivablesModel).count() == 1


class TestReads:
    def test_list_latest_first(self, client):
        _post(client, report_date="2024-01-01")
        _post(client, report_date="2024-01-03")
        _post(client, report_date="2024-01-02")
        dates = [r["report_date"] for r in client.get("/daily-receivables").json()]
        assert dates == ["2024-01-03", "2024-01-02", "2024-01-01"]

    def test_get_by_date_prefix(self, client):
        _post(client, opening_balance=5)
        assert client.get("/daily-receivables/2024-01-01").status_code == 200
        resp = client.get("/daily-receivables/2024-01-01T00:00:00.000Z")
        assert resp.status_code == 200
        assert resp.json()["opening_balance"] == 5.0

    def test_get_missing(self, client):
        assert client.get("/daily-receivables/2030-01-01").status_code == 404

    def test_get_bad_date(self, client):
        assert client.get("/daily-receivables/yesterday").status_code == 400


class TestWrites:
    def test_put(self, client):
        _post(client, opening_balance=5)
        resp = client.put("/daily-receivables/2024-01-01", json={"closing_balance": 42, "report_data": {"x": 1}})
        assert resp.status_code == 200
        body = resp.json()
        assert body["closing_balance"] == 42.0
        assert body["opening_balance"] == 5.0
        assert body["report_data"] == {"x": 1}

    def test_put_missing(self, client):
        assert client.put("/daily-receivables/2024-01-01", json={"closing_balance": 1}).status_code == 404

    def test_finish(self, client):
        _post(client, report_data={"debtors": {"Bob": 20}})
        resp = client.put("/daily-receivables/finish/2024-01-01")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "finished"
        assert body["report_data"] == {"debtors": {"Bob": 20}}

    def test_finished_stays_finished_after_repost(self, client):
        _post(client, opening_balance=5)
        client.put("/daily-receivables/finish/2024-01-01")

        resp = _post(client, opening_balance=7, status="open")
        assert resp.status_code == 200
        assert resp.json()["status"] == "finished"
        assert resp.json()["opening_balance"] == 7.0

    def test_put_cannot_change_status(self, client):
        _post(client)
        resp = client.put("/daily-receivables/2024-01-01", json={"status": "banana", "closing_balance": 3})
        assert resp.status_code == 200
        assert resp.json()["status"] == "open"

        client.put("/daily-receivables/finish/2024-01-01")
        resp = client.put("/daily-receivables/2024-01-01", json={"status": "open"})
        assert resp.json()["status"] == "finished"

    def test_new_report_is_open_whatever_the_body_says(self, client):
        assert _post(client, status="finished").json()["status"] == "open"

    def test_finish_with_timestamp_suffix(self, client):
        _post(client)
        resp = client.put("/daily-receivables/finish/2024-01-01T10:15:00Z")
        assert resp.status_code == 200
        assert resp.json()["status"] == "finished"

    def test_finish_missing(self, client):
        assert client.put("/daily-receivables/finish/2024-01-01").status_code == 404

    def test_delete(self, client):
        _post(client)
        assert client.delete("/daily-receivables/2024-01-01").status_code == 200
        assert client.get("/daily-receivables").json() == []
        assert client.delete("/daily-receivables/2024-01-01").status_code == 404
