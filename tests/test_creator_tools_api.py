"""
API tests for the creator workspace: deals, invoices, ideas, calendar,
analytics and media kit.
"""

import pytest


@pytest.fixture
def base(creator):
    return f"/api/creators/{creator.id}"


@pytest.mark.api
class TestDeals:

    def test_status_aliases(self, client, base, creator_headers):
        paid = client.post(f"{base}/deals", json={"title": "Spring promo", "status": "Paid"}, headers=creator_headers)
        odd = client.post(f"{base}/deals", json={"title": "Mystery", "status": "unheard-of"}, headers=creator_headers)

        assert paid.status_code == 201
        assert paid.json()["status"] == "completed"
        assert odd.json()["status"] == "new"

    def test_crud(self, client, base, creator_headers):
        deal_id = client.post(
            f"{base}/deals", json={"title": "Launch", "brand": "Acme", "value": 1200}, headers=creator_headers
        ).json()["id"]

        updated = client.put(f"{base}/deals/{deal_id}", json={"status": "pending"}, headers=creator_headers)
        assert updated.json()["status"] == "active"
        assert updated.json()["brand"] == "Acme"

        listed = client.get(f"{base}/deals", headers=creator_headers).json()["items"]
        assert [d["id"] for d in listed] == [deal_id]

        deleted = client.delete(f"{base}/deals/{deal_id}", headers=creator_headers)
        assert deleted.json() == {"message": "Deal deleted"}
        assert client.get(f"{base}/deals", headers=creator_headers).json()["items"] == []

    def test_other_creators_deal_reads_as_missing(self, client, factory, base, creator_headers, headers_for):
        other = factory.creator()
        other_deal = client.post(
            f"/api/creators/{other.id}/deals", json={"title": "Theirs"}, headers=headers_for(other.user)
        ).json()

        response = client.put(f"{base}/deals/{other_deal['id']}", json={"title": "Mine"}, headers=creator_headers)

        assert response.status_code == 404

    def test_requires_owner(self, client, factory, creator_headers):
        other = factory.creator()
        response = client.get(f"/api/creators/{other.id}/deals", headers=creator_headers)
        assert response.status_code == 403


@pytest.mark.api
class TestInvoices:

    def test_create_with_items(self, client, base, creator_headers):
        response = client.post(f"{base}/invoices", json={
            "invoice_number": "INV-001",
            "issue_date": "2026-03-01T00:00:00Z",
            "client_name": "Acme Corp",
            "currency": "eur",
            "status": "SENT",
            "items": [
                {"description": "Instagram reel", "quantity": 2, "unit_price": 400},
                {"description": "Usage rights", "total": 150},
            ],
        }, headers=creator_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "sent"
        assert data["currency"] == "EUR"
        assert sorted(item["total"] for item in data["items"]) == [150, 800]

    def test_defaults(self, client, base, creator_headers):
        data = client.post(f"{base}/invoices", json={
            "invoice_number": "INV-002",
            "issue_date": "2026-03-02T00:00:00",
            "status": "void",
        }, headers=creator_headers).json()

        assert data["status"] == "draft"
        assert data["currency"] == "USD"
        assert data["items"] == []

    def test_listed_newest_issue_first(self, client, base, creator_headers):
        for number, day in (("A", "01"), ("B", "15"), ("C", "07")):
            client.post(f"{base}/invoices", json={
                "invoice_number": number, "issue_date": f"2026-04-{day}T00:00:00",
            }, headers=creator_headers)

        items = client.get(f"{base}/invoices", headers=creator_headers).json()["items"]

        assert [i["invoice_number"] for i in items] == ["B", "C", "A"]

    def test_deal_must_belong_to_creator(self, client, factory, base, creator_headers, headers_for):
        other = factory.creator()
        deal = client.post(
            f"/api/creators/{other.id}/deals", json={"title": "Theirs"}, headers=headers_for(other.user)
        ).json()

        response = client.post(f"{base}/invoices", json={
            "invoice_number": "X", "issue_date": "2026-04-01T00:00:00", "deal_id": deal["id"],
        }, headers=creator_headers)

        assert response.status_code == 404

    def test_update_and_delete(self, client, base, creator_headers):
        invoice_id = client.post(f"{base}/invoices", json={
            "invoice_number": "INV-9", "issue_date": "2026-04-01T00:00:00",
        }, headers=creator_headers).json()["id"]

        paid = client.put(f"{base}/invoices/{invoice_id}", json={"status": "paid"}, headers=creator_headers)
        assert paid.json()["status"] == "paid"

        assert client.delete(f"{base}/invoices/{invoice_id}", headers=creator_headers).status_code == 200


@pytest.mark.api
class TestIdeas:

    def test_defaults_and_normalization(self, client, base, creator_headers):
        data = client.post(f"{base}/ideas", json={
            "title": "Get ready with me", "status": "someday", "priority": "HIGH", "tags": ["grwm"],
        }, headers=creator_headers).json()

        assert data["status"] == "draft"
        assert data["priority"] == "high"
        assert data["tags"] == ["grwm"]

    def test_unknown_update_values_leave_idea_unchanged(self, client, base, creator_headers):
        idea_id = client.post(
            f"{base}/ideas", json={"title": "Haul", "status": "planned"}, headers=creator_headers
        ).json()["id"]

        data = client.put(
            f"{base}/ideas/{idea_id}", json={"status": "bogus", "priority": "low"}, headers=creator_headers
        ).json()

        assert data["status"] == "planned"
        assert data["priority"] == "low"

    def test_delete(self, client, base, creator_headers):
        idea_id = client.post(f"{base}/ideas", json={"title": "Vlog"}, headers=creator_headers).json()["id"]

        client.delete(f"{base}/ideas/{idea_id}", headers=creator_headers)

        assert client.get(f"{base}/ideas", headers=creator_headers).json()["items"] == []


@pytest.mark.api
class TestEvents:

    def test_listed_by_start(self, client, base, creator_headers):
        client.post(f"{base}/events", json={"title": "Late", "start_at": "2026-05-20T10:00:00"}, headers=creator_headers)
        client.post(f"{base}/events", json={"title": "Early", "start_at": "2026-05-01T10:00:00Z"}, headers=creator_headers)

        events = client.get(f"{base}/events", headers=creator_headers).json()["events"]

        assert [e["title"] for e in events] == ["Early", "Late"]

    def test_get_update_delete(self, client, base, creator_headers):
        event_id = client.post(
            f"{base}/events", json={"title": "Shoot", "start_at": "2026-05-01T10:00:00"}, headers=creator_headers
        ).json()["id"]

        fetched = client.get(f"{base}/events/{event_id}", headers=creator_headers)
        assert fetched.json()["title"] == "Shoot"

        moved = client.put(f"{base}/events/{event_id}", json={"location": "Studio B"}, headers=creator_headers)
        assert moved.json()["location"] == "Studio B"

        client.delete(f"{base}/events/{event_id}", headers=creator_headers)
        assert client.get(f"{base}/events/{event_id}", headers=creator_headers).status_code == 404

    def test_end_before_start_rejected(self, client, base, creator_headers):
        created = client.post(f"{base}/events", json={
            "title": "Backwards", "start_at": "2026-05-02T10:00:00", "end_at": "2026-05-01T10:00:00",
        }, headers=creator_headers)
        assert created.status_code == 400

        event_id = client.post(
            f"{base}/events", json={"title": "Shoot", "start_at": "2026-05-02T10:00:00"}, headers=creator_headers
        ).json()["id"]

        moved = client.put(
            f"{base}/events/{event_id}", json={"end_at": "2026-05-01T10:00:00"}, headers=creator_headers
        )

        assert moved.status_code == 400
        assert moved.json()["error"] == "ValidationError"
        stored = client.get(f"{base}/events/{event_id}", headers=creator_headers).json()
        assert stored["end_at"] is None


@pytest.mark.api
class TestAnalyticsAndMediaKit:

    def test_snapshots_filter_by_platform(self, client, base, creator_headers):
        client.post(f"{base}/analytics", json={"platform": "instagram", "followers": 1000}, headers=creator_headers)
        client.post(f"{base}/analytics", json={"platform": "tiktok", "followers": 500}, headers=creator_headers)

        items = client.get(f"{base}/analytics", params={"platform": "tiktok"}, headers=creator_headers).json()["items"]

        assert [s["followers"] for s in items] == [500]

    def test_media_kit_upsert(self, client, base, creator_headers):
        assert client.get(f"{base}/mediakit", headers=creator_headers).json() == {"item": None}

        first = client.put(f"{base}/mediakit", json={"data": {"headline": "Hi"}}, headers=creator_headers).json()
        second = client.put(f"{base}/mediakit", json={"headline": "Hello", "rates": [100]}, headers=creator_headers).json()

        assert first["item"]["id"] == second["item"]["id"]
        stored = client.get(f"{base}/mediakit", headers=creator_headers).json()["item"]
        assert stored["data"] == {"headline": "Hello", "rates": [100]}

    def test_media_kit_must_be_object(self, client, base, creator_headers):
        response = client.put(f"{base}/mediakit", json={"data": ["not", "an", "object"]}, headers=creator_headers)
        assert response.status_code == 400
