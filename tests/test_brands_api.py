"""
API tests for brand profiles, brand stats and shortlists.
"""

import pytest

from database.models import UserRole
from database.marketplace_models import ApplicationStatusDB, CampaignStatusDB


@pytest.mark.api
class TestBrandProfile:

    def test_create(self, client, factory, headers_for):
        user = factory.user(UserRole.BRAND)

        response = client.post("/api/brands", json={
            "company_name": "Acme",
            "website": "https://acme.example",
            "contact_email": "team@acme.example",
        }, headers=headers_for(user))

        assert response.status_code == 201
        assert response.json()["user_id"] == user.id

    def test_invalid_website(self, client, factory, headers_for):
        user = factory.user(UserRole.BRAND)

        response = client.post(
            "/api/brands", json={"company_name": "Acme", "website": "acme"}, headers=headers_for(user)
        )

        assert response.status_code == 400

    def test_one_profile_per_user(self, client, brand_headers):
        response = client.post("/api/brands", json={"company_name": "Again"}, headers=brand_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Brand profile already exists"

    def test_list_and_search(self, client, factory):
        factory.brand(company_name="Glow Cosmetics", industry="beauty")
        factory.brand(company_name="Byte Labs", industry="tech")

        by_industry = client.get("/api/brands", params={"industry": "beauty"}).json()
        by_name = client.get("/api/brands", params={"search": "byte"}).json()

        assert [b["company_name"] for b in by_industry["items"]] == ["Glow Cosmetics"]
        assert by_name["total"] == 1

    def test_update_requires_owner(self, client, factory, brand, brand_headers):
        other = factory.brand()

        own = client.put(f"/api/brands/{brand.id}", json={"industry": "sports"}, headers=brand_headers)
        theirs = client.put(f"/api/brands/{other.id}", json={"industry": "sports"}, headers=brand_headers)

        assert own.json()["industry"] == "sports"
        assert theirs.status_code == 403

    def test_null_company_name_is_ignored(self, client, brand, brand_headers):
        name = brand.company_name

        response = client.put(
            f"/api/brands/{brand.id}", json={"company_name": None, "industry": "food"}, headers=brand_headers
        )

        assert response.status_code == 200
        assert response.json()["company_name"] == name
        assert response.json()["industry"] == "food"

    def test_delete(self, client, brand, brand_headers):
        response = client.delete(f"/api/brands/{brand.id}", headers=brand_headers)

        assert response.status_code == 200
        assert client.get(f"/api/brands/{brand.id}").status_code == 404

    def test_stats(self, client, factory, brand, brand_headers, creator):
        active = factory.campaign(brand=brand, budget=1000)
        factory.campaign(brand=brand, budget=500, status=CampaignStatusDB.DRAFT)
        factory.campaign(brand=brand, budget=250, status=CampaignStatusDB.COMPLETED)
        factory.application(active, creator, status=ApplicationStatusDB.APPROVED)

        data = client.get(f"/api/brands/{brand.id}/stats", headers=brand_headers).json()

        assert data["total_campaigns"] == 3
        assert data["active_campaigns"] == 1
        assert data["completed_campaigns"] == 1
        assert data["total_applications"] == 1
        assert data["approved_applications"] == 1
        assert data["total_budget"] == 1750
        assert data["committed_budget"] == 1250
        assert data["available_budget"] == 500


@pytest.mark.api
class TestShortlists:

    def test_add_list_remove(self, client, brand_headers, creator):
        added = client.post(
            "/api/shortlists", json={"creator_id": creator.id, "notes": "Great fit"}, headers=brand_headers
        )
        assert added.status_code == 201
        entry_id = added.json()["id"]

        items = client.get("/api/shortlists", headers=brand_headers).json()["items"]
        assert [i["creator"]["id"] for i in items] == [creator.id]

        removed = client.delete(f"/api/shortlists/{entry_id}", headers=brand_headers)
        assert removed.json() == {"success": True}
        assert client.get("/api/shortlists", headers=brand_headers).json()["items"] == []

    def test_duplicate(self, client, brand_headers, creator):
        client.post("/api/shortlists", json={"creator_id": creator.id}, headers=brand_headers)

        response = client.post("/api/shortlists", json={"creator_id": creator.id}, headers=brand_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Creator is already on your shortlist"

    def test_unknown_creator(self, client, brand_headers):
        response = client.post("/api/shortlists", json={"creator_id": "ghost"}, headers=brand_headers)
        assert response.status_code == 404

    def test_cannot_remove_another_brands_entry(self, client, factory, brand_headers, creator, headers_for):
        other = factory.brand()
        entry = client.post(
            "/api/shortlists", json={"creator_id": creator.id}, headers=headers_for(other.user)
        ).json()

        response = client.delete(f"/api/shortlists/{entry['id']}", headers=brand_headers)

        assert response.status_code == 403

    def test_creators_have_no_shortlist(self, client, creator_headers):
        response = client.get("/api/shortlists", headers=creator_headers)
        assert response.status_code == 403
