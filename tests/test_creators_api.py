"""
API tests for creator discovery, profiles, stats and bulk import.
"""

import pytest

from database.models import Creator, User, UserRole
from database.marketplace_models import ApplicationStatusDB, Shortlist


def profile_payload(**overrides):
    payload = {
        "username": "janedoe",
        "display_name": "Jane Doe",
        "instagram_handle": "jane.doe",
        "instagram_followers": 12000,
        "avg_engagement_rate": 4.5,
        "categories": ["Beauty", "beauty ", "Skincare"],
    }
    payload.update(overrides)
    return payload


@pytest.mark.api
class TestCreatorProfile:

    def test_create_profile(self, client, factory, headers_for):
        user = factory.user(UserRole.CREATOR)

        response = client.post("/api/creators", json=profile_payload(), headers=headers_for(user))

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == user.id
        assert data["categories"] == ["beauty", "skincare"]

    def test_second_profile_conflicts(self, client, creator_headers):
        response = client.post("/api/creators", json=profile_payload(), headers=creator_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Creator profile already exists"

    def test_username_taken(self, client, factory, headers_for):
        factory.creator(username="janedoe")
        user = factory.user(UserRole.CREATOR)

        response = client.post("/api/creators", json=profile_payload(), headers=headers_for(user))

        assert response.json()["message"] == "Username already taken"

    def test_username_must_be_alphanumeric(self, client, factory, headers_for):
        user = factory.user(UserRole.CREATOR)

        response = client.post(
            "/api/creators", json=profile_payload(username="jane_doe!"), headers=headers_for(user)
        )

        assert response.status_code == 400

    def test_engagement_out_of_range(self, client, factory, headers_for):
        user = factory.user(UserRole.CREATOR)

        response = client.post(
            "/api/creators", json=profile_payload(avg_engagement_rate=140), headers=headers_for(user)
        )

        assert response.status_code == 400

    def test_owner_updates_profile(self, client, creator, creator_headers):
        response = client.put(
            f"/api/creators/{creator.id}", json={"bio": "New bio", "base_price": 150}, headers=creator_headers
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "New bio"

    def test_null_display_name_is_ignored(self, client, creator, creator_headers):
        name = creator.display_name

        response = client.put(
            f"/api/creators/{creator.id}", json={"display_name": None, "bio": "Still here"}, headers=creator_headers
        )

        assert response.status_code == 200
        assert response.json()["display_name"] == name
        assert response.json()["bio"] == "Still here"

    def test_non_owner_cannot_update(self, client, factory, creator_headers):
        other = factory.creator()
        response = client.put(f"/api/creators/{other.id}", json={"bio": "x"}, headers=creator_headers)
        assert response.status_code == 403

    def test_delete_profile(self, client, creator, creator_headers):
        response = client.delete(f"/api/creators/{creator.id}", headers=creator_headers)

        assert response.status_code == 200
        assert client.get(f"/api/creators/{creator.id}").status_code == 404


@pytest.mark.api
class TestCreatorDiscovery:

    def test_filters_and_pagination(self, client, factory):
        factory.creator(display_name="Tech Tom", instagram_followers=50000, categories=["tech"], age=28)
        factory.creator(display_name="Food Fay", tiktok_followers=2000, categories=["food"], age=40)
        factory.creator(display_name="Quiet Quinn", is_active=False, categories=["tech"])

        all_active = client.get("/api/creators").json()
        tech = client.get("/api/creators", params={"category": "TECH"}).json()
        big = client.get("/api/creators", params={"min_followers": 10000}).json()
        small = client.get("/api/creators", params={"max_followers": 10000}).json()
        thirties = client.get("/api/creators", params={"age_group": "35-44"}).json()
        searched = client.get("/api/creators", params={"search": "fay"}).json()
        paged = client.get("/api/creators", params={"limit": 1, "page": 2}).json()

        assert all_active["total"] == 2
        assert [c["display_name"] for c in tech["items"]] == ["Tech Tom"]
        assert [c["display_name"] for c in big["items"]] == ["Tech Tom"]
        assert [c["display_name"] for c in small["items"]] == ["Food Fay"]
        assert [c["display_name"] for c in thirties["items"]] == ["Food Fay"]
        assert searched["total"] == 1
        assert paged["pages"] == 2
        assert len(paged["items"]) == 1

    def test_sort_by_followers(self, client, factory):
        factory.creator(display_name="Small", instagram_followers=100)
        factory.creator(display_name="Large", instagram_followers=100, tiktok_followers=90000)

        data = client.get("/api/creators", params={"sort_by": "followers", "sort_order": "desc"}).json()

        assert [c["display_name"] for c in data["items"]] == ["Large", "Small"]

    def test_invalid_sort(self, client):
        response = client.get("/api/creators", params={"sort_by": "karma"})
        assert response.status_code == 400

    def test_recommended_ranks_by_reach(self, client, factory):
        factory.creator(display_name="Steady", instagram_followers=10000, avg_engagement_rate=10.0, categories=["tech"])
        factory.creator(display_name="Huge", youtube_followers=100000, categories=["tech", "gaming"])
        factory.creator(display_name="Chef", instagram_followers=500000, categories=["food"])

        data = client.get("/api/creators/recommended", params={"category": "tech", "limit": 5}).json()

        assert [c["display_name"] for c in data["items"]] == ["Huge", "Steady"]
        assert data["items"][1]["reach_score"] == pytest.approx(11000.0)
        assert data["total"] == 2

    def test_recommended_limit(self, client, factory):
        for i in range(3):
            factory.creator(instagram_followers=1000 * (i + 1))

        data = client.get("/api/creators/recommended", params={"limit": 2}).json()

        assert len(data["items"]) == 2
        assert data["items"][0]["instagram_followers"] == 3000

    def test_public_profile(self, client, creator):
        response = client.get(f"/api/creators/{creator.id}")
        assert response.json()["username"] == creator.username


@pytest.mark.api
class TestCreatorDashboard:

    def test_stats(self, client, factory, creator, creator_headers, brand):
        factory.application(factory.campaign(), creator, status=ApplicationStatusDB.APPROVED)
        factory.application(factory.campaign(), creator, status=ApplicationStatusDB.REJECTED)
        factory.application(factory.campaign(), creator)
        factory._save(Shortlist(brand_id=brand.id, creator_id=creator.id))

        data = client.get(f"/api/creators/{creator.id}/stats", headers=creator_headers).json()

        assert data == {
            "total_applications": 3,
            "approved_applications": 1,
            "pending_applications": 1,
            "rejected_applications": 1,
            "shortlist_count": 1,
            "approval_rate": 33.3,
        }

    def test_stats_with_no_applications(self, client, creator, creator_headers):
        data = client.get(f"/api/creators/{creator.id}/stats", headers=creator_headers).json()
        assert data["approval_rate"] == 0.0

    def test_applications_filtered_by_status(self, client, factory, creator, creator_headers):
        factory.application(factory.campaign(title="Yes"), creator, status=ApplicationStatusDB.APPROVED)
        factory.application(factory.campaign(title="Waiting"), creator)

        data = client.get(
            f"/api/creators/{creator.id}/applications", params={"status": "approved"}, headers=creator_headers
        ).json()

        assert data["total"] == 1
        assert data["items"][0]["campaign"]["title"] == "Yes"

    def test_admin_sees_any_dashboard(self, client, creator, admin_headers):
        response = client.get(f"/api/creators/{creator.id}/stats", headers=admin_headers)
        assert response.status_code == 200


@pytest.mark.api
class TestCreatorImport:

    def test_import_upserts(self, client, db, admin_headers):
        items = [
            {
                "name": "Ada Lovelace",
                "instagram": "https://instagram.com/ada.codes/",
                "followers": "15000",
                "engagementRate": "3.5",
                "niche": "Tech; Education",
                "email": "ADA@example.com",
            },
            {"displayName": "Grace Hopper", "tiktok": "@gracehops", "tiktokFollowers": 8000},
        ]

        response = client.post("/api/creators/import", json={"items": items}, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["imported"] == 2
        assert [c["username"] for c in data["creators"]] == ["ada.codes", "grace_hopper"]
        assert data["creators"][0]["email"] == "ada@example.com"
        assert data["creators"][1]["email"] == "grace_hopper@import.local"

        ada = db.query(Creator).filter(Creator.username == "ada.codes").one()
        assert ada.instagram_followers == 15000
        assert ada.categories == ["tech", "education"]
        assert db.query(User).filter(User.email == "ada@example.com").one().role == UserRole.CREATOR

    def test_reimport_updates_existing(self, client, db, factory, admin_headers):
        existing = factory.creator(username="ada", display_name="Old name")

        client.post(
            "/api/creators/import",
            json={"items": [{"username": "@ada", "name": "Ada L.", "followers": 99}]},
            headers=admin_headers,
        )

        db.expire_all()
        refreshed = db.query(Creator).filter(Creator.id == existing.id).one()
        assert refreshed.display_name == "Ada L."
        assert refreshed.instagram_followers == 99
        assert db.query(Creator).count() == 1

    def test_empty_items(self, client, admin_headers):
        response = client.post("/api/creators/import", json={"items": []}, headers=admin_headers)
        assert response.status_code == 400

    def test_admin_only(self, client, creator_headers):
        response = client.post("/api/creators/import", json={"items": [{"name": "x"}]}, headers=creator_headers)
        assert response.status_code == 403
