"""HTTP tests for the author collections resource."""
from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

BERRY_ID = "d28888e9-2ba9-473a-a40f-e38cb54f9b35"
NANCY_ID = "da2fd609-d754-4feb-8acd-c4f9ff13ba96"
ELI_ID = "2902b665-1190-4c70-9915-b9c2d7680450"


class TestGetAuthorCollection:
    def test_returns_authors_in_requested_order(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({ELI_ID},{BERRY_ID})")
        assert resp.status_code == 200
        assert [a["id"] for a in resp.json()] == [ELI_ID, BERRY_ID]

    def test_whitespace_and_case_tolerated(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({NANCY_ID.upper()}, {BERRY_ID})")
        assert resp.status_code == 200
        assert [a["id"] for a in resp.json()] == [NANCY_ID, BERRY_ID]

    def test_single_id(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({NANCY_ID})")
        assert [a["name"] for a in resp.json()] == ["Nancy Swashbuckler Rye"]

    def test_unknown_id_is_404(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({BERRY_ID},{uuid.uuid4()})")
        assert resp.status_code == 404

    def test_duplicate_id_is_404(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({BERRY_ID},{BERRY_ID})")
        assert resp.status_code == 404

    def test_empty_segment_is_400(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({BERRY_ID},,{NANCY_ID})")
        assert resp.status_code == 400
        assert resp.json()["code"] == "malformed_key"

    def test_non_guid_is_400(self, client: TestClient) -> None:
        resp = client.get(f"/api/authorcollections/({BERRY_ID},not-a-guid)")
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "ids"


class TestCreateAuthorCollection:
    def test_create_and_follow_location(self, client: TestClient) -> None:
        resp = client.post(
            "/api/authorcollections",
            json=[
                {"firstName": "Anne", "lastName": "Bonny", "dateOfBirth": "1697-03-08", "mainCategory": "Ships"},
                {"firstName": "Mary", "lastName": "Read", "dateOfBirth": "1685-01-01", "mainCategory": "Maps"},
            ],
        )
        assert resp.status_code == 201
        created = resp.json()
        assert [a["name"] for a in created] == ["Anne Bonny", "Mary Read"]

        ids = ",".join(a["id"] for a in created)
        assert resp.headers["Location"].endswith(f"/api/authorcollections/({ids})")
        fetched = client.get(resp.headers["Location"])
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_invalid_member_rejects_whole_collection(self, client: TestClient) -> None:
        resp = client.post(
            "/api/authorcollections",
            json=[
                {"firstName": "Anne", "lastName": "Bonny", "dateOfBirth": "1697-03-08", "mainCategory": "Ships"},
                {"firstName": "", "lastName": "Read", "dateOfBirth": "1685-01-01", "mainCategory": "Maps"},
            ],
        )
        assert resp.status_code == 422
        assert len(client.get("/api/authors").json()) == 7
