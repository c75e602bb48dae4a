"""HTTP tests for the authors resource."""
from __future__ import annotations

import json
import uuid
from typing import Any

from fastapi.testclient import TestClient

BERRY_ID = "d28888e9-2ba9-473a-a40f-e38cb54f9b35"
NANCY_ID = "da2fd609-d754-4feb-8acd-c4f9ff13ba96"

NAME_ORDER = ["Arnold", "Atherton", "Berry", "Eli", "Nancy", "Rutherford", "Seabury"]


def first_names(authors: list[dict[str, Any]]) -> list[str]:
    return [a["name"].split(" ")[0] for a in authors]


def pagination(resp: Any) -> dict[str, Any]:
    return json.loads(resp.headers["X-Pagination"])


# ---------------------------------------------------------------------------
# GET /api/authors
# ---------------------------------------------------------------------------


class TestListAuthors:
    def test_default_order_is_by_name(self, client: TestClient) -> None:
        resp = client.get("/api/authors")
        assert resp.status_code == 200
        assert first_names(resp.json()) == NAME_ORDER

    def test_representation(self, client: TestClient) -> None:
        berry = next(a for a in client.get("/api/authors").json() if a["id"] == BERRY_ID)
        assert set(berry) == {"id", "name", "age", "mainCategory"}
        assert berry["name"] == "Berry Griffin Beak Eldritch"
        assert berry["mainCategory"] == "Ships"
        assert isinstance(berry["age"], int)

    def test_pagination_header_single_page(self, client: TestClient) -> None:
        assert pagination(client.get("/api/authors")) == {
            "totalCount": 7,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 1,
            "previousPageLink": None,
            "nextPageLink": None,
        }

    def test_middle_page_links(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"pageNumber": 2, "pageSize": 2, "searchQuery": "a"})
        meta = pagination(resp)
        assert meta["currentPage"] == 2
        assert meta["previousPageLink"].startswith("http://testserver/api/authors?")
        assert "pageNumber=1" in meta["previousPageLink"]
        assert "pageNumber=3" in meta["nextPageLink"]
        assert "searchQuery=a" in meta["nextPageLink"]

    def test_following_next_link(self, client: TestClient) -> None:
        first = client.get("/api/authors", params={"pageSize": 3})
        second = client.get(pagination(first)["nextPageLink"])
        assert first_names(second.json()) == NAME_ORDER[3:6]

    def test_page_past_the_end_is_empty(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"pageNumber": 9})
        assert resp.status_code == 200
        assert resp.json() == []
        assert pagination(resp)["totalCount"] == 7

    def test_page_size_is_capped(self, client: TestClient) -> None:
        assert pagination(client.get("/api/authors", params={"pageSize": 100}))["pageSize"] == 20

    def test_order_by_age(self, client: TestClient) -> None:
        youngest_first = client.get("/api/authors", params={"orderBy": "age"}).json()
        oldest_first = client.get("/api/authors", params={"orderBy": "-age"}).json()
        assert first_names(youngest_first)[0] == "Rutherford"
        assert first_names(oldest_first) == ["Berry", "Nancy", "Seabury", "Eli", "Arnold", "Atherton", "Rutherford"]

    def test_order_by_two_keys(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"orderBy": "mainCategory, -name"})
        assert first_names(resp.json()) == [
            "Rutherford", "Seabury", "Nancy", "Atherton", "Berry", "Eli", "Arnold",
        ]

    def test_unknown_order_by_is_400(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"orderBy": "shoeSize"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "invalid_sort_expression"
        assert body["errors"][0]["field"] == "orderBy"

    def test_filter_by_main_category(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"mainCategory": "Rum"})
        assert first_names(resp.json()) == ["Atherton", "Nancy"]

    def test_search_query(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"searchQuery": "Singing"})
        assert first_names(resp.json()) == ["Arnold", "Eli"]

    def test_fields_shape_each_item(self, client: TestClient) -> None:
        authors = client.get("/api/authors", params={"fields": "name,ID"}).json()
        assert all(list(a) == ["name", "id"] for a in authors)

    def test_unknown_fields_is_400(self, client: TestClient) -> None:
        resp = client.get("/api/authors", params={"fields": "id,shoeSize"})
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_fields"

    def test_head_returns_pagination_header(self, client: TestClient) -> None:
        resp = client.head("/api/authors")
        assert resp.status_code == 200
        assert pagination(resp)["totalCount"] == 7

    def test_options_lists_allowed_methods(self, client: TestClient) -> None:
        resp = client.options("/api/authors")
        assert resp.status_code == 200
        assert resp.headers["Allow"] == "GET,OPTIONS,POST"


# ---------------------------------------------------------------------------
# GET / POST / DELETE single author
# ---------------------------------------------------------------------------


class TestSingleAuthor:
    def test_get_author(self, client: TestClient) -> None:
        resp = client.get(f"/api/authors/{NANCY_ID}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Nancy Swashbuckler Rye"

    def test_get_author_shaped(self, client: TestClient) -> None:
        assert client.get(f"/api/authors/{NANCY_ID}", params={"fields": "mainCategory"}).json() == {
            "mainCategory": "Rum",
        }

    def test_get_author_bad_fields(self, client: TestClient) -> None:
        assert client.get(f"/api/authors/{NANCY_ID}", params={"fields": "x"}).status_code == 400

    def test_get_unknown_author_is_404(self, client: TestClient) -> None:
        resp = client.get(f"/api/authors/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["code"] == "not_found"

    def test_create_author(self, client: TestClient) -> None:
        resp = client.post(
            "/api/authors",
            json={
                "firstName": "Jack",
                "lastName": "Sparrow",
                "dateOfBirth": "1690-04-01",
                "mainCategory": "Rum",
                "courses": [{"title": "Parley", "description": "Invoking the code."}],
            },
        )
        assert resp.status_code == 201
        created = resp.json()
        assert created["name"] == "Jack Sparrow"
        assert resp.headers["Location"].endswith(f"/api/authors/{created['id']}")

        fetched = client.get(resp.headers["Location"])
        assert fetched.json() == created
        courses = client.get(f"/api/authors/{created['id']}/courses").json()
        assert [c["title"] for c in courses] == ["Parley"]

    def test_create_author_missing_fields_is_422(self, client: TestClient) -> None:
        resp = client.post("/api/authors", json={"lastName": "Sparrow"})
        assert resp.status_code == 422
        fields = {e["field"] for e in resp.json()["errors"]}
        assert {"firstName", "dateOfBirth", "mainCategory"} <= fields

    def test_delete_author(self, client: TestClient) -> None:
        assert client.delete(f"/api/authors/{BERRY_ID}").status_code == 204
        assert client.get(f"/api/authors/{BERRY_ID}").status_code == 404
        assert client.get(f"/api/authors/{BERRY_ID}/courses").status_code == 404

    def test_delete_unknown_author_is_404(self, client: TestClient) -> None:
        assert client.delete(f"/api/authors/{uuid.uuid4()}").status_code == 404


class TestOperationalEndpoints:
    def test_liveness(self, client: TestClient) -> None:
        assert client.get("/health/live").json() == {"status": "ok"}

    def test_readiness(self, client: TestClient) -> None:
        resp = client.get("/health/ready")
        assert resp.status_code == 200
        assert resp.json()["checks"] == {"storage": True}

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        resp = client.get("/api/authors", headers={"X-Correlation-ID": "abc"})
        assert resp.headers["X-Correlation-ID"] == "abc"
