"""HTTP tests for the script and section endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def _create_script(client: TestClient, headers: dict[str, str], **fields) -> str:
    body = {"title": "Morning Calm", **fields}
    response = client.post("/api/scripts", json=body, headers=headers)
    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["success"] is True
    return payload["data"]["id"]


def _upsert_section(client: TestClient, headers: dict[str, str], **fields):
    return client.post("/api/sections", json=fields, headers=headers)


class TestAuthentication:

    @pytest.mark.parametrize(
        "method,path",
        [
            ("post", "/api/scripts"),
            ("get", "/api/scripts"),
            ("get", "/api/scripts/anything"),
            ("patch", "/api/scripts/anything"),
            ("post", "/api/sections"),
            ("delete", "/api/sections/anything"),
        ],
    )
    def test_requires_bearer_token(self, client: TestClient, method, path):
        response = client.request(method.upper(), path, json={})
        assert response.status_code == 401

    def test_rejects_garbage_token(self, client: TestClient):
        response = client.get("/api/scripts", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401


class TestScripts:

    def test_create_and_get(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers, focus_area="stress", target_duration_minutes=5)

        response = client.get(f"/api/scripts/{script_id}", headers=headers)

        assert response.status_code == 200
        payload = response.json()
        assert payload["success"] is True
        script = payload["data"]["script"]
        assert script["id"] == script_id
        assert script["title"] == "Morning Calm"
        assert script["focus_area"] == "stress"
        assert script["target_duration_minutes"] == 5
        assert script["is_favorite"] is False
        assert payload["data"]["sections"] == []

    @pytest.mark.parametrize(
        "body",
        [{}, {"title": ""}, {"title": "Calm", "target_duration_minutes": 0}, {"title": "Calm", "owner_id": "x"}],
    )
    def test_create_rejects_malformed_payload(self, client: TestClient, register, body):
        response = client.post("/api/scripts", json=body, headers=register())
        assert response.status_code == 422

    def test_partial_update(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers, notes="keep me")

        response = client.patch(f"/api/scripts/{script_id}", json={"title": "X"}, headers=headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": script_id}}

        script = client.get(f"/api/scripts/{script_id}", headers=headers).json()["data"]["script"]
        assert script["title"] == "X"
        assert script["notes"] == "keep me"

    def test_update_with_no_fields_is_rejected(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers)

        response = client.patch(f"/api/scripts/{script_id}", json={}, headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No fields to update"

    def test_update_cannot_clear_title(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers)
        response = client.patch(f"/api/scripts/{script_id}", json={"title": None}, headers=headers)
        assert response.status_code == 400

    def test_other_accounts_scripts_are_invisible(self, client: TestClient, register):
        owner = register("owner_one")
        intruder = register("owner_two")
        script_id = _create_script(client, owner)

        assert client.get(f"/api/scripts/{script_id}", headers=intruder).status_code == 404
        assert client.patch(f"/api/scripts/{script_id}", json={"title": "X"}, headers=intruder).status_code == 404
        listing = client.get("/api/scripts", headers=intruder).json()["data"]
        assert listing == {"items": [], "total": 0}

    def test_list_pagination_and_filters(self, client: TestClient, register):
        headers = register()
        first = _create_script(client, headers, title="First", is_favorite=True)
        second = _create_script(client, headers, title="Second", focus_area="sleep")

        page = client.get("/api/scripts", params={"page": 2, "page_size": 1}, headers=headers).json()["data"]
        assert [item["id"] for item in page["items"]] == [second]
        assert page["total"] == 2

        empty = client.get("/api/scripts", params={"page": 3, "page_size": 1}, headers=headers).json()["data"]
        assert empty == {"items": [], "total": 2}

        favorites = client.get("/api/scripts", params={"is_favorite": "true"}, headers=headers).json()["data"]
        assert [item["id"] for item in favorites["items"]] == [first]

        sleep = client.get("/api/scripts", params={"focus_area": "sleep"}, headers=headers).json()["data"]
        assert [item["id"] for item in sleep["items"]] == [second]

    @pytest.mark.parametrize("params", [{"page": 0}, {"page_size": 0}, {"page_size": 101}])
    def test_list_rejects_out_of_range_pagination(self, client: TestClient, register, params):
        response = client.get("/api/scripts", params=params, headers=register())
        assert response.status_code == 422


class TestSections:

    def test_morning_calm_flow(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers)

        created = _upsert_section(client, headers, script_id=script_id, order_index=1, body="Breathe in.")
        assert created.status_code == 200, created.text
        section_id = created.json()["data"]["section_id"]

        updated = _upsert_section(
            client, headers, id=section_id, script_id=script_id, order_index=2, body="Breathe out."
        )
        assert updated.json() == {"success": True, "data": {"section_id": section_id}}

        sections = client.get(f"/api/scripts/{script_id}", headers=headers).json()["data"]["sections"]
        assert [(s["id"], s["order_index"], s["body"]) for s in sections] == [(section_id, 2, "Breathe out.")]

        deleted = client.delete(f"/api/sections/{section_id}", headers=headers)
        assert deleted.json() == {"success": True, "data": {"id": section_id}}

        sections = client.get(f"/api/scripts/{script_id}", headers=headers).json()["data"]["sections"]
        assert sections == []

        assert client.delete(f"/api/sections/{section_id}", headers=headers).status_code == 404

    def test_sections_come_back_in_order(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers)
        for order_index in (3, 1, 2):
            _upsert_section(client, headers, script_id=script_id, order_index=order_index, body="...")

        sections = client.get(f"/api/scripts/{script_id}", headers=headers).json()["data"]["sections"]

        assert [s["order_index"] for s in sections] == [1, 2, 3]

    def test_omitted_optional_fields_are_kept_on_update(self, client: TestClient, register):
        headers = register()
        script_id = _create_script(client, headers)
        section_id = _upsert_section(
            client, headers, script_id=script_id, order_index=1, body="Arrive.", section_type="intro", title="Arrival"
        ).json()["data"]["section_id"]

        _upsert_section(client, headers, id=section_id, script_id=script_id, order_index=1, body="Settle.")

        section = client.get(f"/api/scripts/{script_id}", headers=headers).json()["data"]["sections"][0]
        assert section["body"] == "Settle."
        assert section["section_type"] == "intro"
        assert section["title"] == "Arrival"

    def test_cross_script_section_is_forbidden(self, client: TestClient, register):
        headers = register()
        script_a = _create_script(client, headers, title="A")
        script_b = _create_script(client, headers, title="B")
        section_id = _upsert_section(
            client, headers, script_id=script_a, order_index=1, body="A1"
        ).json()["data"]["section_id"]

        response = _upsert_section(client, headers, id=section_id, script_id=script_b, order_index=1, body="B1")

        assert response.status_code == 403

    def test_foreign_sections_are_not_found(self, client: TestClient, register):
        owner = register("owner_one")
        intruder = register("owner_two")
        script_id = _create_script(client, owner)
        section_id = _upsert_section(
            client, owner, script_id=script_id, order_index=1, body="Mine."
        ).json()["data"]["section_id"]

        response = _upsert_section(client, intruder, script_id=script_id, order_index=1, body="Theirs.")
        assert response.status_code == 404
        assert client.delete(f"/api/sections/{section_id}", headers=intruder).status_code == 404

        sections = client.get(f"/api/scripts/{script_id}", headers=owner).json()["data"]["sections"]
        assert [s["id"] for s in sections] == [section_id]

    @pytest.mark.parametrize("fields", [{"order_index": 0, "body": "x"}, {"order_index": 1, "body": ""}, {"order_index": 1}])
    def test_malformed_section_payload(self, client: TestClient, register, fields):
        headers = register()
        script_id = _create_script(client, headers)
        response = _upsert_section(client, headers, script_id=script_id, **fields)
        assert response.status_code == 422
