"""Tests for the HTTP API."""

import asyncio

import pytest

from family_graph.api import create_app


@pytest.fixture
def app():
    return create_app("testing")


def post(app, path, body):
    async def run():
        client = app.test_client()
        response = await client.post(path, json=body)
        return response.status_code, await response.get_json()

    return asyncio.run(run())


def test_health(app):
    async def run():
        response = await app.test_client().get("/api/health")
        return response.status_code, await response.get_json()

    status, body = asyncio.run(run())
    assert status == 200
    assert body["status"] == "healthy"


def test_tree_endpoint(app, draft_json):
    status, body = post(app, "/api/family/tree", draft_json)

    assert status == 200
    assert body["metadata"] == {"totalMembers": 5, "generations": 3}
    assert {"from": "erik", "to": "lena", "type": "spouse"} in body["connections"]


def test_tree_endpoint_aggregates_drafts(app, draft_json):
    extra = {"relationships": [{"person1": "Mats", "person2": "Olle", "type": "far"}]}
    status, body = post(app, "/api/family/tree", {"drafts": [draft_json, extra]})

    assert status == 200
    assert body["metadata"]["totalMembers"] == 6


def test_tree_endpoint_empty_draft(app):
    status, body = post(app, "/api/family/tree", {"persons": [], "relationships": []})

    assert status == 200
    assert body == {"members": [], "connections": [], "metadata": {"totalMembers": 0, "generations": 0}}


def test_tree_endpoint_rejects_invalid_draft(app):
    status, body = post(app, "/api/family/tree", {"persons": [{"name": "A", "confidence": 7}]})

    assert status == 400
    assert body["error"] == "Invalid entity draft"


def test_tree_endpoint_rejects_unknown_layout(app, draft_json):
    status, body = post(app, "/api/family/tree?layout=spiral", draft_json)

    assert status == 400
    assert "Unknown layout" in body["error"]


def test_tree_endpoint_reports_cycle(app):
    cycle = {
        "relationships": [
            {"person1": "A", "person2": "B", "type": "far"},
            {"person1": "A", "person2": "B", "type": "son"},
        ]
    }
    status, body = post(app, "/api/family/tree", cycle)

    assert status == 422
    assert sorted(body["cycle"]) == ["a", "b"]


def test_relations_endpoint(app, draft_json):
    status, body = post(app, "/api/family/relations?center=Erik", draft_json)

    assert status == 200
    assert body["center"] == "erik"
    erik = next(m for m in body["members"] if m["id"] == "erik")
    assert (erik["x"], erik["y"]) == (250, 250)


@pytest.mark.parametrize("drafts", [None, 3, "x", [{"persons": "nope"}]])
def test_tree_endpoint_rejects_malformed_batch(app, drafts):
    status, body = post(app, "/api/family/tree", {"drafts": drafts})

    assert status == 400
    assert body["error"] == "Invalid entity draft"


def test_batch_cannot_mix_with_top_level_draft(app, draft_json):
    body = {"drafts": [draft_json], "relationships": draft_json["relationships"]}
    status, response = post(app, "/api/family/relations", body)

    assert status == 400
    assert response["error"] == "Invalid entity draft"
