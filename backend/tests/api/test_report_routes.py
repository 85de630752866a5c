"""Report Routes - HTTP contract for /api/reports.

Invariants:
    - POST → 201 {message, report}, pending, createdAt == updatedAt, defaults applied
    - Missing fields → 400, nothing stored
    - PUT invalid status → 400 and no mutation; unknown id → 404
    - DELETE twice → 200 then 404; unknown id leaves the count unchanged
    - Storage failure → 500 envelope
"""

from uuid import uuid4

from ecowatch.core.domain_types import Collection


async def test_create_report_applies_defaults(client):
    res = await client.post("/api/reports", json={
        "type": "spill", "location": "River X", "description": "oil sheen",
    })

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Report submitted successfully"
    report = body["report"]
    assert report["status"] == "pending"
    assert report["severity"] == "medium"
    assert report["coordinates"] == ""
    assert report["email"] == ""
    assert report["phone"] == ""
    assert report["createdAt"] == report["updatedAt"]
    assert report["id"]


async def test_create_report_missing_fields(client):
    res = await client.post("/api/reports", json={"type": "spill"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "MISSING_REQUIRED_FIELDS"
    assert "location" in error["message"]
    assert "description" in error["message"]
    assert (await client.get("/api/reports")).json() == []


async def test_create_report_wrong_json_type(client):
    res = await client.post("/api/reports", json={
        "type": ["spill"], "location": "River X", "description": "oil",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_report_ignores_client_supplied_lifecycle(client):
    res = await client.post("/api/reports", json={
        "type": "spill", "location": "River X", "description": "oil",
        "status": "resolved", "id": "mine", "createdAt": "1999-01-01",
    })
    report = res.json()["report"]
    assert report["status"] == "pending"
    assert report["id"] != "mine"
    assert report["createdAt"] != "1999-01-01"


async def test_list_reports_newest_first(client):
    ids = []
    for n in range(3):
        res = await client.post("/api/reports", json={
            "type": "spill", "location": f"Site {n}", "description": "oil",
        })
        ids.append(res.json()["report"]["id"])

    res = await client.get("/api/reports")

    assert res.status_code == 200
    assert [r["id"] for r in res.json()] == list(reversed(ids))


async def test_created_id_resolves_immediately(client, created_report):
    res = await client.get(f"/api/reports/{created_report['id']}")
    assert res.status_code == 200
    assert res.json() == created_report


async def test_get_unknown_report(client):
    res = await client.get(f"/api/reports/{uuid4()}")
    assert res.status_code == 404


async def test_update_status(client, created_report):
    res = await client.put(
        f"/api/reports/{created_report['id']}", json={"status": "reviewed"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Report updated successfully"
    report = body["report"]
    assert report["status"] == "reviewed"
    assert report["createdAt"] == created_report["createdAt"]
    assert report["updatedAt"] >= created_report["createdAt"]
    assert report["description"] == created_report["description"]


async def test_update_invalid_status_does_not_mutate(client, created_report):
    res = await client.put(
        f"/api/reports/{created_report['id']}", json={"status": "archived"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_STATUS"
    stored = (await client.get(f"/api/reports/{created_report['id']}")).json()
    assert stored == created_report


async def test_update_missing_status(client, created_report):
    res = await client.put(f"/api/reports/{created_report['id']}", json={})
    assert res.status_code == 400


async def test_update_unknown_report(client):
    res = await client.put(f"/api/reports/{uuid4()}", json={"status": "resolved"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_delete_twice(client, created_report):
    first = await client.delete(f"/api/reports/{created_report['id']}")
    second = await client.delete(f"/api/reports/{created_report['id']}")

    assert first.status_code == 200
    assert first.json() == {"message": "Report deleted successfully"}
    assert second.status_code == 404


async def test_delete_unknown_keeps_count(client, created_report):
    res = await client.delete(f"/api/reports/{uuid4()}")

    assert res.status_code == 404
    assert len((await client.get("/api/reports")).json()) == 1


async def test_storage_failure_returns_500(broken_client):
    res = await broken_client.get("/api/reports")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "STORAGE_ERROR"


async def test_storage_failure_on_create(broken_client):
    res = await broken_client.post("/api/reports", json={
        "type": "spill", "location": "River X", "description": "oil",
    })
    assert res.status_code == 500


async def test_validation_precedes_storage(broken_client):
    res = await broken_client.post("/api/reports", json={"type": "spill"})
    assert res.status_code == 400


async def test_corrupt_collection_file_returns_storage_error(client, store):
    store.data_dir.mkdir(parents=True)
    store.path_for(Collection.REPORTS).write_text("[1, 2]", encoding="utf-8")

    res = await client.put("/api/reports/x", json={"status": "resolved"})

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "STORAGE_ERROR"
