OWNER = "0xowner"
C1 = "0xc1"
C2 = "0xc2"


def _as(caller: str) -> dict:
    return {"X-Caller-Identity": caller}


def _register(client, node_id: str, caller: str = C1, **extra):
    payload = {"id": node_id, "label": extra.get("label", node_id), "uri": extra.get("uri", "")}
    return client.post("/nodes", json=payload, headers=_as(caller))


def test_register_and_fetch_node(client):
    response = _register(client, "0xaa", label="doc1", uri="ipfs://x")
    assert response.status_code == 201
    body = response.json()
    assert body["creator"] == C1
    assert body["is_active"] is True

    fetched = client.get("/nodes/0xaa")
    assert fetched.status_code == 200
    assert fetched.json()["uri"] == "ipfs://x"

    assert client.get(f"/users/{C1}/nodes").json() == ["0xaa"]


def test_mutation_without_caller_header_is_unauthenticated(client):
    response = client.post("/nodes", json={"id": "0xaa"})
    assert response.status_code == 401


def test_error_mapping(client):
    assert _register(client, "0xaa").status_code == 201

    duplicate = _register(client, "0xaa")
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "DuplicateIdError"

    invalid = _register(client, "0x000")
    assert invalid.status_code == 422
    assert invalid.json()["error"] == "InvalidIdError"

    missing = client.get("/nodes/0xbb/outgoing")
    assert missing.status_code == 404

    forbidden = client.put("/nodes/0xaa/active", json={"active": False}, headers=_as(C2))
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == "UnauthorizedError"


def test_link_lifecycle(client):
    _register(client, "0xaa")
    _register(client, "0xbb")

    created = client.post(
        "/links",
        json={"from_id": "0xaa", "to_id": "0xbb", "relation": "derived-from"},
        headers=_as(C1),
    )
    assert created.status_code == 201
    link_id = created.json()["id"]

    outgoing = client.get("/nodes/0xaa/outgoing").json()
    incoming = client.get("/nodes/0xbb/incoming").json()
    assert [l["id"] for l in outgoing] == [link_id]
    assert [l["id"] for l in incoming] == [link_id]

    toggled = client.put("/links/0xaa/0/active", json={"active": False}, headers=_as(C1))
    assert toggled.status_code == 200
    assert toggled.json()["is_active"] is False
    assert client.get("/nodes/0xbb/incoming").json()[0]["is_active"] is False

    out_of_range = client.put("/links/0xaa/3/active", json={"active": True}, headers=_as(C1))
    assert out_of_range.status_code == 400
    assert out_of_range.json()["error"] == "IndexOutOfRangeError"


def test_link_to_missing_node_names_side(client):
    _register(client, "0xaa")

    response = client.post(
        "/links",
        json={"from_id": "0xaa", "to_id": "0xcc", "relation": "x"},
        headers=_as(C1),
    )
    assert response.status_code == 404
    assert response.json()["side"] == "to"


def test_ownership_transfer(client):
    assert client.get("/owner").json() == {"owner": OWNER}

    denied = client.post("/owner/transfer", json={"new_owner": C2}, headers=_as(C1))
    assert denied.status_code == 403

    moved = client.post("/owner/transfer", json={"new_owner": C2}, headers=_as(OWNER))
    assert moved.status_code == 200
    assert moved.json() == {"owner": C2}


def test_events_and_stats(client):
    _register(client, "0xaa")
    _register(client, "0xbb")
    client.post(
        "/links",
        json={"from_id": "0xaa", "to_id": "0xbb", "relation": "cites"},
        headers=_as(C1),
    )

    page = client.get("/events").json()
    assert [e["event"] for e in page["events"]] == [
        "NodeRegistered",
        "NodeRegistered",
        "LinkCreated",
    ]
    assert page["next_sequence"] == 3
    assert page["events"][2]["payload"]["relation"] == "cites"

    tail = client.get("/events", params={"since": 2}).json()
    assert [e["sequence"] for e in tail["events"]] == [2]

    only_links = client.get("/events", params={"name": "LinkCreated"}).json()
    assert len(only_links["events"]) == 1

    stats = client.get("/graph/stats").json()
    assert stats["nodes"] == 2
    assert stats["links"] == 1
    assert stats["owner"] == OWNER


def test_events_paging_rejects_bad_bounds(client):
    _register(client, "0xaa")

    assert client.get("/events", params={"limit": 0}).status_code == 422
    assert client.get("/events", params={"limit": -1}).status_code == 422
    assert client.get("/events", params={"since": -1}).status_code == 422

    page = client.get("/events", params={"limit": 1}).json()
    assert len(page["events"]) == 1
    assert page["next_sequence"] == 1
