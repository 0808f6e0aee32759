"""Board API integration tests

TestClient + in-memory board over the animals catalog.
"""

from fastapi.testclient import TestClient


def _select(tc: TestClient, images: list[str], tag: str = "all") -> dict:
    resp = tc.post(
        "/board/item-sets/select",
        json={"package_name": "animals", "tag_name": tag, "images": images},
    )
    assert resp.status_code == 200
    return resp.json()


# ── item sets ────────────────────────────────────────────────


class TestItemSetsAPI:
    def test_list(self, client: TestClient) -> None:
        resp = client.get("/board/item-sets")
        assert resp.status_code == 200
        data = resp.json()
        assert data[0] == {
            "package_name": "animals",
            "package_display_name": "Animals",
            "tag_name": "all",
            "tag_title": "All Items",
            "images": ["cat.png", "fish.png"],
        }
        assert data[1]["tag_name"] == "mammal"
        assert data[1]["images"] == ["cat.png"]

    def test_filter_by_package(self, client: TestClient) -> None:
        assert len(client.get("/board/item-sets", params={"package": "animals"}).json()) == 2
        assert client.get("/board/item-sets", params={"package": "plants"}).json() == []

    def test_select(self, client: TestClient) -> None:
        data = _select(client, ["cat.png", "fish.png"])
        assert data["success"] is True
        assert data["notification"]["title"] == "Items Added"
        assert data["notification"]["description"] == "2 item(s) have been added."
        assert data["board"]["items"][0] == {
            "id": "animals-all-item-0",
            "content": "Cat",
            "image_url": "/images/animals/cat.png",
            "tags": ["mammal"],
        }
        assert data["board"]["unranked"] == ["animals-all-item-0", "animals-all-item-1"]

    def test_select_missing_field(self, client: TestClient) -> None:
        resp = client.post("/board/item-sets/select", json={"package_name": "animals"})
        assert resp.status_code == 422


# ── upload ───────────────────────────────────────────────────


class TestUploadAPI:
    def test_upload_generates_ids(self, client: TestClient) -> None:
        resp = client.post(
            "/board/upload",
            json={"items": [{"content": "Mine", "image_url": "blob:1"}, {"id": "u2", "content": "Two", "image_url": "blob:2"}]},
        )
        data = resp.json()
        ids = [i["id"] for i in data["board"]["items"]]
        assert len(ids[0]) == 36
        assert ids[1] == "u2"
        assert data["notification"]["description"] == "2 item(s) have been added."

    def test_empty_upload_still_notifies(self, client: TestClient) -> None:
        data = client.post("/board/upload", json={"items": []}).json()
        assert data["notification"]["description"] == "0 item(s) have been added."


# ── reset / delete / undo ────────────────────────────────────


class TestMutationAPI:
    def test_move_reset_undo(self, client: TestClient) -> None:
        _select(client, ["cat.png"])
        moved = client.post("/board/items/animals-all-item-0/move", json={"tier": "S"}).json()
        assert moved["tiers"][0] == {"name": "S", "item_ids": ["animals-all-item-0"]}

        reset = client.post("/board/reset").json()
        assert reset["notification"]["title"] == "Items Reset"
        assert reset["board"]["tiers"][0]["item_ids"] == []

        undone = client.post(f"/board/undo/{reset['notification']['action_id']}").json()
        assert undone["success"] is True
        assert undone["board"]["tiers"][0]["item_ids"] == ["animals-all-item-0"]

    def test_move_unknown_item(self, client: TestClient) -> None:
        resp = client.post("/board/items/nope/move", json={"tier": "S"})
        assert resp.status_code == 404

    def test_delete_all_unconfirmed(self, client: TestClient) -> None:
        _select(client, ["cat.png"])
        data = client.post("/board/delete-all", json={"confirmed": False}).json()
        assert data["notification"] is None
        assert len(data["board"]["items"]) == 1

    def test_delete_all_and_undo(self, client: TestClient) -> None:
        _select(client, ["cat.png", "fish.png"])
        data = client.post("/board/delete-all", json={"confirmed": True}).json()
        assert data["notification"]["title"] == "All Items Deleted"
        assert data["board"]["items"] == []

        client.post(f"/board/undo/{data['notification']['action_id']}")
        assert len(client.get("/board").json()["items"]) == 2

    def test_undo_twice_is_404(self, client: TestClient) -> None:
        action_id = _select(client, ["cat.png"])["notification"]["action_id"]
        assert client.post(f"/board/undo/{action_id}").status_code == 200
        assert client.post(f"/board/undo/{action_id}").status_code == 404

    def test_notifications_and_dismiss(self, client: TestClient) -> None:
        action_id = _select(client, ["cat.png"])["notification"]["action_id"]
        listed = client.get("/board/notifications").json()
        assert [n["action_id"] for n in listed] == [action_id]

        assert client.delete(f"/board/notifications/{action_id}").json() == {"success": True}
        assert client.get("/board/notifications").json() == []
        assert client.delete(f"/board/notifications/{action_id}").status_code == 404
        assert client.post(f"/board/undo/{action_id}").status_code == 404
