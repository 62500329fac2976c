"""Integration tests for the category endpoints."""

from datetime import datetime
from io import BytesIO
from uuid import uuid4

from openpyxl import load_workbook

CATEGORIES = "/api/categories"


class TestCreateAndGet:
    async def test_create_defaults(self, client):
        response = await client.post(
            f"{CATEGORIES}/",
            json={"name": "Rock", "image": "rock.png"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Rock"
        assert body["image"] == "rock.png"
        assert body["enabled"] is True
        assert body["parent_id"] is None
        assert body["children"] is None

        fetched = await client.get(f"{CATEGORIES}/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    async def test_create_then_exists(self, client, create_category):
        await create_category("Rock")

        response = await client.get(f"{CATEGORIES}/exists", params={"name": "Rock"})
        missing = await client.get(f"{CATEGORIES}/exists", params={"name": "Jazz"})

        assert response.json() is True
        assert missing.json() is False

    async def test_duplicate_name(self, client, create_category):
        await create_category("Rock")

        response = await client.post(f"{CATEGORIES}/", json={"name": "Rock"})

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Category name already exists: Rock",
            "code": "DUPLICATE_CATEGORY_NAME",
        }

    async def test_unknown_parent(self, client):
        parent_id = uuid4()

        response = await client.post(
            f"{CATEGORIES}/",
            json={"name": "Metal", "parent_id": str(parent_id)},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == (
            f"Parent category not found with id: {parent_id}"
        )

    async def test_blank_name_is_rejected(self, client):
        response = await client.post(f"{CATEGORIES}/", json={"name": "   "})

        assert response.status_code == 400

    async def test_missing_name_is_request_error(self, client):
        response = await client.post(f"{CATEGORIES}/", json={})

        assert response.status_code == 422

    async def test_get_unknown(self, client):
        response = await client.get(f"{CATEGORIES}/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"


class TestHierarchyScenario:
    async def test_rock_and_metal(self, client, create_category):
        """A parent can only be deleted once its subcategory is gone."""
        rock = await create_category("Rock")
        metal = await create_category("Metal", parent_id=rock["id"])
        assert metal["parent_name"] == "Rock"

        subs = await client.get(f"{CATEGORIES}/{rock['id']}/subcategories")
        assert [c["name"] for c in subs.json()] == ["Metal"]

        blocked = await client.delete(f"{CATEGORIES}/{rock['id']}")
        assert blocked.status_code == 409
        assert blocked.json()["code"] == "CATEGORY_HAS_CHILDREN"

        assert (await client.delete(f"{CATEGORIES}/{metal['id']}")).status_code == 204
        assert (await client.delete(f"{CATEGORIES}/{rock['id']}")).status_code == 204

        assert (await client.get(f"{CATEGORIES}/{rock['id']}")).status_code == 404

    async def test_reparenting_unblocks_delete(self, client, create_category):
        rock = await create_category("Rock")
        metal = await create_category("Metal", parent_id=rock["id"])

        moved = await client.put(
            f"{CATEGORIES}/{metal['id']}",
            json={"name": "Metal"},
        )
        assert moved.status_code == 200
        assert moved.json()["parent_id"] is None

        top = await client.get(f"{CATEGORIES}/top-level")
        assert [c["name"] for c in top.json()["items"]] == ["Metal", "Rock"]

        assert (await client.delete(f"{CATEGORIES}/{rock['id']}")).status_code == 204

    async def test_with_children_and_has_children(self, client, create_category):
        rock = await create_category("Rock")
        await create_category("Punk", parent_id=rock["id"])
        await create_category("Metal", parent_id=rock["id"])

        response = await client.get(f"{CATEGORIES}/{rock['id']}/with-children")
        has = await client.get(f"{CATEGORIES}/{rock['id']}/has-children")

        assert [c["name"] for c in response.json()["children"]] == ["Metal", "Punk"]
        assert has.json() is True

    async def test_hierarchy_page(self, client, create_category):
        rock = await create_category("Rock")
        await create_category("Metal", parent_id=rock["id"])
        await create_category("Jazz")

        response = await client.get(f"{CATEGORIES}/hierarchy")

        body = response.json()
        assert body["page_size"] == 5
        assert body["total"] == 2
        jazz, rock_item = body["items"]
        assert jazz["children"] is None
        assert [c["name"] for c in rock_item["children"]] == ["Metal"]

    async def test_delete_unknown(self, client):
        response = await client.delete(f"{CATEGORIES}/{uuid4()}")

        assert response.status_code == 404


class TestUpdate:
    async def test_update_fields(self, client, create_category):
        jazz = await create_category("Jazz")
        rock = await create_category("Rock", image="rock.png")

        response = await client.put(
            f"{CATEGORIES}/{rock['id']}",
            json={"name": "Hard Rock", "enabled": False, "parent_id": jazz["id"]},
        )

        body = response.json()
        assert body["name"] == "Hard Rock"
        assert body["enabled"] is False
        assert body["parent_name"] == "Jazz"

    async def test_image_is_ignored_on_update(self, client, create_category):
        rock = await create_category("Rock", image="rock.png")

        await client.put(
            f"{CATEGORIES}/{rock['id']}",
            json={"name": "Rock", "image": "other.png"},
        )

        fetched = await client.get(f"{CATEGORIES}/{rock['id']}")
        assert fetched.json()["image"] == "rock.png"

    async def test_omitted_enabled_keeps_value(self, client, create_category):
        pop = await create_category("Pop", enabled=False)

        response = await client.put(f"{CATEGORIES}/{pop['id']}", json={"name": "Pop"})

        assert response.json()["enabled"] is False

    async def test_rename_to_existing(self, client, create_category):
        await create_category("Jazz")
        rock = await create_category("Rock")

        response = await client.put(
            f"{CATEGORIES}/{rock['id']}",
            json={"name": "Jazz"},
        )

        assert response.status_code == 409

    async def test_own_parent(self, client, create_category):
        rock = await create_category("Rock")

        response = await client.put(
            f"{CATEGORIES}/{rock['id']}",
            json={"name": "Rock", "parent_id": rock["id"]},
        )

        assert response.status_code == 400

    async def test_move_below_own_child(self, client, create_category):
        rock = await create_category("Rock")
        metal = await create_category("Metal", parent_id=rock["id"])

        response = await client.put(
            f"{CATEGORIES}/{rock['id']}",
            json={"name": "Rock", "parent_id": metal["id"]},
        )
        top_level = await client.get(f"{CATEGORIES}/top-level")

        assert response.status_code == 400
        assert [c["name"] for c in top_level.json()["items"]] == ["Rock"]

    async def test_update_unknown(self, client):
        response = await client.put(f"{CATEGORIES}/{uuid4()}", json={"name": "X"})

        assert response.status_code == 404


class TestListings:
    async def test_list_is_paged_by_name(self, client, create_category):
        for name in ["Pop", "Blues", "Rock", "Jazz", "Metal"]:
            await create_category(name)

        response = await client.get(
            f"{CATEGORIES}/",
            params={"page": 2, "page_size": 2},
        )

        body = response.json()
        assert [c["name"] for c in body["items"]] == ["Metal", "Pop"]
        assert body["total"] == 5
        assert body["pages"] == 3
        assert body["page"] == 2

    async def test_default_page_size(self, client):
        response = await client.get(f"{CATEGORIES}/")

        assert response.json()["page_size"] == 10
        assert response.json()["items"] == []

    async def test_page_size_limit(self, client):
        response = await client.get(f"{CATEGORIES}/", params={"page_size": 101})

        assert response.status_code == 422

    async def test_sorted(self, client, create_category):
        await create_category("Blues")
        await create_category("Rock")

        response = await client.get(
            f"{CATEGORIES}/sorted",
            params={"sort_by": "name", "direction": "DESC"},
        )

        assert [c["name"] for c in response.json()["items"]] == ["Rock", "Blues"]

    async def test_sorted_invalid_field(self, client):
        response = await client.get(f"{CATEGORIES}/sorted", params={"sort_by": "price"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_SORT"

    async def test_search(self, client, create_category):
        for name in ["Rock", "Hard Rock", "Pop"]:
            await create_category(name)

        response = await client.get(f"{CATEGORIES}/search", params={"name": "rOcK"})

        assert [c["name"] for c in response.json()["items"]] == ["Hard Rock", "Rock"]

    async def test_enabled_and_public(self, client, create_category):
        rock = await create_category("Rock")
        await create_category("Metal", parent_id=rock["id"])
        await create_category("Grunge", parent_id=rock["id"], enabled=False)
        await create_category("Blues", enabled=False)

        enabled = await client.get(f"{CATEGORIES}/enabled")
        public = await client.get(f"{CATEGORIES}/public")
        tree = await client.get(f"{CATEGORIES}/public/hierarchy")

        assert enabled.json()["total"] == 2
        assert [c["name"] for c in public.json()] == ["Metal", "Rock"]
        assert [c["name"] for c in tree.json()] == ["Rock"]
        assert [c["name"] for c in tree.json()[0]["children"]] == ["Metal"]


class TestExport:
    async def test_export_json(self, client, create_category):
        rock = await create_category("Rock")
        await create_category("Metal", parent_id=rock["id"])

        response = await client.get(f"{CATEGORIES}/export")

        assert [c["name"] for c in response.json()] == ["Metal", "Rock"]

    async def test_export_csv(self, client, create_category):
        rock = await create_category("Rock")
        metal = await create_category("Metal", parent_id=rock["id"], enabled=False)

        response = await client.get(f"{CATEGORIES}/export/csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="categories_')
        filename = disposition.split('"')[1]
        datetime.strptime(filename, "categories_%Y-%m-%d-%H-%M-%S.csv")

        assert response.text.splitlines() == [
            "ID,Name,Status,Parent Category",
            f"{metal['id']},Metal,Inactive,Rock",
            f"{rock['id']},Rock,Active,",
        ]

    async def test_export_xlsx(self, client, create_category):
        await create_category("Rock")

        response = await client.get(f"{CATEGORIES}/export/xlsx")

        assert response.status_code == 200
        assert ".xlsx" in response.headers["content-disposition"]
        sheet = load_workbook(BytesIO(response.content))["Categories"]
        assert sheet.cell(row=2, column=2).value == "Rock"


class TestReset:
    async def test_reset_removes_everything(self, client, create_category):
        rock = await create_category("Rock")
        await create_category("Metal", parent_id=rock["id"])
        await create_category("Jazz")

        response = await client.post(f"{CATEGORIES}/reset")

        assert response.status_code == 200
        assert response.json()["deleted"] == 3
        assert (await client.get(f"{CATEGORIES}/")).json()["total"] == 0
