"""Unit tests for the brand, category and slider HTTP API."""

from fastapi import status

from src.shop_admin.entities.catalog.product import ProductTable


class TestBrandRoutes:
    def test_create_list_and_delete(self, client, admin_headers):
        created = client.post("/brands", json={"name": "Sony"}, headers=admin_headers)
        assert created.status_code == status.HTTP_201_CREATED
        brand_id = created.json()["id"]

        assert [b["name"] for b in client.get("/brands").json()] == ["Sony"]
        assert client.get(f"/brands/{brand_id}").json()["name"] == "Sony"

        deleted = client.delete(f"/brands/{brand_id}", headers=admin_headers)
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/brands").json() == []

    def test_duplicate(self, client, admin_headers, catalog):
        response = client.post("/brands", json={"name": "Apple"}, headers=admin_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["code"] == 1204

    def test_delete_in_use(self, client, session, admin_headers, catalog):
        session.add(ProductTable(name="iPhone", brand=catalog["Apple"]))
        session.commit()

        response = client.delete(f"/brands/{catalog['Apple'].id}", headers=admin_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["code"] == 1206

    def test_create_requires_admin(self, client, auth_headers):
        response = client.post(
            "/brands", json={"name": "Sony"}, headers=auth_headers("alice", "USER")
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestCategoryRoutes:
    def test_create_and_get(self, client, admin_headers):
        created = client.post("/categories", json={"name": "Tablets"}, headers=admin_headers)

        response = client.get(f"/categories/{created.json()['id']}")

        assert response.json()["name"] == "Tablets"

    def test_get_missing(self, client):
        response = client.get("/categories/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == 1203


class TestSliderRoutes:
    def test_create_with_image_and_delete(self, client, admin_headers, image_store):
        created = client.post(
            "/sliders",
            data={"title": "Summer sale", "position": "2"},
            files={"image": ("banner.png", b"banner-bytes", "image/png")},
            headers=admin_headers,
        )

        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["image_url"] == "https://img.test/banner.png"
        assert created.json()["position"] == 2

        deleted = client.delete(f"/sliders/{created.json()['id']}", headers=admin_headers)

        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert image_store.removed == ["pid-banner.png"]
        assert client.get("/sliders").json() == []
