"""Integration tests for the /api/v1/admin endpoints."""

import pytest

from tests.integration.api.conftest import ADMIN_EMAIL, USER_EMAIL

pytestmark = pytest.mark.integration

WIDGET = {"title": "Widget", "price": "20", "category": "Tools"}


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAuthentication:
    async def test_missing_token(self, client, api_v1_prefix):
        response = await client.get(f"{api_v1_prefix}/admin/products")

        assert response.status_code == 401

    async def test_invalid_token(self, client, api_v1_prefix):
        response = await client.get(
            f"{api_v1_prefix}/admin/products",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401

    async def test_user_token_is_forbidden(self, client, api_v1_prefix, user_headers):
        response = await client.get(
            f"{api_v1_prefix}/admin/products",
            headers=user_headers,
        )

        assert response.status_code == 403


class TestProductEndpoints:
    async def test_create_product(self, client, api_v1_prefix, admin_headers):
        response = await client.post(
            f"{api_v1_prefix}/admin/products",
            json=WIDGET,
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Widget"
        assert body["category"] == "Tools"
        assert body["rating"]["rate"] == 0
        assert body["rating"]["count"] == 0

    async def test_create_duplicate_product(self, client, api_v1_prefix, admin_headers):
        url = f"{api_v1_prefix}/admin/products"
        await client.post(url, json=WIDGET, headers=admin_headers)

        response = await client.post(url, json=WIDGET, headers=admin_headers)

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Product already exists",
            "code": "PRODUCT_ALREADY_EXISTS",
        }

        search = await client.get(
            f"{api_v1_prefix}/admin/products/search",
            params={"title": "Widget"},
            headers=admin_headers,
        )
        assert len(search.json()) == 1

    async def test_unknown_category(self, client, api_v1_prefix, admin_headers):
        response = await client.post(
            f"{api_v1_prefix}/admin/products",
            json={**WIDGET, "category": "Nope"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"

    async def test_list_products_bad_direction(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.get(
            f"{api_v1_prefix}/admin/products",
            params={"direction": "sideways"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "NOT_ALLOWED_VALUE"

    async def test_list_products_bad_page(self, client, api_v1_prefix, admin_headers):
        response = await client.get(
            f"{api_v1_prefix}/admin/products",
            params={"page": 0},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"

    async def test_list_products_page_out_of_range(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.get(
            f"{api_v1_prefix}/admin/products",
            params={"page": 10**18},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"

    async def test_by_price_negative_min(self, client, api_v1_prefix, admin_headers):
        response = await client.get(
            f"{api_v1_prefix}/admin/products/by-price",
            params={"direction": "desc", "min_price": -1, "max_price": 100},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "NOT_ALLOWED_VALUE"

    async def test_update_and_get(self, client, api_v1_prefix, admin_headers):
        created = await client.post(
            f"{api_v1_prefix}/admin/products",
            json=WIDGET,
            headers=admin_headers,
        )
        product_id = created.json()["id"]

        response = await client.patch(
            f"{api_v1_prefix}/admin/products/{product_id}",
            json={"description": "A fine widget"},
            headers=admin_headers,
        )
        fetched = await client.get(
            f"{api_v1_prefix}/admin/products/{product_id}",
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert fetched.json()["description"] == "A fine widget"
        assert fetched.json()["title"] == "Widget"

    async def test_delete_by_title(self, client, api_v1_prefix, admin_headers):
        created = await client.post(
            f"{api_v1_prefix}/admin/products",
            json=WIDGET,
            headers=admin_headers,
        )

        response = await client.delete(
            f"{api_v1_prefix}/admin/products",
            params={"title": "Widget"},
            headers=admin_headers,
        )
        missing = await client.get(
            f"{api_v1_prefix}/admin/products/{created.json()['id']}",
            headers=admin_headers,
        )

        assert response.status_code == 204
        assert missing.status_code == 404


class TestCategoryEndpoints:
    async def test_create_and_list(self, client, api_v1_prefix, admin_headers):
        created = await client.post(
            f"{api_v1_prefix}/admin/categories",
            json={"name": "Books"},
            headers=admin_headers,
        )
        listed = await client.get(
            f"{api_v1_prefix}/admin/categories",
            headers=admin_headers,
        )

        assert created.status_code == 201
        assert [c["name"] for c in listed.json()] == ["Books", "Tools"]

    async def test_duplicate_category(self, client, api_v1_prefix, admin_headers):
        response = await client.post(
            f"{api_v1_prefix}/admin/categories",
            json={"name": "Tools"},
            headers=admin_headers,
        )

        assert response.status_code == 409


class TestUserEndpoints:
    async def test_create_user_hides_password(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.post(
            f"{api_v1_prefix}/admin/users",
            json={"name": "Zoe", "email": "zoe@example.com", "password": "secret-pw-1"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["role"] == "USER"
        assert "password" not in body
        assert "password_hash" not in body

    async def test_create_user_with_admin_email(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.post(
            f"{api_v1_prefix}/admin/users",
            json={"name": "Eve", "email": ADMIN_EMAIL, "password": "secret-pw-1"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    async def test_list_users_unknown_field(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.get(
            f"{api_v1_prefix}/admin/users",
            params={"field": "password_hash"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"

    async def test_list_users_excludes_admins(
        self,
        client,
        api_v1_prefix,
        admin_headers,
    ):
        response = await client.get(
            f"{api_v1_prefix}/admin/users",
            headers=admin_headers,
        )

        assert [u["email"] for u in response.json()] == [USER_EMAIL]

    async def test_search_users_no_match(self, client, api_v1_prefix, admin_headers):
        response = await client.get(
            f"{api_v1_prefix}/admin/users/search",
            params={"name": "nobody"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    async def test_update_user(self, client, api_v1_prefix, admin_headers, seeded):
        response = await client.patch(
            f"{api_v1_prefix}/admin/users/{seeded['user_id']}",
            json={"name": "Uma Thurman"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Uma Thurman"
        assert response.json()["email"] == USER_EMAIL


class TestAdminEndpoints:
    async def test_create_admin(self, client, api_v1_prefix, admin_headers):
        response = await client.post(
            f"{api_v1_prefix}/admin/admins",
            json={"name": "Max", "email": "max@example.com", "password": "secret-pw-1"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["role"] == "ADMIN"

    async def test_update_self(self, client, api_v1_prefix, admin_headers, seeded):
        response = await client.patch(
            f"{api_v1_prefix}/admin/admins/{seeded['admin_id']}",
            json={"name": "Ada Lovelace"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Ada Lovelace"

    async def test_update_other_admin_forbidden(
        self,
        client,
        api_v1_prefix,
        admin_headers,
        seeded,
    ):
        response = await client.patch(
            f"{api_v1_prefix}/admin/admins/{seeded['other_admin_id']}",
            json={"name": "Hijacked"},
            headers=admin_headers,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "UNAUTHORIZED"
