"""Tests for categories endpoints."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from newstime.db.models import Category, Post
from newstime.slugs import slugify


class TestSlugify:
    """Tests for slug generation."""

    def test_slugify(self):
        """Test non-alphanumerics collapse to single hyphens."""
        assert slugify("  World News & Views!  ") == "world-news-views"
        assert slugify("Tech/AI 2024") == "tech-ai-2024"

    def test_slugify_only_symbols(self):
        """Test text without letters or digits gives an empty slug."""
        assert slugify("!!!") == ""


class TestListCategories:
    """Tests for GET /api/categories."""

    def test_list_ordered_by_name(self, client: TestClient, db: Session):
        """Test categories are listed alphabetically."""
        db.add_all(
            [
                Category(name="Sports", slug="sports"),
                Category(name="Business", slug="business"),
            ]
        )
        db.commit()

        response = client.get("/api/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Business", "Sports"]

    def test_get_by_slug(self, client: TestClient, test_category: Category):
        """Test fetching a single category."""
        response = client.get("/api/categories/politics")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Politics"
        assert data["color"] == "#1D4ED8"

    def test_get_not_found(self, client: TestClient):
        """Test an unknown slug answers 404."""
        response = client.get("/api/categories/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}


class TestCreateCategory:
    """Tests for POST /api/categories."""

    def test_create_requires_admin(self, client: TestClient):
        """Test anonymous callers cannot create categories."""
        response = client.post("/api/categories", json={"name": "Sports"})
        assert response.status_code == 401

    def test_create_with_defaults(self, client: TestClient, admin_headers: dict, db: Session):
        """Test the slug is derived and defaults are applied."""
        response = client.post(
            "/api/categories",
            json={"name": "Science & Tech"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Category created successfully"

        category = db.get(Category, response.json()["id"])
        assert category.slug == "science-tech"
        assert category.description == ""
        assert category.icon == "Newspaper"
        assert category.color == "#DC2626"
        assert category.post_count == 0

    def test_create_duplicate_slug(
        self, client: TestClient, admin_headers: dict, test_category: Category
    ):
        """Test an explicit slug that already exists answers 400."""
        response = client.post(
            "/api/categories",
            json={"name": "Politics 2", "slug": "politics"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Category slug 'politics' already exists"}

    def test_create_invalid_color(self, client: TestClient, admin_headers: dict):
        """Test a color that is not a hex code is rejected."""
        response = client.post(
            "/api/categories",
            json={"name": "Health", "color": "red"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_create_symbol_only_slug_uses_name(
        self, client: TestClient, admin_headers: dict, db: Session
    ):
        """Test a supplied slug without letters or digits falls back to the name."""
        response = client.post(
            "/api/categories",
            json={"name": "World News", "slug": "!!!"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert db.get(Category, response.json()["id"]).slug == "world-news"
        assert client.get("/api/categories/world-news").status_code == 200


class TestUpdateCategory:
    """Tests for PUT /api/categories/{id}."""

    def test_partial_update(
        self, client: TestClient, admin_headers: dict, db: Session, test_category: Category
    ):
        """Test only supplied fields change."""
        response = client.put(
            f"/api/categories/{test_category.id}",
            json={"description": "Elections and policy"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        db.refresh(test_category)
        assert test_category.description == "Elections and policy"
        assert test_category.name == "Politics"

    def test_update_symbol_only_slug_uses_name(
        self, client: TestClient, admin_headers: dict, db: Session, test_category: Category
    ):
        """Test updating to a slug without letters or digits keeps a usable slug."""
        response = client.put(
            f"/api/categories/{test_category.id}",
            json={"slug": "???"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        db.refresh(test_category)
        assert test_category.slug == "politics"

    def test_update_not_found(self, client: TestClient, admin_headers: dict):
        """Test updating a missing category answers 404."""
        response = client.put("/api/categories/999", json={"name": "X"}, headers=admin_headers)
        assert response.status_code == 404


class TestDeleteCategory:
    """Tests for DELETE /api/categories/{id}."""

    def test_delete_uncategorizes_posts(
        self,
        client: TestClient,
        admin_headers: dict,
        db: Session,
        test_post: Post,
        test_category: Category,
    ):
        """Test deleting a category keeps its posts without a category."""
        category_id = test_category.id
        response = client.delete(f"/api/categories/{category_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}
        assert db.get(Category, category_id) is None

        db.refresh(test_post)
        assert test_post.category_id is None

    def test_delete_not_found(self, client: TestClient, admin_headers: dict):
        """Test deleting a missing category answers 404."""
        response = client.delete("/api/categories/999", headers=admin_headers)
        assert response.status_code == 404
