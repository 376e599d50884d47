"""
Tests for Application Wiring

Root and health endpoints, lifespan behaviour, the error envelope for
unknown routes, the date-strings storage option and the full
publisher/book scenario.
"""

from fastapi import status
from sqlalchemy import inspect

from book_catalog.main import create_app
from tests.conftest import make_client, make_database


class TestRoot:
    """Tests for GET / endpoint."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Welcome to Book Catalog API"
        assert data["health"] == "/health"

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/authors")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not Found"}


class TestHealth:
    """Tests for GET /health endpoint."""

    def test_health_connected(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"

    def test_health_database_unreachable(self, test_settings, tmp_path):
        """The app starts and reports degraded when the database is down."""
        database = make_database(f"sqlite:///{tmp_path}/missing/dir/catalog.db")

        with make_client(database, test_settings) as client:
            health = client.get("/health")
            books = client.get("/books")

        assert health.status_code == status.HTTP_200_OK
        assert health.json()["status"] == "degraded"
        assert health.json()["database"] == "unavailable"
        assert books.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert books.json() == {"error": "Failed to fetch books"}


class TestLifespan:
    """Startup and shutdown behaviour."""

    def test_create_tables_on_startup(self, test_settings, tmp_path):
        settings = test_settings.model_copy(update={"db_create_tables": True})
        database = make_database(f"sqlite:///{tmp_path}/catalog.db")

        with make_client(database, settings) as client:
            tables = set(inspect(database.engine).get_table_names())
            response = client.get("/publishers")

        assert {"book", "publisher"} <= tables
        assert response.status_code == status.HTTP_200_OK

    def test_tables_not_created_by_default(self, test_settings, tmp_path):
        database = make_database(f"sqlite:///{tmp_path}/catalog.db")

        with make_client(database, test_settings):
            tables = inspect(database.engine).get_table_names()

        assert tables == []

    def test_database_is_stored_on_app_state(self, database, test_settings):
        app = create_app(test_settings, database)

        assert app.state.database is database
        assert app.state.settings is test_settings


class TestDateStrings:
    """Reading book dates as stored text."""

    def test_dates_read_as_text(self, test_settings):
        database = make_database(date_strings=True)
        database.create_tables()

        with make_client(database, test_settings) as client:
            publisher_id = client.post(
                "/publishers",
                json={"name": "Acme", "address": "1 Rd", "contact": "a@a.com"},
            ).json()["id"]
            book_id = client.post(
                "/books",
                json={"publisher_id": publisher_id, "name": "Title", "date": "2024-01-01"},
            ).json()["id"]

            listed = client.get("/books").json()
            single = client.get(f"/books/{book_id}").json()

        assert listed[0]["date"] == "2024-01-01"
        assert single["date"] == "2024-01-01"


class TestCors:
    def test_cors_allows_any_origin_by_default(self, client):
        response = client.get("/books", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] in ("*", "http://example.com")


class TestScenario:
    """End-to-end publisher and book lifecycle."""

    def test_publisher_book_lifecycle(self, client):
        response = client.post(
            "/publishers",
            json={"name": "Acme", "address": "1 Rd", "contact": "a@a.com"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        publisher_id = response.json()["id"]

        response = client.post(
            "/books",
            json={"publisher_id": publisher_id, "name": "Title", "date": "2024-01-01"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        book_id = response.json()["id"]

        response = client.get(f"/books/{book_id}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": book_id,
            "name": "Title",
            "date": "2024-01-01",
            "publisher": "Acme",
            "publisher_id": publisher_id,
        }

        response = client.delete(f"/publishers/{publisher_id}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        response = client.delete(f"/books/{book_id}")
        assert response.status_code == status.HTTP_200_OK

        response = client.delete(f"/publishers/{publisher_id}")
        assert response.status_code == status.HTTP_200_OK
        assert client.get("/publishers").json() == []
