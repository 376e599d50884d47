"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (in-memory database, clients, sample data)
- test_books.py: /books endpoints
- test_publishers.py: /publishers endpoints
- test_storage_errors.py: 500 responses when the database fails
- test_app.py: root, health, lifespan and end-to-end scenario
- test_config.py: Settings parsing and validation
- test_database.py: Database gateway

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
