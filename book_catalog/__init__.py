"""
Book Catalog API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Database gateway (engine, single connection, sessions)
- dependencies.py: Dependency injection functions
- errors.py: Error envelope and exception handlers
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
"""

__version__ = "1.0.0"
