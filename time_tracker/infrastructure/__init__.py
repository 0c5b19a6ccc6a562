"""Infrastructure: persistence (SQLAlchemy/PostgreSQL) and external services (httpx)."""
