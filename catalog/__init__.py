"""Product catalog CRUD service (FastAPI + SQLite)."""
