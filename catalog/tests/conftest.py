import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class InMemoryProductRepository:
    """ProductRepository fake that also records every call it receives."""

    def __init__(self, next_id: int = 1):
        self.rows = {}
        self.next_id = next_id
        self.calls = []

    def get_all(self):
        self.calls.append(("get_all",))
        return [p.model_copy() for p in self.rows.values()]

    def get_by_id(self, id):
        self.calls.append(("get_by_id", id))
        p = self.rows.get(id)
        return p.model_copy() if p else None

    def create(self, product):
        self.calls.append(("create", product))
        new_id = self.next_id
        self.next_id += 1
        self.rows[new_id] = product.model_copy(update={"id": new_id})
        return new_id

    def update(self, product):
        self.calls.append(("update", product))
        if product.id not in self.rows:
            return False
        self.rows[product.id] = product.model_copy()
        return True

    def delete(self, id):
        self.calls.append(("delete", id))
        return self.rows.pop(id, None) is not None


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "catalog_test.db"
    # Point the app to this temp DB
    os.environ["CATALOG_DB_PATH"] = str(path)
    from catalog.db import get_conn
    from catalog.repository import product_repo
    with get_conn(str(path)) as conn:
        product_repo.ensure_schema(conn)
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from catalog.api import app
    from fastapi.testclient import TestClient
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def fake_repo():
    return InMemoryProductRepository()


@pytest.fixture()
def fake_client(fake_repo):
    from catalog.api import app
    from catalog.routes.products import get_product_repository
    from fastapi.testclient import TestClient
    app.dependency_overrides[get_product_repository] = lambda: fake_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("CATALOG_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        conn.execute("DELETE FROM Products")
        conn.execute("DELETE FROM sqlite_sequence WHERE name = 'Products'")
        conn.commit()
    finally:
        conn.close()
    yield
