from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from config import Settings
from main import create_app

ADMIN_PASSWORD = "letmein-42"


@pytest.fixture()
def settings(tmp_path):
    public_dir = tmp_path / "public"
    return Settings(
        secret_key="test-signing-secret",
        admin_password=ADMIN_PASSWORD,
        database_url=f"sqlite:///{tmp_path / 'festiverse.db'}",
        public_dir=str(public_dir),
        upload_dir=str(public_dir / "uploads"),
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def db_session(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def admin_headers(client):
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": resp.json()["token"]}


@pytest.fixture()
def signup(client):
    def _signup(email="asha@example.com", password="s3cret-pass", name="Asha", college_id="CS-117"):
        return client.post(
            "/api/auth/signup",
            json={"name": name, "collegeId": college_id, "email": email, "password": password},
        )

    return _signup


@pytest.fixture()
def png_bytes():
    buf = BytesIO()
    Image.new("RGB", (8, 8), "orange").save(buf, "PNG")
    return buf.getvalue()
