import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from userdemo.app import create_app, create_plain_app, main
from userdemo.config import AppConfig, DatabaseConfig, ServerConfig
from userdemo.entities import Base, UserEntity
from userdemo.repository import UserRepository
from userdemo.results import ERROR_CODE, ERROR_MESSAGE, SUCCESS_CODE, SUCCESS_MESSAGE
from userdemo.service import UserDbService


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def config():
    return AppConfig(
        server=ServerConfig(port=18080, domain="example.com"),
        database=DatabaseConfig(url="sqlite://", enabled=True),
    )


@pytest.fixture
def client(config, engine):
    app = create_app(config, UserDbService(UserRepository(engine)))
    return app.test_client()


def test_index(client):
    response = client.get("/")
    body = response.get_json()
    assert response.status_code == 200
    assert body["code"] == SUCCESS_CODE
    assert body["message"] == SUCCESS_MESSAGE
    assert body["data"] == {"tpl": "Index", "port": 18080, "Domain": "example.com"}


def test_port(client):
    body = client.get("/port").get_json()
    assert body["data"] == {"port": 18080, "Domain": "example.com"}


def test_db_config(client):
    body = client.get("/db-config").get_json()
    assert body["data"] == {"URL": "sqlite://", "Enabled": True}


def test_user_create_accepts_valid_payload(client):
    response = client.post("/admin/user/create", json={"name": "dave", "sort": 3})
    assert response.status_code == 200
    assert response.get_json()["code"] == SUCCESS_CODE


def test_user_create_reports_missing_name(client):
    response = client.post("/admin/user/create", json={"code": "x"})
    body = response.get_json()
    assert response.status_code == 500
    assert body["code"] == ERROR_CODE
    assert body["message"] == ERROR_MESSAGE
    assert list(body["messageData"]) == ["name"]
    assert "名称" in body["messageData"]["name"]


def test_user_create_wrong_type_gives_plain_error(client):
    response = client.post("/admin/user/create", json={"name": "dave", "sort": "x"})
    body = response.get_json()
    assert response.status_code == 500
    assert body["message"] == ERROR_MESSAGE
    assert "messageData" not in body


def test_malformed_json_gives_plain_error(client):
    response = client.post(
        "/admin/user-db/create", data="{", content_type="application/json"
    )
    body = response.get_json()
    assert response.status_code == 500
    assert body["code"] == ERROR_CODE
    assert "messageData" not in body


def test_user_db_create_stores_user(client, engine):
    response = client.post("/admin/user-db/create", json={"name": "erin"})
    assert response.status_code == 200
    assert response.get_json()["code"] == SUCCESS_CODE
    with Session(engine) as session:
        assert list(session.scalars(select(UserEntity.name))) == ["erin"]


def test_user_db_create_rejects_missing_name(client, engine):
    response = client.post("/admin/user-db/create", json={})
    assert response.status_code == 500
    assert "name" in response.get_json()["messageData"]
    with Session(engine) as session:
        assert list(session.scalars(select(UserEntity.name))) == []


def test_plain_app_serves_nothing():
    client = create_plain_app().test_client()
    assert client.get("/").status_code == 404


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])


def test_main_rejects_bad_settings(tmp_path):
    (tmp_path / "app.yaml").write_text("server:\n  port: abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        main(["--config", str(tmp_path)])