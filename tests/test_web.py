import json

from fastapi.testclient import TestClient

from filedata.web import create_app


def test_health_endpoint(tmp_path, monkeypatch):
    monkeypatch.delenv("FILEDATA_AUTH_TOKEN", raising=False)
    client = TestClient(create_app(base_directory=tmp_path))
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_put_then_get_persists_document(tmp_path, monkeypatch):
    monkeypatch.delenv("FILEDATA_AUTH_TOKEN", raising=False)
    client = TestClient(create_app(base_directory=tmp_path))

    put = client.put("/documents/scoreboard", json={"Team": "blue", "points": [1, 2]})
    assert put.status_code == 200
    assert put.json() == {"id": "scoreboard", "file_name": "scoreboard.json"}
    assert json.loads((tmp_path / "scoreboard.json").read_text(encoding="utf-8"))["Team"] == "blue"

    got = client.get("/documents/scoreboard")
    assert got.status_code == 200
    assert got.json() == {"Team": "blue", "points": [1, 2]}


def test_error_kinds_map_to_status_codes(tmp_path, monkeypatch):
    monkeypatch.delenv("FILEDATA_AUTH_TOKEN", raising=False)
    client = TestClient(create_app(base_directory=tmp_path))
    (tmp_path / "broken.json").write_text("{oops", encoding="utf-8")

    assert client.get("/documents/missing").status_code == 404
    assert client.get("/documents/a..b").status_code == 400
    assert client.get("/documents/broken").status_code == 422
    assert client.put("/documents/a..b", json={"x": 1}).status_code == 400
    assert client.put("/documents/nothing", json=None).status_code == 400
    assert not (tmp_path / "nothing.json").exists()


def test_auth_token_required_when_configured(tmp_path, monkeypatch):
    monkeypatch.setenv("FILEDATA_AUTH_TOKEN", "secret")
    client = TestClient(create_app(base_directory=tmp_path))

    assert client.put("/documents/doc", json={"a": 1}).status_code == 401
    assert client.put("/documents/doc", json={"a": 1}, headers={"X-Auth-Token": "secret"}).status_code == 200
    assert client.get("/documents/doc", headers={"X-Auth-Token": "secret"}).json() == {"a": 1}
    assert client.get("/health").status_code == 200


def test_base_directory_from_config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("FILEDATA_BASE_DIR", raising=False)
    monkeypatch.delenv("FILEDATA_AUTH_TOKEN", raising=False)
    docs = tmp_path / "docs"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"base_directory": str(docs)}), encoding="utf-8")

    client = TestClient(create_app(config_path=config))
    client.put("/documents/item", json=[1, 2, 3])

    assert (docs / "item.json").exists()
