# ===============================================
# tests/test_endpoints.py
# HTTP surface, with the Echo client and a temp credential store.
# ===============================================
import pytest
from fastapi.testclient import TestClient

from contextfiller import app as app_module
from contextfiller.credentials import CredentialProvider, CredentialStore
from contextfiller.generate import EchoDevClient, FillerGenerator

client = TestClient(app_module.app)


@pytest.fixture
def wired(monkeypatch, tmp_path):
    def install(configured="test-key"):
        store = CredentialStore(str(tmp_path / "creds.yaml"))
        gen = FillerGenerator(
            model_client=EchoDevClient(),
            credentials=CredentialProvider(configured=configured, store=store),
        )
        monkeypatch.setattr(app_module, "credential_store", store)
        monkeypatch.setattr(app_module, "filler_gen", gen)
        return gen
    return install


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_languages_filter():
    r = client.get("/languages", params={"q": "pol"})
    assert r.status_code == 200
    assert [l["code"] for l in r.json()] == ["pl"]
    assert r.json()[0]["display_name"] == "Polish (polski)"


def test_tones():
    assert client.get("/tones").json() == {"tones": ["Professional", "Semi-professional", "Friendly", "Funny"]}


def test_generate_success_then_reset(wired):
    wired()
    r = client.post("/generate", json={"subject": "Organic Skincare", "language": "en", "tone": "Friendly"})
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "success"
    assert data["subject"] == "Organic Skincare"
    assert set(data["result"]) == {"sentence", "short_paragraph", "long_paragraph"}

    assert client.get("/state").json()["status"] == "success"

    r = client.post("/reset")
    assert r.json() == {"status": "idle", "subject": None, "result": None, "error": None, "kind": None}


def test_generate_blank_subject(wired):
    gen = wired()
    r = client.post("/generate", json={"subject": "   "})
    assert r.status_code == 400
    assert r.json()["detail"]["kind"] == "MissingSubject"
    assert gen.model_client.calls == 0


def test_generate_without_credential(wired):
    gen = wired(configured=None)
    r = client.post("/generate", json={"subject": "Tea"})
    assert r.status_code == 401
    assert r.json()["detail"]["kind"] == "MissingCredential"
    assert gen.model_client.calls == 0


def test_saved_credential_unblocks_generation(wired):
    wired(configured=None)
    assert client.get("/credential").json() == {"configured": False}
    assert client.put("/credential", json={"api_key": "  saved-key "}).status_code == 200
    assert client.get("/credential").json() == {"configured": True}
    assert client.post("/generate", json={"subject": "Tea"}).json()["status"] == "success"


def test_blank_credential_rejected(wired):
    wired(configured=None)
    assert client.put("/credential", json={"api_key": " "}).status_code == 400


def test_unknown_language(wired):
    wired()
    assert client.post("/generate", json={"subject": "Tea", "language": "xx"}).status_code == 400


def test_invalid_tone(wired):
    wired()
    assert client.post("/generate", json={"subject": "Tea", "tone": "Sarcastic"}).status_code == 422


def test_malformed_credential_store_is_missing_credential(wired):
    gen = wired(configured=None)
    app_module.credential_store.path.write_text("gemini_api_key: [unclosed\n", encoding="utf-8")
    assert client.get("/credential").json() == {"configured": False}
    r = client.post("/generate", json={"subject": "Tea"})
    assert r.status_code == 401
    assert gen.model_client.calls == 0
