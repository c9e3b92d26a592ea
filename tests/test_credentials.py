# ===============================================
# tests/test_credentials.py
# ===============================================
import pytest

from contextfiller.credentials import CredentialProvider, CredentialStore


def test_store_round_trip_trims(tmp_path):
    store = CredentialStore(str(tmp_path / "creds.yaml"))
    assert store.load() is None
    assert store.save("  abc123  ") == "abc123"
    assert store.load() == "abc123"


@pytest.mark.parametrize("value", ["", "   "])
def test_store_rejects_blank(tmp_path, value):
    store = CredentialStore(str(tmp_path / "creds.yaml"))
    with pytest.raises(ValueError):
        store.save(value)
    assert not store.path.exists()


def test_store_creates_parent_dirs(tmp_path):
    store = CredentialStore(str(tmp_path / "nested" / "dir" / "creds.yaml"))
    store.save("k")
    assert store.load() == "k"


def test_configured_value_wins(tmp_path):
    store = CredentialStore(str(tmp_path / "creds.yaml"))
    store.save("saved")
    assert CredentialProvider(configured="from-env", store=store).get_credential() == "from-env"


def test_falls_back_to_saved(tmp_path):
    store = CredentialStore(str(tmp_path / "creds.yaml"))
    store.save("saved")
    assert CredentialProvider(configured="", store=store).get_credential() == "saved"


def test_none_available(tmp_path):
    store = CredentialStore(str(tmp_path / "creds.yaml"))
    assert CredentialProvider(configured=None, store=store).get_credential() is None
    assert CredentialProvider().get_credential() is None


def test_malformed_store_reads_as_missing(tmp_path):
    path = tmp_path / "creds.yaml"
    path.write_text("gemini_api_key: [unclosed\n", encoding="utf-8")
    store = CredentialStore(str(path))
    assert store.load() is None
    assert CredentialProvider(configured=None, store=store).get_credential() is None
