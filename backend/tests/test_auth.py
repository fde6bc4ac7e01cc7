from fastapi.testclient import TestClient
from liftlog.main import app
from liftlog.settings import get_settings

client = TestClient(app)

def test_valid_token(make_token):
    r = client.get("/exercises", headers={"Authorization": f"Bearer {make_token()}"})
    assert r.status_code == 200

def test_expired_token_rejected(make_token):
    token = make_token(expires_in=-60)
    r = client.get("/sessions", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401, r.text
    assert r.json()["detail"] == "Token expired"

def test_wrong_secret_rejected(make_token):
    token = make_token(secret="someone-else")
    r = client.get("/sessions", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_wrong_audience_rejected(make_token):
    token = make_token(aud="anon")
    assert client.get("/sessions", headers={"Authorization": f"Bearer {token}"}).status_code == 401

def test_garbage_token_rejected():
    r = client.get("/sessions", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 401

def test_owner_lock(make_token, monkeypatch):
    monkeypatch.setattr(get_settings(), "OWNER_SUB", "owner-1")
    ok = client.get("/exercises", headers={"Authorization": f"Bearer {make_token('owner-1')}"})
    assert ok.status_code == 200
    other = client.get("/exercises", headers={"Authorization": f"Bearer {make_token('intruder')}"})
    assert other.status_code == 403
