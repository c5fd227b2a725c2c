from fastapi.testclient import TestClient

from monthly_reports.deps.auth import TOKEN_COOKIE
from monthly_reports.main import app
from monthly_reports.security import create_access_token, decode_token
from monthly_reports.settings import Settings, get_settings


def test_requires_auth(anon_client):
    # no token -> 401s
    r = anon_client.get("/monthly_reports/manage")
    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"
    assert anon_client.post("/monthly_reports/submit", data={"submit": "Submit"}).status_code == 401

def test_garbage_token(anon_client):
    r = anon_client.get("/monthly_reports/manage", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"

def test_expired_token(anon_client):
    tok = create_access_token(sub="1", expires_minutes=-1)
    r = anon_client.get("/monthly_reports/manage", headers={"Authorization": f"Bearer {tok}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_cookie_token_for_browsers(anon_client):
    anon_client.cookies.set(TOKEN_COOKIE, create_access_token(sub="7"))
    assert anon_client.get("/monthly_reports/manage").status_code == 200

def test_token_round_trip():
    payload = decode_token(create_access_token(sub="42", extra={"role": "admin"}))
    assert payload["sub"] == "42"
    assert payload["role"] == "admin"

def test_auth_can_be_switched_off():
    app.dependency_overrides[get_settings] = lambda: Settings(AUTH_REQUIRED=False)
    try:
        r = TestClient(app).get("/monthly_reports/manage")
        assert r.status_code == 200
    finally:
        app.dependency_overrides.pop(get_settings, None)
