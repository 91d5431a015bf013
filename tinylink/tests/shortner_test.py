import pytest

from tinylink.core.config import Settings
from tinylink.main import create_app
from fastapi.testclient import TestClient


def shorten(client, url):
    response = client.post("/shorten", json={"url": url})
    assert response.status_code == 201
    return response.json()["shortCode"]


def test_create_short_url_success(client):
    """Test successful URL shortening."""
    response = client.post(
        "/shorten",
        json={"url": "https://example.com/test"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["originalUrl"] == "https://example.com/test"
    assert len(data["shortCode"]) == 6
    assert data["shortCode"].isalnum()
    assert data["shortUrl"] == f"http://sho.rt/{data['shortCode']}"
    assert "createdAt" in data


def test_create_short_url_keeps_url_verbatim(client):
    response = client.post("/shorten", json={"url": "https://example.com"})
    assert response.json()["originalUrl"] == "https://example.com"


def test_same_url_gets_new_codes(client):
    url = "https://example.com/twice"
    assert shorten(client, url) != shorten(client, url)


def test_create_short_url_missing_url(client):
    """Test that a body without url is rejected."""
    response = client.post("/shorten", json={})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Validation Error"
    assert data["message"] == "URL is required"


@pytest.mark.parametrize("invalid_url", [
    "not-a-valid-url",
    "ftp://x",
    "ftp://example.com",  # Wrong protocol
    "http://",  # Missing domain
    "",
    " https://example.com",  # Leading whitespace
    "https://example.com\n",
    "https://example.com/a b",
    "http://exa\tmple.com",
    "https://example.com/\x00",
])
def test_create_short_url_invalid_url(client, invalid_url):
    """Test that invalid URL format is rejected."""
    response = client.post("/shorten", json={"url": invalid_url})
    assert response.status_code == 400, f"Should reject: {invalid_url}"
    assert "error" in response.json()


def test_create_short_url_non_string_url(client):
    response = client.post("/shorten", json={"url": 12345})
    assert response.status_code == 400


def test_create_short_url_too_long(client):
    """Test that URL longer than 2048 chars is rejected."""
    long_url = "https://example.com/" + "a" * 2100
    response = client.post("/shorten", json={"url": long_url})
    assert response.status_code == 400
    assert response.json()["message"] == "URL must not exceed 2048 characters"


def test_create_short_url_at_length_limit(client):
    url = "https://example.com/" + "a" * (2048 - len("https://example.com/"))
    response = client.post("/shorten", json={"url": url})
    assert response.status_code == 201


def test_create_short_url_malformed_json(client):
    response = client.post(
        "/shorten",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_create_short_url_generation_exhausted(test_settings, registry):
    registry.save("AAAAAA", "https://taken.example")
    app = create_app(settings=test_settings, registry=registry, code_generator=lambda: "AAAAAA")
    client = TestClient(app)

    response = client.post("/shorten", json={"url": "https://example.com"})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to generate unique short code"
    assert registry.get("AAAAAA").original_url == "https://taken.example"


def test_redirect_success(client):
    """Test successful redirect."""
    short_code = shorten(client, "https://example.com/redirect-test")

    response = client.get(f"/{short_code}", follow_redirects=False)
    assert response.status_code == 301
    assert response.headers["location"] == "https://example.com/redirect-test"


def test_redirect_not_found(client):
    """Test redirect with non-existent short code."""
    response = client.get("/zzzzzz", follow_redirects=False)
    assert response.status_code == 404
    assert response.json()["error"] == "Not Found"


@pytest.mark.parametrize("bad_code", ["nonexistent123", "abc", "ab!cde"])
def test_redirect_malformed_code(client, registry, bad_code):
    response = client.get(f"/{bad_code}", follow_redirects=False)
    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"


def test_redirect_increments_click_count(client):
    """Test that redirects increment click count."""
    short_code = shorten(client, "https://example.com")

    # Initial click count should be 0
    stats = client.get(f"/stats/{short_code}").json()
    assert stats["clicks"] == 0

    client.get(f"/{short_code}", follow_redirects=False)
    stats = client.get(f"/stats/{short_code}").json()
    assert stats["clicks"] == 1

    client.get(f"/{short_code}", follow_redirects=False)
    stats = client.get(f"/stats/{short_code}").json()
    assert stats["clicks"] == 2


def test_get_url_stats(client):
    """Test retrieving URL statistics."""
    create_response = client.post("/shorten", json={"url": "https://example.com/stats"})
    created = create_response.json()

    response = client.get(f"/stats/{created['shortCode']}")
    assert response.status_code == 200
    data = response.json()
    assert data["shortCode"] == created["shortCode"]
    assert data["originalUrl"] == "https://example.com/stats"
    assert data["shortUrl"] == created["shortUrl"]
    assert data["createdAt"] == created["createdAt"]
    assert data["clicks"] == 0


def test_get_url_stats_not_found(client):
    """Test getting stats for non-existent URL."""
    response = client.get("/stats/zzzzzz")
    assert response.status_code == 404


def test_get_url_stats_malformed_code(client):
    response = client.get("/stats/nonexistent123")
    assert response.status_code == 400
    assert response.json()["message"] == "Short code must be exactly 6 characters"


def test_apps_do_not_share_links(client, test_settings):
    short_code = shorten(client, "https://example.com")
    other = TestClient(create_app(settings=test_settings))
    assert other.get(f"/stats/{short_code}").status_code == 404


def test_rejected_url_is_not_stored(client, registry):
    response = client.post("/shorten", json={"url": " https://example.com"})
    assert response.status_code == 400
    assert registry.count() == 0


def test_create_short_url_uses_configured_attempts(registry):
    registry.save("AAAAAA", "https://taken.example")
    calls = []

    def always_taken():
        calls.append(1)
        return "AAAAAA"

    settings = Settings(BASE_URL="http://sho.rt", MAX_GENERATION_ATTEMPTS=3)
    client = TestClient(create_app(settings=settings, registry=registry, code_generator=always_taken))

    response = client.post("/shorten", json={"url": "https://example.com"})

    assert response.status_code == 500
    assert len(calls) == 3
