"""Tests for the /translations endpoints."""
from __future__ import annotations

import pytest

NOT_FOUND = {"error": "Translation not found"}
PARSE_FAILED = {"error": "Failed to parse JSON"}


class TestGetTranslations:
    """Tests for GET /translations/{lang}."""

    @pytest.mark.parametrize("lang", ["en", "fr"])
    def test_supported_language_returns_bundle(self, client, request, lang):
        """Each bundle on disk is served as-is."""
        response = client.get(f"/translations/{lang}")

        assert response.status_code == 200
        assert response.json() == request.getfixturevalue(f"{lang}_bundle")

    def test_cache_control_header(self, client):
        """Successful responses are publicly cacheable for an hour."""
        response = client.get("/translations/en")

        assert response.headers["Cache-Control"] == "public, max-age=3600"

    @pytest.mark.parametrize("lang, base", [("fr-CA", "fr"), ("en-US", "en"), ("en-GB-oxendict", "en")])
    def test_region_suffix_served_as_base_language(self, client, lang, base):
        """A region-qualified code behaves exactly like its base code."""
        response = client.get(f"/translations/{lang}")
        base_response = client.get(f"/translations/{base}")

        assert response.status_code == 200
        assert response.json() == base_response.json()
        assert response.headers["Cache-Control"] == base_response.headers["Cache-Control"]

    def test_missing_language_returns_404(self, client):
        """A language without a bundle returns the not-found error body."""
        response = client.get("/translations/xx")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND
        assert "Cache-Control" not in response.headers

    def test_malformed_bundle_returns_500(self, client):
        """A bundle that is not valid JSON returns the parse error body."""
        response = client.get("/translations/de")

        assert response.status_code == 500
        assert response.json() == PARSE_FAILED

    def test_malformed_bundle_with_region_returns_500(self, client):
        """Truncation applies before the parse failure is detected."""
        response = client.get("/translations/de-AT")

        assert response.status_code == 500
        assert response.json() == PARSE_FAILED

    @pytest.mark.parametrize("lang", ["..en", "en.json", "-en", "e", "e1", "en_"])
    def test_rejected_codes_return_404(self, client, lang):
        """Codes that are not plain letters never reach the filesystem."""
        response = client.get(f"/translations/{lang}")

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "path",
        [
            "/translations/..%2Fen",
            "/translations/..%2F..%2Fetc%2Fpasswd",
            "/translations/en%2Ffr",
            "/translations/en/fr",
            "/translations/",
        ],
    )
    def test_codes_with_separators_return_404(self, client, path):
        """Decoded slashes stay on the API route and are rejected as codes."""
        response = client.get(path, follow_redirects=False)

        assert response.status_code == 404
        assert response.json() == NOT_FOUND


class TestListLanguages:
    """Tests for GET /translations."""

    def test_lists_bundles_on_disk(self, client):
        """Every valid bundle file is listed, broken ones included."""
        response = client.get("/translations")

        assert response.status_code == 200
        assert response.json() == {"languages": ["de", "en", "fr"], "default": "en"}


class TestCORS:
    """Tests for the single-origin CORS policy."""

    def test_allowed_origin_gets_cors_header(self, client):
        """Requests from the configured origin are allowed."""
        response = client.get(
            "/translations/en", headers={"Origin": "http://localhost:3000"}
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_other_origin_gets_no_cors_header(self, client):
        """Requests from any other origin are not granted access."""
        response = client.get(
            "/translations/en", headers={"Origin": "http://evil.example"}
        )

        assert "access-control-allow-origin" not in response.headers

    def test_preflight_from_allowed_origin(self, client):
        """Preflight from the configured origin succeeds."""
        response = client.options(
            "/translations/en",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_preflight_from_other_origin_rejected(self, client):
        """Preflight from any other origin is rejected."""
        response = client.options(
            "/translations/en",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 400


class TestHealth:
    """Tests for GET /health."""

    def test_health_reports_bundle_count(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["languages"] == 3

    def test_security_headers_present(self, client):
        """Security headers are added to every response."""
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"

    def test_pages_get_strict_csp(self, client):
        response = client.get("/en")

        csp = response.headers["Content-Security-Policy"]
        assert "default-src 'self'" in csp
        assert "cdn.jsdelivr.net" not in csp

    def test_error_bodies_carry_security_headers(self, client):
        response = client.get("/translations/..%2Fen")

        assert response.status_code == 404
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_docs_csp_allows_cdn(self, client):
        response = client.get("/api/docs")

        assert response.status_code == 200
        assert "https://cdn.jsdelivr.net" in response.headers["Content-Security-Policy"]
