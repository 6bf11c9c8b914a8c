"""
Tests for application-wide middleware.
"""

ORIGIN = "http://frontend.example"


class TestCors:
    def test_simple_request_allowed_from_any_origin(self, client):
        response = client.get("/api/products", headers={"Origin": ORIGIN})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", ORIGIN)

    def test_preflight_allowed(self, client):
        response = client.options(
            "/api/products",
            headers={
                "Origin": ORIGIN,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] in ("*", ORIGIN)
        assert "POST" in response.headers["access-control-allow-methods"]
