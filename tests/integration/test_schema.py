import pytest

pytestmark = pytest.mark.integration


class TestOpenAPISchema:
    def test_schema_lists_product_paths(self, client):
        response = client.get("/api/schema/", HTTP_ACCEPT="application/json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/products" in paths
        assert any(path.startswith("/products/{") for path in paths)
