import json

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture()
def schema(api_client):
    response = api_client.get("/api/schema/?format=json")
    assert response.status_code == 200
    return json.loads(response.content)


class TestApiDocs:
    def test_schema_is_served(self, schema):
        assert schema["info"]["title"] == "REST API Products"
        assert "/api/products" in schema["paths"]
        assert "/api/products/{id}" in schema["paths"]

    def test_product_routes_are_documented(self, schema):
        detail = schema["paths"]["/api/products/{id}"]
        assert set(detail) >= {"get", "put", "patch", "delete"}
        assert detail["get"]["tags"] == ["Products"]
        assert set(schema["paths"]["/api/products"]) >= {"get", "post"}

    def test_swagger_ui_is_served(self, api_client):
        response = api_client.get("/api/docs/")
        assert response.status_code == 200
