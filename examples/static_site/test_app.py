"""Tests for the static site example."""

from wren.testing import TestClient


class TestStaticSitePages:
    async def test_index_page(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert "<h1>Static Site</h1>" in response.text
            assert "text/html" in response.content_type

    async def test_nested_page(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/docs/index.html")
            assert "<h1>Documentation</h1>" in response.text

    async def test_stylesheet(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/style.css")
            assert "text/css" in response.content_type

    async def test_directory_is_not_listed(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/docs/")
            assert response.status == 404


class TestStaticSiteFallthrough:
    async def test_api_route(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/status")
            assert response.text == "ok"

    async def test_refused_path(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/%2e%2e/app.py")
            assert response.status == 400
            assert "<h1>Refused</h1>" in response.text
            assert "denied access" in response.text

    async def test_refused_path_is_escaped(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/..%2F%3Cscript%3E")
            assert response.status == 400
            assert "<script>" not in response.text
            assert "&lt;script&gt;" in response.text
