from __future__ import annotations

import pytest
import httpx


@pytest.mark.anyio
async def test_health(api_client: httpx.AsyncClient):
    resp = await api_client.get("/v1/health")
    assert resp.status_code == 200
    data = resp.json()

    assert data["status"] == "ok"
    assert "version" in data
    assert data["components"]["chart_builder"] is True
    assert data["info"]["chart_builder"]["base_url"] == "http://chart.googleapis.com/chart"


@pytest.mark.anyio
async def test_validation_error_format(api_client: httpx.AsyncClient):
    resp = await api_client.post("/v1/charts/url", json={"options": "not-a-mapping"})
    assert resp.status_code == 422

    body = resp.json()
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["request_id"]
    assert resp.headers.get("X-Request-ID")


@pytest.mark.anyio
async def test_request_id_is_echoed(api_client: httpx.AsyncClient):
    resp = await api_client.get("/v1/health", headers={"X-Request-ID": "rid-123"})
    assert resp.headers["X-Request-ID"] == "rid-123"
