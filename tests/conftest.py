from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gcharts.shared.config import reset_settings_for_tests


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """每个用例使用独立配置：不读取本地 .env，图表地址固定为默认值。"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GCHARTS_CHART_BASE_URL", raising=False)
    monkeypatch.setenv("GCHARTS_LOG_LEVEL", "WARNING")
    reset_settings_for_tests()
    yield
    reset_settings_for_tests()


@pytest.fixture()
async def api_client():
    """全局 API 客户端 Fixture。"""
    from gcharts.interfaces.api.app import create_app

    app = create_app()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
