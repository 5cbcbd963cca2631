"""
API 服务测试
"""

import sys
import os

import pytest
from fastapi.testclient import TestClient

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pinsplit.api.server import app


@pytest.fixture
def client(monkeypatch):
    for name in ("PINSPLIT_BOUNDARY_MARKER", "PINSPLIT_STRATEGY"):
        monkeypatch.delenv(name, raising=False)
    with TestClient(app) as c:
        yield c


class TestApi:
    """API 接口"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["strategy"] == "pattern"

    def test_split(self, client):
        response = client.post("/split", json={"text": "Nǐ hǎo, shìjiè!"})
        assert response.status_code == 200
        data = response.json()
        assert data["split_text"] == "Nǐ hǎo, shì∙jiè!"
        assert data["syllables"] == ["Nǐ", "hǎo", "shì", "jiè"]
        assert data["tokens"][0] == {"syllable": "Nǐ", "tag": "X"}
        assert data["tokens"][1] == {"syllable": " ", "tag": "PU"}
        assert data["marker"] == "∙"

    def test_split_overrides(self, client):
        response = client.post("/split", json={"text": "jìniàn", "strategy": "dictionary", "marker": "|"})
        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "dictionary"
        assert data["split_text"] == "jì|niàn"

    def test_split_text_matches_tokens(self, client):
        response = client.post("/split", json={"text": "pin1yin1, Xi'an", "strategy": "dictionary"})
        assert response.status_code == 200
        data = response.json()
        assert data["split_text"] == "pin1∙yin1, Xi∙an"
        assert data["syllables"] == ["pin1", "yin1", "Xi", "an"]
        assert [t["syllable"] for t in data["tokens"]] == ["pin1", "yin1", ",", " ", "Xi", "∙", "an"]

    def test_tone_digit_marker_rejected(self, client):
        response = client.post("/split", json={"text": "Xi'an", "marker": "1"})
        assert response.status_code == 400

    def test_invalid_marker(self, client):
        response = client.post("/split", json={"text": "nihao", "marker": "ab"})
        assert response.status_code == 400

    def test_invalid_strategy(self, client):
        response = client.post("/split", json={"text": "nihao", "strategy": "neural"})
        assert response.status_code == 400

    def test_simple(self, client):
        response = client.get("/split/simple", params={"text": "pīnyīn"})
        assert response.status_code == 200
        assert response.json() == {"text": "pīnyīn", "syllables": ["pīn", "yīn"]}

    def test_request_headers(self, client):
        response = client.get("/health")
        assert "X-Request-ID" in response.headers
        assert response.headers["X-Response-Time"].endswith("ms")


def test_not_ready_without_lifespan():
    client = TestClient(app)
    response = client.get("/split/simple", params={"text": "nihao"})
    assert response.status_code == 503
