import pytest
import requests

from steam_roast.config import Settings, settings
from steam_roast.generators import (
    CloudflareGenerator,
    GeneratorError,
    OpenRouterGenerator,
    build_generators,
)


class FakeResponse:
    def __init__(self, status_code=200, body=None, json_error=False):
        self.status_code = status_code
        self._body = body
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._json_error:
            raise ValueError("not json")
        return self._body


def capture_post(monkeypatch, response):
    calls = []

    def fake_post(url, **kwargs):
        calls.append({"url": url, **kwargs})
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests, "post", fake_post)
    return calls


def test_openrouter_request_shape(monkeypatch):
    body = {"choices": [{"message": {"content": "  A roast.  "}}]}
    calls = capture_post(monkeypatch, FakeResponse(body=body))
    gen = OpenRouterGenerator("key", "some/model", timeout=5, referer="https://x", app_title="Roaster")

    assert gen.generate("prompt", 200, 0.8) == "  A roast.  "
    call = calls[0]
    assert call["timeout"] == 5
    assert call["headers"]["Authorization"] == "Bearer key"
    assert call["headers"]["X-Title"] == "Roaster"
    assert call["json"]["model"] == "some/model"
    assert call["json"]["max_tokens"] == 200
    assert call["json"]["temperature"] == 0.8
    assert gen.name == "openrouter:some/model"


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=429, body={}),
        FakeResponse(body={"choices": []}),
        FakeResponse(body={"error": "nope"}),
        FakeResponse(json_error=True),
        requests.Timeout("too slow"),
        requests.ConnectionError("down"),
    ],
)
def test_openrouter_failures_raise_generator_error(monkeypatch, response):
    capture_post(monkeypatch, response)
    with pytest.raises(GeneratorError):
        OpenRouterGenerator("key", "m").generate("p", 10, 0.5)


def test_cloudflare_reads_result_response(monkeypatch):
    calls = capture_post(monkeypatch, FakeResponse(body={"result": {"response": "roasted"}}))
    gen = CloudflareGenerator("acct", "tok", "@cf/meta/llama-3-8b-instruct", timeout=3)

    assert gen.generate("p", 100, 0.8) == "roasted"
    assert calls[0]["url"].endswith("/accounts/acct/ai/run/@cf/meta/llama-3-8b-instruct")
    assert calls[0]["timeout"] == 3


def test_cloudflare_malformed_body(monkeypatch):
    capture_post(monkeypatch, FakeResponse(body={"result": None}))
    with pytest.raises(GeneratorError):
        CloudflareGenerator("acct", "tok", "m").generate("p", 100, 0.8)


def test_build_generators_order_and_skips():
    s = Settings(
        _env_file=None,
        OPENROUTER_API_KEY="k",
        OPENROUTER_MODELS=["one", "two", "three"],
        CF_ACCOUNT_ID="acct",
        CF_API_TOKEN="tok",
        ROAST_REQUEST_TIMEOUT_S=4.0,
    )
    names = [g.name for g in build_generators(s)]
    assert names == ["openrouter:one", "openrouter:two", "openrouter:three", "cloudflare:@cf/meta/llama-3-8b-instruct"]
    assert all(g.timeout == 4.0 for g in build_generators(s))


def test_build_generators_without_credentials_is_empty():
    s = Settings(_env_file=None, OPENROUTER_API_KEY=None, CF_ACCOUNT_ID=None, CF_API_TOKEN=None)
    assert build_generators(s) == []


def test_missing_cloudflare_credentials_logged():
    s = Settings(_env_file=None, OPENROUTER_API_KEY="k", CF_ACCOUNT_ID="acct", CF_API_TOKEN=None)
    names = [g.name for g in build_generators(s)]

    assert not any(n.startswith("cloudflare:") for n in names)
    assert "Skipping Cloudflare backend" in settings.log_path.read_text(encoding="utf-8")
