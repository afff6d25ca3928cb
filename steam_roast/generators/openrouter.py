"""OpenRouter chat-completions backend."""

import requests

from .base import GeneratorError, RoastGenerator

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"


class OpenRouterGenerator(RoastGenerator):
    """Calls one OpenRouter model through the chat completions API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        url: str = OPENROUTER_URL,
        timeout: float = 8.0,
        referer: str | None = None,
        app_title: str | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout
        self.referer = referer
        self.app_title = app_title

    @property
    def name(self) -> str:
        return f"openrouter:{self.model}"

    def _headers(self) -> dict:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if self.app_title:
            headers["X-Title"] = self.app_title
        return headers

    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        try:
            r = requests.post(self.url, headers=self._headers(), json=payload, timeout=self.timeout)
            r.raise_for_status()
            js = r.json()
        except (requests.RequestException, ValueError) as e:
            raise GeneratorError(f"{self.name} request failed: {e}") from e

        try:
            content = js["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise GeneratorError(f"{self.name} returned a malformed body: {str(js)[:200]}") from e
        if not isinstance(content, str):
            raise GeneratorError(f"{self.name} returned non-text content")
        return content
