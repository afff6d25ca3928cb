"""Cloudflare Workers AI backend."""

import requests

from .base import GeneratorError, RoastGenerator

CF_SYSTEM_PROMPT = "Return only the requested text. No JSON, no markdown, no preface."


class CloudflareGenerator(RoastGenerator):
    def __init__(self, account_id: str, api_token: str, model: str, timeout: float = 8.0):
        self.account_id = account_id
        self.api_token = api_token
        self.model = model
        self.timeout = timeout

    @property
    def name(self) -> str:
        return f"cloudflare:{self.model}"

    @property
    def url(self) -> str:
        return f"https://api.cloudflare.com/client/v4/accounts/{self.account_id}/ai/run/{self.model}"

    def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        payload = {
            "messages": [
                {"role": "system", "content": CF_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        headers = {"Authorization": f"Bearer {self.api_token}"}
        try:
            r = requests.post(self.url, headers=headers, json=payload, timeout=self.timeout)
            r.raise_for_status()
            js = r.json()
        except (requests.RequestException, ValueError) as e:
            raise GeneratorError(f"{self.name} request failed: {e}") from e

        content = (js.get("result") or {}).get("response") if isinstance(js, dict) else None
        if not isinstance(content, str):
            raise GeneratorError(f"{self.name} returned a malformed body: {str(js)[:200]}")
        return content
