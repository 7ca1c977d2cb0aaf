"""Test helpers: fake image payloads and a Gemini client backed by httpx.MockTransport."""

from __future__ import annotations

import base64
import json

import httpx

from inference.providers.gemini_client import GeminiClient


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00fake-png-body"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")

SECOND_PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00second-image"
SECOND_PNG_B64 = base64.b64encode(SECOND_PNG_BYTES).decode("ascii")


def text_part(text: str) -> dict:
    return {"text": text}


def image_part(data: str = PNG_B64, mime_type: str = "image/png") -> dict:
    return {"inlineData": {"mimeType": mime_type, "data": data}}


def gemini_payload(*parts: dict) -> dict:
    """A successful generateContent body with a single candidate."""
    return {"candidates": [{"content": {"role": "model", "parts": list(parts)}}]}


class RecordingTransport:
    """Collects outgoing requests and answers each with the configured response."""

    def __init__(self, status_code: int = 200, payload=None, content: bytes | None = None):
        self.status_code = status_code
        self.payload = payload if payload is not None else gemini_payload()
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self, api_key: str = "test-key") -> GeminiClient:
        return GeminiClient(api_key=api_key, transport=httpx.MockTransport(self))

