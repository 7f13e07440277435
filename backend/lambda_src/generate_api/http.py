from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from shorts_architect.errors import BriefValidationError


_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Content-Type": "application/json",
}


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": _CORS_HEADERS,
            "body": json.dumps(self.body if self.body is not None else {}),
        }


class HttpRequestParser:
    """Extracts the JSON body from API Gateway proxy events."""

    def parse(self, event: Dict[str, Any]) -> Dict[str, Any]:
        body = event.get("body")
        if body is None:
            raise _body_error("Missing request body")

        if event.get("isBase64Encoded"):  # pragma: no cover - gateway config
            body = base64.b64decode(body).decode("utf-8")

        if isinstance(body, str):
            try:
                body = json.loads(body)
            except json.JSONDecodeError as exc:
                raise _body_error("Body must be valid JSON") from exc

        if isinstance(body, dict):
            return body

        raise _body_error("Body must be a JSON object")


def _body_error(message: str) -> BriefValidationError:
    return BriefValidationError({"body": [message]})


def cors_preflight_response() -> Dict[str, Any]:
    return {
        "statusCode": 204,
        "headers": {
            **_CORS_HEADERS,
            "Access-Control-Allow-Methods": "POST,OPTIONS",
        },
        "body": "",
    }


def ok(body: Mapping[str, Any]) -> Dict[str, Any]:
    return HttpResponse(status_code=200, body=dict(body)).to_payload()


def bad_request(field_errors: Mapping[str, Any]) -> Dict[str, Any]:
    return HttpResponse(status_code=400, body={"error": dict(field_errors)}).to_payload()


def server_error(message: str) -> Dict[str, Any]:
    return HttpResponse(status_code=500, body={"error": message}).to_payload()
