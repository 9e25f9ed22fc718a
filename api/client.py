# api/client.py

import logging
from dataclasses import dataclass, field

import requests

from api.errors import NetworkError

logger = logging.getLogger(__name__)


# -----------------------------
# Configuration
# -----------------------------

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10  # seconds


@dataclass
class ApiResponse:
    status_code: int
    data: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BackendClient:
    """
    JSON-over-HTTP access to the cupboard backend.

    Only transport failures raise (as NetworkError). HTTP error statuses are
    returned to the caller, which knows what they mean for its endpoint.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = requests.Session()

    def url_for(self, path: str) -> str:
        return self.base_url + "/" + path.lstrip("/")

    def post_json(self, path: str, body: dict) -> ApiResponse:
        headers = {"Accept": "application/json"}

        try:
            resp = self.http.post(
                self.url_for(path),
                json=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"POST {path} failed: {e}") from e

        return ApiResponse(status_code=resp.status_code, data=_decode_body(resp))


def _decode_body(resp) -> dict:
    """
    Backend bodies are JSON objects. Anything else (empty body, HTML error
    page, JSON list) is treated as an empty object.
    """
    if not resp.content:
        return {}
    try:
        data = resp.json()
    except ValueError:
        logger.warning("Non-JSON response from backend (status=%s)", resp.status_code)
        return {}
    return data if isinstance(data, dict) else {}
