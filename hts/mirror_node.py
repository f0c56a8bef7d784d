import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MirrorTokenRecord:
    """Token as reported by the mirror node; every field may be absent"""
    token_id: str
    name: Optional[str] = None
    total_supply: Optional[Any] = None

    @classmethod
    def from_json(cls, token_id, payload) -> 'MirrorTokenRecord':
        if not isinstance(payload, dict):
            payload = {}
        return cls(
            token_id=str(token_id),
            name=payload.get('name'),
            total_supply=payload.get('total_supply'),
        )


class MirrorNodeClient:
    """
    Read-only client for the Hedera Mirror Node REST API
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = base_url or settings.HEDERA_MIRROR_NODE_URL
        self.timeout = timeout if timeout is not None else settings.HEDERA_MIRROR_TIMEOUT
        self.session = requests.Session()

    def token_url(self, token_id) -> str:
        return f"{self.base_url.rstrip('/')}/api/v1/tokens/{token_id}"

    def get_token_json(self, token_id) -> Dict[str, Any]:
        """
        Fetch the raw token document.

        Non-2xx answers are not raised: the mirror node still returns a JSON
        body (e.g. `{"_status": ...}` on 404) which simply lacks token fields.
        Connection errors and undecodable bodies propagate.
        """
        url = self.token_url(token_id)
        response = self.session.get(url, timeout=self.timeout)
        logger.debug("GET %s -> %s", url, response.status_code)
        return response.json()

    def get_token(self, token_id) -> MirrorTokenRecord:
        return MirrorTokenRecord.from_json(token_id, self.get_token_json(token_id))

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
