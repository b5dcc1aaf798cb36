#!/usr/bin/env python3
"""
Expensify Integration Server Client

Posts a job description to the Expensify Integration Server and returns the
parsed JSON response. Any transport failure, non-JSON body, non-2xx HTTP
status or non-2xx "responseCode" in the body raises ExpensifyRequestError.
"""

import logging
from typing import Any

import requests

from ..core.config import DEFAULT_EXPENSIFY_BASE_URL
from ..core.errors import ExpensifyRequestError
from ..core.json_utils import format_json

logger = logging.getLogger(__name__)

ENDPOINT = "/Integration-Server/ExpensifyIntegrations"


def _request_failed(code: int, value: Any) -> ExpensifyRequestError:
    return ExpensifyRequestError(
        f"Request failed with http status {code}: {format_json(value)}",
        status_code=code,
        response=value,
    )


class ExpensifyClient:
    """Client for the Expensify Integration Server."""

    def __init__(
        self,
        user_id: str,
        user_secret: str,
        base_url: str = DEFAULT_EXPENSIFY_BASE_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.user_id = user_id
        self.user_secret = user_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{ENDPOINT}"

    def request_job_description(self, payload_type: str, payload: Any) -> dict[str, Any]:
        """Wrap a payload with its job type and our credentials."""
        return {
            "type": payload_type,
            "credentials": {
                "partnerUserID": self.user_id,
                "partnerUserSecret": self.user_secret,
            },
            "inputSettings": payload,
        }

    def post(self, payload_type: str, payload: Any) -> Any:
        """
        Post a job of the given type with payload as its input settings.

        Returns:
            The parsed JSON response

        Raises:
            ExpensifyRequestError: If the request fails or Expensify reports an error
        """
        # YAML input may carry dates; they go over the wire as ISO strings
        job = format_json(self.request_job_description(payload_type, payload), pretty=False, default=str)
        logger.info(f"Posting '{payload_type}' job to {self.url}")

        try:
            response = self.session.post(self.url, data={"requestJobDescription": job}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Post request to {self.url} failed: {e}")
            raise ExpensifyRequestError(f"Post request failed: {e}") from e

        try:
            value = response.json()
        except ValueError as e:
            raise ExpensifyRequestError(
                f"Failed to parse body as json (http status {response.status_code})",
                status_code=response.status_code,
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Expensify answered with http status {response.status_code}")
            raise _request_failed(response.status_code, value)

        code = value.get("responseCode") if isinstance(value, dict) else None
        if isinstance(code, int) and not 200 <= code < 300:
            logger.error(f"Expensify answered with responseCode {code}")
            raise _request_failed(code, value)

        return value
