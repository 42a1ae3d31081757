# src/services/content_client.py

"""Read-only client for the Sanity content query API."""

import json
import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.errors import ContentAPIError
from src.config.settings import Settings


class ContentClient:
    """Runs GROQ queries against a Sanity project's HTTP query endpoint.

    One GET per query. There is no retry: a failed call raises
    :class:`ContentAPIError` and the caller decides what to do with it.
    """

    def __init__(
        self,
        project_id: str | None = None,
        dataset: str | None = None,
        api_version: str | None = None,
        use_cdn: bool | None = None,
    ) -> None:
        self.settings = Settings()
        self.project_id = project_id or self.settings.PROJECT_ID
        self.dataset = dataset or self.settings.DATASET
        self.api_version = api_version or self.settings.API_VERSION
        self.use_cdn = (
            self.settings.USE_CDN if use_cdn is None else use_cdn
        )
        self.logger = logging.getLogger("storefront.content_api")
        self.session = curl_requests.Session()

    @property
    def query_url(self) -> str:
        """Endpoint for queries against the configured dataset."""
        host = "apicdn.sanity.io" if self.use_cdn else "api.sanity.io"
        return (
            f"https://{self.project_id}.{host}"
            f"/v{self.api_version}/data/query/{self.dataset}"
        )

    @staticmethod
    def _error_detail(resp: curl_requests.Response) -> str:
        """Pull the API's own error description out of a failed response."""
        try:
            body: Any = json.loads(resp.text)
        except ValueError:
            return ""
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                return str(error.get("description", ""))
        return ""

    def fetch(self, query: str) -> Any:
        """Run *query* and return the ``result`` member of the response."""
        url = self.query_url
        self.logger.debug("GET %s query=%s", url, query)
        try:
            resp = self.session.get(
                url,
                params={"query": query},
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            raise ContentAPIError(
                f"Request to {url} failed: {exc}"
            ) from exc

        if resp.status_code != 200:
            detail = self._error_detail(resp)
            message = f"HTTP {resp.status_code} from content API"
            if detail:
                message = f"{message}: {detail}"
            raise ContentAPIError(message)

        try:
            body: Any = json.loads(resp.text)
        except ValueError as exc:
            raise ContentAPIError(
                "Content API returned invalid JSON"
            ) from exc

        if not isinstance(body, dict) or "result" not in body:
            raise ContentAPIError(
                "Content API response has no 'result' member"
            )

        self.logger.info(
            "Query answered in %sms", body.get("ms", "?")
        )
        return body["result"]

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()
        self.logger.debug("Content API session closed")

    def ping(self) -> int:
        """Run a cheap count query; returns the number of products."""
        result = self.fetch(self.settings.PING_QUERY)
        return int(result or 0)
