# src/services/health_checker.py

"""Content API connectivity health check."""

import asyncio
import logging
import time
from dataclasses import dataclass

from src.services.content_client import ContentClient

logger = logging.getLogger("storefront.health")

_SLOW_THRESHOLD_MS = 5000


@dataclass
class HealthResult:
    """Result of a content API probe."""

    endpoint: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str
    product_count: int = 0


def probe_content_api(client: ContentClient) -> HealthResult:
    """Run the ping query and classify the outcome."""
    endpoint = client.query_url
    start = time.monotonic()
    try:
        count = client.ping()
    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            endpoint=endpoint,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )

    elapsed_ms = (time.monotonic() - start) * 1000
    if elapsed_ms > _SLOW_THRESHOLD_MS:
        return HealthResult(
            endpoint=endpoint,
            status="slow",
            latency_ms=elapsed_ms,
            message="High latency",
            product_count=count,
        )
    return HealthResult(
        endpoint=endpoint,
        status="ok",
        latency_ms=elapsed_ms,
        message="",
        product_count=count,
    )


class HealthChecker:
    """Probes the configured content API without blocking the loop."""

    def __init__(self, client: ContentClient | None = None) -> None:
        self.client = client or ContentClient()

    def close(self) -> None:
        self.client.close()

    async def check(self) -> HealthResult:
        result = await asyncio.to_thread(probe_content_api, self.client)
        logger.info(
            "Health check %s: %s (%.0fms, %d products) %s",
            result.endpoint,
            result.status,
            result.latency_ms,
            result.product_count,
            result.message,
        )
        return result
