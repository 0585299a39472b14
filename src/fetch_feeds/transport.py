"""HTTP retrieval through an ordered chain of proxy strategies."""

import logging
from typing import Sequence

import requests

from fetch_feeds.models import FetchResult, ProxyStrategy
from fetch_feeds.sources import PROXY_STRATEGIES

logger = logging.getLogger(__name__)

USER_AGENT = "conflict-monitor/1.0 (RSS reader)"


class TransportError(Exception):
    """A strategy responded, but not with a usable payload."""


def fetch_with_fallback(
    url: str,
    strategies: Sequence[ProxyStrategy] = PROXY_STRATEGIES,
    timeout: float = 30,
    accept_no_content: bool = False,
) -> FetchResult:
    """Fetch `url` trying each strategy in order until one returns a payload.

    Args:
        url: Upstream resource to retrieve
        strategies: Ordered proxy chain (direct first, then fallbacks)
        timeout: Per-request timeout in seconds
        accept_no_content: Treat a 204 or an empty body as a successful
            "no content" answer instead of a failure

    Returns:
        FetchResult; `ok` is False once every strategy has failed. This
        function does not raise.
    """
    errors = []

    for strategy in strategies:
        try:
            result = _attempt(url, strategy, timeout, accept_no_content)
        except Exception as e:
            logger.warning("Fetching %s via %s failed: %s", url, strategy.name, e)
            errors.append(f"{strategy.name}: {e}")
            continue

        result.errors = errors
        return result

    return FetchResult(url=url, ok=False, errors=errors)


def _attempt(
    url: str, strategy: ProxyStrategy, timeout: float, accept_no_content: bool
) -> FetchResult:
    """Run a single strategy. Raises on any failure."""
    response = requests.get(
        strategy.build_url(url),
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )

    if response.status_code == 204 and accept_no_content:
        return FetchResult(url=url, ok=True, payload="", status_code=204, strategy=strategy.name)

    response.raise_for_status()

    payload, content, status_code = _unwrap(response, strategy)

    if not payload.strip():
        if accept_no_content:
            return FetchResult(url=url, ok=True, payload="", status_code=status_code, strategy=strategy.name)
        raise TransportError("empty payload")

    return FetchResult(
        url=url,
        ok=True,
        payload=payload,
        content=content,
        status_code=status_code,
        strategy=strategy.name,
    )


def _unwrap(
    response: requests.Response, strategy: ProxyStrategy
) -> tuple[str, bytes | None, int]:
    """Extract the upstream body and status from a (possibly proxied) response.

    Returns the body text, the raw body bytes (None when the proxy only hands
    back decoded text) and the upstream status code.
    """
    if strategy.unwrap == "raw":
        return response.text or "", response.content, response.status_code

    if strategy.unwrap == "json_contents":
        data = response.json()
        if not isinstance(data, dict):
            raise TransportError("proxy returned a non-object JSON body")

        status = data.get("status") or {}
        upstream_code = status.get("http_code") if isinstance(status, dict) else None
        if upstream_code is not None and int(upstream_code) >= 400:
            raise TransportError(f"upstream returned HTTP {upstream_code}")

        contents = data.get("contents")
        if contents is None:
            raise TransportError("proxy response has no contents")
        return str(contents), None, int(upstream_code or response.status_code)

    raise TransportError(f"unknown unwrap mode: {strategy.unwrap}")
