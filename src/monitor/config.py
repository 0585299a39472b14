"""Configuration loader for the conflict monitor."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from aggregate_alerts.aggregator import ALERT_LOG_CAPACITY
from aggregate_alerts.poller import ALERT_STRATEGIES, ALERT_URL, POLL_INTERVAL_SECONDS
from aggregate_alerts.push import RECONNECT_DELAY_SECONDS
from common.config import find_config_path, load_yaml
from corpus.models import SourceSpec
from detect_strikes.places import DEDUP_WINDOW_MINUTES, RECORD_TTL_HOURS, SCAN_LIMIT
from fetch_feeds.models import ProxyStrategy
from fetch_feeds.sources import PROXY_STRATEGIES, RELAXED_SOURCES, RSS_FEEDS
from score_escalation.weights import ESCALATION_CEILING, SCORING_WINDOW

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "MONITOR_CONFIG"


@dataclass
class FetchConfig:
    interval_seconds: float = 300
    timeout_seconds: float = 30
    max_workers: int | None = None
    proxies: list[ProxyStrategy] = field(default_factory=lambda: list(PROXY_STRATEGIES))


@dataclass
class AlertConfig:
    url: str = ALERT_URL
    poll_interval_seconds: float = POLL_INTERVAL_SECONDS
    timeout_seconds: float = 10
    push_url: str | None = None
    reconnect_delay_seconds: float = RECONNECT_DELAY_SECONDS
    capacity: int = ALERT_LOG_CAPACITY
    proxies: list[ProxyStrategy] = field(default_factory=lambda: list(ALERT_STRATEGIES))


@dataclass
class StrikeConfig:
    window_minutes: float = DEDUP_WINDOW_MINUTES
    ttl_hours: float = RECORD_TTL_HOURS
    scan_limit: int = SCAN_LIMIT


@dataclass
class ScoringConfig:
    window: int = SCORING_WINDOW
    ceiling: int = ESCALATION_CEILING


@dataclass
class OutputConfig:
    local_path: str = "output"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class MonitorConfig:
    sources: list[str] = field(default_factory=lambda: list(RSS_FEEDS.keys()))
    source_urls: dict[str, str] = field(default_factory=dict)
    relaxed_sources: list[str] = field(default_factory=lambda: sorted(RELAXED_SOURCES))
    fetch: FetchConfig = field(default_factory=FetchConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    strikes: StrikeConfig = field(default_factory=StrikeConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def source_specs(self) -> list[SourceSpec]:
        """Configured sources with their feed URLs. Unknown keys are skipped."""
        feeds = {**RSS_FEEDS, **self.source_urls}
        specs = []
        for key in self.sources:
            url = feeds.get(key)
            if not url:
                logger.warning("Invalid source: %s", key)
                continue
            specs.append(SourceSpec(key=key, url=url))
        return specs


def load_config(config_name: str | None = None) -> MonitorConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a
                    path to a YAML file. If None, uses the MONITOR_CONFIG
                    env var or "prod".

    Returns:
        Loaded MonitorConfig object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    logger.info("Loading config from %s", config_path)
    return _parse_config(load_yaml(config_path))


def _parse_proxies(raw: list[dict] | None, default: tuple[ProxyStrategy, ...]) -> list[ProxyStrategy]:
    if not raw:
        return list(default)
    return [
        ProxyStrategy(
            name=p["name"],
            prefix=p.get("prefix"),
            unwrap=p.get("unwrap", "raw"),
        )
        for p in raw
    ]


def _parse_config(data: dict) -> MonitorConfig:
    """Parse config dictionary into MonitorConfig object."""
    fetch_raw = data.get("fetch", {})
    fetch = FetchConfig(
        interval_seconds=fetch_raw.get("interval_seconds", 300),
        timeout_seconds=fetch_raw.get("timeout_seconds", 30),
        max_workers=fetch_raw.get("max_workers"),
        proxies=_parse_proxies(fetch_raw.get("proxies"), PROXY_STRATEGIES),
    )

    alerts_raw = data.get("alerts", {})
    alerts = AlertConfig(
        url=alerts_raw.get("url", ALERT_URL),
        poll_interval_seconds=alerts_raw.get("poll_interval_seconds", POLL_INTERVAL_SECONDS),
        timeout_seconds=alerts_raw.get("timeout_seconds", 10),
        push_url=alerts_raw.get("push_url"),
        reconnect_delay_seconds=alerts_raw.get("reconnect_delay_seconds", RECONNECT_DELAY_SECONDS),
        capacity=alerts_raw.get("capacity", ALERT_LOG_CAPACITY),
        proxies=_parse_proxies(alerts_raw.get("proxies"), ALERT_STRATEGIES),
    )

    strikes_raw = data.get("strikes", {})
    strikes = StrikeConfig(
        window_minutes=strikes_raw.get("window_minutes", DEDUP_WINDOW_MINUTES),
        ttl_hours=strikes_raw.get("ttl_hours", RECORD_TTL_HOURS),
        scan_limit=strikes_raw.get("scan_limit", SCAN_LIMIT),
    )

    scoring_raw = data.get("scoring", {})
    scoring = ScoringConfig(
        window=scoring_raw.get("window", SCORING_WINDOW),
        ceiling=scoring_raw.get("ceiling", ESCALATION_CEILING),
    )

    output = OutputConfig(
        local_path=data.get("output", {}).get("local_path", "output"),
    )

    server_raw = data.get("server", {})
    server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=server_raw.get("port", 8000),
    )

    return MonitorConfig(
        sources=data.get("sources") or list(RSS_FEEDS.keys()),
        source_urls=data.get("source_urls") or {},
        relaxed_sources=data.get("relaxed_sources", sorted(RELAXED_SOURCES)),
        fetch=fetch,
        alerts=alerts,
        strikes=strikes,
        scoring=scoring,
        output=output,
        server=server,
    )

