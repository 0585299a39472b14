"""Response models for the monitor API."""

from datetime import datetime

from pydantic import BaseModel, Field


class NewsItemResponse(BaseModel):
    id: str
    source: str
    source_name: str
    title: str
    link: str
    published_at: datetime
    excerpt: str


class NewsListResponse(BaseModel):
    """Items of the current corpus, newest first."""

    items: list[NewsItemResponse]
    total: int
    fetched_at: datetime | None = None
    failed_sources: list[str] = Field(default_factory=list)


class EscalationResponse(BaseModel):
    score: int
    tier: str
    raw_total: int
    items_scored: int
    matched: dict[str, int] = Field(default_factory=dict)


class ClusterResponse(BaseModel):
    topic: str
    keywords: list[str]
    sources: list[str]
    items: list[NewsItemResponse]


class AlertResponse(BaseModel):
    kind: str
    title: str
    places: list[str]
    timestamp: datetime


class AlertLogResponse(BaseModel):
    defense_status: str
    active_places: list[str]
    alerts: list[AlertResponse]


class StrikeResponse(BaseModel):
    city: str
    latitude: float
    longitude: float
    title: str
    source: str
    detected_at: datetime
    item_id: str


class BriefingResponse(BaseModel):
    sentences: list[str]


class MapHighlightResponse(BaseModel):
    place: str
    latitude: float
    longitude: float
    kind: str
    timestamp: datetime
