"""Read-only endpoints over the latest pipeline snapshot."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from corpus.corpus import ALL_SOURCES, filter_by_source
from monitor.context import PipelineContext
from monitor.models import PipelineSnapshot
from monitor_api.models import (
    AlertLogResponse,
    AlertResponse,
    BriefingResponse,
    ClusterResponse,
    EscalationResponse,
    MapHighlightResponse,
    NewsItemResponse,
    NewsListResponse,
    StrikeResponse,
)

router = APIRouter()


def get_snapshot(request: Request) -> PipelineSnapshot:
    """Dependency to get the current pipeline snapshot."""
    context: PipelineContext = request.app.state.context
    return context.snapshot()


Snapshot = Annotated[PipelineSnapshot, Depends(get_snapshot)]


@router.get("/health", tags=["health"])
async def health(snapshot: Snapshot):
    return {
        "status": "ok",
        "fetched_at": snapshot.fetched_at,
        "items": len(snapshot.items),
    }


@router.get("/news", response_model=NewsListResponse, tags=["news"])
async def list_news(
    snapshot: Snapshot,
    source: Annotated[str, Query(description="Filter by source key, or 'all'")] = ALL_SOURCES,
    limit: Annotated[int, Query(ge=1, le=200, description="Max results")] = 50,
):
    """List the current corpus, newest first."""
    items = filter_by_source(snapshot.items, source)

    return NewsListResponse(
        items=[NewsItemResponse(**asdict(item)) for item in items[:limit]],
        total=len(items),
        fetched_at=snapshot.fetched_at,
        failed_sources=snapshot.failed_sources,
    )


@router.get("/escalation", response_model=EscalationResponse, tags=["analysis"])
async def get_escalation(snapshot: Snapshot):
    escalation = snapshot.escalation
    return EscalationResponse(
        score=escalation.score,
        tier=escalation.tier.value,
        raw_total=escalation.raw_total,
        items_scored=escalation.items_scored,
        matched=escalation.matched,
    )


@router.get("/clusters", response_model=list[ClusterResponse], tags=["analysis"])
async def list_clusters(snapshot: Snapshot):
    return [
        ClusterResponse(
            topic=cluster.topic,
            keywords=list(cluster.keywords),
            sources=cluster.sources,
            items=[NewsItemResponse(**asdict(item)) for item in cluster.items],
        )
        for cluster in snapshot.clusters
    ]


@router.get("/alerts", response_model=AlertLogResponse, tags=["alerts"])
async def list_alerts(snapshot: Snapshot):
    return AlertLogResponse(
        defense_status=snapshot.defense_status.value,
        active_places=snapshot.active_places,
        alerts=[
            AlertResponse(kind=event.kind.value, title=event.title, places=event.places, timestamp=event.timestamp)
            for event in snapshot.alerts
        ],
    )


@router.get("/strikes", response_model=list[StrikeResponse], tags=["alerts"])
async def list_strikes(snapshot: Snapshot):
    return [StrikeResponse(**asdict(record)) for record in snapshot.strikes]


@router.get("/briefing", response_model=BriefingResponse, tags=["analysis"])
async def get_briefing(snapshot: Snapshot):
    return BriefingResponse(sentences=snapshot.briefing)


@router.get("/map", response_model=list[MapHighlightResponse], tags=["alerts"])
async def list_map_highlights(request: Request):
    """Known places currently highlighted by alerts and strikes, newest first."""
    context: PipelineContext = request.app.state.context
    return [
        MapHighlightResponse(
            place=highlight.place,
            latitude=highlight.latitude,
            longitude=highlight.longitude,
            kind=highlight.kind.value,
            timestamp=highlight.timestamp,
        )
        for highlight in context.map_highlights.highlights()
    ]
