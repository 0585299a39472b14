"""FastAPI application exposing the pipeline output."""

from fastapi import FastAPI

from monitor.context import PipelineContext
from monitor_api.routers import router


def create_app(context: PipelineContext) -> FastAPI:
    app = FastAPI(
        title="Conflict Monitor API",
        description="Read-only view of the news corpus, escalation score, clusters, alerts and strikes",
        version="1.0.0",
    )
    app.state.context = context
    app.include_router(router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "Conflict Monitor API",
            "version": "1.0.0",
            "docs": "/docs",
        }

    return app


def serve(context: PipelineContext) -> None:
    """Run the API server (blocking)."""
    import uvicorn

    server = context.config.server
    uvicorn.run(create_app(context), host=server.host, port=server.port)
