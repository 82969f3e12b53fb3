"""
AlgoSearch API: drives the result pipeline (submit, filter toggle, sentinel intersection)
for the presentation layer and returns the view to render.
"""

from fastapi import FastAPI, HTTPException, Request

from algosearch.config import Settings
from algosearch.gateway import Fetcher, QueryGateway
from algosearch.log_config import configure_logging
from algosearch.pipeline.platforms import PLATFORMS, resolve_platform
from algosearch.pipeline.schemas import IntersectionReport, PlatformInfo, ResultsView, SearchRequest


def create_app(settings: Settings | None = None, fetcher: Fetcher | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="AlgoSearch", version="0.1.0")
    app.state.gateway = QueryGateway(settings, fetcher=fetcher)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/platforms", response_model=list[PlatformInfo])
    def platforms():
        return PLATFORMS

    @app.get("/api/session", response_model=ResultsView)
    async def current_session(request: Request):
        return request.app.state.gateway.view()

    @app.post("/api/session/search", response_model=ResultsView)
    async def search(body: SearchRequest, request: Request):
        """
        Submit a query. Responds once this submission's results are applied; if a newer
        query was submitted meanwhile, the newer session's view is returned instead.
        """
        return await request.app.state.gateway.submit(body.query)

    @app.post("/api/session/filters/{platform}/toggle", response_model=ResultsView)
    async def toggle_filter(platform: str, request: Request):
        resolved = resolve_platform(platform)
        if resolved is None:
            raise HTTPException(status_code=404, detail=f"Unknown platform: {platform}")
        return request.app.state.gateway.toggle_filter(resolved)

    @app.post("/api/session/sentinel", response_model=ResultsView)
    async def sentinel(body: IntersectionReport, request: Request):
        return request.app.state.gateway.sentinel_intersected(body)

    return app


app = create_app()
