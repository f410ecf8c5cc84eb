"""FastAPI server exposing the stylist page and its JSON endpoints."""

from typing import Optional

from fastapi import FastAPI, Form
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import BaseModel, Field

from couture_app.app import CoutureMindApp
from couture_app.logging_config import configure_logging
from logic.lifecycle import StylistSession
from models.recommendation import Failed, Success
from server.views import render_page

configure_logging()


class CriteriaPayload(BaseModel):
    """JSON body for criteria updates; omitted fields are left as they are."""

    occasion: Optional[str] = Field(None, description="Occasion, catalog entry or free text")
    weather: Optional[str] = Field(None, description="Free-text weather description")
    mood: Optional[str] = Field(None, description="Mood or vibe")


class SessionSnapshot(BaseModel):
    """State of the page session as seen by API clients."""

    state: str
    criteria: dict
    can_generate: bool
    recommendation: Optional[dict] = None
    error: Optional[str] = None


def session_snapshot(session: StylistSession) -> SessionSnapshot:
    state = session.state
    return SessionSnapshot(
        state=state.kind,
        criteria={
            "occasion": session.criteria.occasion,
            "weather": session.criteria.weather,
            "mood": session.criteria.mood,
        },
        can_generate=session.can_generate,
        recommendation=state.recommendation.to_wire() if isinstance(state, Success) else None,
        error=state.message if isinstance(state, Failed) else None,
    )


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def create_app(concierge: CoutureMindApp | None = None) -> FastAPI:
    """Build the ASGI app around one stylist session."""

    concierge = concierge or CoutureMindApp()
    session = concierge.session
    app = FastAPI(title="CoutureMind", version="0.1.0")
    app.state.concierge = concierge

    def apply_form(occasion: str, custom_occasion: str, weather: str, mood: str) -> None:
        session.update_criteria(
            occasion=custom_occasion.strip() or occasion,
            weather=weather,
            mood=mood,
        )

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness check; reports whether a key is set, never the key."""

        return {
            "status": "ok",
            "service": "couturemind",
            "environment": concierge.config.environment or "local",
            "model": concierge.client.model,
            "api_key_configured": concierge.config.has_api_key,
        }

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(render_page(session))

    @app.post("/criteria")
    async def update_criteria(
        occasion: str = Form(""),
        custom_occasion: str = Form(""),
        weather: str = Form(""),
        mood: str = Form(""),
    ) -> RedirectResponse:
        apply_form(occasion, custom_occasion, weather, mood)
        return _redirect_home()

    @app.post("/generate")
    async def generate(
        occasion: str = Form(""),
        custom_occasion: str = Form(""),
        weather: str = Form(""),
        mood: str = Form(""),
    ) -> RedirectResponse:
        """Start a generation in the background; the page polls while loading."""

        apply_form(occasion, custom_occasion, weather, mood)
        session.submit()
        return _redirect_home()

    @app.post("/curation/new")
    async def start_new_curation() -> RedirectResponse:
        session.start_new_curation()
        return _redirect_home()

    @app.post("/reset")
    async def reset() -> RedirectResponse:
        session.reset()
        return _redirect_home()

    @app.get("/api/state", response_model=SessionSnapshot)
    async def get_state() -> SessionSnapshot:
        return session_snapshot(session)

    @app.post("/api/generate", response_model=SessionSnapshot)
    async def generate_json(payload: CriteriaPayload):
        """Update criteria and wait for the outcome.

        Returns 409 while a generation is running or a result is still shown,
        and 400 without an occasion; model failures are reported in the body
        with status 200.
        """

        session.update_criteria(occasion=payload.occasion, weather=payload.weather, mood=payload.mood)
        if not session.accepts_generate:
            return JSONResponse(status_code=409, content=session_snapshot(session).model_dump())
        if not session.criteria.is_ready():
            return JSONResponse(status_code=400, content=session_snapshot(session).model_dump())
        await session.generate()
        return session_snapshot(session)

    @app.post("/api/curation/new", response_model=SessionSnapshot)
    async def start_new_curation_json() -> SessionSnapshot:
        session.start_new_curation()
        return session_snapshot(session)

    @app.post("/api/reset", response_model=SessionSnapshot)
    async def reset_json() -> SessionSnapshot:
        session.reset()
        return session_snapshot(session)

    return app


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
