"""
api/app.py — FastAPI app factory

Each app owns its SessionStore; a middleware resolves the cookie to a
GradingSession and routes receive it through the `grading_session`
dependency.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import SESSION_CLEANUP_INTERVAL, SESSION_TTL
from api.routes import router
from api.session import SessionStore

SESSION_COOKIE = "grading_session"


def create_app(store: Optional[SessionStore] = None, start_cleanup: bool = True) -> FastAPI:
    app = FastAPI(title="CAT Grading Engine", docs_url=None, redoc_url=None)
    app.state.sessions = store if store is not None else SessionStore(ttl=SESSION_TTL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def attach_grading_session(request: Request, call_next):
        grading = app.state.sessions.open(request.cookies.get(SESSION_COOKIE))
        request.state.grading = grading

        response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=grading.session_id,
            httponly=True,
            samesite="lax",
            max_age=int(app.state.sessions.ttl),
        )
        return response

    app.include_router(router)

    @app.get("/")
    async def index():
        return {"service": "cat-grading", "sessions": len(app.state.sessions), "ok": True}

    if start_cleanup:
        app.state.sessions.start_cleanup(SESSION_CLEANUP_INTERVAL)

    return app
