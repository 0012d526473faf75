"""
Market Darpan — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from darpan.api.dependencies import AppState, set_state
from darpan.api.router_meta import router as meta_router
from darpan.api.router_upload import router as upload_router
from darpan.api.router_dashboard import router as dashboard_router
from darpan.api.router_audits import router as audits_router
from darpan.api.router_admin import router as admin_router
from darpan.api.router_auth import router as auth_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the session state and seed the dataset at startup."""
    from darpan.config import EXPORTS_FOLDER, SEED_SAMPLE_DATA
    EXPORTS_FOLDER.mkdir(parents=True, exist_ok=True)
    print(f"  EXPORTS_FOLDER = {EXPORTS_FOLDER}")

    state = AppState()
    state.store.load(seed=SEED_SAMPLE_DATA)
    set_state(state)

    print(f"\nMarket Darpan ready — {state.store.row_count():,} audits, "
          f"{len(state.users.list())} users, {len(state.surveys.list())} surveys\n")
    yield
    set_state(None)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Market Darpan API",
        description="Market audit admin panel — CSV import, filters, chart widgets, users, surveys",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(upload_router)
    app.include_router(dashboard_router)
    app.include_router(audits_router)
    app.include_router(admin_router)
    app.include_router(auth_router)

    return app


app = create_app()
