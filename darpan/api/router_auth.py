"""
Auth endpoints — mocked SSO, dev-mode bypass, sign out.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from darpan.api.dependencies import AppState, get_state
from darpan.api.response_models import SessionUserResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=SessionUserResponse)
async def login(state: AppState = Depends(get_state)):
    """Mocked Microsoft SSO sign-in; succeeds after the configured delay."""
    user = await state.auth.login_sso()
    return SessionUserResponse(**user.to_dict())


@router.post("/login/dev", response_model=SessionUserResponse)
def login_dev(state: AppState = Depends(get_state)):
    """Skip Login (Dev Mode)."""
    user = state.auth.login_dev()
    return SessionUserResponse(**user.to_dict())


@router.post("/logout")
def logout(state: AppState = Depends(get_state)):
    state.auth.logout()
    return {"status": "signed_out"}


@router.get("/me", response_model=SessionUserResponse)
def whoami(state: AppState = Depends(get_state)):
    if state.auth.current_user is None:
        raise HTTPException(401, "Not signed in")
    return SessionUserResponse(**state.auth.current_user.to_dict())
