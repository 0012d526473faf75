"""
Admin endpoints: Role Management (users), Manage Surveys, System Settings (filter bars).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from darpan.admin import LastSurveyError
from darpan.data.schemas import ViewName
from darpan.api.dependencies import AppState, get_state
from darpan.api.response_models import (
    FilterToggleRequest, QuestionUpdateRequest, SurveyTitleRequest,
    UserCreateRequest, UserUpdateRequest,
)

router = APIRouter(prefix="/api", tags=["admin"])


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@router.get("/users")
def list_users(state: AppState = Depends(get_state)):
    return {"users": [u.to_dict() for u in state.users.list()]}


@router.post("/users", status_code=201)
def invite_user(req: UserCreateRequest, state: AppState = Depends(get_state)):
    try:
        user = state.users.add(req.name, req.email, req.role, req.zone, req.assigned_survey)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return user.to_dict()


@router.put("/users/{user_id}")
def edit_user(user_id: int, req: UserUpdateRequest, state: AppState = Depends(get_state)):
    changes = req.model_dump(exclude_none=True)
    try:
        user = state.users.update(user_id, **changes)
    except KeyError:
        raise HTTPException(404, f"User not found: {user_id}")
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return user.to_dict()


@router.delete("/users/{user_id}")
def remove_user(user_id: int, state: AppState = Depends(get_state)):
    try:
        state.users.remove(user_id)
    except KeyError:
        raise HTTPException(404, f"User not found: {user_id}")
    return {"status": "deleted", "id": user_id, "users": [u.to_dict() for u in state.users.list()]}


# ---------------------------------------------------------------------------
# Surveys
# ---------------------------------------------------------------------------

@router.get("/surveys")
def list_surveys(state: AppState = Depends(get_state)):
    return {"surveys": [s.to_dict() for s in state.surveys.list()]}


@router.post("/surveys", status_code=201)
def add_survey(state: AppState = Depends(get_state)):
    return state.surveys.add().to_dict()


@router.delete("/surveys/{survey_id}")
def delete_survey(survey_id: str, state: AppState = Depends(get_state)):
    try:
        remaining = state.surveys.delete(survey_id)
    except LastSurveyError as exc:
        raise HTTPException(409, str(exc))
    except KeyError:
        raise HTTPException(404, f"Survey not found: {survey_id}")
    return {"status": "deleted", "id": survey_id, "surveys": [s.to_dict() for s in remaining]}


@router.put("/surveys/{survey_id}/title")
def rename_survey(survey_id: str, req: SurveyTitleRequest, state: AppState = Depends(get_state)):
    try:
        return state.surveys.rename(survey_id, req.title).to_dict()
    except KeyError:
        raise HTTPException(404, f"Survey not found: {survey_id}")


@router.post("/surveys/{survey_id}/toggle-status")
def toggle_survey_status(survey_id: str, state: AppState = Depends(get_state)):
    try:
        return state.surveys.toggle_status(survey_id).to_dict()
    except KeyError:
        raise HTTPException(404, f"Survey not found: {survey_id}")


@router.post("/surveys/{survey_id}/questions", status_code=201)
def add_question(survey_id: str, state: AppState = Depends(get_state)):
    try:
        question = state.surveys.add_question(survey_id)
    except KeyError:
        raise HTTPException(404, f"Survey not found: {survey_id}")
    return {"id": question.id, "text": question.text, "type": question.type}


@router.put("/surveys/{survey_id}/questions/{question_id}")
def edit_question(
    survey_id: str,
    question_id: int,
    req: QuestionUpdateRequest,
    state: AppState = Depends(get_state),
):
    try:
        question = state.surveys.update_question(survey_id, question_id, req.field, req.value)
    except KeyError as exc:
        raise HTTPException(404, f"Not found: {exc.args[0]}")
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return {"id": question.id, "text": question.text, "type": question.type}


@router.delete("/surveys/{survey_id}/questions/{question_id}")
def delete_question(survey_id: str, question_id: int, state: AppState = Depends(get_state)):
    try:
        return state.surveys.delete_question(survey_id, question_id).to_dict()
    except KeyError as exc:
        raise HTTPException(404, f"Not found: {exc.args[0]}")


# ---------------------------------------------------------------------------
# Filter bar settings
# ---------------------------------------------------------------------------

@router.get("/settings/filters")
def get_filter_settings(state: AppState = Depends(get_state)):
    return state.filters.as_dict()


@router.post("/settings/filters/{view}/toggle")
def toggle_filter(view: ViewName, req: FilterToggleRequest, state: AppState = Depends(get_state)):
    try:
        columns = state.filters.toggle(view, req.column)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return {"view": view.value, "columns": columns}
