from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .deps import AppState, get_state
from .errors import GatewayError
from .models import (
    ActivitiesResponse,
    Activity,
    ActivityRequest,
    DeleteActivityResponse,
    EditActivityRequest,
)

router = APIRouter()
health_router = APIRouter()

@health_router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"

@router.get("/activities")
async def get_activities(state: AppState = Depends(get_state)) -> ActivitiesResponse:
    try:
        return await state.client.get_activities()
    except GatewayError as e:
        state.log.error(f"Get Activities Error: {e.detail}")
        raise

@router.post("/activities")
async def create_activity(
    activity: ActivityRequest,
    state: AppState = Depends(get_state),
) -> Activity:
    state.log.info(f"creating activity {activity!r}")
    try:
        return await state.client.create_activity(activity)
    except GatewayError as e:
        state.log.error(f"Create Activity Error: {e.detail}")
        raise

@router.get("/activities/{activity_id}")
async def get_activity(activity_id: str, state: AppState = Depends(get_state)) -> Activity:
    try:
        return await state.client.get_activity(activity_id)
    except GatewayError as e:
        state.log.error(f"Get Activity Error: {e.detail}")
        raise

@router.patch("/activities/{activity_id}")
async def edit_activity(
    activity_id: str,
    activity: EditActivityRequest,
    state: AppState = Depends(get_state),
) -> Activity:
    state.log.info(f"editing activity {activity_id}: {activity!r}")
    try:
        return await state.client.edit_activity(activity_id, activity)
    except GatewayError as e:
        state.log.error(f"Edit Activity Error: {e.detail}")
        raise

@router.delete("/activities/{activity_id}")
async def delete_activity(activity_id: str, state: AppState = Depends(get_state)) -> DeleteActivityResponse:
    state.log.info(f"deleting activity {activity_id}")
    try:
        return await state.client.delete_activity(activity_id)
    except GatewayError as e:
        state.log.error(f"Delete Activity Error: {e.detail}")
        raise
