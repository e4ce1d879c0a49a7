"""
API Routes for the Trip Planner.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import Optional

from ..models.trip import InvalidFieldError, NotEditingError, TripIndexError
from ..services.trip_controller import TripStoreController, get_trip_controller


router = APIRouter(prefix="/api", tags=["trip-planner"])


# Request/Response Models
class DraftUpdateRequest(BaseModel):
    field_updates: dict[str, Optional[str]]


class ListItemRequest(BaseModel):
    value: Optional[str] = None


class TripStateResponse(BaseModel):
    mode: str
    editing_index: Optional[int] = None
    last_error: Optional[str] = None
    draft: dict
    trips: list[dict]


class ListItemResponse(BaseModel):
    changed: int
    state: TripStateResponse


def _state(controller: TripStoreController) -> TripStateResponse:
    return TripStateResponse(**controller.snapshot())


# Endpoints
# Handlers stay async so they run one at a time on the event loop; the shared controller is not thread-safe

@router.get("/trips", response_model=TripStateResponse)
async def get_trips(controller: TripStoreController = Depends(get_trip_controller)):
    """Get the trip list together with the draft form."""
    return _state(controller)


@router.put("/draft", response_model=TripStateResponse)
async def update_draft(
    request: DraftUpdateRequest,
    controller: TripStoreController = Depends(get_trip_controller)
):
    """Update scalar fields of the draft (startDate, endDate, destination)."""
    try:
        for field_name, value in request.field_updates.items():
            controller.update_draft_field(field_name, value)
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _state(controller)


@router.post("/draft/{list_name}", response_model=ListItemResponse)
async def add_list_item(
    list_name: str,
    request: ListItemRequest,
    controller: TripStoreController = Depends(get_trip_controller)
):
    """Add an activity, expense or companion to the draft."""
    try:
        added = controller.add_list_item(list_name, request.value)
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ListItemResponse(changed=int(added), state=_state(controller))


@router.delete("/draft/{list_name}", response_model=ListItemResponse)
async def remove_list_item(
    list_name: str,
    value: str,
    controller: TripStoreController = Depends(get_trip_controller)
):
    """Remove every matching item from one of the draft's lists."""
    try:
        removed = controller.remove_list_item(list_name, value)
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ListItemResponse(changed=removed, state=_state(controller))


@router.post("/trips", response_model=TripStateResponse)
async def add_trip(controller: TripStoreController = Depends(get_trip_controller)):
    """Commit the draft as a new trip."""
    if not controller.add_trip():
        raise HTTPException(status_code=422, detail=controller.last_error)
    return _state(controller)


# Declared before the "/trips/{index}" routes so "edit" is not read as an index
@router.put("/trips/edit", response_model=TripStateResponse)
async def save_edit(controller: TripStoreController = Depends(get_trip_controller)):
    """Save the draft over the trip being edited."""
    try:
        saved = controller.save_edit()
    except NotEditingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not saved:
        raise HTTPException(status_code=422, detail=controller.last_error)
    return _state(controller)


@router.delete("/trips/edit", response_model=TripStateResponse)
async def cancel_edit(controller: TripStoreController = Depends(get_trip_controller)):
    """Leave edit mode and clear the draft."""
    controller.cancel_edit()
    return _state(controller)


@router.post("/trips/{index}/edit", response_model=TripStateResponse)
async def begin_edit(
    index: int,
    controller: TripStoreController = Depends(get_trip_controller)
):
    """Load a trip into the draft for editing."""
    try:
        controller.begin_edit(index)
    except TripIndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _state(controller)


@router.delete("/trips/{index}", response_model=TripStateResponse)
async def delete_trip(
    index: int,
    controller: TripStoreController = Depends(get_trip_controller)
):
    """Delete a trip."""
    try:
        controller.delete_trip(index)
    except TripIndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _state(controller)
