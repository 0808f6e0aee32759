"""Board API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from tierboard.api.schemas import (
    BoardInfo,
    DeleteAllRequest,
    ErrorResponse,
    ItemInfo,
    ItemSetInfo,
    MoveItemRequest,
    MutationResponse,
    NotificationInfo,
    SelectItemSetRequest,
    TierInfo,
    UndoResponse,
    UploadRequest,
)
from tierboard.core.board import BoardError, BoardState
from tierboard.core.catalog.models import ItemSet
from tierboard.core.logging import get_logger
from tierboard.core.mutation import Notification
from tierboard.services.board_service import BoardService

logger = get_logger(__name__)

router = APIRouter(prefix="/board", tags=["board"])


def get_board_service(request: Request) -> BoardService:
    """BoardService instance (dependency injection)"""
    service: BoardService = request.app.state.board_service
    return service


def _build_item_set_info(item_set: ItemSet) -> ItemSetInfo:
    return ItemSetInfo(
        package_name=item_set.package_name,
        package_display_name=item_set.package_display_name,
        tag_name=item_set.tag_name,
        tag_title=item_set.tag_title,
        images=list(item_set.images),
    )


def _build_board_info(board: BoardState) -> BoardInfo:
    return BoardInfo(
        items=[
            ItemInfo(
                id=item.id,
                content=item.content,
                image_url=item.image_url,
                tags=list(item.tags),
            )
            for item in board.items
        ],
        tiers=[TierInfo(name=name, item_ids=board.tier(name)) for name in board.tier_names],
        unranked=board.unranked,
    )


def _build_mutation_response(
    service: BoardService, notification: Optional[Notification]
) -> MutationResponse:
    info = None
    if notification is not None:
        info = NotificationInfo(
            action_id=notification.action_id,
            title=notification.title,
            description=notification.description,
        )
    return MutationResponse(
        success=True,
        notification=info,
        board=_build_board_info(service.board),
    )


@router.get("", response_model=BoardInfo)
def get_board(service: BoardService = Depends(get_board_service)) -> BoardInfo:
    """Current items, tiers and unranked pool."""
    return _build_board_info(service.board)


@router.get("/item-sets", response_model=list[ItemSetInfo])
def list_item_sets(
    package: Optional[str] = None,
    service: BoardService = Depends(get_board_service),
) -> list[ItemSetInfo]:
    """
    Selectable ItemSets

    All packages in catalog order, or only one package when `package` is given.
    """
    if package is not None:
        sets = service.list_item_sets_by_package().get(package, [])
    else:
        sets = service.list_item_sets()
    return [_build_item_set_info(s) for s in sets]


@router.post("/item-sets/select", response_model=MutationResponse)
def select_item_set(
    request: SelectItemSetRequest,
    service: BoardService = Depends(get_board_service),
) -> MutationResponse:
    """Add the selected images of an ItemSet to the board."""
    notification = service.select_item_set(
        request.package_name, request.tag_name, request.images
    )
    return _build_mutation_response(service, notification)


@router.post("/upload", response_model=MutationResponse)
def upload_items(
    request: UploadRequest,
    service: BoardService = Depends(get_board_service),
) -> MutationResponse:
    """Add items built from uploaded images."""
    items = [
        service.build_upload_item(
            content=u.content, image_url=u.image_url, tags=u.tags, item_id=u.id
        )
        for u in request.items
    ]
    notification = service.trigger_upload(items)
    return _build_mutation_response(service, notification)


@router.post("/reset", response_model=MutationResponse)
def reset_rankings(
    service: BoardService = Depends(get_board_service),
) -> MutationResponse:
    """Move every item back to the unranked pool."""
    return _build_mutation_response(service, service.trigger_reset())


@router.post("/delete-all", response_model=MutationResponse)
def delete_all(
    request: DeleteAllRequest,
    service: BoardService = Depends(get_board_service),
) -> MutationResponse:
    """
    Remove every item

    Does nothing unless `confirmed` is true; the response then has no notification.
    """
    notification = service.trigger_delete_all(request.confirmed)
    return _build_mutation_response(service, notification)


@router.get("/notifications", response_model=list[NotificationInfo])
def list_notifications(
    service: BoardService = Depends(get_board_service),
) -> list[NotificationInfo]:
    return [
        NotificationInfo(action_id=n.action_id, title=n.title, description=n.description)
        for n in service.pending_notifications()
    ]


@router.post(
    "/undo/{action_id}",
    response_model=UndoResponse,
    responses={404: {"model": ErrorResponse}},
)
def undo(
    action_id: str,
    service: BoardService = Depends(get_board_service),
) -> UndoResponse:
    """Reverse one pending mutation."""
    if not service.undo(action_id):
        raise HTTPException(status_code=404, detail=f"No pending action: {action_id}")
    return UndoResponse(
        success=True, action_id=action_id, board=_build_board_info(service.board)
    )


@router.delete(
    "/notifications/{action_id}",
    responses={404: {"model": ErrorResponse}},
)
def dismiss(
    action_id: str,
    service: BoardService = Depends(get_board_service),
) -> dict[str, bool]:
    """Dismiss a notification; its undo is no longer available."""
    if not service.dismiss(action_id):
        raise HTTPException(status_code=404, detail=f"No pending action: {action_id}")
    return {"success": True}


@router.post(
    "/items/{item_id}/move",
    response_model=BoardInfo,
    responses={404: {"model": ErrorResponse}},
)
def move_item(
    item_id: str,
    request: MoveItemRequest,
    service: BoardService = Depends(get_board_service),
) -> BoardInfo:
    """Rank an item in a tier, or return it to the pool."""
    try:
        service.board.move_item(item_id, request.tier, request.position)
    except BoardError as e:
        logger.warning("Move failed: %s", e)
        raise HTTPException(status_code=404, detail=str(e))
    return _build_board_info(service.board)
