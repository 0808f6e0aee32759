"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class SelectItemSetRequest(BaseModel):
    """Add items from a catalog ItemSet"""

    package_name: str = Field(..., min_length=1, description="Package key")
    tag_name: str = Field(..., min_length=1, description="Tag key or 'all'")
    images: list[str] = Field(default_factory=list, description="Selected filenames")


class UploadItem(BaseModel):
    """One item built by the upload flow"""

    id: Optional[str] = Field(default=None, description="Generated when omitted")
    content: str
    image_url: str
    tags: list[str] = Field(default_factory=list)


class UploadRequest(BaseModel):
    items: list[UploadItem] = Field(default_factory=list)


class DeleteAllRequest(BaseModel):
    """Delete-all only runs when the user confirmed the prompt"""

    confirmed: bool = False


class MoveItemRequest(BaseModel):
    tier: Optional[str] = Field(default=None, description="None moves back to the pool")
    position: Optional[int] = Field(default=None, ge=0)


# === Response Schemas ===


class ItemSetInfo(BaseModel):
    package_name: str
    package_display_name: str
    tag_name: str
    tag_title: str
    images: list[str]


class ItemInfo(BaseModel):
    id: str
    content: str
    image_url: str
    tags: list[str] = []


class TierInfo(BaseModel):
    name: str
    item_ids: list[str] = []


class BoardInfo(BaseModel):
    items: list[ItemInfo] = []
    tiers: list[TierInfo] = []
    unranked: list[str] = []


class NotificationInfo(BaseModel):
    """Notification shown after an undoable mutation"""

    action_id: str
    title: str
    description: str


class MutationResponse(BaseModel):
    success: bool
    notification: Optional[NotificationInfo] = None
    board: BoardInfo


class UndoResponse(BaseModel):
    success: bool
    action_id: str
    board: BoardInfo


class ErrorResponse(BaseModel):
    """Error response"""

    success: bool = False
    error: str
    detail: Optional[str] = None
