from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DATETIME_FORMAT


@dataclass
class Video:
    """Thực thể miền (domain): Video trong bộ sưu tập.

    Mutable on purpose: the favorite flag and soft delete are toggled in place.
    """

    id: str
    video_id: str
    title: str
    description: str
    channel_name: str
    channel_icon_url: str
    channel_url: str
    favorite: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    def favorite_video(self) -> None:
        self.favorite = True

    def unfavorite(self) -> None:
        self.favorite = False

    def soft_delete(self, at: datetime) -> None:
        self.deleted_at = at

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def __str__(self) -> str:
        deleted_at = "<empty>" if self.deleted_at is None else self.deleted_at.strftime(DATETIME_FORMAT)
        return (
            f"ID : {self.id}\tVideoID : {self.video_id}\tTitle : {self.title}\t"
            f"Description : {self.description}\tChannelName : {self.channel_name}\t"
            f"ChannelIconURL : {self.channel_icon_url}\tChannelURL : {self.channel_url}\t"
            f"Fab : {str(self.favorite).lower()}\t"
            f"CreatedAt : {self.created_at.strftime(DATETIME_FORMAT)}\t"
            f"UpdatedAt : {self.updated_at.strftime(DATETIME_FORMAT)}\tDeletedAt : {deleted_at}"
        )


def new_video(
    *,
    id: str,
    video_id: str,
    title: str,
    description: str,
    channel_name: str,
    channel_icon_url: str,
    channel_url: str,
    favorite: bool,
    created_at: datetime,
    updated_at: datetime,
) -> Video:
    return Video(
        id=id,
        video_id=video_id,
        title=title,
        description=description,
        channel_name=channel_name,
        channel_icon_url=channel_icon_url,
        channel_url=channel_url,
        favorite=favorite,
        created_at=created_at,
        updated_at=updated_at,
        deleted_at=None,
    )
