from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TelegramUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    is_bot: bool = False
    first_name: str | None = None
    username: str | None = None
    language_code: str | None = None


class Chat(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    type: str | None = None


class PhotoSize(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_id: str
    width: int | None = None
    height: int | None = None


class FileAttachment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_id: str


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message_id: int
    chat: Chat
    date: int | datetime | None = None
    from_user: TelegramUser | None = Field(default=None, alias="from")
    text: str | None = None
    caption: str | None = None
    photo: list[PhotoSize] | None = None
    video: FileAttachment | None = None
    document: FileAttachment | None = None

    @property
    def has_media(self) -> bool:
        return bool(self.photo) or self.video is not None or self.document is not None

    @property
    def largest_photo_id(self) -> str | None:
        if not self.photo:
            return None
        return self.photo[-1].file_id


class CallbackQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    from_user: TelegramUser = Field(alias="from")
    message: Message | None = None
    data: str | None = None


class Update(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    update_id: int
    message: Message | None = None
    callback_query: CallbackQuery | None = None


__all__ = [
    "CallbackQuery",
    "Chat",
    "FileAttachment",
    "Message",
    "PhotoSize",
    "TelegramUser",
    "Update",
]
