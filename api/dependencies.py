from __future__ import annotations

from fastapi import Request

from api.services.update_queue import UpdateQueue
from bot.runtime import Runtime


def get_runtime(request: Request) -> Runtime:
    return request.app.state.runtime


def get_update_queue(request: Request) -> UpdateQueue:
    return request.app.state.update_queue
