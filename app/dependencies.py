from fastapi import Request
from app.database import SheetStore


def get_store(request: Request) -> SheetStore:
    return request.app.state.store
