from fastapi import Request

from app.store import MemoryStore


# Dependency to get the store created at startup
def get_store(request: Request) -> MemoryStore:
    return request.app.state.store
