from fastapi import Request

from app.storage.base import Storage


# Dependency we will use in FastAPI routes
def get_storage(request: Request) -> Storage:
    return request.app.state.storage
