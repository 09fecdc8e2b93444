"""
API routes for platform users (CRUD).
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.api.responses import list_or_no_content, unwrap
from app.schemas import User
from app.services import UserService

router = APIRouter(prefix="/user", tags=["Users"])


@router.get("/list", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)):
    """List all users; 204 when there are none."""
    return list_or_no_content(service.list())


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return unwrap(service.get(user_id))


@router.post("/add", response_model=User, status_code=201)
def add_user(user: User, service: UserService = Depends(get_user_service)):
    return unwrap(service.add(user))


@router.put("/{user_id}/update", response_model=User)
def edit_user(user_id: str, user: User, service: UserService = Depends(get_user_service)):
    return unwrap(service.edit(user_id, user))


@router.delete("/{user_id}/delete", response_model=User)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    return unwrap(service.delete(user_id))
