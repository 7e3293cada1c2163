"""
Layered API — User Routes
==========================

GET/POST /api/users, GET/PUT/DELETE /api/users/{id}.
"""

from layered_api.routes.crud import build_crud_router, users_controller
from layered_api.schemas.user import CreateUserRequest, UpdateUserRequest, UserResponse

router = build_crud_router(
    prefix="/api/users",
    tag="Users",
    controller_dependency=users_controller,
    create_model=CreateUserRequest,
    update_model=UpdateUserRequest,
    response_model=UserResponse,
)
