"""
User Controller
===============

FastAPI controller for user management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from storefront.api.v1.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_update_user_use_case,
    get_user_service,
)
from storefront.api.v1.errors import to_http_exception
from storefront.application.dto.product_dto import DeleteResponse
from storefront.application.dto.user_dto import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from storefront.application.services.user_service import UserService
from storefront.application.use_cases.user_use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from storefront.core.exceptions import StorefrontError

router = APIRouter(tags=["users"])


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Create a user. The email must not belong to any existing user.",
)
async def create_user(
    request: UserCreateRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    try:
        user = use_case.execute(request.to_entity())
    except StorefrontError as e:
        raise to_http_exception(e)
    return UserResponse.from_entity(user)


@router.get("/", response_model=List[UserResponse], summary="List users")
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    return [UserResponse.from_entity(u) for u in service.get_all()]


@router.get(
    "/search",
    response_model=List[UserResponse],
    summary="Search users by name",
    description="Case-sensitive substring match on the user name.",
)
async def search_users(
    name: str = Query(...),
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    return [UserResponse.from_entity(u) for u in service.search_by_name(name)]


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by ID")
async def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    try:
        user = use_case.execute(user_id)
    except StorefrontError as e:
        raise to_http_exception(e)
    return UserResponse.from_entity(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Overwrite name and/or email with the non-null values supplied.",
)
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    try:
        user = use_case.execute(user_id, name=request.name, email=request.email)
    except StorefrontError as e:
        raise to_http_exception(e)
    return UserResponse.from_entity(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Partially update a user",
    description="Apply only the fields sent. A new email must not belong to another user.",
)
async def patch_user(
    user_id: int,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = service.update_partial(user_id, request.model_dump(exclude_unset=True))
    except StorefrontError as e:
        raise to_http_exception(e)
    return UserResponse.from_entity(user)


@router.delete("/{user_id}", response_model=DeleteResponse, summary="Delete a user")
async def delete_user(
    user_id: int,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> DeleteResponse:
    return DeleteResponse(id=user_id, deleted=use_case.execute(user_id))
