"""Automation post routes (API-key gated).

Same store operations as the admin UI routes, with their own validation and
response shapes for automation clients.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.value import WriteGrant
from blog.interface.api.gates import api_key_gate
from blog.interface.api.schemas import AdminCreateBlogAPIRequest, UpdateBlogAPIRequest

router = APIRouter(
    prefix="/api/admin/blogs", tags=["admin"], route_class=DishkaRoute
)


class AdminCreateBlogAPIResponse(BaseModel):
    """Automation create result."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    blog_id: str = Field(serialization_alias="blogId")


class AdminUpdateBlogAPIResponse(BaseModel):
    """Automation update result."""

    success: bool


@router.post(
    "",
    response_model=AdminCreateBlogAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def admin_create_blog(
    body: AdminCreateBlogAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    grant: WriteGrant = Depends(api_key_gate),
) -> AdminCreateBlogAPIResponse:
    """Create a post from an automation client.

    Raises:
        HTTPException: 401/403 for a missing/wrong key, 400 without title or content
    """
    missing = body.missing_required()
    if missing:
        logfire.warn("Automation post rejected", missing=missing)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Title and content required",
        )

    try:
        post = await create_post_use_case.execute(
            CreatePostRequest(
                grant=grant,
                title=body.title,
                category=body.category,
                content=body.content,
                featured=body.featured,
                image=body.image,
            )
        )
        return AdminCreateBlogAPIResponse(success=True, blog_id=post.id)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put("/{post_id}", response_model=AdminUpdateBlogAPIResponse)
async def admin_update_blog(
    post_id: str,
    body: UpdateBlogAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    grant: WriteGrant = Depends(api_key_gate),
) -> AdminUpdateBlogAPIResponse:
    """Overwrite the supplied fields of a post from an automation client.

    Raises:
        HTTPException: 404 if no post has this id
    """
    try:
        await update_post_use_case.execute(
            UpdatePostRequest(grant=grant, post_id=post_id, changes=body.to_changes())
        )
        return AdminUpdateBlogAPIResponse(success=True)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Blog not found",
        )
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def admin_delete_blog(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    grant: WriteGrant = Depends(api_key_gate),
) -> DeletePostResponse:
    """Delete a post from an automation client. Succeeds even if it does not exist."""
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(grant=grant, post_id=post_id)
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )
