"""Public post listing and admin UI post routes (session gated)."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.value import WriteGrant
from blog.interface.api.gates import session_gate
from blog.interface.api.schemas import CreateBlogAPIRequest, UpdateBlogAPIRequest

router = APIRouter(prefix="/api/blogs", tags=["blogs"], route_class=DishkaRoute)


@router.get("", response_model=list[PostResponse])
async def list_blogs(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List every post, newest first. Public."""
    try:
        result = await list_posts_use_case.execute(ListPostsRequest())
        return result.posts
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    body: CreateBlogAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    grant: WriteGrant = Depends(session_gate),
) -> PostResponse:
    """Create a post from the admin UI.

    Requires a logged-in admin session.

    Returns:
        The created post

    Raises:
        HTTPException: 401 without a session
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                grant=grant,
                title=body.title,
                category=body.category,
                content=body.content,
                featured=body.featured,
                image=body.image,
            )
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put("/{post_id}", response_model=Optional[PostResponse])
async def update_blog(
    post_id: str,
    body: UpdateBlogAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    grant: WriteGrant = Depends(session_gate),
) -> PostResponse | None:
    """Overwrite the supplied fields of a post from the admin UI.

    Excerpt and reading time are not recomputed.

    Returns:
        The updated post, or ``null`` if no post has this id
    """
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(grant=grant, post_id=post_id, changes=body.to_changes())
        )
    except NotFoundError:
        return None
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_blog(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    grant: WriteGrant = Depends(session_gate),
) -> DeletePostResponse:
    """Delete a post from the admin UI. Succeeds even if it does not exist."""
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
