"""Content routes: comments, threads and reactions."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from knowspace.application.usecase.auth import GetCurrentUserUseCase
from knowspace.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from knowspace.application.usecase.reaction import (
    CreateReactionRequest,
    CreateReactionResponse,
    CreateReactionUseCase,
)
from knowspace.domain.value import ContentKind
from knowspace.interface.api.auth import authenticate

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str
    content_type: ContentKind | None = None
    article_id: str | None = None
    flashcard_id: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateReactionAPIRequest(BaseModel):
    """API request for leaving a reaction."""

    emoji: str
    article_id: str | None = None
    flashcard_id: str | None = None
    comment_id: str | None = None
    alert_id: str | None = None


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an article or flashcard, or reply to another comment.

    Replies are accepted down to level 4.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Created comment with its author
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            author_id=user.user_id,
            text=request.text,
            content_type=request.content_type,
            article_id=request.article_id,
            flashcard_id=request.flashcard_id,
            parent_id=request.parent_id,
        )
    )


@router.get("/articles/{article_id}/comments", response_model=GetThreadResponse)
async def get_article_comments(
    article_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the threaded comments of an article."""
    await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_thread_use_case.execute(
        GetThreadRequest(content_kind="article", content_id=article_id)
    )


@router.get("/flashcards/{flashcard_id}/comments", response_model=GetThreadResponse)
async def get_flashcard_comments(
    flashcard_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the threaded comments of a flashcard."""
    await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_thread_use_case.execute(
        GetThreadRequest(content_kind="flashcard", content_id=flashcard_id)
    )


@router.post(
    "/reactions",
    response_model=CreateReactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reaction(
    request: CreateReactionAPIRequest,
    create_reaction_use_case: FromDishka[CreateReactionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateReactionResponse:
    """React to an article, flashcard, comment or alert.

    Exactly one target ID must be given, and each user reacts at most once
    per target.
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await create_reaction_use_case.execute(
        CreateReactionRequest(
            user_id=user.user_id,
            emoji=request.emoji,
            article_id=request.article_id,
            flashcard_id=request.flashcard_id,
            comment_id=request.comment_id,
            alert_id=request.alert_id,
        )
    )
