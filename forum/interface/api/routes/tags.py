"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from forum.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    prefix: str | None = Query(default=None, max_length=30),
) -> ListTagsResponse:
    """List tags used by questions, sorted by name.

    Args:
        prefix: Only tags starting with this prefix (autocomplete)
    """
    return await list_tags_use_case.execute(ListTagsRequest(prefix=prefix))
