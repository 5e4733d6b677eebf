"""Owning item lookup shared by the comment use cases."""

from uuid import UUID

from devfeed.domain.error import NotFoundError
from devfeed.domain.service import PollService, PostService
from devfeed.domain.value import ItemKind, PollId, PostId


async def ensure_item_exists(
    item_kind: ItemKind,
    item_id: UUID,
    post_service: PostService,
    poll_service: PollService,
) -> None:
    """Raise NotFoundError unless the post or poll exists."""
    if item_kind == ItemKind.POST:
        if await post_service.get_post_by_id(PostId(item_id)) is None:
            raise NotFoundError("Post", str(item_id))
    elif await poll_service.get_poll_by_id(PollId(item_id)) is None:
        raise NotFoundError("Poll", str(item_id))
