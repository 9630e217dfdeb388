"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import CommentRepository
from inkwell.domain.service import CommentService, ReplyLedger
from inkwell.domain.value import CommentId, PostId
from tests.conftest import make_author
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentService:
    """Tests for CommentService."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_without_replies(self, unit_env):
        """A new comment has no replies and version 0."""
        # Arrange
        service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())

        # Act
        comment = await service.create_comment(post_id, make_author(), "First!")

        # Assert
        assert comment.post_id == post_id
        assert comment.text == "First!"
        assert comment.replies == ()
        assert comment.version == 0

    @pytest.mark.asyncio
    async def test_get_comments_for_post_only_returns_that_post(self, unit_env):
        """Comments on other posts are not returned."""
        # Arrange
        service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        first = await service.create_comment(post_id, make_author(), "one")
        second = await service.create_comment(post_id, make_author(), "two")
        await service.create_comment(PostId(uuid4()), make_author(), "elsewhere")

        # Act
        comments = await service.get_comments_for_post(post_id)

        # Assert
        assert [c.id for c in comments] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_get_comments_for_post_without_comments(self, unit_env):
        """A post without comments yields an empty list."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act
        comments = await service.get_comments_for_post(PostId(uuid4()))

        # Assert
        assert comments == []

    @pytest.mark.asyncio
    async def test_get_missing_comment_raises(self, unit_env):
        """Unknown comment id raises NotFoundError."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_comment(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_update_text_keeps_replies(self, unit_env):
        """Editing the comment text leaves its replies alone."""
        # Arrange
        service = await unit_env.get(CommentService)
        ledger = await unit_env.get(ReplyLedger)
        comment = await service.create_comment(PostId(uuid4()), make_author(), "old")
        reply = await ledger.add_reply(comment.id, make_author(), "a reply")

        # Act
        updated = await service.update_text(comment.id, "new")

        # Assert
        assert updated.text == "new"
        assert updated.replies == (reply,)

    @pytest.mark.asyncio
    async def test_update_text_of_missing_comment_raises(self, unit_env):
        """Unknown comment id raises NotFoundError."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.update_text(CommentId(uuid4()), "new")

    @pytest.mark.asyncio
    async def test_delete_comment_removes_it_with_replies(self, unit_env):
        """Deleting a comment removes the whole document."""
        # Arrange
        service = await unit_env.get(CommentService)
        ledger = await unit_env.get(ReplyLedger)
        repo = await unit_env.get(CommentRepository)
        comment = await service.create_comment(PostId(uuid4()), make_author(), "bye")
        await ledger.add_reply(comment.id, make_author(), "reply")

        # Act
        await service.delete_comment(comment.id)

        # Assert
        assert await repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises(self, unit_env):
        """Deleting twice reports NotFoundError the second time."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(PostId(uuid4()), make_author(), "bye")
        await service.delete_comment(comment.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete_comment(comment.id)
