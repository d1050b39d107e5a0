"""Unit tests for MessageService."""

import pytest

from bookclub.domain.error import NotFoundError, PersistenceError, ValidationError
from bookclub.domain.model import Message
from bookclub.domain.repository import MessageRepository, UserRepository
from bookclub.domain.service import MessageService, RealtimeNotifier
from bookclub.domain.value import MessageId, Pagination, UserId
from bookclub.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryMessageRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from tests.conftest import BASE_TIME, at, make_user
from tests.di import RecordingNotifier
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_users(unit_env, *usernames):
    user_repo = await unit_env.get(UserRepository)
    return [
        await user_repo.save(make_user(name, user_id=str(i + 1)))
        for i, name in enumerate(usernames)
    ]


class CommitCheckingNotifier(RealtimeNotifier):
    """Records the commit count and whether the message is stored at each push."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db
        self.seen: list[tuple[int, bool]] = []

    def notify_user(self, user_id, event, payload) -> None:
        self.seen.append((self.db.commits, payload["id"] in self.db.messages))


class UntouchableUserRepository(InMemoryUserRepository):
    """User store whose activity writes affect no rows."""

    async def touch_last_active(self, user_id, at) -> bool:
        return False


def message(n: int, sender: str, receiver: str, is_read: bool = False) -> Message:
    return Message(
        id=MessageId(f"m{n}"),
        sender_id=UserId(sender),
        receiver_id=UserId(receiver),
        content=f"message {n}",
        timestamp=at(n),
        is_read=is_read,
    )


class TestSend:
    """Tests for send method."""

    @pytest.mark.asyncio
    async def test_send_stores_and_pushes(self, unit_env):
        """A sent message is stored unread and pushed to the receiver once."""
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        notifier = await unit_env.get(RecordingNotifier)
        alice, bob = await seed_users(unit_env, "alice", "bob")

        # Act
        view = await message_service.send(alice.id, bob.id, "Finished chapter 3")

        # Assert
        assert view.message.is_read is False
        assert view.sender.id == alice.id
        assert view.receiver.id == bob.id
        assert await message_repo.find_by_receiver(bob.id) == [view.message]

    @pytest.mark.asyncio
    async def test_message_is_committed_before_push(self, unit_env):
        """The receiver is only notified once the message is durable."""
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        alice, bob = await seed_users(unit_env, "alice", "bob")
        notifier = CommitCheckingNotifier(db)
        message_service = MessageService(
            message_repository=InMemoryMessageRepository(db),
            user_repository=InMemoryUserRepository(db),
            unit_of_work=InMemoryUnitOfWork(db),
            notifier=notifier,
        )

        # Act
        view = await message_service.send(alice.id, bob.id, "Chapter 4?")

        # Assert
        assert notifier.seen == [(1, True)]
        assert db.messages[view.message.id] == view.message

    @pytest.mark.asyncio
    async def test_failed_sender_touch_stores_nothing(self, unit_env):
        """When the sender's activity cannot be written, no message is kept."""
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        alice, bob = await seed_users(unit_env, "alice", "bob")
        notifier = RecordingNotifier()
        message_service = MessageService(
            message_repository=InMemoryMessageRepository(db),
            user_repository=UntouchableUserRepository(db),
            unit_of_work=InMemoryUnitOfWork(db),
            notifier=notifier,
        )

        # Act
        with pytest.raises(PersistenceError):
            await message_service.send(alice.id, bob.id, "Lost?")

        # Assert
        assert db.messages == {}
        assert db.commits == 0
        assert notifier.sent == []

        assert len(notifier.sent) == 1
        user_id, event, payload = notifier.sent[0]
        assert user_id == bob.id
        assert event == "ReceiveMessage"
        assert payload["id"] == view.message.id
        assert payload["content"] == "Finished chapter 3"
        assert payload["sender"]["username"] == "alice"

    @pytest.mark.asyncio
    async def test_send_touches_both_participants(self, unit_env):
        """Sender and receiver activity is refreshed."""
        message_service = await unit_env.get(MessageService)
        user_repo = await unit_env.get(UserRepository)
        alice, bob = await seed_users(unit_env, "alice", "bob")

        await message_service.send(alice.id, bob.id, "Hi")

        assert (await user_repo.find_by_id(alice.id)).last_active_at > BASE_TIME
        assert (await user_repo.find_by_id(bob.id)).last_active_at > BASE_TIME

    @pytest.mark.asyncio
    async def test_unknown_receiver_persists_nothing(self, unit_env):
        """Sending to a missing user fails without storing or pushing."""
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        notifier = await unit_env.get(RecordingNotifier)
        (alice,) = await seed_users(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await message_service.send(alice.id, UserId("ghost"), "Hello?")

        assert await message_repo.find_by_receiver(UserId("ghost")) == []
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_unknown_sender_raises_not_found(self, unit_env):
        message_service = await unit_env.get(MessageService)
        (bob,) = await seed_users(unit_env, "bob")

        with pytest.raises(NotFoundError):
            await message_service.send(UserId("ghost"), bob.id, "Boo")

    @pytest.mark.asyncio
    async def test_blank_content_raises_validation_error(self, unit_env):
        message_service = await unit_env.get(MessageService)
        alice, bob = await seed_users(unit_env, "alice", "bob")

        with pytest.raises(ValidationError):
            await message_service.send(alice.id, bob.id, "   ")

    @pytest.mark.asyncio
    async def test_failing_notifier_does_not_fail_send(self, unit_env):
        """An unreachable transport never fails the send."""
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        notifier = await unit_env.get(RecordingNotifier)
        notifier.fail = True
        alice, bob = await seed_users(unit_env, "alice", "bob")

        view = await message_service.send(alice.id, bob.id, "Still delivered")

        assert await message_repo.find_by_receiver(bob.id) == [view.message]


class TestGetConversation:
    """Tests for get_conversation method."""

    @pytest.mark.asyncio
    async def test_pages_back_from_newest_and_reads_ascending(self, unit_env):
        """Each page is a newest-first block, reversed to read top to bottom."""
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob", "carol")
        for n in range(1, 6):
            sender, receiver = ("1", "2") if n % 2 else ("2", "1")
            await message_repo.add(message(n, sender, receiver))
        await message_repo.add(message(6, "3", "1"))

        # Act
        first = await message_service.get_conversation(
            UserId("1"), UserId("2"), Pagination(page=1, limit=2)
        )
        second = await message_service.get_conversation(
            UserId("1"), UserId("2"), Pagination(page=2, limit=2)
        )
        third = await message_service.get_conversation(
            UserId("2"), UserId("1"), Pagination(page=3, limit=2)
        )

        # Assert
        assert [m.id for m in first] == ["m4", "m5"]
        assert [m.id for m in second] == ["m2", "m3"]
        assert [m.id for m in third] == ["m1"]


class TestGetUserMessages:
    """Tests for get_user_messages method."""

    @pytest.mark.asyncio
    async def test_returns_received_messages_with_participants(self, unit_env):
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob")
        await message_repo.add(message(1, "2", "1"))
        await message_repo.add(message(2, "1", "2"))
        await message_repo.add(message(3, "2", "1", is_read=True))

        views = await message_service.get_user_messages(UserId("1"))

        assert [v.message.id for v in views] == ["m1", "m3"]
        assert all(v.sender.username.root == "bob" for v in views)
        assert all(v.receiver.username.root == "alice" for v in views)


class TestGetRecentChats:
    """Tests for get_recent_chats method."""

    @pytest.mark.asyncio
    async def test_single_counterpart(self, unit_env):
        """One counterpart yields exactly one entry."""
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob")
        await message_repo.add(message(1, "1", "2"))
        await message_repo.add(message(2, "2", "1"))

        chats = await message_service.get_recent_chats(UserId("1"))

        assert len(chats) == 1
        assert chats[0].user.id == "2"
        assert chats[0].unread_count == 1
        assert chats[0].last_message_at == at(2)

    @pytest.mark.asyncio
    async def test_ordered_by_latest_message(self, unit_env):
        """The most recent conversation comes first, with per-chat unread counts."""
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob", "carol")
        await message_repo.add(message(1, "3", "1"))
        await message_repo.add(message(2, "3", "1"))
        await message_repo.add(message(3, "2", "1", is_read=True))
        await message_repo.add(message(4, "1", "3"))
        await message_repo.add(message(5, "1", "2"))

        chats = await message_service.get_recent_chats(UserId("1"))

        assert [c.user.id for c in chats] == ["2", "3"]
        assert [c.unread_count for c in chats] == [0, 2]

    @pytest.mark.asyncio
    async def test_no_messages_no_chats(self, unit_env):
        message_service = await unit_env.get(MessageService)
        await seed_users(unit_env, "alice")

        assert await message_service.get_recent_chats(UserId("1")) == []


class TestReadMessages:
    """Tests for read_messages and get_notification_count."""

    @pytest.mark.asyncio
    async def test_read_clears_notification_count(self, unit_env):
        """Five unread from 2 to 1 count as five until read."""
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob")
        for n in range(1, 6):
            await message_repo.add(message(n, "2", "1"))

        # Act / Assert
        assert await message_service.get_notification_count(UserId("1")) == 5
        assert await message_service.read_messages(UserId("2"), UserId("1")) == 5
        assert await message_service.get_notification_count(UserId("1")) == 0

    @pytest.mark.asyncio
    async def test_read_is_idempotent(self, unit_env):
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob")
        await message_repo.add(message(1, "2", "1"))

        assert await message_service.read_messages(UserId("2"), UserId("1")) == 1
        assert await message_service.read_messages(UserId("2"), UserId("1")) == 0

    @pytest.mark.asyncio
    async def test_read_only_flips_matching_direction(self, unit_env):
        """Messages the receiver sent, or from other senders, stay untouched."""
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob", "carol")
        await message_repo.add(message(1, "2", "1"))
        await message_repo.add(message(2, "1", "2"))
        await message_repo.add(message(3, "3", "1"))

        marked = await message_service.read_messages(UserId("2"), UserId("1"))

        assert marked == 1
        assert await message_service.get_notification_count(UserId("1")) == 1
        assert await message_service.get_notification_count(UserId("2")) == 1

    @pytest.mark.asyncio
    async def test_read_touches_receiver_only_when_something_changed(self, unit_env):
        message_service = await unit_env.get(MessageService)
        user_repo = await unit_env.get(UserRepository)
        message_repo = await unit_env.get(MessageRepository)
        await seed_users(unit_env, "alice", "bob")

        await message_service.read_messages(UserId("2"), UserId("1"))
        assert (await user_repo.find_by_id(UserId("1"))).last_active_at == BASE_TIME

        await message_repo.add(message(1, "2", "1"))
        await message_service.read_messages(UserId("2"), UserId("1"))
        assert (await user_repo.find_by_id(UserId("1"))).last_active_at > BASE_TIME
