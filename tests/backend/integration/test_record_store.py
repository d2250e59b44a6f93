"""
Tests for the generic RecordStore contract, exercised through the Post and User models.
"""
import pytest
from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from miniblog.core.errors import NotFound
from miniblog.models.post import Post
from miniblog.models.user import User
from miniblog.repositories.base import RecordStore


pytestmark = pytest.mark.asyncio


async def _post(store: RecordStore[Post], owner: User, title: str) -> Post:
    return await store.add(Post(title=title, content="Some long enough content", user_id=owner.id))


async def test_add_assigns_id_and_get_by_id(db, create_user):
    owner, _ = await create_user()
    store = RecordStore(Post)

    post = await _post(store, owner, "First post")
    assert post.id is not None

    fetched = await store.get_by_id(post.id)
    assert fetched is not None
    assert fetched.title == "First post"
    assert fetched.user_id == owner.id


async def test_get_by_id_absent_returns_none(db):
    assert await RecordStore(Post).get_by_id(999) is None


async def test_get_all_count_and_exists(db, create_user):
    owner, _ = await create_user()
    store = RecordStore(Post)
    a = await _post(store, owner, "Alpha")
    b = await _post(store, owner, "Beta")

    assert [p.id for p in await store.get_all()] == [a.id, b.id]
    assert await store.count() == 2
    assert await store.exists(a.id) is True
    assert await store.exists(12345) is False


async def test_find_with_keywords_and_q(db, create_user):
    owner, _ = await create_user()
    other, _ = await create_user()
    store = RecordStore(Post)
    await _post(store, owner, "Python tips")
    await _post(store, other, "Rust tips")
    await _post(store, other, "Gardening")

    mine = await store.find(user_id=owner.id)
    assert [p.title for p in mine] == ["Python tips"]

    tips = await store.find(Q(title__icontains="tips"))
    assert {p.title for p in tips} == {"Python tips", "Rust tips"}


async def test_read_records_are_detached(db, create_user):
    """Changing a returned record must not reach the database without update()."""
    owner, _ = await create_user()
    store = RecordStore(Post)
    post = await _post(store, owner, "Original")

    fetched = await store.get_by_id(post.id)
    fetched.title = "Changed locally"

    again = await store.get_by_id(post.id)
    assert again.title == "Original"


async def test_update_replaces_record(db, create_user):
    owner, _ = await create_user()
    store = RecordStore(Post)
    post = await _post(store, owner, "Original")

    post.title = "Updated"
    post.content = "Completely new content"
    await store.update(post)

    fetched = await store.get_by_id(post.id)
    assert fetched.title == "Updated"
    assert fetched.content == "Completely new content"


async def test_update_missing_record_raises_not_found(db, create_user):
    owner, _ = await create_user()
    store = RecordStore(Post)
    post = await _post(store, owner, "Soon gone")
    await store.delete(post)

    post.title = "Ghost"
    with pytest.raises(NotFound) as exc_info:
        await store.update(post)
    assert exc_info.value.resource == "Post"
    assert exc_info.value.key == post.id
    assert await store.count() == 0


async def test_update_without_id_is_rejected(db, create_user):
    owner, _ = await create_user()
    with pytest.raises(ValueError):
        await RecordStore(Post).update(Post(title="New", content="Never saved before", user_id=owner.id))


async def test_delete_by_id_and_missing_id_is_noop(db, create_user):
    owner, _ = await create_user()
    store = RecordStore(Post)
    post = await _post(store, owner, "Delete me")

    await store.delete_by_id(post.id)
    assert await store.exists(post.id) is False

    await store.delete_by_id(post.id)  # no-op
    assert await store.count() == 0


async def test_unique_violation_rolls_back(db, create_user):
    user, _ = await create_user(username="taken")
    store = RecordStore(User)
    with pytest.raises(IntegrityError):
        await store.add(User(
            username="taken",
            email="other@example.com",
            display_name="Other",
            password_hash="x",
        ))
    assert await store.count() == 1
