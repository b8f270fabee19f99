"""Tests for adminkit.crud.repository module."""

import pytest

from adminkit.crud import InMemoryRepository
from tests.factories.crud import make_notice


@pytest.fixture
def repository():
    return InMemoryRepository()


class TestInMemoryRepository:
    """Tests for InMemoryRepository."""

    def test_insert_assigns_ids_and_timestamps(self, repository):
        first = repository.insert(make_notice(title="a"))
        second = repository.insert(make_notice(title="b"))
        assert (first.id, second.id) == (1, 2)
        assert first.created_at is not None
        assert first.updated_at is not None

    def test_insert_with_explicit_id(self, repository):
        repository.insert(make_notice(notice_id=10))
        assert repository.insert(make_notice()).id == 11

    def test_insert_duplicate_id_raises(self, repository):
        repository.insert(make_notice(notice_id=1))
        with pytest.raises(ValueError):
            repository.insert(make_notice(notice_id=1))

    def test_get_returns_copy(self, repository):
        notice = repository.insert(make_notice(title="original"))
        fetched = repository.get(notice.id)
        fetched.title = "changed"
        assert repository.get(notice.id).title == "original"

    def test_get_missing(self, repository):
        assert repository.get(1) is None

    def test_list_ordered_by_id(self, repository):
        repository.insert(make_notice(notice_id=5, title="five"))
        repository.insert(make_notice(notice_id=2, title="two"))
        assert [n.title for n in repository.list()] == ["two", "five"]

    def test_update(self, repository):
        notice = repository.insert(make_notice(title="draft"))
        created_at = notice.created_at
        notice.title = "final"
        assert repository.update(notice) is True
        stored = repository.get(notice.id)
        assert stored.title == "final"
        assert stored.created_at == created_at

    def test_update_missing_or_unsaved(self, repository):
        assert repository.update(make_notice()) is False
        assert repository.update(make_notice(notice_id=3)) is False

    def test_delete_and_count(self, repository):
        notice = repository.insert(make_notice())
        assert repository.count() == 1
        assert repository.delete(notice.id) is True
        assert repository.delete(notice.id) is False
        assert repository.count() == 0
