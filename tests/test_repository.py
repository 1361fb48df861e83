"""Tests for the generic repository and its profile/message specialisations"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from extensions import db
from models import Profile
from utils import repository
from utils.errors import NotFoundError, PersistenceError


SKILL = {'name': 'Go', 'category': 'Backend', 'percentage': 70, 'icon': '', 'order': 1}
MESSAGE = {'name': 'Ann', 'email': 'ann@example.com', 'subject': 'Hi', 'message': 'Hello'}
PROFILE = {'name': 'Jane', 'email': 'jane@example.com', 'bio': 'Developer'}


def test_list_is_empty_without_rows(app_ctx):
    assert repository.skills.list() == []
    assert repository.messages.list() == []


def test_create_then_get_returns_input_plus_id(app_ctx):
    created = repository.skills.create(dict(SKILL))
    assert isinstance(created.id, int)

    fetched = repository.skills.get(created.id).to_dict()
    assert fetched == {'id': created.id, **SKILL}


def test_create_applies_column_defaults(app_ctx):
    article = repository.articles.create({
        'title': 'T', 'content': 'C', 'excerpt': 'E', 'category': 'X'
    })
    data = article.to_dict()
    assert data['published'] is False
    assert data['createdAt'].endswith('+00:00')
    assert data['imageUrl'] is None


def test_get_unknown_id_raises_not_found(app_ctx):
    with pytest.raises(NotFoundError) as exc_info:
        repository.articles.get(12345)
    assert exc_info.value.message == 'Article not found'


def test_update_changes_only_supplied_fields(app_ctx):
    skill = repository.skills.create(dict(SKILL))
    updated = repository.skills.update(skill.id, {'percentage': 95})

    assert updated.to_dict() == {'id': skill.id, **SKILL, 'percentage': 95}


def test_update_unknown_id_raises_not_found(app_ctx):
    with pytest.raises(NotFoundError):
        repository.skills.update(999, {'percentage': 10})


def test_delete_is_reported_not_found_every_time_after(app_ctx):
    skill = repository.skills.create(dict(SKILL))
    assert repository.skills.delete(skill.id) is True

    with pytest.raises(NotFoundError):
        repository.skills.get(skill.id)
    with pytest.raises(NotFoundError):
        repository.skills.delete(skill.id)
    with pytest.raises(NotFoundError):
        repository.skills.delete(skill.id)


def test_list_orders_by_display_rank(app_ctx):
    repository.skills.create({**SKILL, 'name': 'C', 'order': 3})
    repository.skills.create({**SKILL, 'name': 'A', 'order': 1})
    repository.skills.create({**SKILL, 'name': 'B', 'order': 2})
    repository.skills.create({**SKILL, 'name': 'A2', 'order': 1})

    assert [s.name for s in repository.skills.list()] == ['A', 'A2', 'B', 'C']


def test_articles_are_listed_by_id(app_ctx):
    first = repository.articles.create({'title': 'one', 'content': 'c', 'excerpt': 'e', 'category': 'x'})
    second = repository.articles.create({'title': 'two', 'content': 'c', 'excerpt': 'e', 'category': 'x'})
    assert [a.id for a in repository.articles.list()] == [first.id, second.id]


def test_storage_failure_becomes_persistence_error(app_ctx, monkeypatch):
    def broken_commit():
        raise OperationalError('INSERT', {}, Exception('disk I/O error'))

    monkeypatch.setattr(db.session(), 'commit', broken_commit)
    with pytest.raises(PersistenceError) as exc_info:
        repository.skills.create(dict(SKILL))
    assert exc_info.value.status_code == 500

    monkeypatch.undo()
    assert repository.skills.list() == []


# Profile


def test_profile_is_none_before_first_write(app_ctx):
    assert repository.profile.get() is None


def test_profile_has_no_id_based_operations():
    for name in ('list', 'create', 'update', 'delete'):
        assert not hasattr(repository.profile, name)


def test_profile_upsert_creates_then_updates_single_row(app_ctx):
    created = repository.profile.upsert(dict(PROFILE))
    for age in range(5):
        updated = repository.profile.upsert({'age': age})

    assert updated.id == created.id
    assert repository.profile.count() == 1
    data = repository.profile.get().to_dict()
    assert data['age'] == 4
    assert data['name'] == 'Jane'
    assert data['bio'] == 'Developer'


def test_profile_table_rejects_a_second_row(app_ctx):
    repository.profile.upsert(dict(PROFILE))
    db.session.add(Profile(slot=1, **PROFILE))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()
    assert db.session.query(Profile).count() == 1


# Messages


def test_mark_read_is_monotonic(app_ctx):
    message = repository.messages.create(dict(MESSAGE))
    assert message.read is False

    repository.messages.mark_read(message.id)
    repository.messages.mark_read(message.id)
    assert repository.messages.get(message.id).read is True


def test_mark_read_unknown_message(app_ctx):
    with pytest.raises(NotFoundError):
        repository.messages.mark_read(404)


def test_list_by_email_is_exact_and_case_sensitive(app_ctx):
    repository.messages.create(dict(MESSAGE))
    repository.messages.create({**MESSAGE, 'subject': 'Again'})
    repository.messages.create({**MESSAGE, 'email': 'Ann@example.com'})

    found = repository.messages.list_by_email('ann@example.com')
    assert [m.subject for m in found] == ['Hi', 'Again']
    assert repository.messages.list_by_email('nobody@example.com') == []


def test_delete_by_sender_requires_exact_email(app_ctx):
    message = repository.messages.create(dict(MESSAGE))

    with pytest.raises(NotFoundError) as exc_info:
        repository.messages.delete_by_sender(message.id, 'ANN@example.com')
    assert exc_info.value.message == 'Message not found or unauthorized'
    assert repository.messages.get(message.id) is not None

    assert repository.messages.delete_by_sender(message.id, 'ann@example.com') is True
    with pytest.raises(NotFoundError):
        repository.messages.delete_by_sender(message.id, 'ann@example.com')


def test_repository_label_used_in_not_found(app_ctx):
    with pytest.raises(NotFoundError) as exc_info:
        repository.social_links.delete(1)
    assert exc_info.value.message == 'Social link not found'
