"""
Repository Module - Generic persistence layer over Flask-SQLAlchemy

One Repository class serves every entity; it is instantiated per model with
that model's display ordering. Storage failures roll back the session and
surface as PersistenceError.
"""

from functools import wraps

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from models import (
    Profile, Article, Skill, Experience, Education, Activity, Value,
    Message, SocialLink
)
from .errors import NotFoundError, PersistenceError


def persistence_guard(f):
    """Convert storage failures into PersistenceError after rolling back"""
    @wraps(f)
    def decorated_function(self, *args, **kwargs):
        try:
            return f(self, *args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"✗ {self.label} {f.__name__} failed: {str(e)}")
            raise PersistenceError(f"Failed to {f.__name__} {self.label.lower()}") from e
    return decorated_function


class Repository:
    """list/get/create/update/delete for a single table"""

    def __init__(self, model, order_by=None, label=None):
        self.model = model
        self.order_by = order_by if order_by is not None else (model.id,)
        self.label = label or model.__name__

    def not_found(self):
        return NotFoundError(f"{self.label} not found")

    @persistence_guard
    def list(self):
        return db.session.scalars(db.select(self.model).order_by(*self.order_by)).all()

    @persistence_guard
    def get(self, item_id):
        item = db.session.get(self.model, item_id)
        if item is None:
            raise self.not_found()
        return item

    @persistence_guard
    def create(self, fields):
        item = self.model(**fields)
        db.session.add(item)
        db.session.commit()
        return item

    @persistence_guard
    def update(self, item_id, fields):
        item = db.session.get(self.model, item_id)
        if item is None:
            raise self.not_found()
        for key, value in fields.items():
            setattr(item, key, value)
        db.session.commit()
        return item

    @persistence_guard
    def delete(self, item_id):
        item = db.session.get(self.model, item_id)
        if item is None:
            raise self.not_found()
        db.session.delete(item)
        db.session.commit()
        return True

    @persistence_guard
    def count(self):
        return db.session.scalar(db.select(db.func.count()).select_from(self.model))


class ProfileRepository:
    """The profile is a singleton: read it, or create-or-update it"""

    label = 'Profile'

    def _current(self):
        return db.session.scalars(db.select(Profile).limit(1)).first()

    @persistence_guard
    def get(self):
        """The profile row, or None before it is first written"""
        return self._current()

    @persistence_guard
    def upsert(self, fields):
        profile = self._current()
        if profile is None:
            profile = Profile(slot=1, **fields)
            db.session.add(profile)
            try:
                db.session.commit()
                return profile
            except IntegrityError:
                # Another writer created the row first; update theirs instead
                db.session.rollback()
                profile = db.session.scalars(db.select(Profile).limit(1)).one()
        for key, value in fields.items():
            setattr(profile, key, value)
        db.session.commit()
        return profile

    @persistence_guard
    def count(self):
        return db.session.scalar(db.select(db.func.count()).select_from(Profile))


class MessageRepository(Repository):
    """Contact messages, with the visitor self-service paths"""

    def __init__(self):
        super().__init__(Message, order_by=(Message.created_at, Message.id), label='Message')

    @persistence_guard
    def list_by_email(self, email):
        query = db.select(Message).where(Message.email == email).order_by(*self.order_by)
        return db.session.scalars(query).all()

    @persistence_guard
    def mark_read(self, item_id):
        message = db.session.get(Message, item_id)
        if message is None:
            raise self.not_found()
        message.read = True
        db.session.commit()
        return message

    @persistence_guard
    def delete_by_sender(self, item_id, email):
        message = db.session.get(Message, item_id)
        # Exact, case-sensitive match on the address the message was sent from
        if message is None or message.email != email:
            raise NotFoundError('Message not found or unauthorized')
        db.session.delete(message)
        db.session.commit()
        return True


articles = Repository(Article, label='Article')
skills = Repository(Skill, order_by=(Skill.order, Skill.id), label='Skill')
experiences = Repository(Experience, order_by=(Experience.order, Experience.id), label='Experience')
education = Repository(Education, order_by=(Education.order, Education.id), label='Education')
activities = Repository(Activity, order_by=(Activity.order, Activity.id), label='Activity')
values = Repository(Value, order_by=(Value.order, Value.id), label='Value')
social_links = Repository(SocialLink, label='Social link')
profile = ProfileRepository()
messages = MessageRepository()


__all__ = [
    'Repository',
    'ProfileRepository',
    'MessageRepository',
    'articles',
    'skills',
    'experiences',
    'education',
    'activities',
    'values',
    'social_links',
    'profile',
    'messages',
]
