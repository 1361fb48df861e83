from datetime import datetime, timezone

from extensions import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SerializerMixin:
    """Render a row as the camelCase JSON the frontend expects."""

    # (attribute, json key) pairs, in output order
    __json_fields__ = ()

    def to_dict(self):
        data = {}
        for attr, key in self.__json_fields__:
            value = getattr(self, attr)
            if isinstance(value, datetime):
                # Stored naive, always UTC
                if value.tzinfo is None:
                    value = value.replace(tzinfo=timezone.utc)
                value = value.isoformat()
            data[key] = value
        return data

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id}>"


class Profile(SerializerMixin, db.Model):
    __tablename__ = 'profile'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    # Always 1; the unique constraint keeps the table to a single row
    slot = db.Column(db.Integer, nullable=False, unique=True, default=1)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50))
    location = db.Column(db.String(255))
    age = db.Column(db.Integer)
    position = db.Column(db.String(255))
    tagline = db.Column(db.String(500))
    bio = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(500))

    __json_fields__ = (
        ('id', 'id'), ('name', 'name'), ('email', 'email'), ('phone', 'phone'),
        ('location', 'location'), ('age', 'age'), ('position', 'position'),
        ('tagline', 'tagline'), ('bio', 'bio'), ('image_url', 'imageUrl'),
    )


class Article(SerializerMixin, db.Model):
    __tablename__ = 'articles'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    image_url = db.Column(db.String(500))
    published = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    __json_fields__ = (
        ('id', 'id'), ('title', 'title'), ('content', 'content'), ('excerpt', 'excerpt'),
        ('category', 'category'), ('image_url', 'imageUrl'), ('published', 'published'),
        ('created_at', 'createdAt'),
    )


class Skill(SerializerMixin, db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    percentage = db.Column(db.Integer, nullable=False)
    icon = db.Column(db.String(100))
    order = db.Column(db.Integer, default=0)

    __json_fields__ = (
        ('id', 'id'), ('name', 'name'), ('category', 'category'),
        ('percentage', 'percentage'), ('icon', 'icon'), ('order', 'order'),
    )


class Experience(SerializerMixin, db.Model):
    __tablename__ = 'experiences'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    start_date = db.Column(db.String(50), nullable=False)
    end_date = db.Column(db.String(50))
    current = db.Column(db.Boolean, default=False)
    order = db.Column(db.Integer, default=0)

    __json_fields__ = (
        ('id', 'id'), ('title', 'title'), ('company', 'company'),
        ('description', 'description'), ('start_date', 'startDate'),
        ('end_date', 'endDate'), ('current', 'current'), ('order', 'order'),
    )


class Education(SerializerMixin, db.Model):
    __tablename__ = 'education'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    degree = db.Column(db.String(255), nullable=False)
    institution = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    start_date = db.Column(db.String(50), nullable=False)
    end_date = db.Column(db.String(50), nullable=False)
    order = db.Column(db.Integer, default=0)

    __json_fields__ = (
        ('id', 'id'), ('degree', 'degree'), ('institution', 'institution'),
        ('description', 'description'), ('start_date', 'startDate'),
        ('end_date', 'endDate'), ('order', 'order'),
    )


class Activity(SerializerMixin, db.Model):
    __tablename__ = 'activities'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    order = db.Column(db.Integer, default=0)

    __json_fields__ = (
        ('id', 'id'), ('title', 'title'), ('description', 'description'),
        ('icon', 'icon'), ('order', 'order'),
    )


class Value(SerializerMixin, db.Model):
    __tablename__ = 'values'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    order = db.Column(db.Integer, default=0)

    __json_fields__ = (
        ('id', 'id'), ('title', 'title'), ('description', 'description'),
        ('icon', 'icon'), ('order', 'order'),
    )


class Message(SerializerMixin, db.Model):
    __tablename__ = 'messages'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, index=True)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    read = db.Column(db.Boolean, default=False, nullable=False)

    __json_fields__ = (
        ('id', 'id'), ('name', 'name'), ('email', 'email'), ('subject', 'subject'),
        ('message', 'message'), ('created_at', 'createdAt'), ('read', 'read'),
    )


class SocialLink(SerializerMixin, db.Model):
    __tablename__ = 'social_links'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(255), nullable=False)

    __json_fields__ = (
        ('id', 'id'), ('name', 'name'), ('icon', 'icon'), ('url', 'url'),
    )
