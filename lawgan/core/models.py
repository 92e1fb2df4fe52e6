"""
Table definitions for the direct database backend.

The hosted REST backend talks to the same schema, created on its side.
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func

from .config import Config

db = SQLAlchemy()


class Admin(db.Model):
    __tablename__ = Config.ADMINS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False, unique=True, index=True)
    password_hash = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
    last_login = db.Column(db.DateTime(timezone=True))


class Article(db.Model):
    __tablename__ = Config.ARTICLES_TABLE

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, nullable=False, unique=True, index=True)
    summary = db.Column(db.Text)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False, index=True)
    is_breaking = db.Column(db.Boolean, nullable=False, default=False)
    published = db.Column(db.Boolean, nullable=False, default=True)
    author = db.Column(db.Text)
    # Column name kept from the original schema; it holds binary, not a URL
    image_url = db.Column(db.LargeBinary)
    image_mime = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())


class EditorialBoard(db.Model):
    __tablename__ = Config.EDITORIAL_BOARDS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    position = db.Column(db.Text)
    bio = db.Column(db.Text)
    image = db.Column(db.LargeBinary)
    image_mime = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())


class Executive(db.Model):
    __tablename__ = Config.EXECUTIVES_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    position = db.Column(db.Text)
    image = db.Column(db.LargeBinary)
    image_mime = db.Column(db.Text)
    about = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())


class Advertisement(db.Model):
    __tablename__ = Config.ADVERTISEMENTS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    image = db.Column(db.LargeBinary, nullable=False)
    image_mime = db.Column(db.Text)
    url = db.Column(db.Text, nullable=False)
    owner = db.Column(db.Text, nullable=False)
    page = db.Column(db.Text, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())


class Quote(db.Model):
    __tablename__ = Config.QUOTES_TABLE

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    author = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())


MODELS = {
    Config.ADMINS_TABLE: Admin,
    Config.ARTICLES_TABLE: Article,
    Config.EDITORIAL_BOARDS_TABLE: EditorialBoard,
    Config.EXECUTIVES_TABLE: Executive,
    Config.ADVERTISEMENTS_TABLE: Advertisement,
    Config.QUOTES_TABLE: Quote,
}
