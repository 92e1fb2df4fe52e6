"""
Article Routes
==============

GET    /articles                      all articles, newest first
GET    /articles/category/<category>  articles in one category
POST   /articles/publish              create (admin)
PATCH  /articles/edit                 partial update by id or slug (admin)
DELETE /articles/delete               delete by id (admin)
"""

from flask import jsonify

from . import articles_bp
from lawgan.core.config import Config
from lawgan.core.database import get_database
from lawgan.core.errors import ApiError, StorageError, ConflictError, NotFoundError, MissingIdentifier
from lawgan.core.identifiers import normalize_slug, require_category
from lawgan.core.logging_service import logger
from lawgan.modules.auth.tokens import require_admin
from lawgan.modules.common import (
    get_json_body, require_fields, require_id, coerce_id, clean_text, collect_updates,
    ensure_any_field, image_values, serialize_row, storage_failure, to_bool, utc_now,
)

TABLE = Config.ARTICLES_TABLE
IMAGE_COLUMN = 'image_url'
NEWEST_FIRST = [('created_at', 'desc'), ('id', 'desc')]

EDITABLE_FIELDS = ('title', 'summary', 'content', 'category', 'is_breaking', 'published', 'author')
UPDATE_KEYS = EDITABLE_FIELDS + ('new_slug', 'newSlug', 'image_base64', 'image_mime')

# ===== Database Helper Functions =====


def serialize_article(row):
    return serialize_row(row, image_column=IMAGE_COLUMN)


def get_articles_db(category=None, published_only=False):
    """Articles newest first, optionally filtered by (normalized) category"""
    filters = {}
    if category:
        filters['category'] = category
    if published_only:
        filters['published'] = True
    rows = get_database().select(TABLE, filters=filters, order_by=NEWEST_FIRST)
    return [serialize_article(row) for row in rows]


def get_article_by_slug_db(slug):
    row = get_database().select_one(TABLE, {'slug': normalize_slug(slug)})
    return serialize_article(row) if row else None


def _article_filter(data):
    """id takes precedence over slug when both are given"""
    if data.get('id') not in (None, ''):
        return {'id': coerce_id(data['id'])}
    slug = normalize_slug(data.get('slug'))
    if slug:
        return {'slug': slug}
    raise MissingIdentifier('Article id or slug is required.')


# ===== Routes =====

@articles_bp.route('', methods=['GET'])
def list_articles():
    """All articles, newest first"""
    try:
        return jsonify({'articles': get_articles_db()}), 200
    except StorageError as e:
        return storage_failure('articles', 'Failed to fetch articles.', e)


@articles_bp.route('/category/<category>', methods=['GET'])
def list_articles_by_category(category):
    try:
        normalized = require_category(category)
        return jsonify({'articles': get_articles_db(category=normalized)}), 200
    except StorageError as e:
        return storage_failure('articles', 'Failed to fetch articles.', e)
    except ApiError as e:
        return e.to_response()


@articles_bp.route('/publish', methods=['POST'])
@require_admin
def publish_article():
    """Create a new article"""
    data = get_json_body()

    try:
        slug = normalize_slug(data.get('slug'))
        require_fields(
            dict(data, slug=slug), ('title', 'slug', 'content', 'category'),
            'Title, slug, content, and category are required.'
        )
        category = require_category(data['category'])
        images = image_values(data, IMAGE_COLUMN)

        db = get_database()
        if db.exists(TABLE, {'slug': slug}):
            raise ConflictError('Slug already in use.')

        values = {
            'title': str(data['title']).strip(),
            'slug': slug,
            'summary': clean_text(data.get('summary')),
            'content': data['content'],
            'category': category,
            'is_breaking': to_bool(data.get('is_breaking', False)),
            'published': True,
            'author': clean_text(data.get('author')),
            IMAGE_COLUMN: None,
            'image_mime': None,
        }
        values.update(images)

        row = db.insert(TABLE, values)
        logger.log_user_action('articles', 'publish', details={'id': row['id'], 'slug': slug})
        return jsonify({'article': serialize_article(row)}), 201

    except StorageError as e:
        return storage_failure('articles', 'Failed to publish article.', e)
    except ApiError as e:
        return e.to_response()


@articles_bp.route('/edit', methods=['PATCH'])
@require_admin
def edit_article():
    """Partial update; keys missing from the body keep their stored value"""
    data = get_json_body()

    try:
        target = _article_filter(data)
        ensure_any_field(data, UPDATE_KEYS)

        values = collect_updates(
            data, EDITABLE_FIELDS,
            required=('title', 'content', 'category', 'is_breaking', 'published'),
            strip=('title',),
        )
        if 'category' in values:
            values['category'] = require_category(values['category'])
        for flag in ('is_breaking', 'published'):
            if flag in values:
                values[flag] = to_bool(values[flag])
        for optional in ('summary', 'author'):
            if optional in values:
                values[optional] = clean_text(values[optional])

        db = get_database()
        new_slug = normalize_slug(data.get('new_slug', data.get('newSlug')))
        if new_slug:
            clash = db.select_one(TABLE, {'slug': new_slug})
            if clash and clash['id'] != target.get('id') and new_slug != target.get('slug'):
                raise ConflictError('Slug already in use.')
            values['slug'] = new_slug

        values.update(image_values(data, IMAGE_COLUMN))
        values['updated_at'] = utc_now()

        rows = db.update(TABLE, values, target)
        if not rows:
            raise NotFoundError('Article not found.')

        logger.log_user_action('articles', 'edit', details={'id': rows[0]['id'], 'fields': sorted(values)})
        return jsonify({'article': serialize_article(rows[0])}), 200

    except StorageError as e:
        return storage_failure('articles', 'Failed to update article.', e)
    except ApiError as e:
        return e.to_response()


@articles_bp.route('/delete', methods=['DELETE'])
@require_admin
def delete_article():
    data = get_json_body()

    try:
        article_id = require_id(data, 'Article id is required.')
        deleted = get_database().delete(TABLE, {'id': article_id})
        if not deleted:
            raise NotFoundError('Article not found.')

        logger.log_user_action('articles', 'delete', details={'id': article_id})
        return jsonify({'deleted': deleted[0]}), 200

    except StorageError as e:
        return storage_failure('articles', 'Failed to delete article.', e)
    except ApiError as e:
        return e.to_response()
