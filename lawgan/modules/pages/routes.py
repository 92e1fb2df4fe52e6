from datetime import datetime

from flask import render_template

from . import pages_bp
from .layout import (
    home_layout, category_layout, related_articles, content_paragraphs,
    board_member_card, pick_advertisement, display_quotes,
)
from lawgan.core.errors import StorageError
from lawgan.core.identifiers import normalize_category, category_path
from lawgan.core.logging_service import logger

SECTIONS = {
    'law': ('Law', 'Latest legal news, reforms, and analysis'),
    'politics': ('Politics', 'Political news and commentary'),
    'foreign-affairs': ('Foreign Affairs', 'International relations and global affairs'),
    'reviews': ('Reviews', 'Reviews of books, judgments and policy'),
}
AD_SLOTS = 3


def _advert_slots(page):
    # Import here to avoid circular imports
    from lawgan.modules.advertisements.routes import get_advertisements_db
    adverts = get_advertisements_db(page)
    return [pick_advertisement(adverts, index) for index in range(AD_SLOTS)]


def _error_page(error):
    logger.log_error_with_traceback('pages', error)
    return render_template('pages/error.html', message='Failed to load articles. Please try again.'), 500


@pages_bp.app_template_filter('display_date')
def display_date(value, fmt='%B %d, %Y'):
    if not value:
        return ''
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime(fmt)


@pages_bp.app_template_global('section_path')
def section_path(category):
    return '/' + category_path(category)


@pages_bp.route('/')
def home():
    """Home page: breaking stories, latest per category, quotes"""
    # Import here to avoid circular imports
    from lawgan.modules.articles.routes import get_articles_db
    from lawgan.modules.quotes.routes import get_quotes_db

    try:
        layout = home_layout(get_articles_db(published_only=True))
        quotes = display_quotes(get_quotes_db())
        adverts = _advert_slots('home')
    except StorageError as e:
        return _error_page(e)

    return render_template('pages/home.html', layout=layout, quotes=quotes, adverts=adverts)


@pages_bp.route('/law', defaults={'section': 'law'})
@pages_bp.route('/politics', defaults={'section': 'politics'})
@pages_bp.route('/foreign-affairs', defaults={'section': 'foreign-affairs'})
@pages_bp.route('/reviews', defaults={'section': 'reviews'})
def category_page(section):
    from lawgan.modules.articles.routes import get_articles_db

    title, tagline = SECTIONS[section]
    try:
        articles = get_articles_db(category=normalize_category(section), published_only=True)
        adverts = _advert_slots(section)
    except StorageError as e:
        return _error_page(e)

    return render_template(
        'pages/category.html',
        title=title, tagline=tagline, layout=category_layout(articles), adverts=adverts
    )


@pages_bp.route('/article/<slug>')
def article_page(slug):
    from lawgan.modules.articles.routes import get_articles_db, get_article_by_slug_db

    try:
        article = get_article_by_slug_db(slug)
        if not article or not article.get('published'):
            return render_template('pages/error.html', message='Article not found.'), 404
        related = related_articles(get_articles_db(published_only=True), article)
        adverts = _advert_slots('article')
    except StorageError as e:
        return _error_page(e)

    return render_template(
        'pages/article.html',
        article=article, paragraphs=content_paragraphs(article.get('content')),
        related_articles=related, adverts=adverts
    )


@pages_bp.route('/editorial-board')
def editorial_board_page():
    from lawgan.modules.editorial_boards.routes import get_members_db

    try:
        members = [board_member_card(member) for member in get_members_db()]
    except StorageError as e:
        return _error_page(e)

    return render_template('pages/editorial_board.html', members=members)


@pages_bp.route('/about')
def about_page():
    from lawgan.modules.executives.routes import get_executives_db

    try:
        executives = get_executives_db()
    except StorageError as e:
        return _error_page(e)

    return render_template('pages/about.html', executives=executives)
