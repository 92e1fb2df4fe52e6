"""
Page layout buckets
===================

Slices an article list (newest first) into the blocks each page renders.
"""

from lawgan.core.identifiers import ALLOWED_CATEGORIES

BREAKING_LIMIT = 6
CATEGORY_PREVIEW = 3
RELATED_LIMIT = 4

DEFAULT_POSITION = 'Editorial Board Member'
DEFAULT_BIO = 'Member of the editorial board'

FALLBACK_QUOTES = [
    {'id': 'fallback-1', 'title': 'Justice delayed is justice denied', 'author': 'William Ewart Gladstone'},
    {'id': 'fallback-2', 'title': 'The law is reason, free from passion', 'author': 'Aristotle'},
    {'id': 'fallback-3', 'title': 'Injustice anywhere is a threat to justice everywhere',
     'author': 'Martin Luther King Jr.'},
]


def excerpt(article, length):
    """The summary, or the first ``length`` characters of the content"""
    if article.get('summary'):
        return article['summary']
    content = article.get('content') or ''
    if len(content) <= length:
        return content
    return content[:length] + '...'


def _with_excerpt(articles, length):
    return [dict(article, excerpt=excerpt(article, length)) for article in articles]


def home_layout(articles):
    breaking = [article for article in articles if article.get('is_breaking')][:BREAKING_LIMIT]
    sections = {
        category: [a for a in articles if a.get('category') == category][:CATEGORY_PREVIEW]
        for category in ALLOWED_CATEGORIES
    }
    return {
        'main': breaking[0] if breaking else None,
        'breaking': breaking[1:],
        'sections': sections,
    }


def category_layout(articles):
    main = articles[0] if articles else None
    side = articles[1:5]
    return {
        'main': dict(main, excerpt=excerpt(main, 200)) if main else None,
        'side': side,
        'featured': _with_excerpt(articles[5:8], 150),
        'grid': _with_excerpt(articles[8:11], 100),
        'carousel': ([main] + side[:3]) if main else [],
    }


def related_articles(articles, current, limit=RELATED_LIMIT):
    return [
        article for article in articles
        if article.get('category') == current.get('category') and article.get('slug') != current.get('slug')
    ][:limit]


def content_paragraphs(content):
    return [line.strip() for line in (content or '').split('\n') if line.strip()]


def board_member_card(member):
    return {
        'id': member.get('id'),
        'name': member.get('name'),
        'position': member.get('position') or DEFAULT_POSITION,
        'bio': member.get('bio') or DEFAULT_BIO,
        'image': member.get('image'),
    }


def pick_advertisement(advertisements, index=0):
    if not advertisements:
        return None
    return advertisements[abs(index) % len(advertisements)]


def display_quotes(quotes):
    return quotes or FALLBACK_QUOTES
