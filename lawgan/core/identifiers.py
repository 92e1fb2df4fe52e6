from .errors import InvalidCategory

ALLOWED_CATEGORIES = ('law', 'politics', 'foreign affairs', 'reviews')


def normalize_email(email):
    if email is None:
        return None
    return str(email).strip().lower()


def normalize_slug(slug):
    if slug is None:
        return None
    return str(slug).strip().lower()


def normalize_category(category):
    """Lower-case, trim and turn hyphens into spaces ("Foreign-Affairs" -> "foreign affairs")"""
    if category is None:
        return None
    return str(category).strip().lower().replace('-', ' ')


def require_category(category):
    """Normalize a category and reject anything outside the fixed set"""
    normalized = normalize_category(category)
    if normalized not in ALLOWED_CATEGORIES:
        raise InvalidCategory()
    return normalized


def category_path(category):
    """URL form of a stored category ("foreign affairs" -> "foreign-affairs")"""
    return (category or '').strip().lower().replace(' ', '-')
