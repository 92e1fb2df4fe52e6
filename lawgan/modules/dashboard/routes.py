from flask import current_app, render_template

from . import dashboard_bp
from lawgan.core.identifiers import ALLOWED_CATEGORIES

ADVERT_PAGES = ('home', 'law', 'politics', 'foreign-affairs', 'reviews', 'article')


@dashboard_bp.route('', strict_slashes=False)
def dashboard():
    """Admin dashboard shell; data is loaded client side with the stored token"""
    return render_template(
        'dashboard/admin.html',
        categories=ALLOWED_CATEGORIES,
        advert_pages=ADVERT_PAGES,
        max_quotes=current_app.config.get('MAX_QUOTES', 6),
        signup_enabled=current_app.config.get('ADMIN_SIGNUP_ENABLED', True),
    )
