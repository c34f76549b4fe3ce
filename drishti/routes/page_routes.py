from flask import Blueprint, render_template

page_bp = Blueprint('pages', __name__)

LEGAL_PAGES = ('terms', 'privacy', 'refund', 'contact', 'about', 'shipping')


@page_bp.route('/')
def home():
    return render_template('index.html')


@page_bp.route('/admin')
def admin_panel():
    """Single-page admin panel; login state lives in the browser."""
    return render_template('admin.html')


def _legal_view(page):
    def view():
        return render_template(f'pages/{page}.html')
    view.__name__ = f'{page}_page'
    return view


for _page in LEGAL_PAGES:
    page_bp.add_url_rule(f'/{_page}', _page, _legal_view(_page))
