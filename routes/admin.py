"""
Admin routes for reviewing, exporting and removing registrations.
"""
import logging
from urllib.parse import urlsplit
from flask import Blueprint, Response, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_user, logout_user
import strings as text
from models.user import AdminUser
from services.record_codec import CSV_MIMETYPE, copy_for_sheets, encode_csv, export_filename
from services.registry_client import RegistryError, get_registry
from services.search import filter_registrations

admin_bp = Blueprint('admin', __name__)
logger = logging.getLogger(__name__)

PUBLIC_ADMIN_ENDPOINTS = {'admin.login'}


def _safe_redirect_target(target: str | None):
    if not target:
        return None
    parsed = urlsplit(target)
    if parsed.scheme or parsed.netloc:
        return None
    if not target.startswith('/'):
        return None
    # Browsers read "//host" and "/\host" as another origin
    if target.startswith('//') or target.startswith('/\\'):
        return None
    return target


def _search_term() -> str:
    return (request.args.get('q') or '').strip()


def _load_registrations():
    """Fresh fetch narrowed by the optional ``q`` search term."""
    registrations = get_registry().list_all()
    return registrations, filter_registrations(registrations, _search_term())


@admin_bp.before_request
def require_admin():
    """Every admin page except the login form needs an authenticated session."""
    if request.endpoint in PUBLIC_ADMIN_ENDPOINTS:
        return None
    if not current_user.is_authenticated:
        return current_app.login_manager.unauthorized()
    return None


@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Log in the configured admin."""
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    admin = AdminUser.from_config(current_app.config)
    if request.method == 'POST':
        username = (request.form.get('username') or '').strip()
        password = request.form.get('password') or ''
        next_page = _safe_redirect_target(request.form.get('next'))

        if not admin.password_hash:
            flash(text.FLASH['login_disabled'], 'error')
            return render_template('admin/login.html', next_page=next_page), 503
        if username != admin.username or not admin.check_password(password):
            logger.warning('Failed admin login for %r', username)
            flash(text.FLASH['login_failed'], 'error')
            return render_template('admin/login.html', next_page=next_page), 401

        login_user(admin)
        logger.info('Admin %s logged in', admin.username)
        return redirect(next_page or url_for('admin.dashboard'))

    next_page = _safe_redirect_target(request.args.get('next'))
    return render_template('admin/login.html', next_page=next_page)


@admin_bp.route('/logout', methods=['POST'])
def logout():
    """Log out the admin."""
    logout_user()
    flash(text.FLASH['logged_out'], 'success')
    return redirect(url_for('form.register'))


@admin_bp.route('/')
def dashboard():
    """Registration table with search."""
    registrations, visible = _load_registrations()
    return render_template('admin/dashboard.html',
                           registrations=visible,
                           total=len(registrations),
                           search_term=_search_term())


@admin_bp.route('/registrations/delete', methods=['POST'])
def delete_registration():
    """Delete a single registration; the id travels in the form body."""
    registration_id = request.form.get('registration_id')
    if registration_id is None:
        flash(text.FLASH['delete_failed'], 'error')
        return redirect(url_for('admin.dashboard'))
    team_name = request.form.get('team_name') or registration_id
    try:
        get_registry().delete(registration_id)
    except RegistryError:
        flash(text.FLASH['delete_failed'], 'error')
        return redirect(url_for('admin.dashboard'))

    logger.info('Admin %s deleted registration %s', current_user.username, registration_id)
    flash(text.FLASH['entry_deleted'].format(team=team_name), 'warning')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/clear', methods=['POST'])
def clear_registrations():
    """Remove every registration."""
    try:
        get_registry().clear()
    except RegistryError:
        flash(text.FLASH['purge_failed'], 'error')
        return redirect(url_for('admin.dashboard'))

    logger.info('Admin %s purged all registrations', current_user.username)
    flash(text.FLASH['purged'], 'warning')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/export.csv')
def export_csv():
    """Download registrations as a CSV file."""
    _registrations, visible = _load_registrations()
    content = encode_csv(visible)
    if content is None:
        flash(text.FLASH['nothing_to_export'], 'warning')
        return redirect(url_for('admin.dashboard'))

    return Response(
        content.encode('utf-8'),
        mimetype=CSV_MIMETYPE,
        headers={'Content-Disposition': f'attachment; filename={export_filename()}'},
    )


@admin_bp.route('/copy')
def copy_tsv():
    """Tab-separated payload ready for the browser clipboard."""
    _registrations, visible = _load_registrations()
    copied = []
    if not copy_for_sheets(visible, copied.append):
        flash(text.FLASH['clipboard_error'], 'error')
        return redirect(url_for('admin.dashboard'))

    return render_template('admin/copy.html', payload=copied[0], count=len(visible))
