"""
Public signup routes: the registration form and its confirmation page.
"""
from flask import Blueprint, current_app, flash, redirect, render_template, request, session, url_for
import config
import strings as text
from models.registration import Registration
from services.form_state import INITIAL_STATE, state_from_form
from services.registry_client import RegistryError, get_registry
from services.validation import validate_registration

form_bp = Blueprint('form', __name__)

RECEIPT_SESSION_KEY = 'last_receipt'


def _render_form(state: Registration, errors: dict, status: int = 200):
    return render_template(
        'form/register.html',
        form=state,
        errors=errors,
        games=config.GAME_OPTIONS,
        payment_methods=config.PAYMENT_METHODS,
        rules=config.TOURNAMENT_RULES,
        organizer=current_app.config.get('ORGANIZER_NAME', ''),
    ), status


@form_bp.route('/', methods=['GET'])
def register():
    """Blank registration form."""
    return _render_form(INITIAL_STATE, {})


@form_bp.route('/', methods=['POST'])
def submit_registration():
    """Validate and submit a registration."""
    state = state_from_form(request.form)

    # Best-effort snapshot; an unreachable registry means no known duplicates
    existing = get_registry().list_all()
    errors = validate_registration(state, existing)
    if errors:
        flash(text.FLASH['fix_errors'], 'error')
        return _render_form(state, errors, 400)

    submission = state.stamped()
    try:
        get_registry().create(submission)
    except RegistryError:
        flash(text.FLASH['submit_failed'], 'error')
        return _render_form(state, {}, 502)

    session[RECEIPT_SESSION_KEY] = submission.receipt()
    return redirect(url_for('form.success'))


@form_bp.route('/success')
def success():
    """Confirmation page with the receipt of the last submission."""
    receipt = session.pop(RECEIPT_SESSION_KEY, None)
    return render_template('form/success.html', receipt=receipt)
