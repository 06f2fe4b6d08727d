"""
Centralized text labels for the tournament signup app.

Routes and services read user-facing text from here so templates, flash
messages and validation errors stay consistent.
"""
from __future__ import annotations

ENGLISH = {
    'NAV': {
        'brand': 'Champions League',
        'register': 'Register',
        'admin': 'Admin Panel',
        'logout': 'Log out',
    },
    'COMPETITION': {
        'app_title': 'Champions League Registration',
        'banner': 'Free Fire Tournament',
        'organizer': 'Organiser: {name}',
        'rules_title': 'Tournament Rules & Information',
        'success_title': 'Registration Successful!',
        'success_body': 'Your team has been successfully registered for the tournament. We have recorded your response.',
        'receipt_title': 'Registration Receipt',
        'receipt_note': 'This data has been submitted to the tournament admin database.',
    },
    'FLASH': {
        'fix_errors': 'Please fix the highlighted fields and submit again.',
        'submit_failed': 'Failed to submit registration. Please try again or contact the admin.',
        'login_failed': 'Access Denied: Invalid Credentials',
        'login_disabled': 'Admin access is not configured.',
        'logged_out': 'You have been logged out.',
        'entry_deleted': 'Entry for "{team}" deleted.',
        'delete_failed': 'Delete failed.',
        'purged': 'Database purged.',
        'purge_failed': 'Purge failed.',
        'nothing_to_export': 'There are no registrations to export.',
        'clipboard_error': 'Clipboard Error',
    },
    'ERRORS': {
        'REQUIRED_TEAM_NAME': 'Team name is required',
        'TEAM_NAME_TAKEN': 'This team name is already taken',
        'REQUIRED_GAME': 'Please select a game',
        'INVALID_GAME': 'Please select a game from the list',
        'REQUIRED_LEADER_NAME': 'Leader name is required',
        'REQUIRED_PHONE': 'Phone number is required',
        'INVALID_PHONE': 'Invalid phone number format',
        'INVALID_EMAIL': 'Invalid email address',
        'REQUIRED_PLAYER1': 'Player 1 (Leader) is required',
        'REQUIRED_PLAYER2': 'Player 2 is required',
        'REQUIRED_PLAYER3': 'Player 3 is required',
        'REQUIRED_PLAYER4': 'Player 4 is required',
        'REQUIRED_PAYMENT_METHOD': 'Payment method is required',
        'INVALID_PAYMENT_METHOD': 'Please select a payment method from the list',
        'REQUIRED_TRANSACTION_ID': 'Transaction ID is required',
        'RULES_NOT_ACCEPTED': 'You must agree to the rules',
    },
    'UI': {
        'team_info': 'Team Information',
        'leader_info': 'Team Leader',
        'players': 'Players',
        'payment': 'Payment',
        'game_name': 'Game Name',
        'team_name': 'Team Name',
        'leader_name': 'Leader Name',
        'leader_phone': 'Leader Phone Number',
        'leader_email': 'Leader Email',
        'player1': 'Player 1 Name (Leader)',
        'player2': 'Player 2 Name',
        'player3': 'Player 3 Name',
        'player4': 'Player 4 Name',
        'discord_username': 'Discord Username',
        'ingame_id': 'In-game ID / Character ID',
        'payment_method': 'Payment Method',
        'transaction_id': 'Transaction ID',
        'agree_rules': 'I agree to the tournament rules and conditions',
        'choose': 'Choose',
        'submit': 'Submit',
        'submit_another': 'Submit another response',
        'restricted': 'RESTRICTED AREA',
        'enter_code': 'Enter authorization code to proceed',
        'username': 'Username',
        'password': 'Password',
        'authenticate': 'Authenticate',
        'return_public': 'Return to Public Access',
        'entries': 'Entries: {count}',
        'search': 'Search team, leader or game',
        'copy_tsv': 'Copy TSV',
        'export_csv': 'Export CSV',
        'purge': 'Purge All',
        'purge_confirm': 'WARNING: Purge all database entries? This action is irreversible.',
        'delete_confirm': 'Delete entry for "{team}"?',
        'no_entries': 'No registrations yet.',
        'copy_hint': 'The table below is ready to paste into a spreadsheet.',
        'copied': 'Copied',
        'clipboard_error': 'Clipboard Error',
        'not_available': 'N/A',
    },
}


def section(name: str) -> dict:
    return ENGLISH.get(name, {})


def tr(section_name: str, key: str, **kwargs) -> str:
    text_value = section(section_name).get(key, key)
    return text_value.format(**kwargs) if kwargs else text_value


def ui(key: str, **kwargs) -> str:
    return tr('UI', key, **kwargs)


def error(code: str) -> str:
    return tr('ERRORS', code)


FLASH = ENGLISH['FLASH']
ERRORS = ENGLISH['ERRORS']
