APP_NAME = 'invoice-review-incoming'

# Storage
DATA_DIR_NAME = 'data'
SUPPLIERS_FILENAME = 'suppliers.json'
DEFAULT_SUPPLIERS = ('OHC', 'Bospeed', 'TDD', 'CZD')

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = 'INFO'


class Commands:
    """Slash commands registered with Slack."""
    REVIEW = '/invoice-review'
    SUPPLIER_ADD = '/invoice-supplier-add'
    SUPPLIERS = '/invoice-suppliers'
    HELP = '/invoice-help'


# Review modal identifiers
REVIEW_CALLBACK_ID = 'invoice_review_submit'
SUPPLIER_BLOCK_ID = 'supplier_block'
SUPPLIER_ACTION_ID = 'supplier_select'
NOTES_BLOCK_ID = 'notes_block'
NOTES_ACTION_ID = 'notes_input'

# Slack Block Kit limits
MAX_SELECT_OPTIONS = 100
MAX_OPTION_TEXT_LENGTH = 75
MAX_OPTION_VALUE_LENGTH = 150
