"""Tests for the invoice review modal builder and submission parsing."""

from invoice_review.slack.modals import (
    build_invoice_review_modal,
    build_supplier_options,
    format_review_confirmation,
    parse_review_submission,
)
from invoice_review.suppliers.interfaces import ReviewRequest


def _submission_view(supplier=None, notes=None, private_metadata='C123'):
    """Build a minimal view_submission view payload."""
    supplier_state = {'type': 'static_select', 'selected_option': None}
    if supplier is not None:
        supplier_state['selected_option'] = {
            'text': {'type': 'plain_text', 'text': supplier},
            'value': supplier,
        }
    return {
        'callback_id': 'invoice_review_submit',
        'private_metadata': private_metadata,
        'state': {
            'values': {
                'supplier_block': {'supplier_select': supplier_state},
                'notes_block': {'notes_input': {'type': 'plain_text_input', 'value': notes}},
            }
        },
    }


class TestBuildInvoiceReviewModal:
    """Tests for build_invoice_review_modal."""

    def test_modal_structure(self):
        modal = build_invoice_review_modal(['OHC', 'TDD'], channel_id='C42')

        assert modal['type'] == 'modal'
        assert modal['callback_id'] == 'invoice_review_submit'
        assert modal['private_metadata'] == 'C42'
        assert modal['title']['text'] == 'Invoice Review'
        assert modal['submit']['text'] == 'Continue'
        assert modal['close']['text'] == 'Cancel'

        supplier_block, notes_block = modal['blocks']
        assert supplier_block['block_id'] == 'supplier_block'
        assert supplier_block['element']['type'] == 'static_select'
        assert [o['value'] for o in supplier_block['element']['options']] == ['OHC', 'TDD']
        assert notes_block['optional'] is True
        assert notes_block['element']['multiline'] is True

    def test_missing_channel_leaves_metadata_blank(self):
        assert build_invoice_review_modal(['OHC'])['private_metadata'] == ''


class TestBuildSupplierOptions:
    """Tests for Slack option limits."""

    def test_long_name_text_is_truncated(self):
        name = 'X' * 90

        option = build_supplier_options([name])[0]

        assert len(option['text']['text']) == 75
        assert option['value'] == name

    def test_caps_option_count(self):
        names = [f'Supplier {i}' for i in range(150)]

        assert len(build_supplier_options(names)) == 100

    def test_names_too_long_for_a_value_are_left_out(self):
        """Values are never cut, so a submitted value always names a stored supplier."""
        long_a = 'A' * 150 + 'one'
        long_b = 'A' * 150 + 'two'

        options = build_supplier_options(['OHC', long_a, long_b, 'TDD'])

        assert [o['value'] for o in options] == ['OHC', 'TDD']

    def test_cap_counts_only_offered_options(self):
        names = ['B' * 200] + [f'Supplier {i}' for i in range(100)]

        options = build_supplier_options(names)

        assert len(options) == 100
        assert options[0]['value'] == 'Supplier 0'


class TestParseReviewSubmission:
    """Tests for parse_review_submission."""

    def test_extracts_fields(self):
        body = {'user': {'id': 'U1'}}
        view = _submission_view(supplier='OHC', notes='  check totals  ')

        request = parse_review_submission(body, view)

        assert request == ReviewRequest(user_id='U1', supplier='OHC', notes='check totals', channel_id='C123')

    def test_missing_optional_values(self):
        body = {'user': {'id': 'U1'}}
        view = _submission_view(private_metadata='')

        request = parse_review_submission(body, view)

        assert request.supplier is None
        assert request.notes == ''
        assert request.channel_id is None


class TestFormatReviewConfirmation:
    """Tests for format_review_confirmation."""

    def test_with_supplier_and_notes(self):
        text = format_review_confirmation(ReviewRequest(user_id='U1', supplier='OHC', notes='urgent'))

        assert 'Received invoice review request for *OHC*.' in text
        assert text.endswith('Notes: urgent')

    def test_placeholders(self):
        text = format_review_confirmation(ReviewRequest(user_id='U1'))

        assert '*N/A*' in text
        assert text.endswith('Notes: _none_')
