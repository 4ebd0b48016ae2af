"""Tests for the Flask app factory and HTTP endpoints."""

from unittest.mock import patch

import pytest

from invoice_review import create_app
from invoice_review.config import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings without Slack credentials, data dir under tmp_path."""
    return Settings(data_dir=tmp_path / 'data')


@pytest.fixture
def app(settings):
    """Create a test Flask application."""
    app = create_app(settings)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


class TestCreateApp:
    """Tests for create_app."""

    def test_seeds_supplier_file(self, app, settings):
        assert settings.suppliers_file.exists()
        assert app.extensions['supplier_store'].load() == ['OHC', 'Bospeed', 'TDD', 'CZD']

    def test_slack_disabled_without_token(self, app):
        assert 'slack_bolt_app' not in app.extensions
        assert 'slack_handler' not in app.extensions


class TestHealth:
    """Tests for /health."""

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json() == {
            'status': 'success',
            'app': 'invoice-review-incoming',
            'slack': False,
            'socket_mode': False,
        }

    def test_reports_running_socket_mode(self, client):
        """The payload reflects whether the Socket Mode connection is up."""
        with patch('invoice_review.slack.bolt_app._socket_mode_started', True):
            response = client.get('/health')

        assert response.get_json()['socket_mode'] is True


class TestSlackEndpoints:
    """Tests for /slack/* delegation."""

    @pytest.mark.parametrize('path', ['/slack/events', '/slack/commands', '/slack/interactions'])
    def test_unconfigured_returns_503(self, client, path):
        response = client.post(path, data={'command': '/invoice-help'})

        assert response.status_code == 503
        assert response.get_json() == {'error': 'Slack integration not configured'}

    def test_unsigned_request_is_rejected(self, tmp_path):
        settings = Settings(
            data_dir=tmp_path / 'data',
            bot_token='xoxb-test',
            signing_secret='secret',
            verify_token=False,
        )
        app = create_app(settings)

        response = app.test_client().post('/slack/commands', data={'command': '/invoice-help'})

        assert response.status_code == 401
        assert app.test_client().get('/health').get_json()['slack'] is True
