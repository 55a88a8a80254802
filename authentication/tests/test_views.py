"""
View tests for authentication app

Tests all views including:
- Health check (light and heavy)
- Current user through the full basic authentication pipeline
- Admin registration
"""

from unittest.mock import patch

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase, override_settings
from django.urls import reverse

from authentication.gate import basic_authorization_header
from authentication.models import Account


class HealthViewTests(TestCase):
    """Tests for health view"""

    def setUp(self):
        self.url = reverse('health')

    def test_health(self):
        """Test health check reports running"""
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'This service is "running"'})

    def test_heavy_health(self):
        """Test heavy health check queries the database"""
        response = self.client.get(self.url, {'heavy': 'true'})
        self.assertEqual(response.status_code, 200)
        self.assertIn('connected to the database', response.json()['message'])

    @patch('authentication.views.Account.objects.exists', side_effect=DatabaseError('no such table'))
    def test_heavy_health_database_failure(self, mock_exists):
        """Test heavy health check reports a failing database with 500"""
        with self.assertLogs('authentication.views', level='ERROR'):
            response = self.client.get(self.url, {'heavy': 'true'})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['code'], 'INTERNAL_SERVER_ERROR')

    def test_health_post_not_allowed(self):
        """Test health check only answers GET"""
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 405)


@override_settings(BASIC_AUTH_AUTHENTICATOR='authentication.authenticators.DjangoAuthenticator')
class CurrentUserViewTests(TestCase):
    """Tests for current_user view with the real authenticator"""

    def setUp(self):
        """Set up a verified user"""
        self.url = reverse('current_user')
        self.user = get_user_model().objects.create_user(
            username='alice@example.com',
            password='correct-horse-battery'
        )
        self.account = Account.objects.create(user=self.user, verified=True)

    def get_me(self, identifier='alice@example.com', secret='correct-horse-battery'):
        """Helper to request the current user with basic credentials"""
        return self.client.get(self.url, HTTP_AUTHORIZATION=basic_authorization_header(identifier, secret))

    def test_current_user(self):
        """Test authenticated request returns the user's id"""
        response = self.get_me()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'user': self.user.pk})

    def test_current_user_wrong_password(self):
        """Test wrong password gets 401 failed authentication"""
        response = self.get_me(secret='wrong')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['code'], 'FAILED_AUTHENTICATION_EXCEPTION')

    def test_current_user_unverified(self):
        """Test unverified account gets 401 verification error"""
        self.account.verified = False
        self.account.save()

        response = self.get_me()
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['code'], 'ACCOUNT_VERIFICATION_EXCEPTION')

    def test_current_user_deactivated(self):
        """Test deactivated account gets 401 deactivated error"""
        self.account.deactivated = True
        self.account.save()

        response = self.get_me()
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['code'], 'ACCOUNT_DEACTIVATED_EXCEPTION')

    def test_current_user_anonymous(self):
        """Test request without credentials gets 401 unauthorized"""
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {
            'code': 'UNAUTHORIZED_EXCEPTION',
            'message': 'You are not authenticated'
        })


class AdminRegistrationTests(TestCase):
    """Tests for admin registration"""

    def test_account_registered(self):
        """Test Account is registered in the admin"""
        self.assertTrue(admin.site.is_registered(Account))
