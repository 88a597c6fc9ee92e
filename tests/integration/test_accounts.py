"""
Accounts Integration Tests

Login, profile and administrator-only staff management.
"""

from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status

User = get_user_model()

pytestmark = pytest.mark.django_db

NEW_PASSWORD = 'Str0ng!Passw0rd-2024'


class TestLogin:

    def test_login_returns_tokens_and_user(self, api_client, employee_user):
        response = api_client.post('/api/auth/login/', {
            'username': employee_user.username,
            'password': 'Feedlot!pass123',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data
        assert response.data['user']['role'] == 'employee'
        assert response.data['user']['id'] == str(employee_user.id)

        employee_user.refresh_from_db()
        assert employee_user.last_login_at is not None

    def test_login_wrong_password(self, api_client, employee_user):
        response = api_client.post('/api/auth/login/', {
            'username': employee_user.username,
            'password': 'wrong',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_access_token_authenticates_requests(self, api_client, employee_user):
        login = api_client.post('/api/auth/login/', {
            'username': employee_user.username,
            'password': 'Feedlot!pass123',
        }, format='json')

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")
        response = api_client.get('/api/auth/profile/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['full_name'] == 'Eduardo Employee'


class TestProfile:

    def test_role_cannot_be_self_assigned(self, employee_client, employee_user):
        response = employee_client.patch(
            '/api/auth/profile/', {'role': 'admin', 'full_name': 'Eduardo E.'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        employee_user.refresh_from_db()
        assert employee_user.role == 'employee'
        assert employee_user.full_name == 'Eduardo E.'


class TestUserManagement:

    def test_employee_cannot_list_users(self, employee_client):
        response = employee_client.get('/api/auth/users/')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_employee_cannot_create_users(self, employee_client):
        response = employee_client.post('/api/auth/users/', {
            'email': 'intruder@feedlot.test',
            'password': NEW_PASSWORD,
            'full_name': 'Intruder',
            'role': 'admin',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(email='intruder@feedlot.test').exists()

    def test_admin_creates_employee(self, admin_client):
        response = admin_client.post('/api/auth/users/', {
            'email': 'Maria@Feedlot.test',
            'password': NEW_PASSWORD,
            'full_name': 'Maria Silva',
            'role': 'employee',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        user = User.objects.get(email='maria@feedlot.test')
        assert user.username == 'maria@feedlot.test'
        assert user.check_password(NEW_PASSWORD)
        assert 'password' not in response.data

    def test_duplicate_email_rejected(self, admin_client, employee_user):
        response = admin_client.post('/api/auth/users/', {
            'email': employee_user.email,
            'password': NEW_PASSWORD,
            'full_name': 'Copy',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data

    def test_admin_deactivates_user(self, admin_client, employee_user):
        response = admin_client.patch(
            f'/api/auth/users/{employee_user.id}/', {'is_active': False}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        employee_user.refresh_from_db()
        assert employee_user.is_active is False


class TestCreateFeedlotAdminCommand:

    def test_creates_admin(self, db):
        out = StringIO()
        call_command(
            'create_feedlot_admin', '--email', 'Boss@Feedlot.test',
            '--password', NEW_PASSWORD, '--full-name', 'Boss', stdout=out
        )

        user = User.objects.get(email='boss@feedlot.test')
        assert user.role == 'admin'
        assert user.is_staff
        assert user.check_password(NEW_PASSWORD)
        assert 'Created new user' in out.getvalue()

    def test_updates_existing_account(self, employee_user):
        out = StringIO()
        call_command(
            'create_feedlot_admin', '--email', employee_user.email,
            '--password', NEW_PASSWORD, stdout=out
        )

        employee_user.refresh_from_db()
        assert employee_user.role == 'admin'
        assert 'Updated existing user' in out.getvalue()
        assert User.objects.count() == 1

    def test_empty_password_rejected(self, db):
        with pytest.raises(CommandError):
            call_command('create_feedlot_admin', '--email', 'x@feedlot.test', '--password', '')
