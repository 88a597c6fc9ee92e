"""
Management command to create (or reset) the first feedlot administrator.

Usage:
    python manage.py create_feedlot_admin --email admin@example.com --password secret
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from accounts.models import User


class Command(BaseCommand):
    help = 'Creates or updates a feedlot administrator account'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Administrator email')
        parser.add_argument('--password', required=True, help='Administrator password')
        parser.add_argument('--username', help='Login name (defaults to the email)')
        parser.add_argument('--full-name', default='Administrator', help='Display name')

    def handle(self, *args, **options):
        email = options['email'].lower()
        username = options.get('username') or email
        password = options['password']

        if not password:
            raise CommandError('A non-empty password is required.')

        with transaction.atomic():
            user = User.objects.filter(email=email).first()
            if user:
                self.stdout.write(
                    self.style.WARNING(f'User with email {email} already exists.')
                )
                user.username = username
                action = 'Updated existing user'
            else:
                user = User(username=username, email=email)
                action = 'Created new user'

            user.full_name = options['full_name']
            user.role = User.UserRole.ADMIN
            user.is_active = True
            user.is_staff = True
            user.set_password(password)
            user.save()

        self.stdout.write(self.style.SUCCESS(f'{action}: {user.username}'))
        self.stdout.write('=' * 60)
        self.stdout.write(f'Username:  {user.username}')
        self.stdout.write(f'Email:     {user.email}')
        self.stdout.write(f'Role:      {user.get_role_display()}')
        self.stdout.write('=' * 60)
        self.stdout.write('POST to /api/auth/login/ with username and password to obtain tokens.')
