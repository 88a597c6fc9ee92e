from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.utils import timezone
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for user details.
    Used for retrieving and updating the current user's profile.
    """
    display_name = serializers.CharField(source='get_full_name', read_only=True)
    role_display = serializers.CharField(source='get_role_display', read_only=True)

    class Meta:
        model = User
        fields = (
            'id', 'username', 'email', 'full_name', 'display_name',
            'role', 'role_display', 'is_active',
            'created_at', 'updated_at', 'last_login_at'
        )
        read_only_fields = (
            'id', 'username', 'display_name', 'role', 'role_display', 'is_active',
            'created_at', 'updated_at', 'last_login_at'
        )


class UserCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for admin-created staff accounts.
    The username defaults to the email address when omitted.
    """
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    username = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField(required=True)
    full_name = serializers.CharField(required=True, max_length=150)

    class Meta:
        model = User
        fields = ('id', 'username', 'email', 'password', 'full_name', 'role')
        read_only_fields = ('id',)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value.lower()

    def validate(self, attrs):
        if not attrs.get('username'):
            attrs['username'] = attrs['email']
        if User.objects.filter(username=attrs['username']).exists():
            raise serializers.ValidationError(
                {"username": "A user with this username already exists."}
            )
        return attrs

    def create(self, validated_data):
        """Create a new user with encrypted password."""
        password = validated_data.pop('password')

        user = User(**validated_data)
        user.set_password(password)
        user.save()

        return user


class UserAdminUpdateSerializer(serializers.ModelSerializer):
    """Serializer for admins editing another account's name, role or active flag."""
    display_name = serializers.CharField(source='get_full_name', read_only=True)

    class Meta:
        model = User
        fields = (
            'id', 'username', 'email', 'full_name', 'display_name',
            'role', 'is_active', 'created_at', 'updated_at'
        )
        read_only_fields = ('id', 'username', 'email', 'display_name', 'created_at', 'updated_at')


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Custom JWT token serializer that includes additional user information.
    """
    def validate(self, attrs):
        data = super().validate(attrs)

        data['user'] = {
            'id': str(self.user.id),
            'username': self.user.username,
            'email': self.user.email,
            'role': self.user.role,
            'full_name': self.user.get_full_name(),
        }

        self.user.last_login_at = timezone.now()
        self.user.save(update_fields=['last_login_at'])

        return data
