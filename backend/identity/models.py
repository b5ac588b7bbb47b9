import uuid
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.db import models
from django.utils.crypto import get_random_string
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    """Manager for custom user model with email as the unique identifier."""

    def _unique_username(self, email):
        username = email.split("@")[0] or "user"
        original_username = username
        while self.model.objects.filter(username=username).exists():
            username = f"{original_username}_{get_random_string(4)}"
        return username

    def create_user(self, email, password=None, **extra_fields):
        """Create and save a regular User with the given email and password."""
        if not email:
            raise ValueError(_('The Email must be set'))

        email = self.normalize_email(email)
        if not extra_fields.get('username'):
            extra_fields['username'] = self._unique_username(email)

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, **extra_fields):
        """Create and save a SuperUser with the given email and password."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True.'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True.'))
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Account of either a trade business or a seeker looking for one.
    Uses UUID for the primary key; the id is the owner key of every per-user record.
    `is_staff` is the administrator role claim for the approval queues.
    """
    class UserType(models.TextChoices):
        BUSINESS = "business", _("Business")
        SEEKER = "seeker", _("Seeker")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(_('email address'), unique=True)
    username = models.CharField(_('username'), max_length=150, unique=True)
    full_name = models.CharField(_('display name'), max_length=150, blank=True)
    user_type = models.CharField(max_length=16, choices=UserType.choices, blank=True, default="")
    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(default=timezone.now)

    groups = models.ManyToManyField(
        'auth.Group',
        verbose_name=_('groups'),
        blank=True,
        related_name="identity_user_set",
        related_query_name="user",
    )
    user_permissions = models.ManyToManyField(
        'auth.Permission',
        verbose_name=_('user permissions'),
        blank=True,
        related_name="identity_user_set",
        related_query_name="user",
    )
    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    def __str__(self):
        return self.email

    @property
    def display_name(self):
        return self.full_name or self.email.split("@")[0]

    @property
    def is_business(self):
        return self.user_type == self.UserType.BUSINESS

    @property
    def is_seeker(self):
        return self.user_type == self.UserType.SEEKER
