import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(email, password, user_type, full_name=""):
    """Email/password signup. Business accounts start with an empty, unverified company."""
    user = User.objects.create_user(email=email, password=password, full_name=full_name or "")
    return assign_user_type(user, user_type)


def assign_user_type(user, user_type):
    """
    Sets the account type once (OAuth users arrive without one).
    Re-sending the same type is a no-op; switching type is rejected.
    """
    from business.services import ensure_company_stub

    if user.user_type and user.user_type != user_type:
        raise ValidationError({"user_type": "Account type is already set."})
    if not user.user_type:
        user.user_type = user_type
        user.save(update_fields=["user_type"])
        logger.info("user %s registered as %s", user.id, user_type)
    if user.is_business:
        ensure_company_stub(user)
    return user
