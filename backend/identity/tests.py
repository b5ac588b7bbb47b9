from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from business.models import Company

User = get_user_model()


class UserRegistrationTest(APITestCase):
    """
    Test suite for the user registration endpoint.
    """

    def setUp(self):
        self.register_url = reverse("auth:register")
        self.data = {
            "email": "testuser@example.com",
            "full_name": "Test User",
            "user_type": "seeker",
            "password1": "secret-123",
            "password2": "secret-123",
        }

    def test_user_registration_success(self):
        response = self.client.post(self.register_url, self.data, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(User.objects.count(), 1)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)
        self.assertEqual(response.data["user"]["user_type"], "seeker")

        user = User.objects.get()
        self.assertEqual(user.email, self.data["email"])
        self.assertEqual(user.full_name, self.data["full_name"])
        self.assertTrue(user.check_password(self.data["password1"]))
        self.assertFalse(user.is_staff)
        self.assertFalse(Company.objects.exists())

    def test_business_registration_creates_company_stub(self):
        self.data["user_type"] = "business"
        response = self.client.post(self.register_url, self.data, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        company = Company.objects.get(user__email=self.data["email"])
        self.assertFalse(company.verified)
        self.assertEqual(company.tier, "basic")
        self.assertFalse(company.profile_complete)

    def test_user_registration_password_mismatch(self):
        self.data["password2"] = "a-different-password"
        response = self.client.post(self.register_url, self.data, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 0)
        self.assertEqual(response.data["code"], "invalid")
        self.assertEqual(response.data["errors"]["password2"][0], "Passwords do not match.")

    def test_user_registration_short_password(self):
        self.data["password1"] = self.data["password2"] = "abc"
        response = self.client.post(self.register_url, self.data, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"]["password1"][0], "Password must be at least 6 characters.")

    def test_user_registration_email_already_exists(self):
        User.objects.create_user(email="testuser@example.com", full_name="Existing User", password="password123")

        response = self.client.post(self.register_url, self.data, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 1)
        self.assertIn("email", response.data["errors"])


class MeEndpointTest(APITestCase):

    def setUp(self):
        self.url = reverse("auth:me")
        self.user = User.objects.create_user(email="oauth@example.com", password="secret-123")
        self.client.force_authenticate(self.user)

    def test_anonymous_is_rejected(self):
        self.client.force_authenticate(None)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_get_and_patch_profile(self):
        response = self.client.get(self.url)
        self.assertEqual(response.data["display_name"], "oauth")
        self.assertEqual(response.data["user_type"], "")

        response = self.client.patch(self.url, {"full_name": "Olive Auth", "is_staff": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.full_name, "Olive Auth")
        self.assertFalse(self.user.is_staff)

    def test_user_type_is_set_once(self):
        response = self.client.post(self.url, {"user_type": "business"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(Company.objects.filter(user=self.user).exists())

        # same type again is a no-op
        response = self.client.post(self.url, {"user_type": "business"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Company.objects.filter(user=self.user).count(), 1)

        response = self.client.post(self.url, {"user_type": "seeker"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("user_type", response.data["errors"])
