from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from allauth.socialaccount.providers.google.views import GoogleOAuth2Adapter
from allauth.socialaccount.providers.oauth2.client import OAuth2Client
from dj_rest_auth.registration.views import SocialLoginView

from .serializers import RegisterSerializer, UserDetailsSerializer, UserTypeSerializer
from .services import assign_user_type

User = get_user_model()


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}


class RegisterView(generics.CreateAPIView):
    """
    API endpoint for user registration. Responds with the user and a JWT pair.
    """
    queryset = User.objects.all()
    permission_classes = (AllowAny,)
    serializer_class = RegisterSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        body = {"user": UserDetailsSerializer(user).data, **_token_pair(user)}
        return Response(body, status=status.HTTP_201_CREATED)


class GoogleLoginView(SocialLoginView):
    """
    API endpoint for Google social login. An optional `user_type` finishes onboarding
    in the same round trip.
    """
    adapter_class = GoogleOAuth2Adapter
    client_class = OAuth2Client

    @property
    def callback_url(self):
        return settings.GOOGLE_OAUTH_CALLBACK_URL

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        user_type = request.data.get("user_type")
        user = getattr(self, "user", None)
        if user is not None and user_type in User.UserType.values and not user.user_type:
            assign_user_type(user, user_type)
        return response


class MeView(APIView):
    """
    GET   /auth/me/  profile
    PATCH /auth/me/  {"full_name": ...}
    POST  /auth/me/  {"user_type": "business"|"seeker"} (once)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserDetailsSerializer(request.user).data)

    def patch(self, request):
        ser = UserDetailsSerializer(request.user, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        ser.save()
        return Response(ser.data)

    def post(self, request):
        ser = UserTypeSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = assign_user_type(request.user, ser.validated_data["user_type"])
        return Response(UserDetailsSerializer(user).data)
