from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class RegisterSerializer(serializers.ModelSerializer):
    password1 = serializers.CharField(
        write_only=True, required=True, min_length=6,
        error_messages={"min_length": "Password must be at least 6 characters."},
    )
    password2 = serializers.CharField(
        write_only=True, required=True, label="Confirm Password",
    )
    user_type = serializers.ChoiceField(choices=User.UserType.choices)

    class Meta:
        model = User
        fields = ("email", "full_name", "user_type", "password1", "password2")
        extra_kwargs = {
            "email": {"required": True},
            "full_name": {"required": False},
        }

    def validate(self, attrs):
        if attrs["password1"] != attrs["password2"]:
            raise serializers.ValidationError(
                {"password2": "Passwords do not match."}
            )
        return attrs

    def create(self, validated_data):
        from .services import register_user
        return register_user(
            email=validated_data["email"],
            password=validated_data["password1"],
            user_type=validated_data["user_type"],
            full_name=validated_data.get("full_name", ""),
        )


class UserDetailsSerializer(serializers.ModelSerializer):
    """
    Serializer for the custom user model for user detail endpoints.
    """
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ("pk", "username", "email", "full_name", "display_name", "user_type", "is_staff")
        read_only_fields = ("pk", "email", "username", "user_type", "is_staff")


class UserTypeSerializer(serializers.Serializer):
    user_type = serializers.ChoiceField(choices=User.UserType.choices)
