from rest_framework import serializers


class ProfileUpdateSerializer(serializers.Serializer):
    """
    Validates the camelCase profile payload; validated_data is keyed by the
    Profile model field names.
    """
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    dateOfBirth = serializers.DateField(source="date_of_birth", required=False, allow_null=True)
    gender = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    zipCode = serializers.CharField(source="zip_code", max_length=20, required=False, allow_blank=True, allow_null=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)

    # patient fields
    bloodGroup = serializers.CharField(source="blood_group", max_length=10, required=False, allow_blank=True, allow_null=True)
    allergies = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    emergencyContact = serializers.CharField(
        source="emergency_contact", max_length=100, required=False, allow_blank=True, allow_null=True
    )

    # doctor fields
    specialization = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    licenseNumber = serializers.CharField(
        source="license_number", max_length=100, required=False, allow_blank=True, allow_null=True
    )
    experience = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    education = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    consultationFee = serializers.IntegerField(source="consultation_fee", min_value=0, required=False, allow_null=True)
    profileImage = serializers.CharField(source="profile_image", required=False, allow_blank=True, allow_null=True)
