from django.urls import path, include

# CSRF token endpoint (for SPA/Next.js to fetch a token)
from accounts.csrf import csrf as csrf_view

urlpatterns = [
    # CSRF endpoint used by the frontend: GET http://localhost:8000/api/csrf/
    path("api/csrf/", csrf_view, name="csrf"),

    path("api/auth/", include("authentication.urls")),
    path("api/auth/", include("accounts.urls")),
    path("api/profile/", include("user_settings.urls")),
    path("api/doctors/", include("doctors.urls")),
    path("api/patients/", include("patient.urls")),
    path("api/appointments/", include("appointments.urls")),
    path("api/schedule/", include("schedule.urls")),
    path("api/", include("records.urls")),
    path("api/chat/", include("chat.urls")),

    path("", include("django_prometheus.urls")),
]
