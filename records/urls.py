from django.urls import path
from . import views

app_name = "records"

urlpatterns = [
    path("records/", views.records, name="list"),
    path("records/<uuid:record_id>/", views.record_detail, name="detail"),
    path("prescriptions/", views.prescriptions, name="prescriptions"),
]
