from django.urls import path
from . import views

app_name = "schedule"

urlpatterns = [
    path("working-hours/", views.working_hours, name="working-hours"),
    path("block/", views.blocked_slots, name="block"),
]
