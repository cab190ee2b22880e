from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("forgot-password/", views.forgot_password, name="forgot-password"),
    path("reset-password/", views.reset_password, name="reset-password"),
]
