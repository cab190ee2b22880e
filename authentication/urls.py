from django.urls import path
from authentication.views import register, login, logout, session_user

app_name = 'authentication'

urlpatterns = [
    path("register/", register, name="register"),
    path("login/", login, name="login"),
    path("logout/", logout, name="logout"),
    path("session/", session_user, name="session"),
]
