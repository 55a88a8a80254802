from django.urls import path
from . import views

urlpatterns = [
    path('health', views.health, name='health'),
    path('auth/me', views.current_user, name='current_user'),
]
