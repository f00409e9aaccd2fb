from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('login/', views.login, name='login'),
    path('user/', views.get_current_user, name='current-user'),
    path('users/', views.list_users, name='user-list'),
]
