from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Session authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # Current session user
    path('user/', views.get_current_user, name='current-user'),
]
