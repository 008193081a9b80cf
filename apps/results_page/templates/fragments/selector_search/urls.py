from django.urls import path
from . import views

urlpatterns = [
    # Lookup APIs used by the event / user dialogs
    path('search-events', views.search_events, name='search_events'),
    path('search-users', views.search_users, name='search_users'),
]
