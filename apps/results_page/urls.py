# apps/results_page/urls.py

from django.urls import path, include
from . import views

urlpatterns = [
    path('', views.results_page, name='results_page'),

    path('', include('apps.results_page.templates.fragments.selector_search.urls')),
]
