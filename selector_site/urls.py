from django.urls import path, include
from django.conf.urls.static import static

from django.conf import settings

urlpatterns = [
    # Results page with the event / user selector dialogs
    path('', include('apps.results_page.urls')),
]

if settings.DEBUG:
    # Serve static files (CSS/JS)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
