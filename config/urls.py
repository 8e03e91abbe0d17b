"""URL configuration for the Airnest API.

Routes are mounted at the root without trailing slashes, matching the
paths the browser client calls. Uploaded photos are served from
``MEDIA_URL`` in development only.
"""
from django.conf import settings  # type: ignore
from django.conf.urls.static import static  # type: ignore
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('', include('apps.users.urls')),
    path('', include('apps.places.urls')),
    path('', include('apps.bookings.urls')),
    path('', include('apps.reviews.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
