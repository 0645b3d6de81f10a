from django.contrib import admin
from django.urls import path, include

from .views import HealthCheckView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', HealthCheckView.as_view(), name='health'),
    path('', include('shortlinks.urls')),
    path('', include('django_prometheus.urls')),
    path('', include('pages.urls')),
]
