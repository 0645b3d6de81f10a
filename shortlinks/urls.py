from django.urls import path
from .api import PageShortlink

urlpatterns = [
    path('api/pages/<int:page_id>/shortlink/', PageShortlink.as_view(), name='page-shortlink'),
]
