from django.urls import path
from . import views

urlpatterns = [
    path('', views.front_page, name='page-front'),
    path('<slug:slug>/', views.page_detail, name='page-detail'),
]
