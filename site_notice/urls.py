# site_notice/urls.py
from django.urls import path
from . import views

app_name = 'site_notice'

urlpatterns = [
    path('', views.notice_fragment_view, name='fragment'),
    path('status/', views.notice_status_view, name='status'),
]
