# pages/urls.py
from django.urls import path
from . import views

app_name = 'pages'

urlpatterns = [
    # Host pages that carry the notice bar
    path('', views.home_view, name='home'),
    path('about/', views.about_view, name='about'),
]
