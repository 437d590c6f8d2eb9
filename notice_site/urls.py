"""
URL configuration for notice_site project.
"""
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('pages.urls')),
    path('site-notice/', include('site_notice.urls', namespace='site_notice')),
]
