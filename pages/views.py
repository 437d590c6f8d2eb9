# pages/views.py

from django.shortcuts import render
from django.views.decorators.cache import cache_control


# View for the Homepage
def home_view(request):
    # The notice bar itself comes from {% site_notice %} in pages/base.html
    return render(request, 'pages/home.html')


# View for the About page
# Rarely changes; SiteNoticeCacheMiddleware lowers this when a notice boundary is nearer
@cache_control(public=True, max_age=3600)
def about_view(request):
    return render(request, 'pages/about.html')
