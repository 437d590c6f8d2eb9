# site_notice/middleware.py
from django.utils.cache import get_max_age, patch_cache_control


class SiteNoticeCacheMiddleware:
    """
    Keeps shared caches from holding a page past the moment the notice
    should appear or disappear.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # Default to no notice rendered on this page
        request.site_notice_render = None

        response = self.get_response(request)

        notice = getattr(request, 'site_notice_render', None)
        if notice is None or notice.cache_lifetime is None:
            return response

        # Only ever lowers an existing max-age, never makes a page cacheable
        current = get_max_age(response)
        if current is not None and current > notice.cache_lifetime:
            patch_cache_control(response, max_age=notice.cache_lifetime)
        return response
