# site_notice/views.py
from django.http import HttpResponse, JsonResponse
from django.utils.cache import patch_cache_control
from django.views.decorators.http import require_GET

from .cache import get_notice


def _apply_notice_cache_headers(response, notice):
    # Permanent renders only change on a settings edit, which clears our own
    # cache; the header is left to the project defaults
    if notice.cache_lifetime is not None:
        patch_cache_control(response, public=True, max_age=notice.cache_lifetime)
    return response


@require_GET
def notice_fragment_view(request):
    """
    The notice bar as a bare HTML fragment, for pages that load it separately.
    Empty body outside the display window.
    """
    notice = get_notice()
    response = HttpResponse(notice.html, content_type='text/html; charset=utf-8')
    return _apply_notice_cache_headers(response, notice)


@require_GET
def notice_status_view(request):
    notice = get_notice()
    data = {
        'state': notice.state,
        'visible': notice.visible,
        'cache_lifetime': notice.cache_lifetime,
        'storage_key': notice.storage_key if notice.visible else None,
        'closable': notice.closable,
    }
    return _apply_notice_cache_headers(JsonResponse(data), notice)
