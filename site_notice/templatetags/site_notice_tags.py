# site_notice/templatetags/site_notice_tags.py
from django import template
from django.utils.safestring import mark_safe

from site_notice.cache import get_notice
from site_notice.formatting import render_message

register = template.Library()


@register.simple_tag(takes_context=True)
def site_notice(context):
    """
    Renders the site notice bar, or nothing outside its display window.

    The render is left on the request so SiteNoticeCacheMiddleware can cap
    the page's Cache-Control max-age to the notice's remaining lifetime.
    """
    notice = get_notice()
    request = context.get('request')
    if request is not None:
        request.site_notice_render = notice
    return mark_safe(notice.html)


@register.filter(name='render_notice_message')
def render_notice_message(text, message_format):
    return render_message(text, message_format)
