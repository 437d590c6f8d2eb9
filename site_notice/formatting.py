# site_notice/formatting.py
import markdown
from django.template.defaultfilters import linebreaks_filter
from django.utils.safestring import mark_safe

from .models import SiteNoticeSettings


def render_message(text, message_format):
    if not text:
        return ""

    if message_format == SiteNoticeSettings.FORMAT_MARKDOWN:
        # 'extra': tables, fenced code, abbreviations
        # 'nl2br': newlines become <br>
        html = markdown.markdown(text, extensions=['extra', 'nl2br', 'sane_lists'])
        return mark_safe(html)

    if message_format == SiteNoticeSettings.FORMAT_FULL_HTML:
        # Only staff can edit the notice
        return mark_safe(text)

    return linebreaks_filter(text, autoescape=True)
