# site_notice/conf.py
from django.conf import settings

DEFAULTS = {
    'CACHE_ALIAS': 'default',
    'CACHE_PREFIX': 'site_notice',
}


def notice_setting(name):
    """Reads one option from the optional SITE_NOTICE dict in settings.py."""
    overrides = getattr(settings, 'SITE_NOTICE', None) or {}
    return overrides.get(name, DEFAULTS[name])
