# site_notice/cache.py
"""
Django cache adapter for the notice block.

The rendered fragment is cached for exactly as long as the visibility
decision is valid. Entries are namespaced by a generation token, which
signals.py replaces on every settings edit, and by the active time zone.
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from django.core.cache import caches
from django.template.loader import render_to_string
from django.utils import timezone

from .block import default_block
from .conf import notice_setting

logger = logging.getLogger(__name__)

NOTICE_TEMPLATE = 'site_notice/notice.html'


@dataclass(frozen=True)
class CachedNotice:
    html: str
    state: str
    visible: bool
    cache_lifetime: Optional[int]  # seconds left, None = until the next settings edit
    storage_key: str = ''
    closable: bool = False


def _cache():
    return caches[notice_setting('CACHE_ALIAS')]


def _generation_key():
    return f"{notice_setting('CACHE_PREFIX')}:generation"


def _new_generation():
    # Never reused, so entries from an evicted generation stay unreachable
    return uuid.uuid4().hex


def _generation(cache):
    gen_key = _generation_key()
    cache.add(gen_key, _new_generation(), None)
    return cache.get(gen_key)


def _render_key(cache):
    tz_name = timezone.get_current_timezone_name()
    return f"{notice_setting('CACHE_PREFIX')}:{_generation(cache)}:{tz_name}"


def invalidate():
    cache = _cache()
    cache.set(_generation_key(), _new_generation(), None)
    logger.info("Site notice render cache invalidated")


def render_fragment(render):
    if not render.visible:
        return ''
    return render_to_string(NOTICE_TEMPLATE, {'notice': render.payload})


def get_notice(block=None):
    """
    Returns the notice fragment for the current time zone, rendering and
    caching it when no valid entry exists.
    """
    block = block or default_block()
    cache = _cache()
    key = _render_key(cache)
    now = block.clock.now()
    now_ts = int(now.timestamp())

    entry = cache.get(key)
    if entry is not None:
        expires_at = entry['expires_at']
        if expires_at is None or expires_at > now_ts:
            remaining = None if expires_at is None else expires_at - now_ts
            return CachedNotice(
                html=entry['html'],
                state=entry['state'],
                visible=entry['visible'],
                cache_lifetime=remaining,
                storage_key=entry['storage_key'],
                closable=entry['closable'],
            )

    render = block.build(now=now)
    payload = render.payload or {}
    notice = CachedNotice(
        html=render_fragment(render),
        state=render.state.value,
        visible=render.visible,
        cache_lifetime=render.cache_lifetime,
        storage_key=payload.get('storage_key', ''),
        closable=payload.get('closable', False),
    )

    if render.cache_lifetime != 0:
        cache.set(key, {
            'html': notice.html,
            'state': notice.state,
            'visible': notice.visible,
            'expires_at': None if render.cache_lifetime is None else now_ts + render.cache_lifetime,
            'storage_key': notice.storage_key,
            'closable': notice.closable,
        }, render.cache_lifetime)
    return notice
