# site_notice/block.py
"""
The notice block itself: one clock, one configuration source, one render value.

Nothing in here knows about templates, HTTP headers or the cache backend.
Those adapters live in cache.py, middleware.py and the template tag, and
they only ever look at the NoticeRender this returns.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from django.utils import timezone

from .config import NoticeConfig
from .keys import derive_key
from .visibility import NoticeState, decide_config

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self):
        ...


class ConfigSource(Protocol):
    def load(self) -> NoticeConfig:
        ...


class SystemClock:
    """Request-time clock: whole seconds, like a request timestamp."""

    def now(self):
        return timezone.now().replace(microsecond=0)


class FixedClock:
    def __init__(self, instant):
        self.instant = instant

    def now(self):
        return self.instant


class ModelConfigSource:
    def load(self) -> NoticeConfig:
        from .models import SiteNoticeSettings
        return NoticeConfig.from_model(SiteNoticeSettings.load())


class StaticConfigSource:
    def __init__(self, config: NoticeConfig):
        self.config = config

    def load(self) -> NoticeConfig:
        return self.config


@dataclass(frozen=True)
class NoticeRender:
    visible: bool
    state: NoticeState
    cache_lifetime: Optional[int]
    payload: Optional[dict] = None


class SiteNoticeBlock:
    def __init__(self, config_source: ConfigSource, clock: Clock):
        self.config_source = config_source
        self.clock = clock

    def build(self, now=None) -> NoticeRender:
        config = self.config_source.load()
        if now is None:
            now = self.clock.now()
        decision = decide_config(now, config.start, config.end)

        if not decision.visible:
            logger.debug("Site notice hidden (%s), cache lifetime %s",
                         decision.state.value, decision.cache_lifetime)
            return NoticeRender(
                visible=False,
                state=decision.state,
                cache_lifetime=decision.cache_lifetime,
            )

        storage_key = derive_key(config.message, config.start, config.end, config.storage_key_salt)
        payload = {
            'message': config.message,
            'message_format': config.message_format,
            'link_url': config.link_url,
            'background': config.background,
            'closable': config.closable,
            'storage_key': storage_key,
            'client_settings': {
                'closable': config.closable,
                'storageKey': storage_key,
            },
        }
        return NoticeRender(
            visible=True,
            state=decision.state,
            cache_lifetime=decision.cache_lifetime,
            payload=payload,
        )


def default_block():
    return SiteNoticeBlock(ModelConfigSource(), SystemClock())
