# site_notice/visibility.py
"""
Decides whether the site notice is inside its display window.

Everything here is plain arithmetic over aware datetimes so it can be
called from a view, a template tag or a management command alike.
"""
import enum
import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

# Same sentinel Django's cache API uses for "never expires".
CACHE_PERMANENT = None


class NoticeState(enum.Enum):
    PENDING = 'pending'   # before start
    EXPIRED = 'expired'   # after end
    ACTIVE = 'active'     # inside the window (or unbounded)


@dataclass(frozen=True)
class VisibilityDecision:
    state: NoticeState
    cache_lifetime: Optional[int]

    @property
    def visible(self):
        return self.state is NoticeState.ACTIVE

    @property
    def is_permanent(self):
        return self.cache_lifetime is CACHE_PERMANENT


def _seconds_until(later, now):
    return max(0, int((later - now).total_seconds()))


def parse_instant(value):
    """
    Turns a stored schedule value into an aware datetime.

    Returns None for empty or unreadable input so a broken value behaves
    like an unbounded window instead of taking the page down.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                if day is not None:
                    parsed = datetime.combine(day, time.min)
        except ValueError:
            # Well formed but out of range, e.g. 2024-02-30T10:00:00
            parsed = None
        if parsed is None:
            logger.warning("Ignoring unparseable site notice timestamp %r", text)
            return None

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, timezone.get_current_timezone())
    return parsed


def decide(now, start=None, end=None):
    """
    Classifies `now` against the optional [start, end] window.

    Both bounds are inclusive. The returned cache lifetime is the number of
    seconds until the decision can next change, or CACHE_PERMANENT when only
    a configuration change can alter it.
    """
    if start is not None and now < start:
        return VisibilityDecision(NoticeState.PENDING, _seconds_until(start, now))

    if end is not None and now > end:
        return VisibilityDecision(NoticeState.EXPIRED, CACHE_PERMANENT)

    if end is not None:
        return VisibilityDecision(NoticeState.ACTIVE, _seconds_until(end, now))
    return VisibilityDecision(NoticeState.ACTIVE, CACHE_PERMANENT)


def decide_config(now, start_iso, end_iso):
    return decide(now, parse_instant(start_iso), parse_instant(end_iso))
