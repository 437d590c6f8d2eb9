# site_notice/signals.py
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .cache import invalidate
from .models import SiteNoticeSettings


# Expired notices are cached forever, so every edit has to drop the cached render
@receiver(post_save, sender=SiteNoticeSettings)
def invalidate_notice_on_save(sender, instance, **kwargs):
    invalidate()


@receiver(post_delete, sender=SiteNoticeSettings)
def invalidate_notice_on_delete(sender, instance, **kwargs):
    invalidate()
