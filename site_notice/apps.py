# site_notice/apps.py
from django.apps import AppConfig


class SiteNoticeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'site_notice'
    verbose_name = 'Site notice'

    def ready(self):
        import site_notice.signals  # noqa: F401 connects the cache invalidation receivers
