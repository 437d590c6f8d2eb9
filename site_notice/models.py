# site_notice/models.py
from django.db import models


class SiteNoticeSettings(models.Model):
    """
    The one and only notice configuration row, edited from the Django admin.

    Schedule values are kept as ISO-8601 strings (empty means unbounded) so the
    dismissal key hashes exactly what was saved.
    """
    SINGLETON_PK = 1

    FORMAT_MARKDOWN = 'markdown'
    FORMAT_PLAIN_TEXT = 'plain_text'
    FORMAT_FULL_HTML = 'full_html'

    FORMAT_CHOICES = [
        (FORMAT_MARKDOWN, 'Markdown'),
        (FORMAT_PLAIN_TEXT, 'Plain text'),
        (FORMAT_FULL_HTML, 'Full HTML'),
    ]

    BACKGROUND_DEFAULT = 'is-default'
    BACKGROUND_INFO = 'is-info'
    BACKGROUND_SUCCESS = 'is-success'
    BACKGROUND_WARNING = 'is-warning'
    BACKGROUND_DANGER = 'is-danger'

    BACKGROUND_CHOICES = [
        (BACKGROUND_DEFAULT, 'Default'),
        (BACKGROUND_INFO, 'Info'),
        (BACKGROUND_SUCCESS, 'Success'),
        (BACKGROUND_WARNING, 'Warning'),
        (BACKGROUND_DANGER, 'Danger'),
    ]

    message = models.TextField(blank=True, help_text="Short text recommended.")
    message_format = models.CharField(max_length=20, choices=FORMAT_CHOICES, default=FORMAT_MARKDOWN)
    link_url = models.URLField(max_length=500, blank=True, verbose_name="Link URL (optional)")

    start = models.CharField(max_length=64, blank=True,
                             help_text="ISO-8601 start datetime. Shown immediately if empty.")
    end = models.CharField(max_length=64, blank=True,
                           help_text="ISO-8601 end datetime. No time limit if empty.")

    background = models.CharField(max_length=20, choices=BACKGROUND_CHOICES, default=BACKGROUND_DEFAULT,
                                  verbose_name="Background color")
    closable = models.BooleanField(default=False, verbose_name="Show close button")
    storage_key_salt = models.CharField(max_length=100, blank=True,
                                        help_text="Change to show the notice again to visitors who closed it.")

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Site notice settings"
        verbose_name_plural = "Site notice settings"

    def __str__(self):
        return "Site notice settings"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        # Unsaved defaults when nobody has configured the notice yet
        return cls.objects.filter(pk=cls.SINGLETON_PK).first() or cls(pk=cls.SINGLETON_PK)
