# site_notice/forms.py
from django import forms
from django.utils import timezone

from .models import SiteNoticeSettings
from .visibility import parse_instant

DATETIME_LOCAL_FORMAT = '%Y-%m-%dT%H:%M'


class SiteNoticeSettingsForm(forms.ModelForm):
    """
    Admin form for the notice. Start/end are edited as datetimes but stored
    as ISO-8601 strings with their UTC offset, e.g. 2025-06-01T09:00:00+09:00.
    """
    start = forms.DateTimeField(
        label="Start datetime",
        required=False,
        widget=forms.DateTimeInput(attrs={'type': 'datetime-local'}, format=DATETIME_LOCAL_FORMAT),
    )
    end = forms.DateTimeField(
        label="End datetime",
        required=False,
        help_text="No time limit if not set",
        widget=forms.DateTimeInput(attrs={'type': 'datetime-local'}, format=DATETIME_LOCAL_FORMAT),
    )

    class Meta:
        model = SiteNoticeSettings
        fields = ['message', 'message_format', 'link_url', 'start', 'end',
                  'background', 'closable', 'storage_key_salt']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance and not self.is_bound:
            # Stored strings back into local datetimes for the widget
            for name in ('start', 'end'):
                parsed = parse_instant(getattr(self.instance, name))
                self.initial[name] = timezone.localtime(parsed) if parsed else None

    def clean_link_url(self):
        return (self.cleaned_data.get('link_url') or '').strip()

    def clean_storage_key_salt(self):
        return (self.cleaned_data.get('storage_key_salt') or '').strip()

    def clean(self):
        cleaned_data = super().clean()
        start = cleaned_data.get('start')
        end = cleaned_data.get('end')
        if start and end and end < start:
            self.add_error('end', "The end datetime must not be earlier than the start datetime.")
        return cleaned_data

    def save(self, commit=True):
        notice = super().save(commit=False)
        start = self.cleaned_data.get('start')
        end = self.cleaned_data.get('end')
        notice.start = start.replace(microsecond=0).isoformat() if start else ''
        notice.end = end.replace(microsecond=0).isoformat() if end else ''
        if commit:
            notice.save()
        return notice
