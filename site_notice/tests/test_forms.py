"""
Tests for the admin settings form.
"""
from datetime import datetime, timezone as dt_timezone

import pytest

from site_notice.forms import SiteNoticeSettingsForm
from site_notice.models import SiteNoticeSettings


def form_data(**overrides):
    data = {
        'message': 'Planned maintenance',
        'message_format': 'markdown',
        'link_url': '',
        'start': '',
        'end': '',
        'background': 'is-default',
        'storage_key_salt': '',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestSiteNoticeSettingsForm:

    def test_saves_schedule_as_iso_strings(self):
        form = SiteNoticeSettingsForm(data=form_data(start='2025-06-01T09:00', end='2025-06-02T18:30'),
                                      instance=SiteNoticeSettings.load())
        assert form.is_valid(), form.errors
        notice = form.save()
        assert notice.start == '2025-06-01T09:00:00+00:00'
        assert notice.end == '2025-06-02T18:30:00+00:00'

    def test_empty_schedule_is_stored_as_empty_strings(self):
        form = SiteNoticeSettingsForm(data=form_data(), instance=SiteNoticeSettings.load())
        assert form.is_valid(), form.errors
        notice = form.save()
        assert notice.start == ''
        assert notice.end == ''

    def test_trims_salt_and_link(self):
        form = SiteNoticeSettingsForm(
            data=form_data(link_url='  https://example.com/news  ', storage_key_salt='  round-2  '),
            instance=SiteNoticeSettings.load(),
        )
        assert form.is_valid(), form.errors
        notice = form.save()
        assert notice.link_url == 'https://example.com/news'
        assert notice.storage_key_salt == 'round-2'

    def test_end_before_start_is_rejected(self):
        form = SiteNoticeSettingsForm(data=form_data(start='2025-06-02T09:00', end='2025-06-01T09:00'),
                                      instance=SiteNoticeSettings.load())
        assert not form.is_valid()
        assert 'end' in form.errors

    def test_closable_checkbox(self):
        form = SiteNoticeSettingsForm(data=form_data(closable='on'), instance=SiteNoticeSettings.load())
        assert form.is_valid(), form.errors
        assert form.save().closable is True

    def test_initial_values_come_from_stored_strings(self):
        notice = SiteNoticeSettings(message='x', start='2025-06-01T09:00:00+00:00', end='garbage')
        notice.save()
        form = SiteNoticeSettingsForm(instance=notice)
        assert form.initial['start'] == datetime(2025, 6, 1, 9, 0, tzinfo=dt_timezone.utc)
        assert form.initial['end'] is None
