"""
Tests for the site_notice_status management command.
"""
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from site_notice.keys import derive_key
from site_notice.models import SiteNoticeSettings


@pytest.mark.django_db
class TestSiteNoticeStatusCommand:

    def run(self, *args):
        out = StringIO()
        call_command('site_notice_status', *args, stdout=out)
        return out.getvalue()

    def test_pending_at_instant(self):
        SiteNoticeSettings(message='Launch', start='2023-11-14T23:13:20+00:00').save()
        output = self.run('--at', '2023-11-14T22:13:20+00:00')
        assert 'State: pending' in output
        assert 'Cache lifetime: 3600s' in output
        assert 'Notice is hidden.' in output

    def test_active_at_instant_shows_storage_key(self):
        SiteNoticeSettings(message='Launch', start='2023-11-14T22:00:00+00:00', storage_key_salt='abc').save()
        output = self.run('--at', '2023-11-14T22:13:20+00:00')
        assert 'State: active' in output
        assert 'Cache lifetime: permanent' in output
        assert derive_key('Launch', '2023-11-14T22:00:00+00:00', '', 'abc') in output

    def test_expired_now(self):
        SiteNoticeSettings(message='Old', end='2000-01-01T00:00:00+00:00').save()
        output = self.run()
        assert 'State: expired' in output

    def test_invalid_instant(self):
        with pytest.raises(CommandError):
            self.run('--at', 'tomorrow-ish')
