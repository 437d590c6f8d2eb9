# site_notice/management/commands/site_notice_status.py
from django.core.management.base import BaseCommand, CommandError

from site_notice.block import FixedClock, ModelConfigSource, SiteNoticeBlock, SystemClock
from site_notice.visibility import parse_instant


class Command(BaseCommand):
    help = 'Shows whether the site notice is displayed now (or at --at) and how long the render may be cached.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--at',
            type=str,
            default=None,
            help='ISO-8601 instant to evaluate instead of the current time (e.g. 2025-06-01T09:00:00+00:00).'
        )

    def handle(self, *args, **options):
        at = options['at']
        if at:
            instant = parse_instant(at)
            if instant is None:
                raise CommandError(f'Could not parse --at value "{at}".')
            clock = FixedClock(instant)
        else:
            clock = SystemClock()

        render = SiteNoticeBlock(ModelConfigSource(), clock).build()
        lifetime = 'permanent' if render.cache_lifetime is None else f'{render.cache_lifetime}s'

        self.stdout.write(f"Evaluated at: {clock.now().isoformat()}")
        self.stdout.write(f"State: {render.state.value}")
        self.stdout.write(f"Cache lifetime: {lifetime}")
        if render.visible:
            self.stdout.write(self.style.SUCCESS(f"Notice is visible (storage key {render.payload['storage_key']})."))
        else:
            self.stdout.write(self.style.WARNING("Notice is hidden."))
