# site_notice/config.py
from dataclasses import dataclass


@dataclass(frozen=True)
class NoticeConfig:
    message: str = ''
    message_format: str = 'markdown'
    link_url: str = ''
    start: str = ''
    end: str = ''
    background: str = 'is-default'
    closable: bool = False
    storage_key_salt: str = ''

    @classmethod
    def defaults(cls):
        return cls()

    @classmethod
    def from_model(cls, obj):
        """Snapshot of a SiteNoticeSettings row, with blanks normalised to ''."""
        return cls(
            message=obj.message or '',
            message_format=obj.message_format or cls.message_format,
            link_url=(obj.link_url or '').strip(),
            start=(obj.start or '').strip(),
            end=(obj.end or '').strip(),
            background=obj.background or cls.background,
            closable=bool(obj.closable),
            storage_key_salt=(obj.storage_key_salt or '').strip(),
        )
