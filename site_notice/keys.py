# site_notice/keys.py
import hashlib

STORAGE_KEY_PREFIX = 'site_notice_'
STORAGE_KEY_DIGEST_LENGTH = 16


def derive_key(message, start, end, salt):
    """
    Builds the localStorage key that remembers a visitor dismissed this notice.

    Editing the message, either end of the window or the salt produces a new
    key, so the notice shows again for everyone.
    """
    fields = [message, start, end, salt]
    raw = '|'.join('' if value is None else str(value) for value in fields)
    digest = hashlib.sha256(raw.encode('utf-8')).hexdigest()
    return STORAGE_KEY_PREFIX + digest[:STORAGE_KEY_DIGEST_LENGTH]
