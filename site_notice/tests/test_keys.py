"""
Unit tests for the dismissal storage key.
"""
import hashlib
import random
import re
import string

from site_notice.keys import derive_key

KEY_PATTERN = re.compile(r'^site_notice_[0-9a-f]{16}$')


class TestDeriveKey:
    """Tests for derive_key()."""

    def test_matches_sha256_prefix(self):
        raw = 'Important notice|2023-11-14T22:13:10+00:00|2023-11-15T00:13:20+00:00|abc'
        expected = 'site_notice_' + hashlib.sha256(raw.encode('utf-8')).hexdigest()[:16]
        key = derive_key('Important notice', '2023-11-14T22:13:10+00:00', '2023-11-15T00:13:20+00:00', 'abc')
        assert key == expected

    def test_format(self):
        assert KEY_PATTERN.match(derive_key('Hello', '', '', ''))

    def test_deterministic(self):
        first = derive_key('msg', '2024-01-01T00:00:00+00:00', '', 'salt')
        second = derive_key('msg', '2024-01-01T00:00:00+00:00', '', 'salt')
        assert first == second

    def test_none_is_empty_string(self):
        assert derive_key('msg', None, None, None) == derive_key('msg', '', '', '')

    def test_each_field_changes_the_key(self):
        base = ('msg', '2024-01-01T00:00:00+00:00', '2024-02-01T00:00:00+00:00', 'salt')
        base_key = derive_key(*base)
        for index in range(4):
            changed = list(base)
            changed[index] = changed[index] + 'x'
            assert derive_key(*changed) != base_key

    def test_empty_field_position_matters(self):
        """Moving a value between fields must not produce the same key."""
        assert derive_key('a', '', '', '') != derive_key('', 'a', '', '')
        assert derive_key('', '', 'a', '') != derive_key('', '', '', 'a')

    def test_unicode_message(self):
        key = derive_key('メンテナンスのお知らせ', '', '', '')
        assert KEY_PATTERN.match(key)

    def test_no_collisions_across_random_inputs(self):
        rng = random.Random(20231114)
        alphabet = string.ascii_letters + string.digits + ' :-+'

        def word():
            return ''.join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))

        tuples = {(word(), word(), word(), word()) for _ in range(3000)}
        keys = {derive_key(*fields) for fields in tuples}
        assert len(keys) == len(tuples)
