"""Tests for colour_by_value.core.hsl — complementary colours from the rolling hash."""

import pytest
from colour_by_value.core.hashing import rolling_hash
from colour_by_value.core.hsl import BACKGROUND, FOREGROUND, Hsl, colour_for, colour_pair


class TestHsl:
    def test_red(self):
        assert Hsl(0, 100, 50).to_rgb() == (255, 0, 0)
        assert Hsl(0, 100, 50).to_hex() == '#FF0000'

    def test_white_and_black(self):
        assert Hsl(200, 50, 100).to_hex() == '#FFFFFF'
        assert Hsl(200, 50, 0).to_hex() == '#000000'

    def test_grey_ignores_hue(self):
        assert Hsl(0, 0, 50).to_rgb() == Hsl(180, 0, 50).to_rgb()

    def test_css(self):
        assert Hsl(97, 77, 62).css() == 'hsl(97, 77%, 62%)'

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Hsl(1, 2, 3).hue = 4


class TestColourFor:
    def test_known_value(self):
        # rolling_hash('a') == 97
        assert colour_for('a', BACKGROUND) == Hsl(97, 77, 62)
        assert colour_for('a', FOREGROUND) == Hsl(277, 97, 85)

    def test_even_hash_gets_dark_text(self):
        # rolling_hash('b') == 98
        assert colour_for('b', FOREGROUND).lightness == 15

    def test_foreground_hue_is_complement(self):
        for i in range(200):
            bg, fg = colour_pair(f'tag-{i}')
            assert fg.hue == (bg.hue + 180) % 360

    def test_ranges(self):
        for i in range(500):
            bg, fg = colour_pair(f'row {i}')
            assert 0 <= bg.hue < 360
            assert 70 <= bg.saturation < 100
            assert 45 <= bg.lightness < 65
            assert 80 <= fg.saturation < 100
            assert fg.lightness in (15, 85)

    def test_lightness_follows_parity(self):
        for text in ('alpha', 'beta', 'gamma', 'delta'):
            expected = 15 if rolling_hash(text) % 2 == 0 else 85
            assert colour_for(text, FOREGROUND).lightness == expected

    def test_pair_matches_single_role(self):
        assert colour_pair('Apple') == (colour_for('Apple', BACKGROUND), colour_for('Apple', FOREGROUND))

    def test_deterministic(self):
        assert colour_pair('Apple') == colour_pair('Apple')

    def test_unknown_role(self):
        with pytest.raises(ValueError, match='role'):
            colour_for('a', 'border')
