"""Tests for MouseButton, Markup and Alignment codecs."""

import pytest

from i3bar_protocol.enums import (
    Alignment,
    Markup,
    MouseButton,
    decode_alignment,
    decode_markup,
    decode_mouse_button,
    encode_alignment,
    encode_markup,
    encode_mouse_button,
)
from i3bar_protocol.errors import InvalidData

KNOWN_CODES = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    4: MouseButton.WHEEL_UP,
    5: MouseButton.WHEEL_DOWN,
    8: MouseButton.BACK,
    9: MouseButton.FORWARD,
}


class TestMouseButton:
    """Permissive integer codec."""

    @pytest.mark.parametrize(("code", "button"), KNOWN_CODES.items())
    def test_known_codes_round_trip(self, code, button):
        """Known codes decode to their button and encode back to the same code."""
        assert decode_mouse_button(code) is button
        assert encode_mouse_button(button) == code

    @pytest.mark.parametrize("code", [0, 6, 7, 10, 255, -1, 2**40])
    def test_unknown_codes_decode_to_unknown(self, code):
        """Any other integer is UNKNOWN rather than an error."""
        assert decode_mouse_button(code) is MouseButton.UNKNOWN

    def test_unknown_encodes_as_zero(self):
        """UNKNOWN always encodes as 0, so code 7 does not survive a round trip."""
        assert encode_mouse_button(decode_mouse_button(7)) == 0
        assert MouseButton.UNKNOWN.code == 0

    @pytest.mark.parametrize("value", [True, 1.0, "1", None, [1], {"code": 1}])
    def test_non_integer_rejected(self, value):
        """Only JSON integers are button codes."""
        with pytest.raises(InvalidData, match="expected an integer button code"):
            decode_mouse_button(value)


class TestMarkup:
    """Strict string codec."""

    @pytest.mark.parametrize("markup", list(Markup))
    def test_round_trip(self, markup):
        """Every member survives encode then decode."""
        assert decode_markup(encode_markup(markup)) is markup

    def test_wire_strings(self):
        """Members encode as lowercase strings."""
        assert encode_markup(Markup.NONE) == "none"
        assert encode_markup(Markup.PANGO) == "pango"

    def test_unknown_string(self):
        """Unknown string names itself and the accepted values."""
        with pytest.raises(InvalidData) as exc_info:
            decode_markup("html")
        assert "'html'" in exc_info.value.message
        assert "'none'" in exc_info.value.message
        assert "'pango'" in exc_info.value.message

    def test_case_sensitive(self):
        """Uppercase variants are not accepted."""
        with pytest.raises(InvalidData):
            decode_markup("Pango")

    def test_non_string(self):
        """Non-string values are rejected."""
        with pytest.raises(InvalidData, match="expected a string"):
            decode_markup(1)


class TestAlignment:
    """Strict string codec."""

    @pytest.mark.parametrize("alignment", list(Alignment))
    def test_round_trip(self, alignment):
        """Every member survives encode then decode."""
        assert decode_alignment(encode_alignment(alignment)) is alignment

    def test_wire_strings(self):
        """Members encode as lowercase strings."""
        assert [encode_alignment(a) for a in Alignment] == ["left", "center", "right"]

    def test_unknown_string(self):
        """Unknown string names itself and the accepted values."""
        with pytest.raises(InvalidData) as exc_info:
            decode_alignment("justify")
        assert "'justify'" in exc_info.value.message
        assert "'left', 'center', 'right'" in exc_info.value.message

    def test_null_rejected(self):
        """JSON null is not an alignment."""
        with pytest.raises(InvalidData):
            decode_alignment(None)
