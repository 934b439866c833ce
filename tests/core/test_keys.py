"""Tests for keys.py - Identity and property keys."""

import pytest

from ldgraph.keys import BlankId, Invalid, Key, Reference, is_absolute, key_iri


class TestIsAbsolute:
    """Tests for is_absolute()."""

    @pytest.mark.parametrize(
        "value",
        ["http://example.org/a", "urn:isbn:0451450523", "mailto:a@b.c", "tag+x.y-z:foo"],
    )
    def test_absolute(self, value):
        assert is_absolute(value)

    @pytest.mark.parametrize("value", ["relative/path", "#frag", "", "1http://x", "_:b0"])
    def test_not_absolute(self, value):
        assert not is_absolute(value)


class TestReference:
    def test_absolute_iri(self):
        ref = Reference("http://example.org/a")
        assert ref.iri() == "http://example.org/a"
        assert ref.as_str() == "http://example.org/a"
        assert str(ref) == "http://example.org/a"

    def test_relative_has_no_iri(self):
        assert Reference("a/b").iri() is None

    def test_equality_and_hash(self):
        assert Reference("x:a") == Reference("x:a")
        assert len({Reference("x:a"), Reference("x:a")}) == 1

    def test_satisfies_key_protocol(self):
        assert isinstance(Reference("x:a"), Key)


class TestBlankId:
    def test_parse(self):
        blank = BlankId.parse("_:b0")
        assert blank == BlankId("b0")
        assert blank.as_str() == "_:b0"
        assert blank.iri() is None

    @pytest.mark.parametrize("value", ["b0", "_:", "http://x"])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError, match="Not a blank node identifier"):
            BlankId.parse(value)


class TestInvalid:
    def test_never_an_iri(self):
        key = Invalid("http://looks.absolute")
        assert key.iri() is None
        assert key.as_str() == "http://looks.absolute"


class TestKeyIri:
    def test_none(self):
        assert key_iri(None) is None

    def test_plain_strings(self):
        assert key_iri("http://example.org/a") == "http://example.org/a"
        assert key_iri("_:b0") is None
        assert key_iri("name") is None

    def test_keys(self):
        assert key_iri(Reference("urn:x")) == "urn:x"
        assert key_iri(BlankId("b1")) is None

    def test_other_hashables(self):
        assert key_iri(42) is None
