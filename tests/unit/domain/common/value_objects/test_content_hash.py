"""Tests for the ContentHash value object."""

import hashlib

import pytest

from cardforge.domain.common.value_objects import ContentHash


class TestContentHash:
    def test_compute_is_sha256_hex(self) -> None:
        text = "Photosynthesis converts light into chemical energy."

        content_hash = ContentHash.compute(text)

        assert content_hash.value == hashlib.sha256(text.encode("utf-8")).hexdigest()
        assert str(content_hash) == content_hash.value

    def test_same_text_same_hash(self) -> None:
        assert ContentHash.compute("abc") == ContentHash.compute("abc")
        assert ContentHash.compute("abc") != ContentHash.compute("abd")

    def test_lone_surrogate_is_hashed(self) -> None:
        content_hash = ContentHash.compute("broken \ud800 text")

        assert len(content_hash.value) == 64
        assert content_hash != ContentHash.compute("broken \ud801 text")

    def test_empty_content_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ContentHash.compute("")

    @pytest.mark.parametrize("value", ["", "abc", "z" * 64])
    def test_invalid_values_are_rejected(self, value: str) -> None:
        with pytest.raises(ValueError):
            ContentHash(value)
