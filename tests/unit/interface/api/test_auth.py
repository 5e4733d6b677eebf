"""Unit tests for bearer token extraction."""

import pytest

from devfeed.interface.api.auth import bearer_token


class TestBearerToken:
    """Tests for bearer_token."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
            ("Bearer   abc  ", "abc"),
            (None, None),
            ("", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("Basic dXNlcjpwYXNz", None),
        ],
    )
    def test_extracts_token(self, header, expected):
        assert bearer_token(header) == expected
