"""
tests/unit/test_formats.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for the composite-code formats.
"""
from __future__ import annotations

import pytest

from harvey_client.domain.formats import (
    format_kov,
    format_kov_school_code,
    is_eduid,
    is_kodfak,
    is_kov,
    is_kov_school,
)


def test_eduid():
    assert is_eduid("000160024")
    assert not is_eduid("16002")


def test_kodfak():
    assert is_kodfak("1234")
    assert not is_kodfak("12a4")


def test_kov():
    assert is_kov("2381H11")
    assert not is_kov("2381-11")


def test_format_kov():
    assert format_kov("2381", "H", "11") == "2381H11"


def test_format_kov_school_code():
    code = format_kov_school_code("01", "000160024", "2381H11")
    assert code == "01.000160024.2381H11"
    assert is_kov_school(code)


def test_format_kov_school_code_rejects_bad_parts():
    with pytest.raises(ValueError):
        format_kov_school_code("1", "160024", "2381H11")
