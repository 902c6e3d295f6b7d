"""
domain/formats.py
──────────────────────────────────────────────────────────────────────────────
printf-style formats and regular expressions describing the structure of the
composite codes used by the Harvey API.

  EDUID        school identifier           9 digits
  KODFAK       faculty code                4 digits
  KOV          study field code            7 alphanumerics (4 + 1 + 2)
  KOV-school   study field at a school     NN.XXXXXXXXX.XXXXXXX
  ISCO code    occupation code prefix      1–7 digits
"""
from __future__ import annotations

import re

KOV_SCHOOL_FORMAT = "%2s.%9s.%7s"
KOV_FORMAT = "%4s%1s%2s"

EDUID_REGEX = r"^[0-9]{9}$"
KODFAK_REGEX = r"^[0-9]{4}$"
KOV_REGEX = r"^[0-9a-zA-Z]{7}$"
KOV_SCHOOL_REGEX = r"^[0-9]{2}\.[0-9a-zA-Z]{9}\.[0-9a-zA-Z]{7}$"
ISCO_CODE_REGEX = r"^[0-9]{1,7}$"


def is_eduid(value: str) -> bool:
    return re.match(EDUID_REGEX, value) is not None


def is_kodfak(value: str) -> bool:
    return re.match(KODFAK_REGEX, value) is not None


def is_kov(value: str) -> bool:
    return re.match(KOV_REGEX, value) is not None


def is_kov_school(value: str) -> bool:
    return re.match(KOV_SCHOOL_REGEX, value) is not None


def format_kov(group: str, level: str, number: str) -> str:
    """Assemble a KOV code from its three parts, e.g. ("2381", "H", "11")."""
    return KOV_FORMAT % (group, level, number)


def format_kov_school_code(prefix: str, eduid: str, kov: str) -> str:
    """Assemble a composite KOV-school code, e.g. "01.000160024.2381H11".

    Raises:
        ValueError: If the result does not match KOV_SCHOOL_REGEX.
    """
    code = KOV_SCHOOL_FORMAT % (prefix, eduid, kov)
    if not is_kov_school(code):
        raise ValueError(f"Invalid KOV-school code: {code!r}")
    return code
