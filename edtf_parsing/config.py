"""Configuration loading for the EDTF parser."""

from __future__ import annotations

import os
from dataclasses import dataclass


_DEFAULT_MAX_INPUT_LENGTH = 1024
_DEFAULT_ACCEPT_OPEN_KEYWORD = True


@dataclass(frozen=True)
class ParserConfig:
    # 0 disables the length check.
    max_input_length: int = _DEFAULT_MAX_INPUT_LENGTH
    accept_open_keyword: bool = _DEFAULT_ACCEPT_OPEN_KEYWORD


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes")


def load_parser_config() -> ParserConfig:
    """Load parser configuration from environment variables."""
    max_input_length = _parse_int(os.getenv("EDTF_MAX_INPUT_LENGTH"), _DEFAULT_MAX_INPUT_LENGTH)
    if max_input_length < 0:
        raise ValueError("EDTF_MAX_INPUT_LENGTH must not be negative")

    return ParserConfig(
        max_input_length=max_input_length,
        accept_open_keyword=_parse_bool(
            os.getenv("EDTF_ACCEPT_OPEN_KEYWORD"),
            _DEFAULT_ACCEPT_OPEN_KEYWORD,
        ),
    )
