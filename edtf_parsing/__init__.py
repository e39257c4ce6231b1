"""EDTF parsing module for reading and writing Extended Date/Time Format strings.

This module parses EDTF text into immutable date values, covering dates at
year, month and day precision, seasons, expanded years, uncertainty and
approximation markers, intervals, lists and dates with unspecified ('X')
digits, and renders those values back into canonical EDTF text.
"""

from edtf_parsing.bounds import date_bounds, edtf_bounds
from edtf_parsing.config import ParserConfig, load_parser_config
from edtf_parsing.edtf import (
    AnnotatedDate,
    DatePrecision,
    DateValue,
    Edtf,
    EdtfList,
    Interval,
    Month,
    Season,
    SeasonName,
    Single,
    Year,
    YearMonth,
    YearMonthDay,
)
from edtf_parsing.edtf_parser import EdtfParser, parse_edtf, try_parse_edtf
from edtf_parsing.errors import EdtfParseError, ParseErrorEntry
from edtf_parsing.formatter import format_annotated_date, format_date_value, format_edtf

__all__ = [
    "AnnotatedDate",
    "DatePrecision",
    "DateValue",
    "Edtf",
    "EdtfList",
    "EdtfParseError",
    "EdtfParser",
    "Interval",
    "Month",
    "ParseErrorEntry",
    "ParserConfig",
    "Season",
    "SeasonName",
    "Single",
    "Year",
    "YearMonth",
    "YearMonthDay",
    "date_bounds",
    "edtf_bounds",
    "format_annotated_date",
    "format_date_value",
    "format_edtf",
    "load_parser_config",
    "parse_edtf",
    "try_parse_edtf",
]
