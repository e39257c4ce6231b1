"""Canonical text rendering of parsed EDTF values.

The output is normalized rather than echoed: '2004?~' comes back as '2004%',
and an interval side left empty in the input ('2020/') comes back as '..'.
"""

from edtf_parsing.edtf import (
    AnnotatedDate,
    DateValue,
    Edtf,
    EdtfList,
    Interval,
    Season,
    Single,
    Year,
    YearMonth,
    YearMonthDay,
)

OPEN_SIDE = ".."


def format_year(year: int) -> str:
    """Four zero-padded digits, or 'Y' plus the signed value when that doesn't fit."""
    if abs(year) >= 10000 or year < 0:
        return f"Y{year}"
    return f"{year:04d}"


def format_date_value(value: DateValue) -> str:
    if isinstance(value, YearMonthDay):
        return f"{format_year(value.year)}-{value.month:02d}-{value.day:02d}"
    if isinstance(value, YearMonth):
        return f"{format_year(value.year)}-{value.month:02d}"
    if isinstance(value, Season):
        return f"{format_year(value.year)}-{value.season:02d}"
    if isinstance(value, Year):
        return format_year(value.year)
    raise TypeError(f"Not an EDTF date value: {value!r}")


def format_qualifiers(uncertain: bool, approximate: bool) -> str:
    if uncertain and approximate:
        return "%"
    return ("?" if uncertain else "") + ("~" if approximate else "")


def format_annotated_date(date: AnnotatedDate) -> str:
    return format_date_value(date.date) + format_qualifiers(date.uncertain, date.approximate)


def format_edtf(value: Edtf) -> str:
    """Render an EDTF value as canonical EDTF text.

    Args:
        value: A Single, Interval or EdtfList

    Returns:
        The canonical string form
    """
    if isinstance(value, Single):
        return format_annotated_date(value.date)
    if isinstance(value, Interval):
        start = OPEN_SIDE if value.start is None else format_annotated_date(value.start)
        end = OPEN_SIDE if value.end is None else format_annotated_date(value.end)
        return f"{start}/{end}"
    if isinstance(value, EdtfList):
        return ",".join(format_edtf(item) for item in value.items)
    raise TypeError(f"Not an EDTF value: {value!r}")
