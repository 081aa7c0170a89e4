"""Calendar date validation.

Dates are plain ``(day, month, year)`` integer triples on the proleptic
Gregorian calendar. Years start at 1; there is no year zero.
"""

from utilkit.errors import InvalidArgumentError

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_int(value: object) -> bool:
    # bool is a subclass of int but is never a valid date component
    return isinstance(value, int) and not isinstance(value, bool)


def is_leap_year(year: int) -> bool:
    """Return True if `year` is a Gregorian leap year.

    A year is a leap year when it is divisible by 4, except for centuries,
    which must also be divisible by 400.
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in `month` of `year`.

    Args:
        month: Month number, 1 (January) through 12 (December).
        year: Year, used to decide the length of February.

    Raises:
        InvalidArgumentError: If `month` is not in [1, 12].
    """
    if not _is_int(month) or not 1 <= month <= 12:
        raise InvalidArgumentError("month", month, "must be an integer in [1, 12]")
    days = list(DAYS_PER_MONTH)
    if is_leap_year(year):
        days[1] = 29
    return days[month - 1]


def is_valid_date(day: object, month: object, year: object) -> bool:
    """Check whether a day/month/year triple names a real calendar date.

    Never raises: values of the wrong type and out-of-range components are
    reported as invalid.

    Args:
        day: Day of the month.
        month: Month number (1-12).
        year: Year (>= 1).

    Returns:
        bool: True if the date exists, False otherwise.

    Example:
        >>> is_valid_date(29, 2, 2024)
        True
        >>> is_valid_date(29, 2, 2023)
        False
    """
    if not (_is_int(day) and _is_int(month) and _is_int(year)):
        return False
    if month < 1 or month > 12 or day < 1 or year < 1:  # type: ignore[operator]
        return False
    return day <= days_in_month(month, year)  # type: ignore[arg-type,operator]
