"""Human-friendly labels for diary entry timestamps."""

import locale
import os
from dataclasses import dataclass
from datetime import date as Date
from datetime import datetime, timedelta


@dataclass(frozen=True)
class _Wording:
    today: str
    yesterday: str
    months: tuple[str, ...]
    weekdays: tuple[str, ...]


_ENGLISH = _Wording(
    today="today",
    yesterday="yesterday",
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    weekdays=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
)

# Month names in the genitive case, as used after a day number.
_RUSSIAN = _Wording(
    today="сегодня",
    yesterday="вчера",
    months=(
        "января", "февраля", "марта", "апреля", "мая", "июня",
        "июля", "августа", "сентября", "октября", "ноября", "декабря",
    ),
    weekdays=(
        "понедельник", "вторник", "среда", "четверг", "пятница", "суббота", "воскресенье",
    ),
)


def _format(moment: datetime, today: Date | None, wording: _Wording) -> str:
    if today is None:
        today = Date.today()
    day = moment.date()
    month = wording.months[day.month - 1]
    stamp = f"{day.day} {month} {moment:%H:%M}"

    if day == today:
        return f"{wording.today}, {stamp}"
    if day == today - timedelta(days=1):
        return f"{wording.yesterday}, {stamp}"
    if day >= today - timedelta(days=6):
        return f"{wording.weekdays[day.weekday()].lower()}, {stamp}"
    return f"{day.day} {month} {day.year:04d}"


def format_russian(date: datetime, today: Date | None = None) -> str:
    """Describe ``date`` relative to ``today`` in Russian."""
    return _format(date, today, _RUSSIAN)


def format_international(date: datetime, today: Date | None = None) -> str:
    """Describe ``date`` relative to ``today`` in English."""
    return _format(date, today, _ENGLISH)


def system_language() -> str:
    """Return the two-letter code of the user's language, ``en`` if unknown."""
    value = ""
    for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(variable, "")
        if value:
            break
    else:
        value = locale.getlocale()[0] or ""
    code = value.split(".")[0].split("@")[0].split("_")[0].split("-")[0].lower()
    if not code or code in ("c", "posix"):
        return "en"
    return code


def format_date(date: datetime, today: Date | None = None, language: str | None = None) -> str:
    """Describe ``date`` in Russian for Russian speakers, in English otherwise."""
    if language is None:
        language = system_language()
    if language == "ru":
        return format_russian(date, today)
    return format_international(date, today)