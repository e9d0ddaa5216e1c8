"""Time stamps in nanoseconds since 1601 with local, DOS and Unix forms."""

import time
from dataclasses import dataclass

TICKS_PER_SECOND = 1_000_000_000
REMINDER_PRECISION = TICKS_PER_SECOND

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
# Nanoseconds between 1601-01-01 and 1970-01-01.
_UNIX_SHIFT_NS = 11644473600000000000
_WIN_TICK_NS = TICKS_PER_SECOND // 10_000_000


@dataclass
class RarLocalTime:
    """Broken down local time.

    ``reminder`` is the part below one second in nanoseconds, ``wday`` the
    day of week with Sunday as 0 and ``yday`` the zero based day of year.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    reminder: int = 0
    wday: int = 0
    yday: int = 0


def is_leap_year(year):
    """True for Gregorian leap years."""
    return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(order=True)
class RarTime:
    """A point in time, stored as nanoseconds since 1601-01-01 UTC.

    Zero means the time is not set.
    """

    itime: int = 0

    @classmethod
    def from_win(cls, value):
        """From a Windows FILETIME value in 100 ns units."""
        return cls((value * _WIN_TICK_NS) & _MASK64)

    @classmethod
    def from_unix(cls, seconds):
        """From Unix time in whole seconds."""
        return cls.from_unix_ns((seconds & _MASK64) * 1_000_000_000)

    @classmethod
    def from_unix_ns(cls, ns):
        """From Unix time in nanoseconds."""
        return cls(((ns + _UNIX_SHIFT_NS) & _MASK64) // (1_000_000_000 // TICKS_PER_SECOND))

    @classmethod
    def from_local(cls, lt):
        """From a broken down local time; weekday and year day are ignored."""
        seconds = time.mktime(
            (lt.year, lt.month, lt.day, lt.hour, lt.minute, lt.second, 0, 0, -1)
        )
        result = cls.from_unix(int(seconds))
        result.itime = (result.itime + lt.reminder) & _MASK64
        return result

    @classmethod
    def from_dos(cls, dos_time):
        """From a packed DOS date and time in local time."""
        lt = RarLocalTime(
            year=(dos_time >> 25) + 1980,
            month=(dos_time >> 21) & 0x0F,
            day=(dos_time >> 16) & 0x1F,
            hour=(dos_time >> 11) & 0x1F,
            minute=(dos_time >> 5) & 0x3F,
            second=(dos_time & 0x1F) * 2,
        )
        return cls.from_local(lt)

    @classmethod
    def from_iso_text(cls, text):
        """From local time text such as '2021-03-04 05:06:07'.

        Only digits count: four for the year, then two for each next field.
        Missing month and day default to 1.
        """
        fields = [0] * 6
        digit_count = 0
        for ch in text:
            if "0" <= ch <= "9":
                field_pos = 0 if digit_count < 4 else (digit_count - 4) // 2 + 1
                if field_pos < len(fields):
                    fields[field_pos] = fields[field_pos] * 10 + ord(ch) - ord("0")
                digit_count += 1
        lt = RarLocalTime(
            year=fields[0],
            month=fields[1] or 1,
            day=fields[2] or 1,
            hour=fields[3],
            minute=fields[4],
            second=fields[5],
        )
        return cls.from_local(lt)

    @classmethod
    def from_age_text(cls, text):
        """The current time minus an age such as '1d2h3m4s'."""
        units = {"D": 24 * 3600, "H": 3600, "M": 60, "S": 1}
        seconds = 0
        value = 0
        for ch in text:
            if "0" <= ch <= "9":
                value = (value * 10 + ord(ch) - ord("0")) & _MASK32
            else:
                factor = units.get(ch.upper() if "a" <= ch <= "z" else ch)
                if factor is not None:
                    seconds = (seconds + value * factor) & _MASK32
                value = 0
        result = cls.now()
        result.itime = (result.itime - seconds * TICKS_PER_SECOND) & _MASK64
        return result

    @classmethod
    def now(cls):
        """The current time with whole second precision."""
        return cls.from_unix(int(time.time()))

    def win(self):
        """Windows FILETIME value in 100 ns units."""
        return self.itime // _WIN_TICK_NS

    def unix_ns(self):
        """Unix time in nanoseconds, wrapped to 64 bits."""
        return (self.itime * (1_000_000_000 // TICKS_PER_SECOND) - _UNIX_SHIFT_NS) & _MASK64

    def unix(self):
        """Unix time in whole seconds."""
        return self.unix_ns() // 1_000_000_000

    def local(self):
        """Broken down local time."""
        t = time.localtime(self.unix())
        return RarLocalTime(
            year=t.tm_year,
            month=t.tm_mon,
            day=t.tm_mday,
            hour=t.tm_hour,
            minute=t.tm_min,
            second=t.tm_sec,
            reminder=self.itime % TICKS_PER_SECOND,
            wday=(t.tm_wday + 1) % 7,
            yday=t.tm_yday - 1,
        )

    def dos(self):
        """Packed DOS date and time in local time."""
        lt = self.local()
        value = (
            (lt.second // 2)
            | (lt.minute << 5)
            | (lt.hour << 11)
            | (lt.day << 16)
            | (lt.month << 21)
            | ((lt.year - 1980) << 25)
        )
        return value & _MASK32

    def text(self, full_ms=False):
        """Local time as text, with nanoseconds if ``full_ms`` is true."""
        if not self.is_set():
            return "????-??-?? ??:??"
        lt = self.local()
        if full_ms:
            return (
                f"{lt.year}-{lt.month:02}-{lt.day:02} "
                f"{lt.hour:02}:{lt.minute:02}:{lt.second:02},{lt.reminder:09}"
            )
        return f"{lt.year}-{lt.month:02}-{lt.day:02} {lt.hour:02}:{lt.minute:02}"

    def is_set(self):
        return self.itime != 0

    def adjust(self, ns):
        """Add a signed number of nanoseconds."""
        ticks = int(ns / (1_000_000_000 // TICKS_PER_SECOND))
        self.itime = (self.itime + ticks) & _MASK64