""" anonymization rules and random shift sources """
# coding=utf-8
import datetime
import random
import threading
import logging
from collections import namedtuple

LOGGER = logging.getLogger(__name__)

# rule kinds
PRESERVE = "preserve"
REPLACE = "replace"
SHIFT_DATE = "shift-date"

KINDS = (PRESERVE, REPLACE, SHIFT_DATE)

DATE_FORMAT = "%Y%m%d"

# date shift range: [1, 365) days
MIN_SHIFT = 1
MAX_SHIFT = 365


class RandomShiftSource:
    """thread-safe random integer generator"""

    def __init__(self, seed=None):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def next(self, low, high):
        """return random integer in [low, high)"""
        with self._lock:
            return self._random.randrange(low, high)


class FixedShiftSource:
    """always return the same offset"""

    def __init__(self, offset):
        self.offset = offset

    def next(self, low, high):
        return self.offset


# process-wide generator
DEFAULT_SOURCE = RandomShiftSource()


class Rule(namedtuple("Rule", ["tag", "kind", "text", "source"])):
    """anonymization rule bound to a single tag

    Use the constructors: Rule.preserve, Rule.replace, Rule.shift_date
    """

    __slots__ = ()

    def __new__(cls, tag, kind, text=None, source=None):
        if kind not in KINDS:
            raise ValueError(f"Unknown rule kind: {kind}")
        if kind == REPLACE and text is None:
            raise ValueError("A replacement text is required")
        if kind == SHIFT_DATE and source is None:
            source = DEFAULT_SOURCE
        return super().__new__(cls, tag, kind, text, source)

    @classmethod
    def preserve(cls, tag):
        """keep the original value"""
        return cls(tag, PRESERVE)

    @classmethod
    def replace(cls, tag, text):
        """replace value with a constant"""
        return cls(tag, REPLACE, text=text)

    @classmethod
    def shift_date(cls, tag, source=None):
        """subtract a random number of days from a YYYYMMDD date"""
        return cls(tag, SHIFT_DATE, source=source)

    def __repr__(self):
        if self.kind == REPLACE:
            return f"Rule({self.tag}, {self.kind}, {self.text!r})"
        return f"Rule({self.tag}, {self.kind})"

    def apply(self, attribute):
        """return the anonymized value of attribute (an AttributeValue)"""
        value = attribute.value
        if self.kind == PRESERVE:
            return value
        elif self.kind == REPLACE:
            return self.text
        elif self.kind == SHIFT_DATE:
            return shift_date(value, self.source)
        raise ValueError(f"Unknown rule kind: {self.kind}")


def parse_date(value):
    """parse strict YYYYMMDD string, return None if invalid"""
    if not isinstance(value, str) or len(value) != 8:
        return None
    elif not (value.isascii() and value.isdigit()):
        return None
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        # invalid calendar date
        return None


def shift_date(value, source):
    """subtract [1, 365) days from date, or return value unchanged"""
    date = parse_date(value)
    if date is None:
        LOGGER.debug(f"Not a date, keep value: {value!r}")
        return value
    offset = source.next(MIN_SHIFT, MAX_SHIFT)
    try:
        return (date - datetime.timedelta(days=offset)).strftime(DATE_FORMAT)
    except OverflowError:
        # before year 1
        return value
