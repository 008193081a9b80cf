# apps/results_page/selectors.py
"""
Selector kinds and the per-request selector pair.

This module does not import Django so the headless page client can share it.
"""

from dataclasses import dataclass
from enum import Enum


class SelectorKind(Enum):
    EVENT = 'event'
    USER = 'user'

    @property
    def param(self):
        """Query parameter carrying this selector on the results page."""
        return _WIRE[self]['param']

    @property
    def default(self):
        return _WIRE[self]['default']

    @property
    def lookup_path(self):
        return _WIRE[self]['lookup_path']

    @property
    def id_field(self):
        return _WIRE[self]['id_field']

    @property
    def label_field(self):
        return _WIRE[self]['label_field']


_WIRE = {
    SelectorKind.EVENT: {
        'param': 'eventid',
        'default': '1',
        'lookup_path': '/search-events',
        'id_field': 'eventno',
        'label_field': 'eventname',
    },
    SelectorKind.USER: {
        'param': 'userno',
        'default': '0',
        'lookup_path': '/search-users',
        'id_field': 'userno',
        'label_field': 'username',
    },
}


@dataclass(frozen=True)
class SelectorValue:
    kind: SelectorKind
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError(f"{self.kind.value} selector value must not be empty")

    @classmethod
    def from_param(cls, kind, raw):
        """Build a value from a raw request parameter, falling back to the kind's default."""
        return cls(kind, raw if raw else kind.default)

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class SelectorPair:
    """The (event, user) pair that parameterizes the results view."""

    event: SelectorValue
    user: SelectorValue

    @classmethod
    def from_params(cls, params):
        """
        Read both selectors from a mapping of request parameters.

        Missing or empty values are replaced by their defaults here and
        nowhere else.
        """
        return cls(
            event=SelectorValue.from_param(SelectorKind.EVENT, params.get(SelectorKind.EVENT.param)),
            user=SelectorValue.from_param(SelectorKind.USER, params.get(SelectorKind.USER.param)),
        )

    @classmethod
    def of(cls, eventid, userno):
        return cls(
            event=SelectorValue(SelectorKind.EVENT, eventid),
            user=SelectorValue(SelectorKind.USER, userno),
        )

    def get(self, kind):
        return self.event if kind is SelectorKind.EVENT else self.user

    def replace(self, kind, value):
        """Return a new pair with the entry for ``kind`` set to ``value``."""
        new_value = SelectorValue(kind, value)
        if kind is SelectorKind.EVENT:
            return SelectorPair(event=new_value, user=self.user)
        return SelectorPair(event=self.event, user=new_value)

    def as_params(self):
        # Event first, then user
        return {
            SelectorKind.EVENT.param: self.event.value,
            SelectorKind.USER.param: self.user.value,
        }


@dataclass(frozen=True)
class Candidate:
    """One selectable search result."""

    id: str
    label: str

    def to_record(self, kind):
        return {kind.id_field: self.id, kind.label_field: self.label}

    @classmethod
    def from_record(cls, kind, record):
        return cls(id=str(record[kind.id_field]), label=str(record[kind.label_field]))
