"""Description sinks — append-only text builders for matcher diagnostics.

Every append operation returns the sink itself so calls chain:

    description.append_text("map containing [").append_description_of(m)

Description implements all rendering rules on top of a single abstract
``append(text)`` primitive, so StringDescription and NullDescription only
differ in what they do with the final text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Final

from matchkit._types import SelfDescribing

if TYPE_CHECKING:
    from collections.abc import Iterable

_ESCAPES: Final = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class Description(ABC):
    """Base sink. Subclasses implement ``append``."""

    __slots__ = ()

    @abstractmethod
    def append(self, text: str) -> None:
        """Append raw text to the underlying buffer."""

    def append_text(self, text: str) -> Description:
        self.append(text)
        return self

    def append_description_of(self, value: SelfDescribing) -> Description:
        value.describe_to(self)
        return self

    def append_value(self, value: Any) -> Description:
        """Render an arbitrary value with the one canonical convention.

        - None renders as ``None``
        - strings render double-quoted with escapes: ``"a\\"b"``
        - lists and tuples render as ``[<1>, <2>]``
        - self-describing values render their own description
        - anything else renders as ``<str(value)>``
        """
        if value is None:
            self.append("None")
        elif isinstance(value, str):
            self._append_quoted(value)
        elif not isinstance(value, type) and isinstance(value, SelfDescribing):
            value.describe_to(self)
        elif isinstance(value, list | tuple):
            self.append_value_list("[", ", ", "]", value)
        else:
            self.append("<")
            self.append(str(value))
            self.append(">")
        return self

    def append_value_list(
        self, start: str, separator: str, end: str, values: Iterable[Any]
    ) -> Description:
        self.append(start)
        for i, value in enumerate(values):
            if i:
                self.append(separator)
            self.append_value(value)
        self.append(end)
        return self

    def append_list(
        self,
        start: str,
        separator: str,
        end: str,
        values: Iterable[SelfDescribing],
    ) -> Description:
        self.append(start)
        for i, value in enumerate(values):
            if i:
                self.append(separator)
            self.append_description_of(value)
        self.append(end)
        return self

    def _append_quoted(self, text: str) -> None:
        self.append('"')
        self.append("".join(_ESCAPES.get(ch, ch) for ch in text))
        self.append('"')


class StringDescription(Description):
    """Collects appended text; ``str()`` returns it."""

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> None:
        self._parts.append(text)

    def __str__(self) -> str:
        return "".join(self._parts)

    @staticmethod
    def to_string(value: SelfDescribing) -> str:
        """Render the description of a self-describing value."""
        return str(StringDescription().append_description_of(value))


class NullDescription(Description):
    """A sink that discards everything.

    Used to run diagnosing logic purely for its boolean outcome without
    building any text. Stateless, so one shared instance serves every caller.
    """

    __slots__ = ()

    def append(self, text: str) -> None:
        pass

    def append_text(self, text: str) -> Description:
        return self

    def append_description_of(self, value: SelfDescribing) -> Description:
        return self

    def append_value(self, value: Any) -> Description:
        return self

    def append_value_list(
        self, start: str, separator: str, end: str, values: Iterable[Any]
    ) -> Description:
        return self

    def append_list(
        self,
        start: str,
        separator: str,
        end: str,
        values: Iterable[SelfDescribing],
    ) -> Description:
        return self

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "NULL_DESCRIPTION"


NULL_DESCRIPTION: Final[Description] = NullDescription()


def to_string(value: SelfDescribing) -> str:
    """Shortcut for ``StringDescription.to_string``."""
    return StringDescription.to_string(value)
