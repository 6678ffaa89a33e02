"""Type definitions for tagbind."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DataTypeCategory(str, Enum):
    """Semantic data type of a server-side property."""

    PLAIN = "Plain"
    DATE = "Date"
    DATETIME = "DateTime"
    TIME = "Time"

    @property
    def is_temporal(self) -> bool:
        return self is not DataTypeCategory.PLAIN

    @classmethod
    def parse(cls, value: Any) -> "DataTypeCategory":
        """Parse a data type name; anything unrecognized is Plain.

        Accepts members, the declared names ("Date", "DateTime", "Time")
        in any case, and snake-case spellings such as "date_time".
        """
        if isinstance(value, DataTypeCategory):
            return value
        if not isinstance(value, str):
            return cls.PLAIN

        key = value.strip().replace("_", "").replace("-", "").lower()
        return _CATEGORY_NAMES.get(key, cls.PLAIN)

    @classmethod
    def from_python_type(cls, type_: Any) -> "DataTypeCategory":
        """Map a Python type to its category.

        ``datetime.datetime`` is checked before ``datetime.date`` since it
        is a subclass of it.
        """
        if not isinstance(type_, type):
            return cls.PLAIN
        if issubclass(type_, dt.datetime):
            return cls.DATETIME
        if issubclass(type_, dt.date):
            return cls.DATE
        if issubclass(type_, dt.time):
            return cls.TIME
        return cls.PLAIN


_CATEGORY_NAMES: dict[str, DataTypeCategory] = {
    "plain": DataTypeCategory.PLAIN,
    "date": DataTypeCategory.DATE,
    "datetime": DataTypeCategory.DATETIME,
    "time": DataTypeCategory.TIME,
}


@dataclass(frozen=True)
class LocalePattern:
    """Short date and time patterns of a culture.

    Patterns use single-letter culture tokens: ``d`` day, ``M`` month,
    ``y`` year, ``h``/``H`` hour, ``m`` minute, ``s`` second and ``tt``
    for the AM/PM designator.

    Attributes:
        name: Culture name (e.g. "en-US"). Empty for the invariant culture.
        short_date_pattern: Short date pattern (e.g. "M/d/yyyy").
        short_time_pattern: Short time pattern (e.g. "h:mm tt").
    """

    name: str
    short_date_pattern: str
    short_time_pattern: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "short_date_pattern": self.short_date_pattern,
            "short_time_pattern": self.short_time_pattern,
        }


@dataclass(frozen=True)
class PropertyDescriptor:
    """A server-side property as seen by the expression builder.

    Attributes:
        name: Property name, already in client naming (e.g. "orderDate").
        data_type: Declared semantic data type.
        binding_path: Explicit client binding path. When None the path is
            composed from the name and the render options.
    """

    name: str
    data_type: DataTypeCategory = DataTypeCategory.PLAIN
    binding_path: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.data_type, DataTypeCategory):
            object.__setattr__(self, "data_type", DataTypeCategory.parse(self.data_type))

    @classmethod
    def from_field(cls, field_name: str, type_: Any = None) -> "PropertyDescriptor":
        """Build a descriptor from a server field name and type.

        Args:
            field_name: Server-side name, camel-cased for the client.
            type_: A data type name or a Python type.

        Returns:
            PropertyDescriptor.
        """
        from tagbind.naming import camelize

        if isinstance(type_, type):
            category = DataTypeCategory.from_python_type(type_)
        else:
            category = DataTypeCategory.parse(type_)
        return cls(name=camelize(field_name), data_type=category)


@dataclass(frozen=True)
class RenderOptions:
    """Per-invocation rendering options.

    Empty strings are treated the same as None.

    Attributes:
        parent_alias: Parent object the path is qualified with.
        var_alias: Alternate variable name replacing the property name.
        pipe_spec: Client value pipe (e.g. "currency" or "percent:'1.2-2'").
        locale_override: Culture name used instead of the active locale.
        custom_format: Verbatim date format; bypasses locale resolution.
        data_type_override: Category used instead of the declared one.
    """

    parent_alias: str | None = None
    var_alias: str | None = None
    pipe_spec: str | None = None
    locale_override: str | None = None
    custom_format: str | None = None
    data_type_override: DataTypeCategory | None = field(default=None)
