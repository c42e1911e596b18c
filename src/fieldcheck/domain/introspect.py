"""Record introspection — field descriptors and value lookup.

A record is an instance of a dataclass or of a pydantic model.  Rule
annotations live in field metadata under a tag key (``"validate"`` by
default)::

    @dataclass
    class User:
        name: str = rule_field("min:2")
        age: int = field(default=0, metadata={"validate": "minmax:18,99"})

    class Account(BaseModel):
        code: str = Field(json_schema_extra={"validate": "len:5"})

Names starting with an underscore are internal.  Descriptors are derived
from the record's type on every call; nothing is cached.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from fieldcheck.domain.errors import NotAStructError

DEFAULT_TAG_KEY = "validate"


@dataclass(frozen=True)
class FieldDescriptor:
    """Per-field metadata read from a record's type."""

    name: str
    exported: bool
    annotation: str = ""


def is_record(value: object) -> bool:
    """True for dataclass instances and pydantic model instances."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _annotation_from(metadata: Any, tag_key: str) -> str:
    if not isinstance(metadata, Mapping):
        return ""
    raw = metadata.get(tag_key, "")
    return raw if isinstance(raw, str) else ""


def describe(record: object, *, tag_key: str = DEFAULT_TAG_KEY) -> list[FieldDescriptor]:
    """Return one descriptor per field of *record*, in declaration order.

    Fields without an annotation are included with ``annotation=""``.

    Raises:
        NotAStructError: If *record* is not a dataclass or model instance.
    """
    if isinstance(record, BaseModel):
        return [
            FieldDescriptor(
                name=name,
                exported=not name.startswith("_"),
                annotation=_annotation_from(info.json_schema_extra, tag_key),
            )
            for name, info in type(record).model_fields.items()
        ]
    if is_record(record):
        return [
            FieldDescriptor(
                name=f.name,
                exported=not f.name.startswith("_"),
                annotation=_annotation_from(f.metadata, tag_key),
            )
            for f in dataclasses.fields(record)  # type: ignore[arg-type]
        ]
    raise NotAStructError


def get_value(record: object, name: str) -> Any:
    """Return the current value of field *name* on *record*.

    Only names produced by :func:`describe` on the same record are valid.

    Raises:
        NotAStructError: If *record* is not a dataclass or model instance.
        LookupError: If *name* is not a field of *record*.
    """
    if isinstance(record, BaseModel):
        names: Collection[str] = type(record).model_fields
    elif is_record(record):
        names = {f.name for f in dataclasses.fields(record)}  # type: ignore[arg-type]
    else:
        raise NotAStructError
    if name not in names:
        msg = f"{type(record).__name__!r} has no field {name!r}"
        raise LookupError(msg)
    return getattr(record, name)


def rule_field(annotation: str, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs: Any) -> Any:
    """``dataclasses.field`` carrying a rule annotation in its metadata."""
    metadata = {**kwargs.pop("metadata", {}), tag_key: annotation}
    return dataclasses.field(metadata=metadata, **kwargs)


def rule_model_field(annotation: str, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs: Any) -> Any:
    """``pydantic.Field`` carrying a rule annotation in ``json_schema_extra``."""
    extra = {**(kwargs.pop("json_schema_extra", None) or {}), tag_key: annotation}
    return Field(json_schema_extra=extra, **kwargs)
