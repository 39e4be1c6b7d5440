"""Assign decoded configuration data onto a caller-owned model instance."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, create_model
from pydantic.fields import FieldInfo


def validate(target: BaseModel, data: Mapping[str, Any]) -> BaseModel:
    """Validate ``data`` against the target's model, with the target's current values as defaults.

    Raises:
        pydantic.ValidationError: ``data`` does not fit the model.
    """
    return overlay_model(target).model_validate(data)


def apply(target: BaseModel, decoded: BaseModel, names: Iterable[str] | None = None) -> set[str]:
    """Copy the fields ``decoded`` was given onto ``target``.

    Nested models are merged field by field, so nested fields the source did
    not mention keep their current values. ``names`` restricts which fields
    may be copied. Returns the names that were assigned.
    """
    supplied = set(decoded.model_fields_set) | set(decoded.model_extra or {})
    if names is not None:
        supplied &= set(names)

    for name in sorted(supplied):
        value = getattr(decoded, name)
        current = getattr(target, name, None)
        if isinstance(current, BaseModel) and isinstance(value, type(current)) and type(value) is not type(current):
            merged = current.model_copy(deep=True)
            apply(merged, value)
            value = merged
        setattr(target, name, value)
    return supplied


def assign[T: BaseModel](target: T, data: Mapping[str, Any]) -> set[str]:
    """Validate ``data`` and copy the supplied fields onto ``target``.

    Nothing is assigned when validation fails.

    Raises:
        pydantic.ValidationError: ``data`` does not fit the model.
    """
    return apply(target, validate(target, data))


def overlay_model(target: BaseModel) -> type[BaseModel]:
    """Subclass of the target's model whose field defaults are the target's current values."""
    model_cls = type(target)
    fields: dict[str, Any] = {}
    for name, info in model_cls.model_fields.items():
        annotation = info.annotation
        default = getattr(target, name)
        if isinstance(default, BaseModel) and annotation is type(default):
            annotation = overlay_model(default)
            default = annotation.model_validate({})
        fields[name] = (
            annotation,
            FieldInfo.merge_field_infos(info, default=default, default_factory=None),
        )
    return create_model(
        model_cls.__name__,
        __base__=model_cls,
        __module__=model_cls.__module__,
        **fields,
    )


def aliased_fields(model_cls: type[BaseModel]) -> set[str]:
    """Names of the fields that declare an explicit alias."""
    return {name for name, info in model_cls.model_fields.items() if info.alias or info.validation_alias}
