# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Declarative Flag Definitions with Pydantic Models.

The `model` module allows flags to be declared as the fields of a `pydantic`
model instead of calling the `define_*` methods one by one:

```python
class Options(BaseModel):
    port: int = FlagField(8080, description="port to listen on", short="p")
    debug: bool = FlagField(False, description="enable debug logging")

fs = FlagSet("server")
define_model(fs, Options)
if fs.parse(sys.argv):
    options = bind_model(fs, Options)
```

Only `int`, `float`, `bool` and `str` fields are supported. Underscores in
field names become dashes in flag names.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

from flagset.exceptions import FlagDefinitionError
from flagset.flag import Flag
from flagset.flagset import FlagSet
from flagset.value import Kind

ModelT = TypeVar("ModelT", bound=BaseModel)

SHORT_KEY = "flag_short"


def FlagField(  # noqa: N802
    default: Any = PydanticUndefined,
    *,
    description: str | None = None,
    short: str | None = None,
    **kwargs: Any,
) -> Any:
    """A `pydantic.Field` which carries an optional single character alias.

    :param default: The flag default; required fields default to the zero
                    value of their kind when defined as a flag.
    :param description: Used as the usage text of the flag.
    :param short: The single character alias, usable as ``-x``.
    """
    extra = {SHORT_KEY: short} if short is not None else None
    return Field(default, description=description, json_schema_extra=extra, **kwargs)


def flag_name(field_name: str) -> str:
    return field_name.replace("_", "-")


def _field_kind(name: str, info: FieldInfo) -> Kind:
    annotation = info.annotation
    kind = Kind.from_type(annotation) if isinstance(annotation, type) else None
    if kind is None:
        raise FlagDefinitionError(name, f"unsupported field type {annotation!r}")
    return kind


def _field_short(info: FieldInfo) -> str | None:
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        short = extra.get(SHORT_KEY)
        if isinstance(short, str):
            return short
    return None


def define_model(fs: FlagSet, model: type[BaseModel]) -> dict[str, Flag]:
    """Defines one flag per field of ``model`` in ``fs``.

    :param fs: The flag set to add the flags to.
    :param model: Pydantic model class whose fields describe the flags.
    :return: The defined flags, keyed by field name.
    """
    flags: dict[str, Flag] = {}

    for field_name, info in model.model_fields.items():
        name = flag_name(field_name)
        kind = _field_kind(name, info)

        if info.is_required():
            default = kind.zero()
        else:
            default = info.get_default(call_default_factory=True)

        flags[field_name] = fs.define(
            name,
            kind,
            default,
            info.description if info.description is not None else "",
            _field_short(info),
        )

    return flags


def bind_model(fs: FlagSet, model: type[ModelT]) -> ModelT:
    """Validates the current flag values of ``fs`` into an instance of ``model``.

    :raises KeyError: If a model field has no corresponding flag.
    :raises pydantic.ValidationError: If the model rejects the values.
    """
    data = {field_name: fs[flag_name(field_name)].get() for field_name in model.model_fields}
    return model.model_validate(data)
