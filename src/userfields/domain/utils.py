"""Domain layer utilities."""

import time
from collections.abc import Callable
from dataclasses import MISSING, fields, is_dataclass
from typing import Any, TypeVar, cast

D = TypeVar("D")


def get_millis() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Build a dataclass instance from a flat dict.

    Args:
        dc_type: The dataclass type to build.
        values: The dict containing the data.

    Returns:
        An instance of dc_type populated with data from values.

    Note:
        - Keys in values that are not fields of dc_type are ignored.
        - Fields that are missing or None in values take their default.
        - All fields without defaults must be present in values.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    kwargs = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        if values.get(field.name) is not None:
            kwargs[field.name] = values[field.name]
        elif field.default is not MISSING:
            kwargs[field.name] = field.default
        elif field.default_factory is not MISSING:
            factory = cast(Callable[[], Any], field.default_factory)
            kwargs[field.name] = factory()
        else:
            raise KeyError(f"Missing required field '{field.name}'")
    return cast(D, dc_type(**kwargs))
