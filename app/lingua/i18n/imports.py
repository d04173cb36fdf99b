"""Resolve configured import paths to Python objects."""

import importlib
from typing import Any


def import_string(path: str) -> Any:
    """Import an object from ``package.module:attr`` or ``package.module.attr``.

    Raises:
        ImportError: If the module or attribute cannot be found.
    """
    if ":" in path:
        module_path, _, attr_path = path.partition(":")
    else:
        module_path, _, attr_path = path.rpartition(".")

    if not module_path or not attr_path:
        raise ImportError(f"Invalid import path: {path!r}")

    module = importlib.import_module(module_path)

    target: Any = module
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ImportError(f"{module_path!r} has no attribute {attr_path!r}") from e
    return target
