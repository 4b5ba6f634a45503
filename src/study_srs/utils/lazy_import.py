"""Deferred imports for optional backends.

Motor is only needed when MongoDB storage is used, so importing
study_srs must not import it.
"""

from collections.abc import Callable
from functools import cache
from importlib import import_module


def lazy_import(module_name: str, attribute: str | None = None) -> Callable[[], object]:
    """Return a loader for ``module_name`` or for ``attribute`` inside it.

    Nothing is imported until the loader is called. The first result is
    cached and later calls return the same object.
    """

    @cache
    def loader() -> object:
        module = import_module(module_name)
        if attribute is None:
            return module
        return getattr(module, attribute)

    return loader
