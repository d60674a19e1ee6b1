"""Type capability classification for the print engine."""

from __future__ import annotations

import functools
import logging
import numbers
from collections.abc import Collection, Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Set, Tuple, Type

import numpy as np

logger = logging.getLogger(__name__)

TEXT_TYPES: Tuple[type, ...] = (str, bytes, bytearray)
SCALAR_TYPES: Tuple[type, ...] = (numbers.Number, type(None), np.generic)
# Modules whose collection and iterator types only have a generic text form.
COLLECTION_MODULES: Tuple[str, ...] = ("builtins", "collections", "_collections", "array", "numpy")
# Cached classifications keep their types alive, so the caches are bounded.
CLASSIFY_CACHE_SIZE = 512


class NotPrintableError(TypeError):
    """Raised when a value has neither a text form nor container traversal."""


class Capability(Enum):
    """How a type is rendered by the print engine."""
    DIRECT = "direct"
    CONTAINER = "container"
    NONE = "none"


def _text_form_owners(tp: Type[Any]) -> Set[type]:
    """Classes that define ``__str__`` and ``__repr__`` for ``tp``, minus ``object``."""
    owners = {
        next(klass for klass in tp.__mro__ if name in vars(klass))
        for name in ("__str__", "__repr__")
    }
    owners.discard(object)
    return owners


@functools.lru_cache(maxsize=CLASSIFY_CACHE_SIZE)
def is_directly_renderable(tp: Type[Any]) -> bool:
    """
    Check whether values of ``tp`` can be written as text on their own.

    Text and scalar types always qualify. Other types qualify when they
    define their own ``__str__`` or ``__repr__``. For iterables the text
    form must not come from a builtin, ``collections`` or numpy base, so
    lists and arrays render as containers while e.g. an iterator class
    with its own ``__str__`` renders as text. Mappings never qualify.

    Args:
        tp: Type to inspect

    Returns:
        True if the type has a natural text form
    """
    if issubclass(tp, TEXT_TYPES + SCALAR_TYPES):
        return True
    owners = _text_form_owners(tp)
    if not issubclass(tp, Iterable):
        return bool(owners)
    if issubclass(tp, Mapping):
        return False
    return any(owner.__module__.split(".")[0] not in COLLECTION_MODULES for owner in owners)


@functools.lru_cache(maxsize=CLASSIFY_CACHE_SIZE)
def is_container(tp: Type[Any]) -> bool:
    """
    Check whether ``tp`` is a re-iterable, non-associative collection.

    One-shot iterators (generators, file objects, ``map`` results) and
    mappings are excluded, as is text.
    """
    if issubclass(tp, TEXT_TYPES):
        return False
    if issubclass(tp, (Iterator, Mapping)):
        return False
    return issubclass(tp, Collection)


def is_printable(tp: Type[Any]) -> bool:
    return is_directly_renderable(tp) or is_container(tp)


@functools.lru_cache(maxsize=CLASSIFY_CACHE_SIZE)
def classify(tp: Type[Any]) -> Capability:
    """Return the rendering capability of ``tp``; direct rendering wins."""
    if is_directly_renderable(tp):
        return Capability.DIRECT
    if is_container(tp):
        return Capability.CONTAINER
    return Capability.NONE


def check_printable(value: Any) -> Capability:
    """
    Classify ``value`` by its type, rejecting non-printable values.

    Raises:
        NotPrintableError: If the type is neither directly renderable nor a container
    """
    capability = classify(type(value))
    if capability is Capability.NONE:
        logger.debug("Rejected value of type %s", type(value).__qualname__)
        raise NotPrintableError(
            f"Values of type {type(value).__qualname__!r} are not printable: "
            "they are neither directly renderable as text nor a re-iterable container"
        )
    return capability
