"""Deterministic ordering of tool descriptors."""

from typing import Iterable

from ..tools.base import ToolDescriptor


def sort_key(descriptor: ToolDescriptor) -> str:
    """Label provider name folded to lower case.

    str.lower() does not depend on the process locale, so the order is the
    same on every machine.
    """
    return (descriptor.label_provider.name or "").lower()


def sort_descriptors(descriptors: Iterable[ToolDescriptor]) -> list[ToolDescriptor]:
    """Return the descriptors ordered by display name, case-insensitive.

    The sort is stable: tools with equal folded names keep their input order.
    """
    return sorted(descriptors, key=sort_key)
