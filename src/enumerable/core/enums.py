"""Enumerations describing how a collection is traversed."""

from enum import Enum


class ContainerKind(Enum):
    """Capability tag resolved once per call for the value being traversed."""

    NATIVE = "native"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"

    @property
    def is_indexed(self) -> bool:
        """Whether elements are addressed by integer position.

        Returns:
            True for native and generic sequences.
        """
        return self in (ContainerKind.NATIVE, ContainerKind.SEQUENCE)

    @property
    def is_keyed(self) -> bool:
        """Whether elements are addressed by key.

        Returns:
            True for mappings, pandas containers and plain objects.
        """
        return self is ContainerKind.MAPPING
