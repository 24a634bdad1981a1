"""Record contract for values stored by a FileStore."""

from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

K = TypeVar("K")


class PersistableRecord(Protocol[K]):
    """What the store needs from a value: an identity and a deep copy."""

    def get_key(self) -> K:
        ...

    def clone(self) -> "PersistableRecord[K]":
        ...


class Record(BaseModel):
    """
    Base class for storable domain values.

    Subclasses declare their fields as usual and either a ``key`` field or
    their own ``get_key()``. Serialization is left to pydantic, so any field
    that round-trips through JSON is storable.
    """

    # inf/nan are written as Infinity/NaN so they load back as floats
    model_config = ConfigDict(ser_json_inf_nan="constants")

    def get_key(self) -> Any:
        """Identity of this record. Defaults to the ``key`` field."""
        try:
            return self.key
        except AttributeError:
            raise NotImplementedError(
                f"{type(self).__name__} must declare a 'key' field or override get_key()"
            ) from None

    def clone(self):
        """Independent copy: no mutable sub-structure is shared with self."""
        return self.model_copy(deep=True)
