"""
TypedBuffer: the one-dimensional data container every operation consumes.

A TypedBuffer is a tagged NumPy array: element type, live size, a
"may contain blanks" flag and a cached sort status. It may also be a
tile, i.e. a strided view into a larger parent buffer, in which case it
must be materialized (``contiguous()``) before anything sorts it.

Unlike the result payloads, a TypedBuffer is mutable: in-place
operations (blank removal, sorting) rewrite its storage and metadata.
Those operations only ever run when the caller explicitly opts in.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyunivariate.core.dtypes import ElementType, element_type_of, is_blank
from pyunivariate.core.exceptions import DimensionError, InvalidParameterError


class SortStatus(IntEnum):
    """Cached ordering of a buffer. A hint, never a guarantee."""
    NOT = 0
    INCREASING = 1
    DECREASING = 2


class TypedBuffer:
    """
    Mutable 1-D typed numeric buffer.

    Construction:
        TypedBuffer.from_array(data)
        TypedBuffer.tile(parent, start, stop, step)

    The live elements are ``values``; in-place blank removal compacts
    them to the front of the storage and shrinks ``size`` without
    reallocating.
    """

    __slots__ = ('_array', '_size', '_etype', '_has_blank', '_sort_status', '_block')

    def __init__(
        self,
        array: NDArray[Any],
        etype: ElementType,
        *,
        has_blank: bool,
        sort_status: SortStatus = SortStatus.NOT,
        block: TypedBuffer | None = None,
    ):
        self._array = array
        self._size = array.shape[0]
        self._etype = etype
        self._has_blank = has_blank
        self._sort_status = sort_status
        self._block = block

    # === Factory Methods ===

    @classmethod
    def from_array(
        cls,
        data: Any,
        *,
        has_blank: bool | None = None,
        copy: bool = False,
    ) -> TypedBuffer:
        """
        Build a TypedBuffer from array-like data.

        Parameters
        ----------
        data : array-like
            NumPy array, list, scalar, or pandas Series (anything with
            ``to_numpy()``). 0-d input becomes a one-element buffer.
        has_blank : bool, optional
            Whether blanks may be present. If None, the data is scanned.
            Floating types are always checked for NaN regardless.
        copy : bool
            Copy the data instead of wrapping it.
        """
        if hasattr(data, 'to_numpy'):
            array = data.to_numpy()
        else:
            array = np.asarray(data)

        if array.ndim == 0:
            array = array.reshape(1)
        if array.ndim != 1:
            raise DimensionError(
                f"data: expected 1D array, got {array.ndim}D with shape {array.shape}"
            )

        etype = element_type_of(array.dtype)
        if array.dtype != etype.dtype:
            # Non-native byte order
            array = array.astype(etype.dtype)
        elif copy:
            array = array.copy()

        if has_blank is None:
            has_blank = bool(np.any(is_blank(array, etype)))

        return cls(array, etype, has_blank=has_blank)

    @classmethod
    def tile(
        cls,
        parent: TypedBuffer,
        start: int,
        stop: int,
        step: int = 1,
    ) -> TypedBuffer:
        """
        A strided, non-owning view into ``parent``.

        Writes through a tile land in the parent's storage, so the
        normalizer always materializes tiles before sorting them.
        """
        if step < 1:
            raise InvalidParameterError(
                f"step: must be a positive integer, got {step}",
                parameter='step',
                value=step,
            )
        view = parent.values[start:stop:step]
        return cls(view, parent.element_type, has_blank=parent.has_blank, block=parent)

    # === Properties ===

    @property
    def element_type(self) -> ElementType:
        return self._etype

    @property
    def dtype(self) -> np.dtype:
        return self._etype.dtype

    @property
    def size(self) -> int:
        """Number of live elements."""
        return self._size

    @property
    def values(self) -> NDArray[Any]:
        """The live elements (a view, not a copy)."""
        return self._array[:self._size]

    @property
    def has_blank(self) -> bool:
        """Whether blank elements may be present."""
        return self._has_blank or self._etype.is_floating

    @has_blank.setter
    def has_blank(self, flag: bool) -> None:
        self._has_blank = bool(flag)

    @property
    def sort_status(self) -> SortStatus:
        return self._sort_status

    @sort_status.setter
    def sort_status(self, status: SortStatus) -> None:
        self._sort_status = SortStatus(status)

    @property
    def block(self) -> TypedBuffer | None:
        """Parent buffer if this is a tile, else None."""
        return self._block

    @property
    def is_tile(self) -> bool:
        return self._block is not None

    # === Blank handling ===

    def blank_mask(self) -> NDArray[np.bool_]:
        """Boolean mask of blank live elements."""
        if not self.has_blank:
            return np.zeros(self._size, dtype=bool)
        return is_blank(self.values, self._etype)

    def usable(self) -> NDArray[Any]:
        """Non-blank live elements (a new array when blanks are present)."""
        if not self.has_blank:
            return self.values
        return self.values[~self.blank_mask()]

    def compact(self, keep: NDArray[np.bool_]) -> None:
        """
        Keep only the elements flagged in ``keep``, in place.

        Survivors move to the front of the existing storage and ``size``
        shrinks; nothing is reallocated.
        """
        if self.is_tile:
            raise InvalidParameterError(
                "cannot compact a tile in place; materialize it with contiguous() first"
            )
        survivors = self.values[keep]
        n = survivors.shape[0]
        self._array[:n] = survivors
        self._size = n

    # === Copies ===

    def copy(self) -> TypedBuffer:
        """Independent contiguous copy of the live elements."""
        return TypedBuffer(
            np.array(self.values, copy=True, order='C'),
            self._etype,
            has_blank=self._has_blank,
            sort_status=self._sort_status,
        )

    def contiguous(self) -> TypedBuffer:
        """Materialize a tile into its own storage (a copy for any buffer)."""
        return self.copy()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        tile = ", tile" if self.is_tile else ""
        return (
            f"TypedBuffer(type={self._etype.value}, size={self._size}, "
            f"has_blank={self.has_blank}, sort={self._sort_status.name}{tile})"
        )


def ensure_buffer(data: Any) -> TypedBuffer:
    """Wrap array-like data in a TypedBuffer if needed (no copy)."""
    if isinstance(data, TypedBuffer):
        return data
    return TypedBuffer.from_array(data)
