# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/buffer.py
# DESCRIPTION:    Position-aware byte buffer
# CREATED:        12.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Copyright (c) 2026 The binkit Project
# All Rights Reserved.
#
# Contributor(s): ______________________________________

"""binkit - Position-aware byte buffer

This module provides the `BufferView` class, a window over a contiguous byte region
that carries its own cursor state (position, limit, mark). Several views can share
the same backing storage while keeping independent cursors, which is what makes
non-consuming reads possible: a reader takes a `~BufferView.duplicate` (or a
`~BufferView.as_read_only` snapshot), moves the snapshot's cursor, and leaves the
original untouched.

The underlying memory storage is created by a `BufferFactory`. Two factories
are provided:

- `BytesBufferFactory`: Uses Python's built-in `bytearray` (ordinary memory).
- `CTypesBufferFactory`: Uses `ctypes.create_string_buffer`, i.e. memory allocated
  outside of Python objects. Views created with this factory are *direct* views.

Example::

    from binkit.buffer import BufferView

    buf = BufferView.allocate(8)
    buf.put(b'\\x01\\x02\\x03')
    buf.put_number(258, 2)
    buf.flip()                 # position=0, limit=5

    head = buf.duplicate()     # shares storage, independent cursor
    print(head.get(3))         # b'\\x01\\x02\\x03'
    print(buf.position)        # 0, the original cursor did not move
    print(buf.remaining)       # 5
"""

from __future__ import annotations

from ctypes import addressof, create_string_buffer, string_at
from typing import Any, ClassVar, Protocol, runtime_checkable

from .types import ByteOrder


@runtime_checkable
class BufferFactory(Protocol): # pragma: no cover
    """Protocol defining the interface for creating and reading memory buffers.

    Allows `BufferView` to work with different underlying buffer types
    (like `bytearray` or `ctypes` arrays).
    """
    #: True when buffers created by this factory live outside of Python objects.
    direct: ClassVar[bool]
    def create(self, init_or_size: int | bytes, size: int | None=None) -> Any:
        """Create and return a mutable byte buffer object.

        Arguments:
            init_or_size: An integer specifying the buffer size, or a bytes
                          object for initializing the buffer content.
            size: Optional integer size, primarily used when `init_or_size`
                  is bytes to specify a potentially different final size.

        Returns:
            The created mutable buffer object (e.g., `bytearray`, `ctypes.c_char_Array`).
        """
    def read(self, buffer: Any, start: int, size: int) -> bytes:
        """Return a copy of `size` bytes starting at `start` as new `bytes`.

        The bytes are copied exactly once, straight from the buffer memory.

        Arguments:
            buffer: A memory buffer previously created by this factory's `create()` method.
            start: Index of the first byte to copy.
            size: Number of bytes to copy.
        """

class BytesBufferFactory:
    """Buffer factory using Python's `bytearray` for storage."""
    direct: ClassVar[bool] = False
    def create(self, init_or_size: int | bytes, size: int | None=None) -> bytearray:
        """This function creates a mutable character buffer. The returned object is a
        `bytearray`.

        Arguments:
            init_or_size: Must be an integer which specifies the size of the array,
                or a bytes object which will be used to initialize the array items.
            size: Size of the array.

        Important:
            If there are more bytes than specified `size`, this function copies only
            `size` bytes into new buffer.
        """
        if isinstance(init_or_size, int):
            return bytearray(init_or_size)
        size = len(init_or_size) if size is None else size
        buffer = bytearray(size)
        limit = min(len(init_or_size), size)
        buffer[:limit] = init_or_size[:limit]
        return buffer
    def read(self, buffer: bytes | bytearray, start: int, size: int) -> bytes:
        """Returns a copy of the byte range taken through a `memoryview`."""
        return bytes(memoryview(buffer)[start:start + size])

class CTypesBufferFactory:
    """Buffer factory using `ctypes.create_string_buffer` (array of c_char).

    Buffers created by this factory are not Python objects holding their bytes
    inline, so `BufferView` instances using it are reported as *direct*.
    """
    direct: ClassVar[bool] = True
    def create(self, init_or_size: int | bytes, size: int | None=None) -> Any:
        """This function creates a `ctypes` mutable character buffer. The returned object
        is an array of `ctypes.c_char`.

        Arguments:
            init_or_size: Must be an integer which specifies the size of the array,
                or a bytes object which will be used to initialize the array items.
            size: Size of the array.

        Important:
            Although arguments are the same as for `ctypes.create_string_buffer`,
            the behavior is different when new buffer is initialized from bytes:

            1. If there are more bytes than specified `size`, this function copies only
               `size` bytes into new buffer. The `~ctypes.create_string_buffer` raises
               an excpetion.
            2. Unlike `~ctypes.create_string_buffer` when `size` is NOT specified,
               the buffer is NOT made one item larger than its length so that the last
               element in the array is a NUL termination character.
        """
        if isinstance(init_or_size, int):
            return create_string_buffer(init_or_size)
        size = len(init_or_size) if size is None else size
        buffer = create_string_buffer(size)
        limit = min(len(init_or_size), size)
        buffer[:limit] = init_or_size[:limit]
        return buffer
    def read(self, buffer: Any, start: int, size: int) -> bytes:
        """Returns a copy of the byte range read directly from buffer memory."""
        return string_at(addressof(buffer) + start, size)

class BufferView:
    """Byte buffer with position, limit and mark.

    The view covers `capacity` bytes of its backing storage (`raw`), starting at
    `array_offset`. Cursor state obeys `0 <= mark <= position <= limit <= capacity`.

    Arguments:
        init: Must be an integer which specifies the size of the array, or a `bytes` object
              which will be used to initialize the array items.
        size: Size of the array. The argument value is used only when `init` is a `bytes` object.
        factory: Factory object used to create the internal memory buffer.
        read_only: When True, the view does not allow modifications.
        byteorder: The byte order used to get/put numbers.

    Important:
        Views created by `duplicate()`, `as_read_only()`, `slice()` and `wrap()` share
        the backing storage with their source, so changes made through one view are
        visible through the others. Only their cursors are independent.
    """
    def __init__(self, init: int | bytes, size: int | None=None, *,
                 factory: type[BufferFactory]=BytesBufferFactory, read_only: bool=False,
                 byteorder: ByteOrder=ByteOrder.BIG):
        #: Buffer factory instance used by view [default: `BytesBufferFactory`].
        self.factory: BufferFactory = factory()
        #: The memory buffer. The actual data type of buffer depends on `buffer factory`,
        #: but it must provide direct acces to cells, slices and length like `bytearray`.
        self.raw: Any = self.factory.create(init, size)
        #: The byte order used to get/put numbers [default: `.BIG`].
        self.byteorder: ByteOrder = byteorder
        self._offset: int = 0
        self._capacity: int = len(self.raw)
        self._position: int = 0
        self._limit: int = self._capacity
        self._mark: int | None = None
        self._read_only: bool = read_only
    def __repr__(self):
        return (f"{self.__class__.__name__}(position={self._position}, limit={self._limit}, "
                f"capacity={self._capacity}, direct={self.is_direct}, "
                f"read_only={self._read_only})")
    @classmethod
    def _over(cls, factory: BufferFactory, raw: Any, *, offset: int, capacity: int,
              position: int, limit: int, mark: int | None, read_only: bool,
              byteorder: ByteOrder) -> BufferView:
        view = cls.__new__(cls)
        view.factory = factory
        view.raw = raw
        view.byteorder = byteorder
        view._offset = offset
        view._capacity = capacity
        view._position = position
        view._limit = limit
        view._mark = mark
        view._read_only = read_only
        return view
    @classmethod
    def allocate(cls, capacity: int, *, byteorder: ByteOrder=ByteOrder.BIG) -> BufferView:
        """Returns new zero-filled view backed by ordinary memory.

        Arguments:
            capacity: The view capacity in bytes.
            byteorder: The byte order used to get/put numbers.
        """
        return cls(capacity, byteorder=byteorder)
    @classmethod
    def allocate_direct(cls, capacity: int, *, byteorder: ByteOrder=ByteOrder.BIG) -> BufferView:
        """Returns new zero-filled direct view (backed by `ctypes` memory).

        Arguments:
            capacity: The view capacity in bytes.
            byteorder: The byte order used to get/put numbers.
        """
        return cls(capacity, factory=CTypesBufferFactory, byteorder=byteorder)
    @classmethod
    def wrap(cls, data: bytes | bytearray, offset: int=0, length: int | None=None, *,
             byteorder: ByteOrder=ByteOrder.BIG) -> BufferView:
        """Returns view over `data` without copying it.

        The capacity of returned view is `len(data)`, its position is `offset` and
        its limit is `offset + length`.

        Arguments:
            data: Backing storage. A `bytearray` gives a writable view, `bytes` gives
                  a read-only one.
            offset: Initial position.
            length: Number of bytes available from `offset`. All bytes to the end
                    of `data` when not specified.
            byteorder: The byte order used to get/put numbers.

        Important:
            The view aliases `data`. Changes made to a `bytearray` after this call are
            visible through the view, and writes through the view change the `bytearray`.
            Shrinking the `bytearray` below the view capacity makes later reads and writes
            raise `BufferError`.

        Raises:
            TypeError: When `data` is not `bytes` or `bytearray`.
            ValueError: When `offset` or `length` do not fit into `data`.
        """
        if not isinstance(data, bytes | bytearray):
            raise TypeError(f"Cannot wrap '{type(data).__name__}' object")
        if length is None:
            length = len(data) - offset
        if offset < 0 or length < 0 or offset + length > len(data):
            raise ValueError(f"Range [{offset}:{offset + length}] does not fit into {len(data)} bytes")
        return cls._over(BytesBufferFactory(), data, offset=0, capacity=len(data),
                         position=offset, limit=offset + length, mark=None,
                         read_only=isinstance(data, bytes), byteorder=byteorder)
    def _check_writable(self) -> None:
        if self._read_only:
            raise BufferError("Buffer is read-only")
    def _check_storage(self) -> None:
        if len(self.raw) < self._offset + self._capacity:
            raise BufferError("Backing storage is smaller than buffer capacity")
    # Derived views
    def duplicate(self) -> BufferView:
        """Returns new view that shares this view's content.

        Position, limit, mark and read-only flag of the new view are identical to
        those of this view, but they change independently.
        """
        return self._over(self.factory, self.raw, offset=self._offset,
                          capacity=self._capacity, position=self._position,
                          limit=self._limit, mark=self._mark,
                          read_only=self._read_only, byteorder=self.byteorder)
    def as_read_only(self) -> BufferView:
        """Returns new read-only view that shares this view's content.

        Like `duplicate()`, but the new view rejects all modifications.
        """
        view = self.duplicate()
        view._read_only = True
        return view
    def slice(self) -> BufferView:
        """Returns new view whose content is a shared subsequence of this view's content.

        The new view starts at this view's current position. Its capacity and limit
        are the number of bytes remaining in this view, its position is zero and its
        mark is undefined.
        """
        remaining = self.remaining
        return self._over(self.factory, self.raw, offset=self._offset + self._position,
                          capacity=remaining, position=0, limit=remaining, mark=None,
                          read_only=self._read_only, byteorder=self.byteorder)
    # Cursor
    def set_mark(self) -> None:
        """Sets the mark at the current position.
        """
        self._mark = self._position
    def reset(self) -> None:
        """Resets position to the previously marked one.

        Raises:
            BufferError: When mark is not set.
        """
        if self._mark is None:
            raise BufferError("Mark is not set")
        self._position = self._mark
    def rewind(self) -> None:
        """Sets position to zero and discards the mark. Limit is unchanged.
        """
        self._position = 0
        self._mark = None
    def flip(self) -> None:
        """Sets limit to the current position, then the position to zero, and
        discards the mark.

        Used after a sequence of `put` operations to prepare the view for reading.
        """
        self._limit = self._position
        self._position = 0
        self._mark = None
    def has_remaining(self) -> bool:
        """Returns True if there are any bytes between position and limit.
        """
        return self._position < self._limit
    # Data access
    def get(self, size: int=-1) -> bytes:
        """Read specified number of bytes from current position, or all remaining data.

        Advances the position by the number of bytes read.

        Arguments:
            size: Number of bytes to read. If negative, reads all data from the
                  current position to the limit (default: -1).

        Returns:
           The bytes read (a copy).

        Raises:
            BufferError: If `size` requests more bytes than remaining, or when the
                         backing storage was shrunk below view capacity.
        """
        if size < 0:
            size = self.remaining
        if size > self.remaining:
            raise BufferError("Insufficient data in buffer")
        self._check_storage()
        result = self.factory.read(self.raw, self._offset + self._position, size)
        self._position += size
        return result
    def get_byte(self) -> int:
        """Read one byte.
        """
        return self.get(1)[0]
    def get_number(self, size: int, *, signed: bool=False) -> int:
        """Read a number of `size` bytes from current position using `self.byteorder`.

        Arguments:
            size: The number of bytes representing the number.
            signed: Whether to interpret the bytes as a signed integer (default: False).

        Raises:
            BufferError: When there is not enough bytes to read.
        """
        return int.from_bytes(self.get(size), self.byteorder.value, signed=signed)
    def put(self, data: bytes | bytearray | BufferView) -> None:
        """Write bytes at the current position and advance position.

        Arguments:
            data: The bytes to write. When it's a `BufferView`, all its remaining bytes
                  are transferred and its position is advanced to its limit.

        Raises:
            BufferError: If the view is read-only, or `data` does not fit between
                         position and limit.
            ValueError: If `data` is this view.
        """
        self._check_writable()
        if data is self:
            raise ValueError("Source buffer cannot be the target buffer")
        size = data.remaining if isinstance(data, BufferView) else len(data)
        if size > self.remaining:
            raise BufferError("Insufficient buffer size")
        self._check_storage()
        if isinstance(data, BufferView):
            data = data.get()
        start = self._offset + self._position
        self.raw[start:start + size] = data
        self._position += size
    def put_byte(self, byte: int) -> None:
        """Write one byte.
        """
        self.put(bytes((byte, )))
    def put_number(self, value: int, size: int, *, signed: bool=False) -> None:
        """Write number with specified size (in bytes) using `self.byteorder`.

        Arguments:
            value: The integer value to write.
            size: Value size in bytes.
            signed: Write as signed or unsigned integer.

        Raises:
            BufferError: If the view is read-only or there is not enough space.
        """
        self.put(value.to_bytes(size, self.byteorder.value, signed=signed))
    # Backing storage
    def has_array(self) -> bool:
        """Returns True if the view is backed by an accessible, writable `bytearray`.

        When True, `array()` and `array_offset` could be used for direct access.
        """
        return not self.is_direct and not self._read_only
    def array(self) -> bytearray:
        """Returns the `bytearray` that backs this view.

        Important:
            The view's content starts at `array_offset`. Modifications of the array
            are visible through the view (and all views sharing it).

        Raises:
            BufferError: When view is read-only or direct, or when its array was
                         shrunk below view capacity.
        """
        self._check_writable()
        if self.is_direct:
            raise BufferError("Buffer is not backed by an accessible array")
        self._check_storage()
        return self.raw
    def get_raw(self) -> bytes:
        """Return a copy of the whole view content `[0, capacity)` as `bytes`,
        regardless of position and limit.
        """
        self._check_storage()
        return self.factory.read(self.raw, self._offset, self._capacity)
    # Properties
    @property
    def position(self) -> int:
        """Index of the next byte to be read or written.

        When set below the mark, the mark is discarded.

        Raises:
            ValueError: On attempt to set it outside `[0, limit]`.
        """
        return self._position
    @position.setter
    def position(self, value: int) -> None:
        if not 0 <= value <= self._limit:
            raise ValueError(f"Position {value} outside range [0, {self._limit}]")
        if self._mark is not None and self._mark > value:
            self._mark = None
        self._position = value
    @property
    def limit(self) -> int:
        """Index of the first byte that should not be read or written.

        When set below the position, the position is set to the new limit. When set below
        the mark, the mark is discarded.

        Raises:
            ValueError: On attempt to set it outside `[0, capacity]`.
        """
        return self._limit
    @limit.setter
    def limit(self, value: int) -> None:
        if not 0 <= value <= self._capacity:
            raise ValueError(f"Limit {value} outside range [0, {self._capacity}]")
        self._limit = value
        if self._position > value:
            self._position = value
        if self._mark is not None and self._mark > value:
            self._mark = None
    @property
    def mark(self) -> int | None:
        """Marked position, or None if the mark is not set."""
        return self._mark
    @property
    def capacity(self) -> int:
        """Number of bytes covered by this view."""
        return self._capacity
    @property
    def remaining(self) -> int:
        """Number of bytes between position and limit."""
        return self._limit - self._position
    @property
    def array_offset(self) -> int:
        """Index of this view's first byte within `raw`."""
        return self._offset
    @property
    def is_direct(self) -> bool:
        """True if the view is backed by `ctypes` memory."""
        return self.factory.direct
    @property
    def is_read_only(self) -> bool:
        """True if the view does not allow modifications."""
        return self._read_only
