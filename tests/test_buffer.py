# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           tests/test_buffer.py
# DESCRIPTION:    Unit tests for binkit.buffer
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

"""binkit - Unit tests for binkit.buffer
"""

from __future__ import annotations

import ctypes

import pytest

from binkit.buffer import *
from binkit.types import ByteOrder

factories = [BytesBufferFactory, CTypesBufferFactory]

@pytest.fixture(params=factories)
def factory(request):
    """Fixture providing both BytesBufferFactory and CTypesBufferFactory."""
    return request.param

def test_factory_bytes_create():
    bf = BytesBufferFactory()
    assert not bf.direct
    # Size specified, init shorter
    buf = bf.create(b'ABC', 5)
    assert isinstance(buf, bytearray)
    assert buf == b'ABC\x00\x00'
    # Size specified, init longer
    assert bf.create(b'ABCDEFGHI', 5) == b'ABCDE'
    # No size specified
    assert bf.create(b'ABC') == b'ABC'
    # Size only
    assert bf.create(5) == b'\x00' * 5

def test_factory_ctypes_create():
    cbf = CTypesBufferFactory()
    assert cbf.direct
    buf = cbf.create(b'ABC', 5)
    assert isinstance(buf, ctypes.Array)
    assert buf.raw == b'ABC\x00\x00'
    assert cbf.create(b'ABCDEFGHI', 5).raw == b'ABCDE'
    # Our factory does *not* add the extra NUL if size is omitted
    buf = cbf.create(b'ABC')
    assert len(buf) == 3
    assert buf.raw == b'ABC'
    assert cbf.create(5).raw == b'\x00' * 5

def test_factory_read(factory):
    f = factory()
    buf = f.create(b'0123456789')
    result = f.read(buf, 2, 4)
    assert isinstance(result, bytes)
    assert result == b'2345'
    assert f.read(buf, 10, 0) == b''

def test_create(factory):
    view = BufferView(b'ABCDEF', 8, factory=factory)
    assert view.capacity == 8
    assert view.position == 0
    assert view.limit == 8
    assert view.mark is None
    assert view.remaining == 8
    assert view.array_offset == 0
    assert view.is_direct == factory.direct
    assert not view.is_read_only
    assert view.byteorder is ByteOrder.BIG
    assert view.get_raw() == b'ABCDEF\x00\x00'

def test_allocate():
    view = BufferView.allocate(4)
    assert not view.is_direct
    assert view.has_array()
    assert view.get_raw() == b'\x00' * 4
    view = BufferView.allocate_direct(4, byteorder=ByteOrder.LITTLE)
    assert view.is_direct
    assert not view.has_array()
    assert view.byteorder is ByteOrder.LITTLE
    assert view.get_raw() == b'\x00' * 4

def test_wrap_bytearray():
    data = bytearray(b'0123456789')
    view = BufferView.wrap(data, 2, 5)
    assert view.capacity == 10
    assert view.position == 2
    assert view.limit == 7
    assert not view.is_read_only
    assert view.array() is data
    # Aliasing both ways
    data[2] = ord('X')
    assert view.get(1) == b'X'
    view.put(b'Y')
    assert data == b'01XY456789'

def test_wrap_bytes():
    view = BufferView.wrap(b'0123')
    assert view.is_read_only
    assert not view.has_array()
    assert view.get() == b'0123'
    with pytest.raises(BufferError, match="Buffer is read-only"):
        view.put(b'x')

def test_wrap_errors():
    with pytest.raises(TypeError):
        BufferView.wrap('text')
    with pytest.raises(ValueError):
        BufferView.wrap(bytearray(4), 3, 2)
    with pytest.raises(ValueError):
        BufferView.wrap(bytearray(4), -1)

def test_position(factory):
    view = BufferView(10, factory=factory)
    view.position = 5
    assert view.position == 5
    view.position = 10
    assert view.remaining == 0
    assert not view.has_remaining()
    with pytest.raises(ValueError):
        view.position = 11
    with pytest.raises(ValueError):
        view.position = -1

def test_limit(factory):
    view = BufferView(10, factory=factory)
    view.position = 8
    view.limit = 5
    assert view.limit == 5
    assert view.position == 5
    with pytest.raises(ValueError):
        view.limit = 11
    with pytest.raises(ValueError):
        view.position = 6

def test_mark(factory):
    view = BufferView(10, factory=factory)
    with pytest.raises(BufferError, match="Mark is not set"):
        view.reset()
    view.position = 4
    view.set_mark()
    assert view.mark == 4
    view.position = 7
    view.reset()
    assert view.position == 4
    # Position below mark discards it
    view.position = 3
    assert view.mark is None
    # Limit below mark discards it
    view.position = 6
    view.set_mark()
    view.limit = 5
    assert view.mark is None
    assert view.position == 5

def test_rewind_flip(factory):
    view = BufferView(10, factory=factory)
    view.put(b'ABC')
    view.set_mark()
    view.flip()
    assert view.position == 0
    assert view.limit == 3
    assert view.mark is None
    assert view.get() == b'ABC'
    view.set_mark()
    view.rewind()
    assert view.position == 0
    assert view.limit == 3
    assert view.mark is None

def test_get(factory):
    view = BufferView(b'0123456789', factory=factory)
    assert view.get(3) == b'012'
    assert view.position == 3
    assert view.get_byte() == ord('3')
    view.limit = 6
    assert view.get() == b'45'
    assert view.position == 6
    assert view.get(0) == b''
    with pytest.raises(BufferError, match="Insufficient data in buffer"):
        view.get(1)

def test_put(factory):
    view = BufferView(6, factory=factory)
    view.put(b'AB')
    view.put_byte(ord('C'))
    assert view.position == 3
    assert view.get_raw() == b'ABC\x00\x00\x00'
    view.limit = 4
    with pytest.raises(BufferError, match="Insufficient buffer size"):
        view.put(b'DE')
    assert view.position == 3
    with pytest.raises(ValueError):
        view.put(view)

def test_put_view(factory):
    src = BufferView(b'0123456789', factory=factory)
    src.position = 2
    src.limit = 6
    dst = BufferView(8, factory=factory)
    dst.put(src)
    assert dst.position == 4
    assert src.position == 6
    assert dst.get_raw() == b'2345\x00\x00\x00\x00'
    # Too large source is not consumed
    src.position = 0
    src.limit = 10
    with pytest.raises(BufferError):
        dst.put(src)
    assert src.position == 0

def test_numbers(factory):
    view = BufferView(8, factory=factory)
    view.put_number(258, 2)
    view.put_number(-2, 2, signed=True)
    assert view.get_raw()[:4] == b'\x01\x02\xff\xfe'
    view.flip()
    assert view.get_number(2) == 258
    assert view.get_number(2, signed=True) == -2
    view = BufferView(4, factory=factory, byteorder=ByteOrder.LITTLE)
    view.put_number(258, 2)
    assert view.get_raw()[:2] == b'\x02\x01'

def test_read_only(factory):
    view = BufferView(b'ABCD', factory=factory, read_only=True)
    assert view.is_read_only
    assert not view.has_array()
    with pytest.raises(BufferError, match="Buffer is read-only"):
        view.put(b'x')
    with pytest.raises(BufferError, match="Buffer is read-only"):
        view.put_byte(1)
    with pytest.raises(BufferError, match="Buffer is read-only"):
        view.array()
    assert view.get(2) == b'AB'

def test_array_direct():
    view = BufferView.allocate_direct(4)
    with pytest.raises(BufferError, match="not backed by an accessible array"):
        view.array()

def test_duplicate(factory):
    view = BufferView(b'0123456789', factory=factory)
    view.position = 2
    view.set_mark()
    view.position = 3
    view.limit = 8
    dup = view.duplicate()
    assert (dup.position, dup.limit, dup.mark, dup.capacity) == (3, 8, 2, 10)
    assert dup.is_direct == view.is_direct
    assert not dup.is_read_only
    # Independent cursors
    dup.get(2)
    assert view.position == 3
    # Shared content
    dup.put(b'X')
    view.position = 5
    assert view.get(1) == b'X'

def test_as_read_only(factory):
    view = BufferView(b'0123', factory=factory)
    view.position = 1
    ro = view.as_read_only()
    assert ro.is_read_only
    assert not view.is_read_only
    assert ro.position == 1
    with pytest.raises(BufferError):
        ro.put(b'x')
    view.put(b'Z')
    ro.position = 1
    assert ro.get(1) == b'Z'

def test_slice(factory):
    view = BufferView(b'0123456789', factory=factory)
    view.position = 3
    view.limit = 7
    view.set_mark()
    part = view.slice()
    assert (part.position, part.limit, part.capacity, part.mark) == (0, 4, 4, None)
    assert part.array_offset == 3
    assert part.get_raw() == b'3456'
    part.put(b'AB')
    assert view.get(2) == b'AB'
    # Slice of slice
    part.position = 1
    inner = part.slice()
    assert inner.array_offset == 4
    assert inner.get() == b'B56'

def test_repr():
    view = BufferView.allocate(4)
    assert repr(view) == "BufferView(position=0, limit=4, capacity=4, direct=False, read_only=False)"

def test_wrap_shrunk_storage():
    data = bytearray(b'0123456789')
    view = BufferView.wrap(data)
    ro = view.as_read_only()
    part = view.slice()
    del data[5:]
    for target in (view, ro, part):
        with pytest.raises(BufferError, match="Backing storage is smaller than buffer capacity"):
            target.get()
        with pytest.raises(BufferError, match="Backing storage is smaller"):
            target.get_raw()
    with pytest.raises(BufferError, match="Backing storage is smaller"):
        view.array()
    with pytest.raises(BufferError, match="Backing storage is smaller"):
        view.put(b'x')
    assert view.position == 0

def test_wrap_grown_storage():
    data = bytearray(b'0123')
    view = BufferView.wrap(data)
    data.extend(b'4567')
    assert view.capacity == 4
    assert view.get() == b'0123'
    assert view.get_raw() == b'0123'
