# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/binary.py
# DESCRIPTION:    Copying bytes out of buffer views
# CREATED:        13.10.2026
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

"""binkit - Copying bytes out of buffer views

This module provides functions that extract byte ranges from a `~binkit.buffer.BufferView`
without disturbing it. All functions here:

- never change position, limit, mark or content of the source view,
- return newly allocated data (`bytes`, or a new read-only `BufferView` over a private
  copy) that shares nothing with the source,
- return `None` when passed `None`.

Views backed by an accessible `bytearray` are copied directly from the array. Other views
(read-only or direct ones) are read through a read-only snapshot whose cursor is moved
instead of the source cursor. Both ways produce the same result.

Example::

    from binkit.buffer import BufferView
    from binkit.binary import copy_all, copy_remaining, copy_remaining_up_to

    view = BufferView(bytes(range(16)))
    view.position = 4
    view.limit = 12
    copy_remaining(view)           # b'\\x04\\x05\\x06\\x07\\x08\\t\\n\\x0b'
    copy_remaining_up_to(view, 3)  # b'\\x04\\x05\\x06'
    copy_all(view)                 # bytes 0..11
    view.position                  # still 4
"""

from __future__ import annotations

from .buffer import BufferView
from .logging import BraceMessage, get_logger
from .types import InvalidArgumentError

#: Agent name used for log records emitted by this module.
AGENT: str = 'binkit.binary'

def _copy_range(view: BufferView, start: int, end: int) -> bytes:
    """Returns copy of view bytes `[start, end)`, regardless of view cursor.
    """
    if view.has_array():
        offset = view.array_offset
        return bytes(memoryview(view.array())[offset + start:offset + end])
    snapshot = view.as_read_only()
    snapshot.limit = end
    snapshot.position = start
    return snapshot.get()

def _clone(view: BufferView) -> BufferView:
    """Returns new ordinary memory view with copy of whole `view` content.

    Position of returned view is the position of `view`, its limit is its capacity and
    the mark is not set.
    """
    clone = BufferView.allocate(view.capacity, byteorder=view.byteorder)
    clone.put(_copy_range(view, 0, view.capacity))
    clone.position = view.position
    return clone

def _frozen_clone(view: BufferView) -> BufferView:
    """Like `_clone`, but the returned view is read-only and backed by immutable `bytes`.
    """
    return BufferView.wrap(_copy_range(view, 0, view.capacity), view.position,
                           byteorder=view.byteorder)

def copy_all(view: BufferView | None) -> bytes | None:
    """Returns a copy of all bytes from the beginning of view to its limit.

    The current position of `view` is ignored. Use this (instead of `copy_remaining`)
    when the view content is known to start at index zero, for example in buffers
    filled by a decoder.

    Arguments:
        view: Source view, left unchanged.

    Returns:
        Bytes `[0, limit)`, or `None` if `view` is `None`.
    """
    if view is None:
        return None
    return _copy_range(view, 0, view.limit)

def copy_remaining(view: BufferView | None) -> bytes | None:
    """Returns a copy of bytes from the current position of view to its limit.

    Arguments:
        view: Source view, left unchanged.

    Returns:
        Bytes `[position, limit)` (empty if there are no remaining bytes), or `None`
        if `view` is `None`.
    """
    if view is None:
        return None
    if not view.has_remaining():
        return b''
    return _copy_range(view, view.position, view.limit)

def copy_remaining_up_to(view: BufferView | None, max_bytes: int) -> bytes | None:
    """Returns a copy of at most `max_bytes` bytes starting at the current position of view.

    This behaves identically to `copy_remaining`, except that `max_bytes` limits the
    number of copied bytes. Value greater than number of remaining bytes is not an error.

    Arguments:
        view: Source view, left unchanged.
        max_bytes: Maximum number of bytes to copy.

    Returns:
        `min(max_bytes, remaining)` bytes, or `None` if `view` is `None`.

    Raises:
        InvalidArgumentError: When `max_bytes` is negative.
    """
    if view is None:
        return None
    if max_bytes < 0:
        raise InvalidArgumentError(f"Number of bytes to copy cannot be negative ({max_bytes})",
                                   max_bytes=max_bytes)
    start = view.position
    return _copy_range(view, start, start + min(max_bytes, view.remaining))

def immutable_copy(view: BufferView | None) -> BufferView | None:
    """Returns a read-only view over private copy of the given view content.

    The whole content `[0, capacity)` is copied into ordinary memory. The position of the
    new view is set to the position of `view`, its limit is set to its capacity.

    Important:
        The mark of `view` is not carried over to the copy.

    Arguments:
        view: Source view, left unchanged.

    Returns:
        New read-only view, or `None` if `view` is `None`.
    """
    if view is None:
        return None
    return _frozen_clone(view)

def immutable_copy_of_remaining(view: BufferView | None) -> BufferView | None:
    """Returns a read-only view over private copy of the remaining bytes of given view.

    The new view covers exactly the copied bytes: its position is zero and both limit and
    capacity are the number of bytes that were remaining in `view`.

    Arguments:
        view: Source view, left unchanged.

    Returns:
        New read-only view, or `None` if `view` is `None`.
    """
    if view is None:
        return None
    return BufferView.wrap(copy_remaining(view), byteorder=view.byteorder)

def normalize_to_ordinary_memory(view: BufferView | None) -> BufferView | None:
    """Returns a copy of direct view backed by ordinary (`bytearray`) memory.

    The whole content `[0, capacity)` is copied. The position of the new view is set to
    the position of `view` and its limit to its capacity. The copy is read-only when
    `view` is read-only.

    Important:
        The mark of `view` is not carried over to the copy. The function is not
        idempotent, callers should check `view.is_direct` first.

    Arguments:
        view: Source direct view, left unchanged.

    Returns:
        New view, or `None` if `view` is `None`.

    Raises:
        InvalidArgumentError: When `view` is not direct.
    """
    if view is None:
        return None
    if not view.is_direct:
        raise InvalidArgumentError("Provided buffer view is already backed by ordinary memory",
                                   capacity=view.capacity)
    get_logger(AGENT, 'buffer').debug(BraceMessage("Normalizing direct {0!r}", view))
    return _frozen_clone(view) if view.is_read_only else _clone(view)
