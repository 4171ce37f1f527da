# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/stream.py
# DESCRIPTION:    Reading buffer views as streams
# CREATED:        14.10.2026
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

"""binkit - Reading buffer views as streams

`to_stream` presents remaining bytes of a `~binkit.buffer.BufferView` as a readable,
single-pass binary stream. The bytes are copied first, so the stream is not affected
by later changes of the view.
"""

from __future__ import annotations

import io

from .binary import copy_remaining
from .buffer import BufferView


class ByteStream(io.RawIOBase):
    """Sequential, non-seekable binary stream over owned bytes.

    Arguments:
        data: Stream content.
    """
    def __init__(self, data: bytes=b''):
        super().__init__()
        self._data: memoryview = memoryview(data)
        self._pos: int = 0
    def readable(self) -> bool:
        return True
    def readinto(self, buffer) -> int:
        """Read bytes into a pre-allocated, writable bytes-like object.

        Returns:
            Number of bytes read (0 at end of stream).
        """
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        size = min(len(buffer), len(self._data) - self._pos)
        buffer[:size] = self._data[self._pos:self._pos + size]
        self._pos += size
        return size
    @property
    def remaining(self) -> int:
        """Number of bytes not read yet."""
        return len(self._data) - self._pos

def to_stream(view: BufferView | None) -> ByteStream:
    """Returns stream over copy of remaining bytes of given view.

    Arguments:
        view: Source view, left unchanged. When `None`, an empty stream is returned.
    """
    return ByteStream(b'' if view is None else copy_remaining(view))
