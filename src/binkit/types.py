# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/types.py
# DESCRIPTION:    Core types
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

"""binkit - Core types

This module provides fundamental building blocks used across the `binkit` package:

- A custom base exception class (`Error`) and the `InvalidArgumentError` raised
  on precondition violations.
- `ByteOrder` enumeration used by `~binkit.buffer.BufferView` for number access.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# Exceptions

class Error(Exception):
    """Exception intended as a base for application-related errors.

    Unlike the standard `Exception`, this class accepts arbitrary keyword
    arguments during initialization. These keyword arguments are stored as
    attributes on the exception instance.

    Important:
        Attribute lookup on this class never fails, as all attributes that are not actually
        set, have `None` value. The special attribute `__notes__` (used by `add_note`)
        is explicitly excluded from this behavior.

    Example::

        try:
            normalize_to_ordinary_memory(view)
        except Error as e:
            if e.capacity is None:
                ...
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args)
        for name, value in kwargs.items():
            setattr(self, name, value)
    def __getattr__(self, name) -> Any | None:
        if name == '__notes__':
            raise AttributeError
        return None

class InvalidArgumentError(Error, ValueError):
    """Raised when an argument violates a precondition of the called function.

    Derives from `ValueError`, so callers that do not know about `binkit` errors
    can still handle it in the usual way.
    """

# Enums

class ByteOrder(Enum):
    """Byte order for storing numbers in binary `.BufferView`.
    """
    LITTLE = 'little'
    BIG = 'big'
    NETWORK = BIG
