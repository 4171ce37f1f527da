# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/codec.py
# DESCRIPTION:    Hexadecimal and Base64 text encodings
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

"""binkit - Hexadecimal and Base64 text encodings

This module converts binary data to and from text. The actual algorithms are those of
the standard `binascii` and `base64` modules, this module only gives them a uniform
interface and handles `None` values:

- `to_hex` / `from_hex` do not accept `None`.
- Base64 functions return `None` for `None` without invoking the codec.

Malformed input makes decoders raise `DecodeError` (`binascii.Error`), which is passed
to the caller unchanged.

Module-level functions use the default `text_codec` (lowercase hex digits, standard
Base64 alphabet with padding, strict decoding, UTF-8 text). Differently configured
codecs are created from `CodecConfig`.

Example::

    from binkit.codec import to_hex, from_hex, to_base64, from_base64

    to_hex(b'\\xde\\xad\\xbe\\xef')   # 'deadbeef'
    from_hex('deadbeef')            # b'\\xde\\xad\\xbe\\xef'
    to_base64(b'binkit')            # 'Ymlua2l0'
    from_base64(None)               # None
"""

from __future__ import annotations

import base64
import binascii
import string
from enum import Enum

from .config import BoolOption, Config, EnumOption, StrOption
from .logging import BraceMessage, get_logger

#: Exception raised by decoders on malformed input.
DecodeError = binascii.Error

class LetterCase(Enum):
    """Letter case of hexadecimal digits."""
    LOWER = 'lower'
    UPPER = 'upper'

#: Characters that appear in Base64 text (standard alphabet and padding).
BASE64_CHARS: str = string.ascii_letters + string.digits + "+/="

class EncodingOption(StrOption):
    """Configuration option with name of text encoding usable for Base64 text.

    Only encodings that map all `BASE64_CHARS` to their ASCII bytes are accepted,
    otherwise Base64 text would not decode back to the original data.
    """
    def _check_value(self, value: str | None) -> None:
        super()._check_value(value)
        if value is None:
            return
        try:
            encoded = BASE64_CHARS.encode(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding '{value}'") from exc
        if encoded != BASE64_CHARS.encode('ascii'):
            raise ValueError(f"Encoding '{value}' is not ASCII compatible")

class CodecConfig(Config):
    """Text codec configuration.

    Arguments:
        name: Section name [default: 'codec'].
        optional: Whether the section may be missing in configuration file.
    """
    def __init__(self, name: str='codec', *, optional: bool=False):
        super().__init__(name, optional=optional)
        #: Letter case of hexadecimal digits produced by encoder.
        self.hex_case: EnumOption = \
            EnumOption('hex_case', LetterCase,
                       "Letter case of hexadecimal digits produced by encoder",
                       required=True, default=LetterCase.LOWER)
        #: Whether Base64 decoder rejects characters outside of Base64 alphabet.
        self.strict: BoolOption = \
            BoolOption('strict',
                       "When 'yes', Base64 decoder rejects characters outside of Base64 alphabet.\n"
                       "When 'no', such characters are discarded before decoding.",
                       required=True, default=True)
        #: Character encoding of Base64 text.
        self.encoding: EncodingOption = \
            EncodingOption('encoding', "Character encoding of Base64 text", required=True,
                           default='utf-8')

class TextCodec:
    """Converts binary data to hexadecimal or Base64 text and back.

    Codec settings are taken from `config` when the codec is created, later changes
    to `config` have no effect on it.

    Arguments:
        config: Codec configuration. Defaults are used when not specified.

    Raises:
        Error: When `config` is not valid.
    """
    def __init__(self, config: CodecConfig | None=None):
        if config is None:
            config = CodecConfig()
        else:
            config.validate()
            get_logger(self, 'codec').debug(BraceMessage("Codec [{0}]: hex_case={1}, strict={2}, encoding={3}",
                                                         config.name,
                                                         config.hex_case.get_formatted(),
                                                         config.strict.get_formatted(),
                                                         config.encoding.value))
        #: Letter case of hexadecimal digits produced by `to_hex`.
        self.hex_case: LetterCase = config.hex_case.value
        #: Whether Base64 decoder rejects characters outside of Base64 alphabet.
        self.strict: bool = config.strict.value
        #: Character encoding of Base64 text.
        self.encoding: str = config.encoding.value
    def to_hex(self, data: bytes) -> str:
        """Converts byte data to hexadecimal text.
        """
        result = binascii.hexlify(data).decode('ascii')
        return result.upper() if self.hex_case is LetterCase.UPPER else result
    def from_hex(self, text: str) -> bytes:
        """Converts hexadecimal text (digits in any letter case) to the original byte data.

        Raises:
            DecodeError: When `text` has odd length or contains non-hexadecimal characters.
            ValueError: When `text` contains non-ASCII characters.
        """
        return binascii.unhexlify(text)
    def to_base64_bytes(self, data: bytes | None) -> bytes | None:
        """Converts byte data to Base64 encoded bytes, or returns `None` for `None`.
        """
        return None if data is None else base64.b64encode(data)
    def from_base64_bytes(self, data: bytes | None) -> bytes | None:
        """Converts Base64 encoded bytes to the original byte data, or returns `None` for `None`.

        Raises:
            DecodeError: When `data` is not valid Base64 (bad character in strict mode,
                         or incorrect padding).
        """
        return None if data is None else base64.b64decode(data, validate=self.strict)
    def to_base64(self, data: bytes | None) -> str | None:
        """Converts byte data to Base64 text, or returns `None` for `None`.
        """
        return None if data is None else self.to_base64_bytes(data).decode(self.encoding)
    def from_base64(self, text: str | None) -> bytes | None:
        """Converts Base64 text to the original byte data, or returns `None` for `None`.

        Raises:
            DecodeError: When `text` is not valid Base64.
        """
        return None if text is None else self.from_base64_bytes(text.encode(self.encoding))

#: Default text codec.
text_codec: TextCodec = TextCodec()
#: Shortcut to `.TextCodec.to_hex` of default codec.
to_hex = text_codec.to_hex
#: Shortcut to `.TextCodec.from_hex` of default codec.
from_hex = text_codec.from_hex
#: Shortcut to `.TextCodec.to_base64` of default codec.
to_base64 = text_codec.to_base64
#: Shortcut to `.TextCodec.from_base64` of default codec.
from_base64 = text_codec.from_base64
#: Shortcut to `.TextCodec.to_base64_bytes` of default codec.
to_base64_bytes = text_codec.to_base64_bytes
#: Shortcut to `.TextCodec.from_base64_bytes` of default codec.
from_base64_bytes = text_codec.from_base64_bytes
