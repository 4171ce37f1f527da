# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           tests/test_codec.py
# DESCRIPTION:    Unit tests for binkit.codec
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

"""binkit - Unit tests for binkit.codec
"""

from __future__ import annotations

import binascii
import logging
from configparser import ConfigParser

import pytest

from binkit import codec
from binkit.codec import *
from binkit.types import Error

SAMPLES = [b'', b'\x00', b'\xde\xad\xbe\xef', bytes(range(256)), 'Žluťoučký kůň'.encode('utf-8')]

def test_hex():
    assert to_hex(b'\xde\xad\xbe\xef') == 'deadbeef'
    assert from_hex('deadbeef') == b'\xde\xad\xbe\xef'
    assert from_hex('DEADBEEF') == b'\xde\xad\xbe\xef'
    assert to_hex(b'') == ''
    assert from_hex('') == b''

@pytest.mark.parametrize('data', SAMPLES)
def test_round_trip(data):
    assert from_hex(to_hex(data)) == data
    assert from_base64(to_base64(data)) == data
    assert from_base64_bytes(to_base64_bytes(data)) == data

def test_hex_errors():
    with pytest.raises(DecodeError):
        from_hex('abc')
    with pytest.raises(DecodeError):
        from_hex('zz')
    with pytest.raises(TypeError):
        to_hex(None)
    assert DecodeError is binascii.Error

def test_base64():
    assert to_base64(b'binkit') == 'Ymlua2l0'
    assert to_base64(b'\xff\xfe') == '//4='
    assert from_base64('//4=') == b'\xff\xfe'
    assert to_base64_bytes(b'binkit') == b'Ymlua2l0'
    assert from_base64_bytes(b'Ymlua2l0') == b'binkit'
    assert to_base64(b'') == ''
    assert from_base64('') == b''

def test_base64_none():
    assert to_base64(None) is None
    assert from_base64(None) is None
    assert to_base64_bytes(None) is None
    assert from_base64_bytes(None) is None

def test_base64_errors():
    with pytest.raises(DecodeError):
        from_base64('//4')
    with pytest.raises(DecodeError):
        from_base64('Ymlu*2l0')
    with pytest.raises(DecodeError):
        from_base64('Ymlu a2l0')
    with pytest.raises(DecodeError):
        from_base64_bytes(b'-_4=')
    with pytest.raises(DecodeError):
        from_base64('Ymlua2l0ž')

def test_default_codec():
    assert codec.text_codec.hex_case is LetterCase.LOWER
    assert codec.text_codec.strict
    assert codec.text_codec.encoding == 'utf-8'

def test_config_defaults():
    cfg = CodecConfig()
    assert cfg.name == 'codec'
    assert cfg.hex_case.value is LetterCase.LOWER
    assert cfg.strict.value is True
    assert cfg.encoding.value == 'utf-8'
    cfg.validate()

def test_config_load():
    parser = ConfigParser()
    parser.read_string("""
[codec]
hex_case = UPPER
strict = no
encoding = ascii
""")
    cfg = CodecConfig()
    cfg.load_config(parser)
    assert cfg.hex_case.value is LetterCase.UPPER
    assert cfg.strict.value is False
    assert cfg.encoding.value == 'ascii'
    tc = TextCodec(cfg)
    assert tc.to_hex(b'\xde\xad') == 'DEAD'
    assert tc.from_hex('DEAD') == b'\xde\xad'
    assert tc.from_hex('dead') == b'\xde\xad'
    # Non-alphabet characters are discarded
    assert tc.from_base64('Ymlu a2l0\n') == b'binkit'
    # Padding is still checked
    with pytest.raises(DecodeError):
        tc.from_base64('//4')
    # Codec does not follow later config changes
    cfg.hex_case.value = LetterCase.LOWER
    assert tc.to_hex(b'\xde\xad') == 'DEAD'

def test_config_bad_value():
    parser = ConfigParser()
    parser.read_string("""
[codec]
hex_case = mixed
""")
    with pytest.raises(Error, match="Illegal value 'mixed'"):
        CodecConfig().load_config(parser)

def test_config_invalid():
    cfg = CodecConfig()
    with pytest.raises(ValueError, match="Value is required for option 'encoding'"):
        cfg.encoding.value = None
    cfg.encoding.clear(to_default=False)
    with pytest.raises(Error, match="Missing value for required option 'encoding'"):
        TextCodec(cfg)

def test_codec_logging(caplog):
    caplog.set_level(logging.DEBUG, logger='binkit')
    TextCodec(CodecConfig())
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == 'binkit.codec'
    assert record.agent == 'binkit.codec.TextCodec'
    assert record.getMessage() == "Codec [codec]: hex_case=lower, strict=yes, encoding=utf-8"

@pytest.mark.parametrize('encoding', ['utf-16', 'utf-32', 'cp037', 'utf-8-sig'])
def test_config_incompatible_encoding(encoding):
    cfg = CodecConfig()
    with pytest.raises(ValueError, match=f"Encoding '{encoding}' is not ASCII compatible"):
        cfg.encoding.value = encoding
    assert cfg.encoding.value == 'utf-8'
    parser = ConfigParser()
    parser.read_string(f"[codec]\nencoding = {encoding}\n")
    with pytest.raises(Error, match="is not ASCII compatible") as cm:
        cfg.load_config(parser)
    assert cm.value.option == 'encoding'

@pytest.mark.parametrize('encoding', ['nonexistent-codec', 'base64', 'rot13'])
def test_config_unknown_encoding(encoding):
    cfg = CodecConfig()
    with pytest.raises(ValueError, match=f"Unknown text encoding '{encoding}'"):
        cfg.encoding.value = encoding

@pytest.mark.parametrize('encoding', ['ascii', 'latin-1', 'cp1250', 'UTF8'])
def test_config_compatible_encoding(encoding):
    cfg = CodecConfig()
    cfg.encoding.value = encoding
    tc = TextCodec(cfg)
    for data in SAMPLES:
        assert tc.from_base64(tc.to_base64(data)) == data

def test_from_hex_non_ascii():
    with pytest.raises(ValueError):
        from_hex('dežd')
