# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/config.py
# DESCRIPTION:    Classes for configuration definitions
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

"""binkit - Classes for configuration definitions

Parametrized `binkit` components (like `~binkit.codec.TextCodec`) describe their
settings as a `Config`, i.e. one section of a `configparser` file with a fixed set of
typed options:

*   `StrOption`, `BoolOption` and `EnumOption` for plain values.
*   Options could be required and could have a default value.
*   Values are type checked on assignment and may be further restricted by option
    subclasses (see `~binkit.codec.EncodingOption`).
*   The section could be loaded from `~configparser.ConfigParser`, and written back
    as annotated text with `Config.get_config()`.

Example::

    from configparser import ConfigParser
    from binkit.codec import CodecConfig, LetterCase

    cfg = CodecConfig()
    parser = ConfigParser()
    parser.read_string('''
    [codec]
    hex_case = upper
    ''')
    cfg.load_config(parser)
    print(cfg.hex_case.value is LetterCase.UPPER) # Output: True
    print(cfg.get_config())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from configparser import DEFAULTSECT, ConfigParser
from enum import Enum
from typing import Generic, TypeVar

from .types import Error

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

#: Valid string literals for True value.
TRUE_STR: list[str] = ['yes', 'true', 'on', 'y', '1']
#: Valid string literals for False value.
FALSE_STR: list[str] = ['no', 'false', 'off', 'n', '0']

class Option(Generic[T], ABC):
    """Abstract base class for typed configuration options.

    Arguments:
        name: Option name (key in configuration section).
        datatype: Type of option values.
        description: Option description. Can span multiple lines.
        required: True if option must have a value.
        default: Default option value, also used as initial value.
    """
    def __init__(self, name: str, datatype: type[T], description: str, *, required: bool=False,
                 default: T | None=None):
        assert name and description, "name and description required" # noqa: S101
        #: Option name.
        self.name: str = name
        #: Type of option values.
        self.datatype: type[T] = datatype
        #: Option description. Can span multiple lines.
        self.description: str = description
        #: True if option must have a value.
        self.required: bool = required
        #: Default option value.
        self.default: T | None = default
        self._value: T | None = None
        if default is not None:
            self.set_value(default)
    def _check_value(self, value: T | None) -> None:
        """Checks value before assignment. Subclasses may add restrictions.

        Raises:
            TypeError: When value is not of `datatype`.
            ValueError: When value is `None` for required option.
        """
        if value is None:
            if self.required:
                raise ValueError(f"Value is required for option '{self.name}'.")
        elif not isinstance(value, self.datatype):
            raise TypeError(f"Option '{self.name}' value must be a '{self.datatype.__name__}',"
                            f" not '{type(value).__name__}'")
    def _get_value_description(self) -> str:
        return self.datatype.__name__
    def load_config(self, config: ConfigParser, section: str) -> None:
        """Sets option value from `section` of `~configparser.ConfigParser`. The value
        is left unchanged when the section (or `DEFAULT` section) does not define it.

        Raises:
            ValueError: When the value in configuration is not valid.
            KeyError: When `section` does not exist.
        """
        if section != DEFAULTSECT and not config.has_section(section):
            raise KeyError(f"Configuration error: section '{section}' not found!")
        if config.has_option(section, self.name):
            self.set_as_str(config[section][self.name])
    def validate(self) -> None:
        """Raises `Error` when required option does not have a value.
        """
        if self.required and self._value is None:
            raise Error(f"Missing value for required option '{self.name}'")
    def get_config(self, *, plain: bool=False) -> str:
        """Returns option as `configparser` text. Values equal to default are commented out.

        Arguments:
          plain: When False, the description, type and required flag are included as comments.
        """
        lines = []
        if not plain:
            if self.required:
                lines.append("; REQUIRED option.\n")
            lines.extend(f"; {line}\n" for line in self.description.strip().splitlines())
            lines.append(f"; Type: {self._get_value_description()}\n")
        prefix = ';' if self._value == self.default else ''
        value = '<UNDEFINED>' if self._value is None else self.get_formatted()
        lines.append(f'{prefix}{self.name} = {value}\n')
        return ''.join(lines)
    def has_value(self) -> bool:
        """Returns True if option value is not None.
        """
        return self._value is not None
    def clear(self, *, to_default: bool=True) -> None:
        """Sets the option value to default value, or to `None` when `to_default` is False.
        """
        self._value = self.default if to_default else None
    def get_value(self) -> T | None:
        """Returns current option value.
        """
        return self._value
    def set_value(self, value: T | None) -> None:
        """Set new option value.

        Raises:
            TypeError: When the new value is not of the expected `datatype`.
            ValueError: When the value is not acceptable for this option.
        """
        self._check_value(value)
        self._value = value
    @abstractmethod
    def get_formatted(self) -> str:
        """Returns value formatted for use in config file.
        """
    @abstractmethod
    def set_as_str(self, value: str) -> None:
        """Set new option value from string.

        Raises:
            ValueError: When the argument is not a valid option value.
        """
    @property
    def value(self) -> T | None:
        """Current option value."""
        return self._value
    @value.setter
    def value(self, value: T | None) -> None:
        self.set_value(value)

class Config:
    """Configuration section, i.e. named set of options.

    Options are found among instance attributes, so descendants define them in
    `__init__` as attributes named after the option.

    Arguments:
        name: Section name.
        optional: When True, a missing section in configuration file is not an error.
        description: Section description. Class doc string is used when not specified.
    """
    def __init__(self, name: str, *, optional: bool=False, description: str | None=None):
        self._name: str = name
        self._optional: bool = optional
        self._description: str = (self.__doc__ or '') if description is None else description
    def validate(self) -> None:
        """Validates all options.

        Raises:
            Error: When a required option has no value, or an option is not stored in
                   attribute with the same name as `option.name`.
        """
        for option in self.options:
            option.validate()
            if getattr(self, option.name, None) is not option:
                raise Error(f"Option '{option.name}' is not defined as attribute with the same name")
    def clear(self, *, to_default: bool=True) -> None:
        """Sets all options to their default values (or to `None` when `to_default` is False).
        """
        for option in self.options:
            option.clear(to_default=to_default)
    def get_description(self) -> str:
        """Section description. Can span multiple lines.
        """
        return self._description
    def get_config(self, *, plain: bool=False) -> str:
        """Returns the section as `configparser` text.

        Arguments:
          plain: When False, the section description and option descriptions are included
                 as comments.
        """
        lines = [f"[{self.name}]\n"]
        if not plain:
            lines.append(';\n')
            lines.extend(f"; {line.strip()}\n" for line in self.get_description().strip().splitlines())
        for option in self.options:
            if not plain:
                lines.append('\n')
            lines.append(option.get_config(plain=plain))
        return ''.join(lines)
    def load_config(self, config: ConfigParser, section: str | None=None) -> None:
        """Sets option values from `~configparser.ConfigParser`.

        Arguments:
            config:  Parsed configuration.
            section: Section to read. Defaults to `name`.

        Raises:
            Error: When section is missing and the config is not optional, or when an option
                   value is not valid.
        """
        if section is None:
            section = self.name
        if section != DEFAULTSECT and not config.has_section(section):
            if self._optional:
                return
            raise Error(f"Configuration error: section '{section}' not found!")
        for option in self.options:
            try:
                option.load_config(config, section)
            except (ValueError, TypeError) as exc:
                raise Error(f"Configuration error: {exc}", section=section,
                            option=option.name) from exc
    @property
    def name(self) -> str:
        """Section name.
        """
        return self._name
    @property
    def optional(self) -> bool:
        """Whether the section may be missing in configuration file.
        """
        return self._optional
    @property
    def options(self) -> list[Option]:
        """Options defined as attributes of this instance, in definition order."""
        return [v for v in vars(self).values() if isinstance(v, Option)]

# Options
class StrOption(Option[str]):
    """Configuration option with string value.

    Arguments:
        name: Option name.
        description: Option description. Can span multiple lines.
        required: True if option must have a value.
        default: Default option value.
    """
    def __init__(self, name: str, description: str, *, required: bool=False, default: str | None=None):
        super().__init__(name, str, description, required=required, default=default)
    def get_formatted(self) -> str:
        return '<UNDEFINED>' if self._value is None else self._value
    def set_as_str(self, value: str) -> None:
        self.set_value(value)

class BoolOption(Option[bool]):
    """Configuration option with boolean value.

    Literals from `TRUE_STR` and `FALSE_STR` (in any letter case) are accepted
    in configuration files.
    """
    def __init__(self, name: str, description: str, *, required: bool=False,
                 default: bool | None=None):
        super().__init__(name, bool, description, required=required, default=default)
    def get_formatted(self) -> str:
        if self._value is None:
            return '<UNDEFINED>'
        return 'yes' if self._value else 'no'
    def set_as_str(self, value: str) -> None:
        """Set new option value from boolean literal.

        Raises:
            ValueError: When the argument is not a valid boolean literal.
        """
        literal = value.strip().lower()
        if literal not in TRUE_STR and literal not in FALSE_STR:
            raise ValueError(f"Value is not a valid bool string constant: '{value}'")
        self.set_value(literal in TRUE_STR)

class EnumOption(Option[E], Generic[E]):
    """Configuration option with enum value. Members are written to configuration
    files as lowercase names, and read in any letter case.

    Arguments:
        name: Option name.
        enum_class: Enum type.
        description: Option description. Can span multiple lines.
        required: True if option must have a value.
        default: Default option value.
        allowed: Allowed members. All members of `enum_class` when not specified.
    """
    def __init__(self, name: str, enum_class: type[E], description: str, *, required: bool=False,
                 default: E | None=None, allowed: Sequence[E] | None=None):
        #: Allowed enum members.
        self.allowed: Sequence[E] = list(enum_class) if allowed is None else allowed
        self._members: dict[str, E] = {i.name.lower(): i for i in self.allowed}
        super().__init__(name, enum_class, description, required=required, default=default)
    def _check_value(self, value: E | None) -> None:
        super()._check_value(value)
        if value is not None and value not in self.allowed:
            raise ValueError(f"Value '{value!r}' not allowed")
    def _get_value_description(self) -> str:
        return f"enum [{', '.join(self._members)}]"
    def get_formatted(self) -> str:
        return '<UNDEFINED>' if self._value is None else self._value.name.lower()
    def set_as_str(self, value: str) -> None:
        """Set new option value from member name.

        Raises:
            ValueError: When the argument is not a name of allowed member.
        """
        member = self._members.get(value.strip().lower())
        if member is None:
            raise ValueError(f"Illegal value '{value}' for enum type '{self.datatype.__name__}'")
        self.set_value(member)
