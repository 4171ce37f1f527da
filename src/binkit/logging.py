# SPDX-FileCopyrightText: 2026-present The binkit Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: binkit
# FILE:           binkit/logging.py
# DESCRIPTION:    Context-based logging
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

"""binkit - Context-based logging

This module provides context-based logging built on top of standard `logging` module.
Loggers are requested by *agents* (objects or names that emit log records) for a
*topic*, and the `LoggingManager` decides which `logging.Logger` they end up with.

The context-based logging:

1. Adds context information (`domain`, `topic`, `agent`) into `logging.LogRecord`,
   that could be used in logging entry formats.
2. Builds `logging.Logger` names from `LoggingManager.logger_fmt`, so applications can
   route `binkit` output to their own logger hierarchy.

The `BraceMessage` wrapper defers `str.format()` interpolation until the record is
actually emitted.

Example::

    import logging
    from binkit.logging import TOPIC, get_logger, logging_manager

    logging.basicConfig(level=logging.DEBUG,
                        format='%(name)s [%(agent)s] %(message)s')
    logging_manager.logger_fmt = ['myapp', 'binkit', TOPIC]
    get_logger('demo', 'buffer').debug("Hello")
    # myapp.binkit.buffer [demo] Hello
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, IntEnum
from typing import Any


class FormatElement(Enum):
    """Sentinels used within `LoggingManager.logger_fmt` list."""
    DOMAIN = 1
    TOPIC = 2

#: Sentinel representing the domain element in `LoggingManager.logger_fmt`.
DOMAIN: FormatElement = FormatElement.DOMAIN
#: Sentinel representing the topic element in `LoggingManager.logger_fmt`.
TOPIC: FormatElement = FormatElement.TOPIC

#: Logger name format used until changed by application.
DEFAULT_LOGGER_FMT: list[str | FormatElement] = ['binkit', DOMAIN, TOPIC]

class LogLevel(IntEnum):
    """Mirrors standard `logging` levels for convenience and type hinting.
    """
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    FATAL = CRITICAL
    WARN = WARNING

class BraceMessage:
    """Lazy logging message wrapper using brace (`str.format`) style formatting.

    Example::

        logger.debug(BraceMessage("Copied {0} bytes from {view!r}", 16, view=view))
    """
    def __init__(self, fmt: str, /, *args, **kwargs):
        self.fmt: str = fmt
        self.args: tuple[Any, ...] = args
        self.kwargs: dict[str, Any] = kwargs
    def __str__(self) -> str:
        return self.fmt.format(*self.args, **self.kwargs)

class ContextFilter(logging.Filter):
    """Logging filter ensuring context fields exist on `LogRecord` instances.

    Records that did not pass through `ContextLoggerAdapter` get `domain`, `topic`
    and `agent` attributes set to `None`, so formatters using them do not fail.
    """
    def filter(self, record) -> bool:
        for attr in ('domain', 'topic', 'agent'):
            if not hasattr(record, attr):
                setattr(record, attr, None)
        return True

class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter injecting context (`domain`, `topic`, `agent`) info.

    Parameters:
        logger: The standard `logging.Logger` instance to wrap.
        domain: Context Domain name (or None).
        topic: Context Topic name (or None).
        agent: The original agent object or string passed to `get_logger`.
        agent_name: The resolved string name for the agent.
    """
    def __init__(self, logger, domain: str | None, topic: str | None, agent: Any, agent_name: str):
        self.agent = agent
        super().__init__(logger, {'domain': domain, 'topic': topic, 'agent': agent_name})
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        """Merges the adapter's context with any `extra` passed to the logging call,
        giving precedence to keys passed in the call.
        """
        kwargs['extra'] = dict(self.extra, **kwargs['extra']) if 'extra' in kwargs else self.extra
        return msg, kwargs

class LoggingManager:
    """Logging manager.
    """
    def __init__(self):
        self._agent_map: dict[str, str] = {}
        self.__logger_fmt: list[str | FormatElement] = list(DEFAULT_LOGGER_FMT)
        self.__default_domain: str | None = None
        self._logger_factory: Callable = logging.getLogger
    def get_logger_factory(self) -> Callable:
        """Return a callable which is used to create a Logger.
        """
        return self._logger_factory
    def set_logger_factory(self, factory: Callable) -> None:
        """Set a callable which is used to create a Logger.

        The factory has the following signature: `factory(name, *args, **kwargs)`
        """
        self._logger_factory = factory
    def reset(self) -> None:
        """Resets manager to "factory defaults": no agent mappings, default `logger_fmt`,
        undefined `default_domain` and `logging.getLogger` as logger factory.
        """
        self._agent_map.clear()
        self.__logger_fmt = list(DEFAULT_LOGGER_FMT)
        self.__default_domain = None
        self._logger_factory = logging.getLogger
    @property
    def logger_fmt(self) -> list[str | FormatElement]:
        """Logger format.

        The list can contain any number of string values and at most one occurrence of `DOMAIN`
        or `TOPIC` enum values. Empty strings are removed.

        The final `logging.Logger` name is constructed by joining elements of this list with
        dots, and with sentinels replaced with `domain` and `topic` names (sentinels are
        skipped when the name is not defined).

        Raises:
            ValueError: When assigned list is not valid.
        """
        return self.__logger_fmt
    @logger_fmt.setter
    def logger_fmt(self, value: list[str | FormatElement]) -> None:
        def validated(seq):
            seen = set()
            for item in seq:
                match item:
                    case str():
                        if item:
                            yield item
                    case FormatElement():
                        if item in seen:
                            raise ValueError(f"Only one occurence of sentinel {item.name} allowed")
                        seen.add(item)
                        yield item
                    case _:
                        raise ValueError(f"Unsupported item type {type(item)}")

        self.__logger_fmt = list(validated(value))
    @property
    def default_domain(self) -> str | None:
        """Default domain. Could be either a string or `None`.
        """
        return self.__default_domain
    @default_domain.setter
    def default_domain(self, value: str | None) -> None:
        self.__default_domain = None if value is None else str(value)
    def _get_logger_name(self, domain: str | None, topic: str | None) -> str:
        result = []
        for item in self.logger_fmt:
            if item is DOMAIN:
                if domain:
                    result.append(domain)
            elif item is TOPIC:
                if topic:
                    result.append(topic)
            else:
                result.append(item)
        return '.'.join(result)
    def get_agent_name(self, agent: Any) -> str:
        """Determine the canonical string name for a given agent identifier.

        1. If `agent` is a string, it's used directly.
        2. Otherwise `agent._agent_name_` is used if defined, or `module.ClassQualname`.
        3. Agent name mapping defined via `set_agent_mapping` is applied.
        """
        agent_name: Any = agent
        if not isinstance(agent, str):
            if not (agent_name := getattr(agent, '_agent_name_', None)):
                agent_name = f'{agent.__class__.__module__}.{agent.__class__.__qualname__}'
        return str(self._agent_map.get(agent_name, agent_name))
    def set_agent_mapping(self, agent: str, new_agent: str | None) -> None:
        """Sets or removes the mapping of an agent name to another name.

        Parameters:
            agent: Agent name.
            new_agent: New agent name or `None` to remove the mapping. Empty string is like `None`.
        """
        if new_agent:
            self._agent_map[agent] = str(new_agent)
        else:
            self._agent_map.pop(agent, None)
    def get_agent_mapping(self, agent: str) -> str | None:
        """Returns current name mapping for agent, or `None`.
        """
        return self._agent_map.get(agent)
    def get_logger(self, agent: Any, topic: str | None=None) -> ContextLoggerAdapter:
        """Get a `ContextLoggerAdapter` configured for the specified agent and topic.

        Arguments:
            agent: The agent identifier (object or string).
            topic: Optional topic string for the logging stream (e.g., 'buffer', 'codec').
        """
        agent_name = self.get_agent_name(agent)
        domain = self.default_domain
        logger = self._logger_factory(self._get_logger_name(domain, topic))
        return ContextLoggerAdapter(logger, domain, topic, agent, agent_name)

#: Context logging manager.
logging_manager: LoggingManager = LoggingManager()
#: Shortcut to global `.LoggingManager.get_logger` function.
get_logger = logging_manager.get_logger
#: Shortcut to global `.LoggingManager.get_agent_name` function.
get_agent_name = logging_manager.get_agent_name
#: Shortcut to global `.LoggingManager.set_agent_mapping` function.
set_agent_mapping = logging_manager.set_agent_mapping
