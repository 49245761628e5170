"""Core mechanisms and helpers for interacting with the NS API
See https://www.nationstates.net/pages/api.html for NS API details
"""

# Standard library modules
# Code quality
import enum
import logging
import typing as t

# Core library that supports response parsing
import xml.etree.ElementTree as etree

from nationscripts.exceptions import RemoteError

# Setup logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def configure_logger(
    loggerObject: logging.Logger,
    *,
    level: t.Union[int, str] = logging.WARNING,
    force: bool = True,
) -> logging.Logger:
    """Performs standard configuration on the provided logger.

    Can be used to configure this modules logger or any user modules logger.

    Adds a default stream handler with a format string containing level, name, and message.

    Returns the logger passed.
    """
    # Add formatted handler
    FORMAT_STRING = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
    # Only add the handler if forced or none exist
    if force or len(loggerObject.handlers) == 0:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT_STRING))
        loggerObject.addHandler(handler)
    # Set logging level
    loggerObject.setLevel(level)
    # Chain object
    return loggerObject


def enable_logging(level: t.Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure root logger using `configure_logger`.

    Returns the root logger.
    """
    return configure_logger(logging.getLogger(), level=level)


def clean_format(string: str) -> str:
    """Casts the string to lowercase and replaces spaces with underscores"""
    return string.lower().replace(" ", "_")


def wire_value(value: t.Any) -> str:
    """Returns the string sent over the wire for a value.

    Enum members are reduced to their value, everything else is passed through str.
    """
    if isinstance(value, enum.Enum):
        value = value.value
    return str(value)


def joined_parameter(*values: t.Any) -> str:
    """Formats the given values into a single string to be passed as a parameter"""
    return "+".join(wire_value(value) for value in values)


def as_xml(data: str) -> etree.Element:
    """Parse the given data as XML and returns the root node"""
    if not data or not data.strip():
        raise RemoteError("The NS API returned an empty response.")
    try:
        return etree.fromstring(data)
    except etree.ParseError as error:
        raise RemoteError(
            f"Tried to parse malformed data as XML. Error: {error}, Got data: '{data}'"
        ) from error
