"""Localized string resources for rule names, descriptions and messages.

Rules never embed user-facing text; they request a template by key and
let this module pick the table for the active culture.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CULTURE = "en-US"

SOURCE_NAME = "SourceName"
NAME_SPACE_FORMAT = "NameSpaceFormat"
AVOID_LONG_LINES_NAME = "AvoidLongLinesName"
AVOID_LONG_LINES_COMMON_NAME = "AvoidLongLinesCommonName"
AVOID_LONG_LINES_DESCRIPTION = "AvoidLongLinesDescription"
AVOID_LONG_LINES_ERROR = "AvoidLongLinesError"

_TABLES: dict[str, dict[str, str]] = {
    "en-US": {
        SOURCE_NAME: "PS",
        NAME_SPACE_FORMAT: "{0}{1}",
        AVOID_LONG_LINES_NAME: "AvoidLongLines",
        AVOID_LONG_LINES_COMMON_NAME: "Avoid long lines",
        AVOID_LONG_LINES_DESCRIPTION: (
            "Line lengths should be less than the configured maximum"
        ),
        AVOID_LONG_LINES_ERROR: (
            "Line exceeds the configured maximum length of {0} characters"
        ),
    },
}


def current_culture() -> str:
    """Return the culture named by ``PSLINT_CULTURE``, or the default."""
    return os.environ.get("PSLINT_CULTURE") or DEFAULT_CULTURE


def _resolve_table(culture: str) -> dict[str, str]:
    """Return the table for *culture*, falling back by language, then default."""
    if culture in _TABLES:
        return _TABLES[culture]
    language = culture.split("-", 1)[0].lower()
    for name, table in _TABLES.items():
        if name.split("-", 1)[0].lower() == language:
            return table
    logger.debug("No strings for culture %r; using %s", culture, DEFAULT_CULTURE)
    return _TABLES[DEFAULT_CULTURE]


def get_string(key: str, *args: object, culture: str | None = None) -> str:
    """Return the template for *key* formatted with *args*.

    Args:
        key: Resource identifier, e.g. ``AVOID_LONG_LINES_ERROR``.
        *args: Positional values substituted into ``{0}``, ``{1}``, ...
        culture: Culture name such as ``en-US``. Defaults to the current culture.

    Returns:
        The formatted, localized string.

    Raises:
        KeyError: If *key* is not a known resource.
    """
    table = _resolve_table(culture or current_culture())
    template = table.get(key)
    if template is None:
        template = _TABLES[DEFAULT_CULTURE][key]
    return template.format(*args)
