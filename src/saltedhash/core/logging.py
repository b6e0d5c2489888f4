"""Log redaction for credentials.

Clear-text passwords, salts and stored tokens must never reach log output.
Two passes run over every message: ``key=value`` pairs with a sensitive
key lose their value, and anything shaped like a salted-hash token
(``{SCHEME}base64``) is masked wherever it appears.
"""

from __future__ import annotations

import logging
import re
from typing import Final

_SENSITIVE_KEYS: Final[tuple[str, ...]] = (
    "clear_text",
    "cleartext",
    "password",
    "secret",
    "salt_hex",
    "salt",
    "hashed",
    "token",
)

_REDACTED: Final[str] = "[REDACTED]"

_SENSITIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(?P<key>"
    + "|".join(re.escape(k) for k in _SENSITIVE_KEYS)
    + r")\s*[=:]\s*(?P<value>\"[^\"]*\"|'[^']*'|\S+)",
    re.IGNORECASE,
)

# A scheme tag immediately followed by base64 payload.
_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<scheme>\{S[A-Za-z0-9]+\})[A-Za-z0-9+/]+={0,2}"
)


def redact_message(message: str) -> str:
    """Strip secret values and token payloads from *message*.

    ``password=hunter2`` becomes ``password=[REDACTED]`` and
    ``{SSHA}72uhy5...`` becomes ``{SSHA}[REDACTED]``; the scheme tag is
    kept because it is useful and not secret.
    """
    message = _SENSITIVE_PATTERN.sub(lambda m: f"{m.group('key')}={_REDACTED}", message)
    return _TOKEN_PATTERN.sub(lambda m: f"{m.group('scheme')}{_REDACTED}", message)


class SanitizingFilter(logging.Filter):
    """Rewrites each record's message through :func:`redact_message`.

    Arguments are merged into the message first so that secrets passed
    as ``%s`` arguments are caught too.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage() if record.args else str(record.msg)
        record.msg = redact_message(message)
        record.args = None
        return True


def install_sanitizing_filter(
    logger: logging.Logger | None = None,
    *,
    handler_level: bool = False,
) -> SanitizingFilter:
    """Attach a :class:`SanitizingFilter` to *logger* (root if ``None``).

    With ``handler_level=True`` the filter goes on each of the logger's
    handlers instead, which also covers records propagated from child
    loggers.  The installed filter is returned so it can be removed later.
    """
    filt = SanitizingFilter()
    target = logger or logging.getLogger()
    targets = target.handlers if handler_level else [target]
    for item in targets:
        item.addFilter(filt)
    return filt
