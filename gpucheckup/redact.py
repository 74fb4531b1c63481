"""Redact personal data (hostname, username, home dir, emails) from report output."""

import getpass
import re
import socket
from pathlib import Path

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")


def _current_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def _current_username() -> str:
    try:
        name = getpass.getuser()
    except (KeyError, OSError):
        return ""
    # Windows may report DOMAIN\user
    return name.rsplit("\\", 1)[-1]


def _current_home() -> str:
    try:
        return str(Path.home())
    except (KeyError, RuntimeError):
        return ""


class Redactor:
    """Replace identifying strings in rendered output. Disabled = pass-through.

    hostname / username / home default to the current machine's values.
    """

    def __init__(self, enabled: bool = True, hostname: str | None = None, username: str | None = None, home: str | None = None):
        self.enabled = enabled
        self.patterns: list[tuple[re.Pattern, str]] = []
        if not enabled:
            return
        hostname = _current_hostname() if hostname is None else hostname
        username = _current_username() if username is None else username
        home = _current_home() if home is None else home

        # Order matters: home before username paths, hostname before bare username
        if home and home not in ("/", "\\"):
            self.patterns.append((re.compile(re.escape(home), re.IGNORECASE), "<home>"))
        if hostname:
            self.patterns.append((re.compile(r"\b" + re.escape(hostname) + r"\b", re.IGNORECASE), "<host>"))
        if username:
            self.patterns.append((re.compile(r"(?:C:\\Users\\|/home/|/Users/)" + re.escape(username), re.IGNORECASE), "<home>"))
            self.patterns.append((re.compile(r"\b" + re.escape(username) + r"\b"), "<user>"))
        self.patterns.append((_EMAIL_RE, "<email-redacted>"))

    def redact(self, text: str) -> str:
        if not self.enabled or not text:
            return text
        for pattern, replacement in self.patterns:
            text = pattern.sub(replacement, text)
        return text
