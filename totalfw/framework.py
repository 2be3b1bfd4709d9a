"""The framework object and its default definitions."""

from __future__ import annotations

import contextlib
import json as _json
import os
import re
import time
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Pattern, TypeVar

from .config import Config, default_config
from .paths import TPath
from .types import (
    AuditData,
    Currency,
    ErrorInfo,
    InternalStats,
    Message,
    Routes,
    Stats,
    SuccessResult,
    Temporary,
)

VERSION = "5.0.0"
MAX_ERRORS = 10

T = TypeVar("T")


def _node_version() -> str:
    return os.environ.get("NODE_VERSION", "unknown")


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, not {type(value).__name__}")
    return value


@dataclass
class Framework:
    """Holds the whole state of a running application."""

    id: str = ""
    clusterid: str = ""
    is5: int = 5012
    version: int = 5012
    is_bundle: bool = False
    is_loaded: bool = False
    version_header: str = "5"
    version_node: str = field(default_factory=_node_version)

    resources: Dict[str, Any] = field(default_factory=dict)
    connections: Dict[str, Any] = field(default_factory=dict)
    schedules: Dict[str, Any] = field(default_factory=dict)
    modules: Dict[str, Any] = field(default_factory=dict)
    plugins: Dict[str, Any] = field(default_factory=dict)
    actions: Dict[str, Any] = field(default_factory=dict)
    apiservices: Dict[str, Any] = field(default_factory=dict)
    processing: Dict[str, Any] = field(default_factory=dict)
    transformations: Dict[str, Any] = field(default_factory=dict)
    consumption: Dict[str, Any] = field(default_factory=dict)
    flowstreams: Dict[str, Any] = field(default_factory=dict)
    filestorages: Dict[str, Any] = field(default_factory=dict)
    jsonschemas: Dict[str, Any] = field(default_factory=dict)
    querybuilders: Dict[str, Any] = field(default_factory=dict)
    openclients: Dict[str, Any] = field(default_factory=dict)
    nodemodules: Dict[str, Any] = field(default_factory=dict)
    workers: Dict[str, Any] = field(default_factory=dict)

    timeouts: List[Any] = field(default_factory=list)
    errors: List[ErrorInfo] = field(default_factory=list)
    paused: List[Any] = field(default_factory=list)
    crons: List[Any] = field(default_factory=list)

    internal: InternalStats = field(default_factory=InternalStats)
    routes: Routes = field(default_factory=Routes)
    temporary: Temporary = field(default_factory=Temporary)
    stats: Stats = field(default_factory=Stats)
    path: TPath = field(default_factory=lambda: TPath("src"))
    config: Config = field(default_factory=default_config)


class Parsers:
    """Default body parsers."""

    def json(self, value: str) -> Any:
        """Parse JSON; raises ``json.JSONDecodeError`` on bad input."""
        return _json.loads(value)

    def urlencoded(self, value: str) -> Dict[str, str]:
        """Split ``key=value`` pairs on ``&``; pairs without ``=`` are dropped."""
        result: Dict[str, str] = {}
        for pair in value.split("&"):
            key, sep, val = pair.partition("=")
            if sep:
                result[key] = val
        return result

    def xml(self, value: str) -> str:
        """Return the XML text as it came; raises ``TypeError`` for non-text input."""
        return _require_text(value, "XML body")


@dataclass
class Validators:
    """Regular expressions used to validate input values."""

    email: Pattern[str] = field(
        default_factory=lambda: re.compile(r"^[a-zA-Z0-9-_.+]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
    )
    url: Pattern[str] = field(default_factory=lambda: re.compile(r"^http(s)?://[^,{}\\]*$"))
    phone: Pattern[str] = field(
        default_factory=lambda: re.compile(
            r"^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,8}$"
        )
    )
    zip: Pattern[str] = field(default_factory=lambda: re.compile(r"^[0-9a-z\-\s]{3,20}$"))
    uid: Pattern[str] = field(
        default_factory=lambda: re.compile(
            r"^\d{14,}[a-z]{3}[01]{1}|^\d{9,14}[a-z]{2}[01]{1}a|^\d{4,18}[a-z]{2}\d{1}[01]{1}b"
            r"|^[0-9a-f]{4,18}[a-z]{2}\d{1}[01]{1}c|^[0-9a-z]{4,18}[a-z]{2}\d{1}[01]{1}d"
            r"|^[0-9a-zA-Z]{5,10}\d{1}[01]{1}f|^[0-9a-zA-Z]{10}[A-J]{1}r$"
        )
    )
    xss: Pattern[str] = field(default_factory=lambda: re.compile(r"<.*>"))
    sqlinjection: Pattern[str] = field(
        default_factory=lambda: re.compile(
            r"'(''|[^'])*'|\b(ALTER|CREATE|DELETE|DROP|EXEC(UTE){0,1}|INSERT( +INTO){0,1}"
            r"|MERGE|SELECT|UPDATE|UNION( +ALL){0,1})\b"
        )
    )


class Definitions:
    """Default handlers of a framework: parsers, validators and event hooks."""

    def __init__(self, framework: Framework) -> None:
        self.framework = framework
        self.helpers: Dict[str, Callable[[], Any]] = {}
        self.currencies: Dict[str, Currency] = {}
        self.parsers = Parsers()
        self.validators = Validators()

    def on_success(self, value: T) -> SuccessResult[T]:
        return SuccessResult(value=value)

    def on_audit(self, name: Optional[str], data: AuditData) -> None:
        """Stamp ``data`` and append it as a JSON line to ``logs/<name>.log``.

        Write failures are ignored.
        """
        self.framework.stats.performance.open += 1
        data.dtcreated = datetime.now(timezone.utc)
        log_path = self.framework.path.logs(f"{name or 'audit'}.log")
        line = _json.dumps(data.to_dict()) + "\n"
        with contextlib.suppress(OSError):
            with open(log_path, "a", encoding="utf-8") as handle:
                handle.write(line)

    def on_mail(
        self,
        email: str,
        subject: str,
        body: str,
        callback: Optional[str] = None,
        reply: Optional[str] = None,
    ) -> Message:
        """Build a mail message addressed from the configured sender."""
        msg = Message(subject=subject, body=body)
        if "," in email:
            msg.to_addresses.extend(
                addr.strip() for addr in email.split(",") if addr.strip()
            )
        else:
            msg.to_addresses.append(email)

        config = self.framework.config
        smtp = config.smtp
        msg.from_address = next(
            (v for v in (config.mail_from, smtp.from_address, smtp.user) if v is not None), ""
        )
        msg.from_name = next(
            (v for v in (config.mail_from_name, smtp.name) if v is not None), ""
        )

        if reply is not None:
            msg.reply_to = reply
        elif config.mail_reply is not None and len(config.mail_reply) > 3:
            msg.reply_to = config.mail_reply

        if config.mail_cc is not None and len(config.mail_cc) > 3:
            msg.cc.append(config.mail_cc)
        if config.mail_bcc is not None and len(config.mail_bcc) > 3:
            msg.bcc.append(config.mail_bcc)

        msg.sending = time.monotonic()
        return msg

    def on_view_compile(self, name: str, html: str) -> str:
        """Return the compiled view; the default leaves the HTML as it is."""
        _require_text(name, "view name")
        return _require_text(html, "view HTML")

    def on_error(
        self, err: BaseException, name: Optional[str] = None, url: Optional[str] = None
    ) -> None:
        """Print the error, keep it among the last errors and count it."""
        now = datetime.now(timezone.utc)
        error_name = name if name is not None else "unknown"
        error_str = str(err)
        prefix = f"{error_name} ---> " if error_name else ""
        url_info = f" ({url})" if url is not None else ""
        print(f"ERROR ======= {now:%Y-%m-%d %H:%M:%S}: {prefix}{error_str}{url_info}")
        if err.__traceback__ is not None:
            print("".join(traceback.format_exception(type(err), err, err.__traceback__)))

        errors = self.framework.errors
        errors.append(
            ErrorInfo(error=error_str, name=error_name or None, url=url, date=now)
        )
        if len(errors) > MAX_ERRORS:
            del errors[0]
        self.framework.stats.error += 1


def initialize_framework() -> Framework:
    """Return a new framework holding the default values."""
    return Framework()