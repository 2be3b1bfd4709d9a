"""Data types that hold the framework's state, statistics and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

FrameworkValue = Union[str, int, float, bool, Dict[str, Any], List[Any], None]

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ClusterStats:
    """Message describing cluster statistics."""

    type: str = "stats"


@dataclass
class InternalStats:
    """Internal counters of the framework."""

    ticks: int = 0
    counter: int = 0
    uid: int = 0
    interval: Optional[int] = None


@dataclass
class PerformanceStats:
    publish: int = 0
    subscribe: int = 0
    calls: int = 0
    download: int = 0
    upload: int = 0
    request: int = 0
    message: int = 0
    file: int = 0
    open: int = 0
    online: int = 0
    usage: int = 0
    mail: int = 0
    dbrm: int = 0
    dbwm: int = 0
    external: int = 0


@dataclass
class OtherStats:
    websocketping: int = 0
    websocketcleaner: int = 0
    obsolete: int = 0
    mail: int = 0


@dataclass
class RequestStats:
    request: int = 0
    external: int = 0
    pending: int = 0
    web: int = 0
    xhr: int = 0
    file: int = 0
    websocket: int = 0
    get: int = 0
    options: int = 0
    head: int = 0
    post: int = 0
    put: int = 0
    patch: int = 0
    upload: int = 0
    schema: int = 0
    operation: int = 0
    blocked: int = 0
    delete: int = 0
    mobile: int = 0
    desktop: int = 0
    size: int = 0


@dataclass
class ResponseStats:
    ddos: int = 0
    html: int = 0
    xml: int = 0
    json: int = 0
    websocket: int = 0
    timeout: int = 0
    custom: int = 0
    binary: int = 0
    pipe: int = 0
    file: int = 0
    image: int = 0
    destroy: int = 0
    stream: int = 0
    streaming: int = 0
    text: int = 0
    empty: int = 0
    redirect: int = 0
    forward: int = 0
    proxy: int = 0
    notmodified: int = 0
    sse: int = 0
    errorbuilder: int = 0
    error400: int = 0
    error401: int = 0
    error403: int = 0
    error404: int = 0
    error409: int = 0
    error431: int = 0
    error500: int = 0
    error501: int = 0
    error503: int = 0
    size: int = 0


@dataclass
class Stats:
    """All framework statistics."""

    compilation: int = 0
    error: int = 0
    performance: PerformanceStats = field(default_factory=PerformanceStats)
    other: OtherStats = field(default_factory=OtherStats)
    request: RequestStats = field(default_factory=RequestStats)
    response: ResponseStats = field(default_factory=ResponseStats)


@dataclass
class ServiceStats:
    redirect: int = 0
    request: int = 0
    file: int = 0
    usage: int = 0


@dataclass
class Temporary:
    """Temporary in-memory storage."""

    path: Dict[str, Any] = field(default_factory=dict)
    actions: Dict[str, Any] = field(default_factory=dict)
    cache: Dict[str, Any] = field(default_factory=dict)
    notfound: Dict[str, Any] = field(default_factory=dict)
    processing: Dict[str, Any] = field(default_factory=dict)
    views: Dict[str, Any] = field(default_factory=dict)
    viewscache: List[Any] = field(default_factory=list)
    directories: Dict[str, Any] = field(default_factory=dict)
    versions: Dict[str, Any] = field(default_factory=dict)
    dependencies: Dict[str, Any] = field(default_factory=dict)
    other: Dict[str, Any] = field(default_factory=dict)
    cryptokeys: Dict[str, Any] = field(default_factory=dict)
    internal: Dict[str, Any] = field(default_factory=dict)
    ready: Dict[str, Any] = field(default_factory=dict)
    ddos: Dict[str, Any] = field(default_factory=dict)
    service: ServiceStats = field(default_factory=ServiceStats)
    pending: List[Any] = field(default_factory=list)
    tmp: Dict[str, Any] = field(default_factory=dict)
    merged: Dict[str, Any] = field(default_factory=dict)
    minified: Dict[str, Any] = field(default_factory=dict)
    tmsblocked: Dict[str, Any] = field(default_factory=dict)
    dnscache: Dict[str, Any] = field(default_factory=dict)
    blocked: Dict[str, Any] = field(default_factory=dict)
    bans: Dict[str, Any] = field(default_factory=dict)
    calls: Dict[str, Any] = field(default_factory=dict)
    utils: Dict[str, Any] = field(default_factory=dict)
    mail: Dict[str, Any] = field(default_factory=dict)
    images: Dict[str, Any] = field(default_factory=dict)
    querybuilders: Dict[str, Any] = field(default_factory=dict)
    templates: Dict[str, Any] = field(default_factory=dict)
    smtp: Dict[str, Any] = field(default_factory=dict)
    datetime: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Routes:
    """Registered routes and their caches."""

    fallback: Dict[str, Any] = field(default_factory=dict)
    virtual_routes: Dict[str, Any] = field(default_factory=dict)
    api: Dict[str, Any] = field(default_factory=dict)
    routes: List[Any] = field(default_factory=list)
    routescache: Dict[str, Any] = field(default_factory=dict)
    websockets: List[Any] = field(default_factory=list)
    websocketscache: Dict[str, Any] = field(default_factory=dict)
    files: List[Any] = field(default_factory=list)
    filescache: Dict[str, Any] = field(default_factory=dict)
    timeout: Optional[int] = None
    middleware: Dict[str, Any] = field(default_factory=dict)
    imagesmiddleware: Dict[str, Any] = field(default_factory=dict)
    proxies: List[Any] = field(default_factory=list)


@dataclass
class Currency:
    code: str
    symbol: str


@dataclass
class Controller:
    """The request-facing view of a controller: client address, headers and query."""

    ip: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)


@dataclass
class Message:
    """An outgoing mail message."""

    subject: str
    body: str
    to_addresses: List[str] = field(default_factory=list)
    from_address: Optional[str] = None
    from_name: Optional[str] = None
    reply_to: Optional[str] = None
    cc: List[str] = field(default_factory=list)
    bcc: List[str] = field(default_factory=list)
    sending: Optional[float] = None


@dataclass
class SMTPConfig:
    from_address: Optional[str] = None
    name: Optional[str] = None
    user: Optional[str] = None


@dataclass
class ErrorInfo:
    """A recorded error."""

    error: str
    name: Optional[str] = None
    url: Optional[str] = None
    date: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "name": self.name,
            "url": self.url,
            "date": self.date.isoformat(),
        }


@dataclass
class SuccessResult(Generic[T]):
    value: T
    success: bool = True


@dataclass
class AuditData:
    """An audit record; ``data`` holds the caller's fields."""

    dtcreated: datetime = field(default_factory=_utcnow)
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {**self.data, "dtcreated": self.dtcreated.isoformat()}


@dataclass
class Proxy:
    source: str
    target: str


@dataclass
class Ban:
    ip: str
    expires: datetime


@dataclass
class DDOSEntry:
    count: int
    expires: datetime


@dataclass
class PendingItem:
    id: str
    created: datetime = field(default_factory=_utcnow)