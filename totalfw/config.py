"""Application configuration and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .types import SMTPConfig

HTTP_FILE_TYPES = (
    "flac", "jpg", "jpeg", "png", "gif", "ico", "wasm", "js", "mjs", "css", "txt", "xml",
    "woff", "woff2", "otf", "ttf", "eot", "svg", "zip", "rar", "pdf", "docx", "xlsx",
    "doc", "xls", "html", "htm", "appcache", "manifest", "map", "ogv", "ogg", "mp4",
    "mp3", "webp", "webm", "swf", "package", "json", "ui", "md", "m4v", "jsx", "heif",
    "heic", "ics", "ts", "m3u8", "wav", "xsd", "xsl", "xslt", "ipynb", "ijsnb", "log",
)


def _default_httpfiles() -> Dict[str, bool]:
    return {ext: True for ext in HTTP_FILE_TYPES}


@dataclass
class Config:
    """Framework configuration.

    The fields after the secrets are the framework's own settings; the
    application's version string is kept in ``resource_version`` so that it
    does not clash with the configuration's ``version``.
    """

    name: str = "Total.js"
    version: str = "1.0.0"
    author: str = ""
    secret: str = ""
    secret_encryption: str = ""
    secret_totalapi: str = ""
    secret_csrf: str = ""
    secret_tapi: str = ""
    secret_tms: str = ""

    root: str = ""
    cors: str = ""
    api: str = "/api/"
    sourcemap: bool = True
    httpreqlimit: int = 0
    httpcompress: bool = True
    httpetag: str = ""
    httpmaxsize: int = 256
    httprangebuffer: int = 5120
    httptimeout: int = 5
    httpfiles: Dict[str, bool] = field(default_factory=_default_httpfiles)
    httpchecktypes: bool = True
    httpmaxage: int = 60
    httpmaxkeys: int = 33
    httpmaxkey: int = 25
    blacklist: str = ""
    xpoweredby: str = "Total.js"
    maxopenfiles: int = 100
    minifyjs: bool = True
    minifycss: bool = True
    minifyhtml: bool = True
    localize: bool = True
    port: str = "auto"
    ip: str = "0.0.0.0"
    unixsocket: str = ""
    timezone: str = "utc"
    insecure: bool = False
    performance: bool = False
    filtererrors: bool = True
    cleartemp: bool = True
    customtitles: bool = False
    resource_version: str = ""
    clearcache: int = 10
    imageconverter: str = "gm"
    imagememory: int = 0
    stats: bool = True
    npmcache: str = "/var/www/.npm"
    python: str = "python3"
    wsmaxsize: int = 256
    wscompress: bool = True
    wsencodedecode: bool = False
    wsmaxlatency: int = 2000
    proxytimeout: int = 5
    cookiesamesite: str = "Lax"
    cookiesecure: bool = False
    csrfexpiration: str = "30 minutes"
    tapi: bool = True
    tapiurl: str = "eu"
    tapimail: bool = False
    tapilogger: bool = False
    imprint: bool = True
    tms: bool = False
    tmsmaxsize: int = 256
    tmsurl: str = "/$tms/"
    tmsclearblocked: int = 60

    mail_from: Optional[str] = None
    mail_from_name: Optional[str] = None
    mail_reply: Optional[str] = None
    mail_cc: Optional[str] = None
    mail_bcc: Optional[str] = None
    smtp: SMTPConfig = field(default_factory=SMTPConfig)


def default_config() -> Config:
    """Return a fresh configuration holding the framework defaults."""
    return Config()