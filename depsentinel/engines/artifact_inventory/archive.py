"""Archive access — zip entries, pom.properties and MANIFEST.MF parsing."""

from __future__ import annotations

import lzma
import re
import zipfile
import zlib

from depsentinel.exceptions import (
    ArchiveMissingError,
    ArchiveOpenError,
    MetadataParseError,
    ResourceCloseError,
)

MANIFEST_NAME = "META-INF/MANIFEST.MF"

# Errors zipfile can raise while inflating a single member.
_ENTRY_READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    lzma.LZMAError,
    NotImplementedError,  # unsupported compression method
    RuntimeError,  # encrypted member
)

_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")
_PROPS_WS = " \t\f"
_PROPS_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


# ── .properties ──────────────────────────────────────────────────────────


def _logical_lines(text: str) -> list[tuple[int, str]]:
    """Join backslash-continued lines; drop blanks and comments.

    Returns ``(line_no, logical_line)`` pairs, 1-based on the first natural line.
    """
    result: list[tuple[int, str]] = []
    pending: str | None = None
    start = 0
    for idx, raw in enumerate(_LINE_SPLIT_RE.split(text), start=1):
        line = raw.lstrip(_PROPS_WS)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            start = idx
            pending = ""
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        result.append((start, pending + line))
        pending = None
    if pending:
        result.append((start, pending))
    return result


def _unescape(value: str, source: str, line_no: int) -> str:
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != "\\" or i + 1 >= len(value):
            out.append(ch)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == "u":
            digits = value[i + 2 : i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise MetadataParseError(source, "malformed \\uxxxx escape", line_no)
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            out.append(_PROPS_ESCAPES.get(nxt, nxt))
            i += 2
    return "".join(out)


def _split_key_value(line: str) -> tuple[str, str]:
    """Split at the first unescaped ``=``, ``:`` or whitespace."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=:" or ch in _PROPS_WS:
            break
        i += 1
    key, rest = line[:i], line[i:]
    rest = rest.lstrip(_PROPS_WS)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_PROPS_WS)
    return key, rest


def parse_properties(data: bytes, source: str = "pom.properties") -> dict[str, str]:
    """Parse a Java ``.properties`` payload (ISO-8859-1 with ``\\u`` escapes)."""
    props: dict[str, str] = {}
    for line_no, line in _logical_lines(data.decode("latin-1")):
        key, value = _split_key_value(line)
        props[_unescape(key, source, line_no)] = _unescape(value, source, line_no)
    return props


# ── MANIFEST.MF ──────────────────────────────────────────────────────────


def parse_manifest(data: bytes, source: str = MANIFEST_NAME) -> dict[str, str]:
    """Parse the main section of a jar manifest.

    Attribute names are lower-cased; the main section ends at the first
    blank line. Continuation lines begin with a single space.
    """
    attributes: dict[str, str] = {}
    current: str | None = None
    text = data.decode("utf-8", errors="replace")
    if text.startswith("\ufeff"):
        text = text[1:]
    for line_no, line in enumerate(_LINE_SPLIT_RE.split(text), start=1):
        if not line:
            break
        if line.startswith(" "):
            if current is None:
                raise MetadataParseError(source, "continuation before first header", line_no)
            attributes[current] += line[1:]
            continue
        name, sep, value = line.partition(": ")
        if not sep or not name or " " in name:
            raise MetadataParseError(source, f"invalid header field {line!r}", line_no)
        current = name.lower()
        attributes[current] = value
    return attributes


# ── Opened archive ───────────────────────────────────────────────────────


class OpenedArchive:
    """An open zip archive plus its lazily parsed manifest.

    The manifest is read at most once and shared by every strategy that
    asks for it. Use as a context manager, or call :meth:`close`.
    """

    def __init__(self, path: str, zf: zipfile.ZipFile) -> None:
        self.path = path
        self._zf = zf
        self._manifest: dict[str, str] | None = None
        self._manifest_loaded = False
        self._manifest_error: MetadataParseError | None = None

    @classmethod
    def open(cls, path: str) -> OpenedArchive:
        """Open *path* as a zip archive.

        Raises :class:`ArchiveMissingError` if the file is gone and
        :class:`ArchiveOpenError` for any other failure.
        """
        try:
            zf = zipfile.ZipFile(path)
        except FileNotFoundError as exc:
            raise ArchiveMissingError(path, "file not found") from exc
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, ValueError) as exc:
            raise ArchiveOpenError(path, str(exc) or type(exc).__name__) from exc
        return cls(path, zf)

    def entries(self) -> list[zipfile.ZipInfo]:
        """Entries in central-directory order."""
        return self._zf.infolist()

    def read(self, name: str) -> bytes:
        try:
            return self._zf.read(name)
        except _ENTRY_READ_ERRORS as exc:
            raise MetadataParseError(name, f"unreadable entry: {exc}") from exc

    def manifest(self) -> dict[str, str] | None:
        """Main manifest attributes, or None if the archive has no manifest.

        Raises :class:`MetadataParseError` if the manifest is malformed; the
        failure is remembered so later callers see it too.
        """
        if not self._manifest_loaded:
            self._manifest_loaded = True
            name = self._manifest_entry()
            if name is not None:
                try:
                    self._manifest = parse_manifest(self.read(name), name)
                except MetadataParseError as exc:
                    self._manifest_error = exc
        if self._manifest_error is not None:
            raise self._manifest_error
        return self._manifest

    def _manifest_entry(self) -> str | None:
        names = self._zf.namelist()
        if MANIFEST_NAME in names:
            return MANIFEST_NAME
        for name in names:
            if name.upper() == MANIFEST_NAME:
                return name
        return None

    def close(self) -> None:
        """Close the archive, raising :class:`ResourceCloseError` on failure."""
        try:
            self._zf.close()
        except Exception as exc:
            raise ResourceCloseError(self.path, str(exc) or type(exc).__name__) from exc

    def __enter__(self) -> OpenedArchive:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
