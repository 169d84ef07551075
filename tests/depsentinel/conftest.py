"""Shared fixtures for depsentinel tests — build real jar archives on disk."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest


def write_jar(
    path: Path,
    *,
    pom: dict[str, str] | None = None,
    pom_entry: str = "META-INF/maven/com.example/foo/pom.properties",
    manifest: dict[str, str] | None = None,
    extra: dict[str, bytes] | None = None,
) -> Path:
    """Write a jar at *path* with optional pom.properties / manifest / raw entries."""
    with zipfile.ZipFile(path, "w") as zf:
        if manifest is not None:
            lines = ["Manifest-Version: 1.0"] + [f"{k}: {v}" for k, v in manifest.items()]
            zf.writestr("META-INF/MANIFEST.MF", "\r\n".join(lines) + "\r\n\r\n")
        if pom is not None:
            body = "#Generated by Maven\n" + "".join(f"{k}={v}\n" for k, v in pom.items())
            zf.writestr(pom_entry, body)
        for name, data in (extra or {}).items():
            zf.writestr(name, data)
        zf.writestr("com/example/Foo.class", b"\xca\xfe\xba\xbe")
    return path


@pytest.fixture
def make_jar(tmp_path):
    """Factory: ``make_jar("name.jar", pom=..., manifest=...) -> str path``."""

    def _make(name: str = "lib.jar", **kwargs) -> str:
        return str(write_jar(tmp_path / name, **kwargs))

    return _make


@pytest.fixture
def pom_props():
    return {"groupId": "com.example", "artifactId": "foo", "version": "1.2.3"}
