# -*- coding: utf-8 -*-
import json
import re

import pytest

from app import deps
from eleccalc import version


def test_version_read_from_json(tmp_path):
    p = tmp_path / "version.json"
    p.write_text(json.dumps({"semver": "2.1.0"}), encoding="utf-8")
    assert version._read_version_json(p) == "2.1.0"

    p.write_text(json.dumps({"version": "3.0.0"}), encoding="utf-8")
    assert version._read_version_json(p) == "3.0.0"


def test_version_fallback(tmp_path):
    assert version._read_version_json(tmp_path / "missing.json") == "0.0.0"
    bad = tmp_path / "bad.json"
    bad.write_text("[]", encoding="utf-8")
    assert version._read_version_json(bad) == "0.0.0"


def test_package_version_matches_repo_file():
    data = json.loads(version.VERSION_JSON.read_text(encoding="utf-8"))
    assert version.get_version() == data["semver"]


def test_pyproject_version_matches_version_json():
    pyproject = (version.VERSION_JSON.parent / "pyproject.toml").read_text(encoding="utf-8")
    m = re.search(r'^version\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)
    assert m is not None
    assert m.group(1) == version._read_version_json()


def test_version_prefers_installed_metadata(monkeypatch, tmp_path):
    monkeypatch.setattr(version.importlib.metadata, "version", lambda name: "9.9.9")
    assert version._resolve_version(path=tmp_path / "missing.json") == "9.9.9"


def test_version_falls_back_to_json_without_metadata(monkeypatch, tmp_path):
    def _missing(name):
        raise version.importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version.importlib.metadata, "version", _missing)
    p = tmp_path / "version.json"
    p.write_text(json.dumps({"semver": "2.1.0"}), encoding="utf-8")
    assert version._resolve_version(path=p) == "2.1.0"
    assert version._resolve_version(path=tmp_path / "missing.json") == "0.0.0"


def test_missing_runtime_packages_reported(monkeypatch):
    monkeypatch.setattr(deps, "RUNTIME_PACKAGES", (("not-a-real-pkg", "not_a_real_module_xyz"),))
    assert deps.missing_runtime_packages() == ["not-a-real-pkg"]
    with pytest.raises(RuntimeError, match="not-a-real-pkg"):
        deps.ensure_runtime_deps()


def test_no_missing_packages_when_importable(monkeypatch):
    monkeypatch.setattr(deps, "RUNTIME_PACKAGES", (("json", "json"),))
    assert deps.missing_runtime_packages() == []
    deps.ensure_runtime_deps()
