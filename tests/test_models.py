from pathlib import Path

import pytest
from pydantic import ValidationError

from core.domain.models import Configuration, Manifest, ManifestMeta
from core.domain.output_format import OutputFormat


def test_manifest_keeps_scripts_exactly():
    scripts = {"build": "tsc -p .", "test": "jest --ci", "lint:fix": "eslint . --fix"}
    manifest = Manifest.model_validate({"name": "demo", "scripts": scripts, "version": "1.0.0"})
    assert manifest.scripts == scripts
    assert manifest.name == "demo"


def test_manifest_defaults_when_fields_missing():
    manifest = Manifest.model_validate({})
    assert manifest.scripts == {}
    assert manifest.name is None
    assert manifest.description is None


def test_manifest_tolerates_malformed_metadata():
    manifest = Manifest.model_validate({"name": 42, "description": "   ", "scripts": None})
    assert manifest.name is None
    assert manifest.description is None
    assert manifest.scripts == {}


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"scripts": ["build"]},
        {"scripts": {"build": 1}},
        {"scripts": {"": "tsc"}},
    ],
)
def test_manifest_rejects_bad_shape(data):
    with pytest.raises(ValidationError):
        Manifest.model_validate(data)


def test_manifest_is_frozen():
    manifest = Manifest.model_validate({"scripts": {"build": "tsc"}})
    with pytest.raises(ValidationError):
        manifest.name = "other"


def test_configuration_defaults():
    config = Configuration()
    assert config.path == Path("package.json")
    assert config.format is OutputFormat.TABLE
    assert OutputFormat.default() is OutputFormat.TABLE
    assert config.filter is None
    assert not config.names_only


def test_meta_prefers_manifest_name(tmp_path: Path):
    meta = ManifestMeta.from_manifest(Manifest(name="pkg", description="Tools"), cwd=tmp_path)
    assert meta.title == "pkg"
    assert meta.description == "Tools"


def test_meta_falls_back_to_directory_name(tmp_path: Path):
    meta = ManifestMeta.from_manifest(Manifest(), cwd=tmp_path)
    assert meta.title == tmp_path.name
    assert ManifestMeta.from_manifest(Manifest(), cwd=Path("/")).title == "unknown"
