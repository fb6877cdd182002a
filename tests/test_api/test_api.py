"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from svgsprite.config import Settings
from svgsprite.dependencies import create_builder, get_builder
from svgsprite.main import app
from svgsprite.models.options import OutputConfiguration
from tests.conftest import BAR_CHART_SVG, CIRCLE_SVG, HTML_DOC


client = TestClient(app)

CONFIGURATION = {
    "name": "test",
    "css_class_prefix": "client-",
    "css_options": [
        {"selector": ".icon", "scale": 1, "unit": "px"},
        {"selector": ".icon_em", "scale": 1, "unit": "em"},
    ],
    "dts_options": {"module": True, "enum_name": "TestIcons", "class_union_name": "TestIconClasses"},
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_create_sprite():
    response = client.post("/api/sprite", json={
        "files": [
            {"name": "circle.svg", "svg": CIRCLE_SVG},
            {"name": "bar.svg", "svg": BAR_CHART_SVG},
            {"name": "page.svg", "svg": HTML_DOC},
        ],
        "configuration": CONFIGURATION,
        "public_path": "/static/",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["icon_count"] == 2
    assert data["width"] == 24
    assert data["height"] == 48
    assert data["asset_url"] == "/static/" + data["asset_name"]
    assert data["asset_name"].startswith("sprite-")
    assert 'id="client-circle"' in data["svg"]
    assert ".icon.client-bar{" in data["css"]
    assert ".icon_em{" in data["css"]
    assert "exports.TestIcons = Object.freeze(EnumClassList);" in data["js"]
    assert 'declare module "svg-sprites/test" {' in data["dts"]
    assert [d["filename"] for d in data["diagnostics"]] == ["page.svg"]


def test_create_sprite_empty():
    response = client.post("/api/sprite", json={"files": [], "configuration": CONFIGURATION})
    assert response.status_code == 200
    data = response.json()
    assert data["icon_count"] == 0
    assert data["width"] == 0


def test_identifier_collision_rejected():
    response = client.post("/api/sprite", json={
        "files": [
            {"name": "arrow-down.svg", "svg": CIRCLE_SVG},
            {"name": "arrow_down.svg", "svg": BAR_CHART_SVG},
        ],
        "configuration": CONFIGURATION,
    })
    assert response.status_code == 422
    assert "ArrowDown" in response.json()["detail"]


def test_invalid_unit_rejected():
    configuration = dict(CONFIGURATION, css_options=[{"selector": ".icon", "scale": 1, "unit": "pt"}])
    response = client.post("/api/sprite", json={"files": [], "configuration": configuration})
    assert response.status_code == 422


def test_module_name_overrides_configuration_name():
    response = client.post("/api/sprite", json={
        "files": [{"name": "circle.svg", "svg": CIRCLE_SVG}],
        "configuration": CONFIGURATION,
        "module_name": "icons",
    })
    assert response.status_code == 200
    dts = response.json()["dts"]
    assert 'declare module "svg-sprites/icons" {' in dts
    assert "svg-sprites/test" not in dts


class TestConfiguredSprites:
    @pytest.fixture
    def icon_settings(self, tmp_path):
        folder = tmp_path / "icons"
        folder.mkdir()
        (folder / "circle.svg").write_text(CIRCLE_SVG, encoding="utf-8")
        (folder / "bar.svg").write_text(BAR_CHART_SVG, encoding="utf-8")
        return Settings(
            svgsprite_public_path="/assets/",
            svgsprite_dts_output_folder=str(tmp_path / "types"),
            svgsprite_configurations={
                "ui": OutputConfiguration(**dict(CONFIGURATION, name="ui", folder=str(folder))),
                "gone": OutputConfiguration(name="gone", folder=str(tmp_path / "missing")),
            },
        )

    @pytest.fixture
    def configured_client(self, icon_settings):
        builder = create_builder(icon_settings)
        app.dependency_overrides[get_builder] = lambda: builder
        yield client
        app.dependency_overrides.pop(get_builder, None)

    def test_create_builder_from_settings(self, icon_settings, tmp_path):
        builder = create_builder(icon_settings)
        assert builder.dts_output_folder == tmp_path / "types"
        assert builder.public_path == "/assets/"
        assert builder.module_prefix == "svg-sprites/"
        assert sorted(builder.configurations) == ["gone", "ui"]

    def test_create_builder_without_declaration_folder(self):
        builder = create_builder(Settings(svgsprite_dts_output_folder=""))
        assert builder.dts_output_folder is None
        assert builder.configurations == {}

    def test_build_configured_sprite(self, configured_client, tmp_path):
        response = configured_client.post("/api/sprite/ui")
        assert response.status_code == 200
        data = response.json()
        assert data["icon_count"] == 2
        assert data["asset_url"] == "/assets/" + data["asset_name"]
        assert 'declare module "svg-sprites/ui" {' in data["dts"]

        written = tmp_path / "types" / "ui.d.ts"
        assert written.read_text(encoding="utf-8") == data["dts"]

    def test_unknown_configuration(self, configured_client):
        response = configured_client.post("/api/sprite/nope")
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_missing_folder(self, configured_client):
        response = configured_client.post("/api/sprite/gone")
        assert response.status_code == 404
