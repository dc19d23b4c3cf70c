"""Tests for the command line interface and config loading"""

import json

import pytest
from click.testing import CliRunner

from storyscope.cli.main import main
from storyscope.config import AppConfig, OutputFormat, load_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def quiet_config(tmp_path):
    """Config file that keeps INFO logs out of the captured output"""
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    return path


@pytest.fixture
def json_config(tmp_path):
    path = tmp_path / "json.yaml"
    path.write_text(
        "logging:\n  level: WARNING\noutput:\n  format: json\n",
        encoding="utf-8"
    )
    return path


def test_templates_table(runner, quiet_config):
    result = runner.invoke(main, ["--config", str(quiet_config), "templates"])

    assert result.exit_code == 0
    assert "interview" in result.output
    assert "dramatic" in result.output


def test_templates_json(runner, quiet_config):
    result = runner.invoke(main, ["--config", str(quiet_config), "templates", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [template["id"] for template in data] == ["interview", "documentary", "dramatic"]
    assert data[2]["default_settings"]["lighting_mood"] == "moody"


def test_scene_json(runner, quiet_config):
    description = "A tense interview in a dark office with a lamp"
    result = runner.invoke(main, ["--config", str(quiet_config), "scene", description, "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["title"] == description
    assert data["id"] == "scene-1"
    assert data["location"]["type"] == "indoor-practical"
    assert data["budget"]["currency"] == "USD"


def test_scene_table(runner, quiet_config):
    result = runner.invoke(main, ["--config", str(quiet_config), "scene", "A walk in the park"])

    assert result.exit_code == 0
    assert "Shot List" in result.output
    assert "Budget" in result.output


def test_scene_from_file(runner, quiet_config, tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("Driving a car at night", encoding="utf-8")

    result = runner.invoke(main, ["--config", str(quiet_config), "scene", "--file", str(path), "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output)["location"]["type"] == "vehicle"


def test_scene_requires_description(runner, quiet_config):
    result = runner.invoke(main, ["--config", str(quiet_config), "scene"])

    assert result.exit_code == 1
    assert "Provide a scene description" in result.output


def test_story_json(runner, quiet_config, tmp_path, sample_story):
    path = tmp_path / "manuscript.txt"
    path.write_text(sample_story, encoding="utf-8")

    result = runner.invoke(main, ["--config", str(quiet_config), "story", str(path), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["title"] == "manuscript"
    assert data["id"] == "story-1"
    assert data["structure"]["type"] == "three-act"


def test_story_title_option(runner, json_config, tmp_path):
    path = tmp_path / "draft.txt"
    path.write_text("", encoding="utf-8")

    result = runner.invoke(main, ["--config", str(json_config), "story", str(path), "--title", "Draft"])

    assert result.exit_code == 0
    assert json.loads(result.output)["title"] == "Draft"


def test_story_table(runner, quiet_config, tmp_path, sample_story):
    path = tmp_path / "manuscript.txt"
    path.write_text(sample_story, encoding="utf-8")

    result = runner.invoke(main, ["--config", str(quiet_config), "story", str(path)])

    assert result.exit_code == 0
    assert "Acts" in result.output
    assert "Anna Reed" in result.output


def test_invalid_config_fails(runner, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("output:\n  format: xml\n", encoding="utf-8")

    result = runner.invoke(main, ["--config", str(path), "templates"])

    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "missing.yaml") == AppConfig()


def test_load_config_sections(json_config):
    config = load_config(json_config)

    assert config.output.format == OutputFormat.JSON
    assert config.logging.level == "WARNING"
    assert config.analysis.ids == "sequential"
    assert not config.analysis.parallel


def test_unknown_id_strategy(tmp_path):
    path = tmp_path / "ids.yaml"
    path.write_text("analysis:\n  ids: random\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path).analysis.id_factory()
