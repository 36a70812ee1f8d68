"""
Tests for the command line front end.
"""

import json

import pytest
import yaml

from sharedparams.cli import main


@pytest.fixture
def sample_path(tmp_path, sample_text):
    path = tmp_path / "SharedParams.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


def test_text_output(sample_path, sample_text, capsys):
    assert main([str(sample_path)]) == 0
    assert capsys.readouterr().out == sample_text


def test_json_output(sample_path, capsys):
    assert main([str(sample_path), "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [p["name"] for p in data["parameters"]] == ["Weight", "Width"]


def test_yaml_output(sample_path, capsys):
    assert main([str(sample_path), "--format", "yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["meta"]["version"] == 2


def test_report(sample_path, capsys):
    assert main([str(sample_path), "--report"]) == 0
    out = capsys.readouterr().out
    assert "Parameters:            2" in out
    assert "Groups without parameters: Unused" in out


def test_output_file(sample_path, sample_text, tmp_path):
    target = tmp_path / "out.txt"
    assert main([str(sample_path), "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == sample_text


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error" in capsys.readouterr().err


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err


def test_wrong_extension(tmp_path, sample_text, capsys):
    path = tmp_path / "params.csv"
    path.write_text(sample_text, encoding="utf-8")
    assert main([str(path)]) == 1
    assert ".txt" in capsys.readouterr().err


def test_truncated_utf16_file(tmp_path, sample_text, capsys):
    path = tmp_path / "wide.txt"
    path.write_bytes(sample_text.encode("utf-16")[:-1])
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err
