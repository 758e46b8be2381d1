"""Tests for the command-line interface."""

import io
import json

from brew_codec.cli import main

METHOD_JSON = {
    "method": "Bright V60",
    "params": {"stages": [{"time": 30, "pourTime": 10, "label": "Bloom", "water": "45g", "pourType": "pulse-7"}]},
}

EQUIPMENT_JSON = {
    "name": "My Dripper",
    "animationType": "v60",
    "customPourAnimations": [{"id": "pulse-7", "name": "Pulse pour"}],
}


def test_template_command(capsys):
    assert main(["template", "brewing_method"]) == 0

    output = capsys.readouterr().out
    assert json.loads(output)["method"] == "Modified single-pour"


def test_share_command_uses_equipment_names(tmp_path, capsys):
    source = tmp_path / "method.json"
    source.write_text(json.dumps(METHOD_JSON), encoding="utf-8")
    equipment = tmp_path / "equipment.json"
    equipment.write_text(json.dumps({"equipment": EQUIPMENT_JSON}), encoding="utf-8")

    assert main(["share", str(source), "--equipment", str(equipment)]) == 0

    output = capsys.readouterr().out
    assert output.startswith("[Method] Bright V60")
    assert "[Pulse pour] Bloom - 45g" in output


def test_parse_command_json_output(tmp_path, capsys):
    source = tmp_path / "method.json"
    source.write_text(json.dumps(METHOD_JSON), encoding="utf-8")

    assert main(["parse", str(source), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["kind"] == "brewing_method"
    assert data["value"]["params"]["stages"][0]["pourType"] == "pulse-7"


def test_parse_command_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('[{"name": "Guji", "roastLevel": "light"}]'))

    assert main(["parse", "-"]) == 0

    output = capsys.readouterr().out
    assert "coffee_beans" in output
    assert "Guji" in output


def test_parse_command_reports_reason(tmp_path, capsys):
    source = tmp_path / "broken.txt"
    source.write_text('{"equipment":{"name":"X","animationType":"custom"}}', encoding="utf-8")

    assert main(["parse", str(source)]) == 1

    assert "Error: custom equipment missing shape" in capsys.readouterr().err


def test_missing_source_file(tmp_path, capsys):
    assert main(["parse", str(tmp_path / "nope.txt")]) == 1

    assert capsys.readouterr().err.startswith("Error:")
