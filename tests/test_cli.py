import json

import yaml

from cli import main


def test_generate_prints_json(project, capsys):
	assert main(["generate", str(project), "--format", "json"]) == 0
	data = json.loads(capsys.readouterr().out)
	assert data["info"]["name"] == "UserService"
	assert len(data["relationships"]) == 2


def test_generate_writes_files(project, tmp_path, capsys):
	out = tmp_path / "docs"
	assert main(["generate", str(project), "-o", str(out)]) == 0
	doc = yaml.safe_load((out / "servicefile.yaml").read_text())
	assert doc["info"]["system"] == "accounts"


def test_generate_reports_errors(tmp_path, capsys):
	(tmp_path / "main.go").write_text("package main\n")
	assert main(["generate", str(tmp_path)]) == 1
	assert "no services found" in capsys.readouterr().err


def test_generate_strict_implicit(tmp_path, capsys):
	(tmp_path / "alpha.go").write_text("// service:name Alpha\npackage alpha\n")
	(tmp_path / "beta.go").write_text("// service:name Beta\npackage beta\n")
	(tmp_path / "cache.go").write_text("// service:uses Redis\npackage cache\n")
	assert main(["generate", str(tmp_path), "--strict-implicit"]) == 1
	assert "ambiguous" in capsys.readouterr().err


def test_generate_reports_output_collision(tmp_path, capsys):
	src = tmp_path / "src"
	src.mkdir()
	(src / "a.go").write_text("// service:User_Service:uses Redis\npackage a\n")
	(src / "b.go").write_text("// service:user-service:uses Redis\npackage b\n")
	assert main(["generate", str(src), "-o", str(tmp_path / "out")]) == 1
	assert "would all be written" in capsys.readouterr().err
