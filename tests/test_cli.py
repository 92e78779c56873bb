import json

from facescan import cli
from conftest import FakeCascade


def test_no_arguments(capsys):
    assert cli.main(["facescan"]) == 2
    assert "Usage" in capsys.readouterr().err


def test_save_without_directory(tmp_path, capsys):
    assert cli.main(["facescan", str(tmp_path), "--save"]) == 2
    assert "Save directory not specified" in capsys.readouterr().err


def test_unknown_option(tmp_path):
    assert cli.main(["facescan", str(tmp_path), "--bogus"]) == 2


def test_not_a_directory(tmp_path):
    f = tmp_path / "file.jpg"
    f.write_bytes(b"")
    assert cli.main(["facescan", str(f)]) == 1
    assert cli.main(["facescan", str(tmp_path / "missing")]) == 1


def test_cascade_failure(tmp_path, monkeypatch):
    def boom():
        raise FileNotFoundError("no cascade")

    monkeypatch.setattr(cli, "load_cascade", boom)
    assert cli.main(["facescan", str(tmp_path)]) == 1


def test_save_and_json(image_tree, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "load_cascade", lambda: FakeCascade([[0, 0, 100, 100], [10, 10, 100, 100]]))
    out = tmp_path / "out"
    report = tmp_path / "report" / "faces.json"

    rc = cli.main(["facescan", str(image_tree), "--save", str(out), "--json", str(report)])

    assert rc == 0
    assert sorted(p.name for p in out.iterdir()) == ["a.jpg", "b.PNG"]
    data = json.loads(report.read_text(encoding="utf-8"))
    assert len(data["images"]) == 2
    assert data["images"][0]["faces"] == [{"x": 0, "y": 0, "width": 100, "height": 100}]
    assert data["images"][0]["saved_to"].endswith("a.jpg")


def test_display_mode(image_tree, monkeypatch):
    from facescan import core

    shown = []
    monkeypatch.setattr(cli, "load_cascade", lambda: FakeCascade([[0, 0, 100, 100]]))
    monkeypatch.setattr(core, "show_image", lambda img: shown.append(img.shape))
    assert cli.main(["facescan", str(image_tree)]) == 0
    assert len(shown) == 2


def test_json_write_failure(image_tree, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "load_cascade", lambda: FakeCascade([[0, 0, 100, 100]]))
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    rc = cli.main(["facescan", str(image_tree), "--save", str(tmp_path / "out"), "--json", str(blocker / "faces.json")])

    assert rc == 1
