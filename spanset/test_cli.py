import pytest

import spans
from spanset import messages


@pytest.fixture(autouse=True)
def plain_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".spanset.yml").write_text("color: false\n", encoding="utf-8")
    yield
    messages.set_color(True)


def test_demo(capsys):
    assert spans.main(["demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "(100,200) (1000,2000)"
    assert out[1] == "(10,20) (100,200) (1000,3000)"
    assert out[2] == "[i] merged: (10,20) (100,200) (1000,3000)"
    assert out[3] == "[i] overlapping: (100,300)"
    assert out[4] == "[i] touching: (1,10)"


def test_merge(capsys):
    assert spans.main(["merge", "150,300", "100,200", "(400,500)"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["[i] 3 spans merged into 2", "(100,300) (400,500)"]


def test_merge_floats(capsys):
    assert spans.main(["merge", "0.5,1.5", "1,2"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(0.5,2)"


def test_contained_scan_modes(capsys):
    args = ["contained", "0,5", "4,5", "0,1", "1,10"]
    assert spans.main(args) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "(0,1)"
    assert out[1].startswith("[?] early-stop scan skipped 1")

    assert spans.main(args + ["--full"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(0,1) (4,5)"


def test_scan_mode_from_config(tmp_path, capsys):
    (tmp_path / "full.yml").write_text("scan: full\ncolor: false\nseparator: ';'\n", encoding="utf-8")
    assert spans.main(["--config", "full.yml", "intersected", "5,6", "1,10", "2,3", "4,20"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(1,10);(4,20)"


def test_compare(capsys):
    assert spans.main(["compare", "--left", "1,2", "3,4", "--right", "3,4", "1,2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("[✗] identical")
    assert out[1].startswith("[✓] equal")

    assert spans.main(["compare", "--left", "1,2", "--right", "1,3"]) == 1


def test_bad_input(capsys):
    assert spans.main(["merge", "1;2"]) == 1
    assert "Invalid pair" in capsys.readouterr().out
    assert spans.main(["merge", "1,x"]) == 1
    assert "Invalid endpoint" in capsys.readouterr().out


def test_bad_config(tmp_path, capsys):
    (tmp_path / "bad.yml").write_text("scan: never\n", encoding="utf-8")
    assert spans.main(["--config", "bad.yml", "demo"]) == 1
    assert "Could not load config" in capsys.readouterr().out


def test_no_command(capsys):
    assert spans.main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_negative_endpoints(capsys):
    assert spans.main(["merge", "-5,3", "2,8", "-20,-10"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(-20,-10) (-5,8)"

    assert spans.main(["contained", "-10,0", "-5,-1", "-1.5,2", "--full"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(-5,-1)"

    assert spans.main(["compare", "--left", "-2,-1", "--right", "-1,-2"]) == 0
