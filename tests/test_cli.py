import pytest
from PIL import Image

from asciiartist.cli import build_parser, main


@pytest.fixture(autouse=True)
def colour_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")


def test_parser_defaults(tmp_path):
    args = build_parser().parse_args(["-i", str(tmp_path / "x.png")])
    assert args.width == 120
    assert args.charset == " .:-=+*#%@"
    assert args.color is True
    assert args.aspect_ratio_compensation == 0.5
    assert args.debug is False


def test_parser_long_flags(tmp_path):
    args = build_parser().parse_args(
        ["--input", "a.png", "--width", "80", "--charset", "@#. ", "--no-color", "--aspect-ratio-compensation", "0.6"]
    )
    assert args.width == 80
    assert args.charset == "@#. "
    assert args.color is False
    assert args.aspect_ratio_compensation == 0.6


def test_input_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "--input" in capsys.readouterr().err


def test_renders_plain_art(image_file, capsys):
    main(["-i", str(image_file), "-w", "10", "--no-color"])
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert lines[0] == f"Loading image from: {image_file}..."
    assert lines[1] == "Image dimensions: 40x20"
    assert lines[2:5] == [lines[2]] * 3
    assert len(lines[2]) == 10
    assert lines[5] == ""
    assert lines[6].startswith("Conversion complete! Time taken: ")
    assert "\033" not in out


def test_renders_colour_by_default(image_file, capsys):
    main(["-i", str(image_file), "-w", "10"])
    out = capsys.readouterr().out
    assert "\033[38;2;200;30;60m" in out
    assert "\033[0m" in out


def test_no_color_env_disables_colour(image_file, capsys, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    main(["-i", str(image_file), "-w", "10", "-C"])
    assert "\033" not in capsys.readouterr().out


def test_custom_charset(tmp_path, capsys):
    path = tmp_path / "white.png"
    Image.new("RGB", (4, 4), (255, 255, 255)).save(path)
    main(["-i", str(path), "-w", "4", "-c", "ab", "-A", "1.0", "--no-color"])
    out = capsys.readouterr().out
    assert "bbbb\nbbbb\nbbbb\nbbbb" in out


def test_missing_file_exits_nonzero(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(tmp_path / "missing.png")])
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_undecodable_file_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.jpg"
    path.write_bytes(b"\x00\x01\x02 not an image")
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(path)])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Cannot decode image")


@pytest.mark.parametrize("flags", [["-w", "0"], ["-c", ""], ["-A", "0"], ["-A", "-1"]])
def test_invalid_configuration_exits_before_loading(image_file, capsys, flags):
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(image_file), *flags])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Loading image" not in captured.out
    assert captured.err.startswith("Error: ")


def test_debug_logging(image_file, capsys):
    main(["-i", str(image_file), "-w", "10", "--debug"])
    err = capsys.readouterr().err
    assert "DEBUG: Rendering 40x20 image to 10 columns x 3 rows" in err


def test_corrupt_header_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.ppm"
    path.write_bytes(b"P6\n32\x8732\n255\n" + b"\x00" * 32 * 32 * 3)
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(path), "--no-color"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Cannot decode image")


@pytest.mark.parametrize("aspect", ["1e308", "1e7"])
def test_huge_aspect_ratio_exits_nonzero(image_file, capsys, aspect):
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(image_file), "-A", aspect, "--no-color"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_greyscale_input(tmp_path, capsys):
    path = tmp_path / "grey.png"
    Image.new("L", (8, 8), 0).save(path)
    main(["-i", str(path), "-w", "4", "-A", "1.0"])
    out = capsys.readouterr().out
    assert "\033[38;2;0;0;0m " in out
