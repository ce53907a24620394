import os

import cv2
import numpy as np

import main


def test_missing_argument_prints_usage(capsys):
    assert main.main([]) == 1
    out = capsys.readouterr().out
    assert out.strip() == main.USAGE


def test_counts_image_file(tmp_path, capsys, plus_image):
    path = str(tmp_path / "plus.png")
    cv2.imwrite(path, plus_image(size=70, center=(32, 32), arm=20))

    assert main.main([path]) == 0
    assert capsys.readouterr().out == "1\n"


def test_undecodable_file_prints_zero(tmp_path, capsys):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")

    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == "0\n"


def test_missing_file_prints_zero(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.png")]) == 0
    assert capsys.readouterr().out == "0\n"


def test_verbose_keeps_stdout_clean(tmp_path, capsys):
    path = str(tmp_path / "blank.png")
    cv2.imwrite(path, np.zeros((20, 20), dtype=np.uint8))

    assert main.main([path, "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0\n"
    assert "[INFO]" in captured.err


def test_annotate_writes_output(tmp_path, capsys, plus_image):
    path = str(tmp_path / "grid.png")
    cv2.imwrite(path, plus_image(size=65, center=(32, 32), arm=20))
    out_dir = tmp_path / "out"

    assert main.main([path, "--annotate", "-o", str(out_dir)]) == 0
    capsys.readouterr()

    written = out_dir / "grid_intersections.png"
    assert written.exists()
    assert cv2.imread(str(written)).shape == (65, 65, 3)


def test_literal_fill_flag(tmp_path, capsys, hline_image):
    path = str(tmp_path / "line.png")
    cv2.imwrite(path, hline_image(size=30, row=15, start=2, stop=27))

    assert main.main([path, "--literal-fill"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_annotate_skips_empty_image(tmp_path, capsys):
    out_dir = tmp_path / "out"
    assert main.main([str(tmp_path / "nope.png"), "--annotate", "-o", str(out_dir)]) == 0
    assert capsys.readouterr().out == "0\n"
    assert not os.path.exists(out_dir)


def test_extra_arguments_are_ignored(tmp_path, capsys):
    path = str(tmp_path / "blank.png")
    cv2.imwrite(path, np.zeros((20, 20), dtype=np.uint8))

    assert main.main([path, "ignored.png"]) == 0
    assert capsys.readouterr().out == "0\n"
