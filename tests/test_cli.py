import json
import os

import pytest

from mandelzoom.cli import build_arg_parser, main
from mandelzoom.video.png_writer import frame_path


def test_render_positionals():
    args = build_arg_parser().parse_args(["render", "out", "120", "-0.75", "0.1", "1e6"])
    assert args.outdir == "out"
    assert args.numsteps == 120
    assert args.xcenter == -0.75
    assert args.ycenter == 0.1
    assert args.zoom == 1e6


def test_render_requires_all_positionals():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["render", "out", "120"])


def test_render_command(tmp_path):
    outdir = str(tmp_path / "frames")
    rc = main(["render", outdir, "3", "-0.5", "0", "8",
               "--width", "10", "--height", "6", "--max-iter", "24", "--no-progress"])

    assert rc == 0
    for i in range(3):
        assert os.path.isfile(frame_path(outdir, i))
    with open(os.path.join(outdir, "run.json"), encoding="utf-8") as f:
        manifest = json.load(f)
    assert manifest["config"]["frames"] == 3
    assert manifest["config"]["final_zoom"] == 8.0


def test_render_uses_config_file(tmp_path):
    config = tmp_path / "zoom.json"
    config.write_text(json.dumps({"width": 8, "height": 5, "max_iter": 16, "progress": False}), encoding="utf-8")
    outdir = str(tmp_path / "frames")

    assert main(["--config", str(config), "render", outdir, "2", "0", "0", "2"]) == 0
    assert os.path.isfile(frame_path(outdir, 1))


@pytest.mark.parametrize("argv", [
    ["render", "OUT", "1", "-0.5", "0", "4"],
    ["render", "OUT", "10", "-0.5", "0", "0.5"],
    ["render", "OUT", "10", "-0.5", "0", "4", "--width", "1"],
])
def test_render_rejects_invalid_configuration(tmp_path, argv):
    outdir = str(tmp_path / "frames")
    argv = [outdir if a == "OUT" else a for a in argv]
    assert main(argv) == 1
    assert not os.path.exists(frame_path(outdir, 0))


def test_encode_without_frames_fails(tmp_path):
    assert main(["encode", "--input-dir", str(tmp_path), "--output", str(tmp_path / "out.mp4")]) == 1


def test_missing_config_file_fails(tmp_path):
    assert main(["--config", str(tmp_path / "nope.json"), "encode"]) == 1
