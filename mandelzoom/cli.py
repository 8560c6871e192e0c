from __future__ import annotations

import argparse
import logging
import os
import subprocess
from typing import Optional

from mandelzoom.config import load_config, normalise_config
from mandelzoom.pipeline import run_zoom
from mandelzoom.util.logging_setup import configure_root_logging, get_logger
from mandelzoom.util.manifest import build_manifest, write_manifest
from mandelzoom.video.opencv_writer import encode_with_opencv
from mandelzoom.video.png_writer import EncodingError

def _git_commit() -> Optional[str]:
    try:
        r = subprocess.run(["git", "rev-parse", "HEAD"], capture_output=True, text=True, check=True)
        return r.stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        return None

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mandelzoom", description="Render the frames of an exponential zoom into the Mandelbrot set.")
    p.add_argument("--config", type=str, default=None, help="Path to config JSON. If omitted, built-in defaults are used.")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG","INFO","WARNING","ERROR"], help="Log level.")
    p.add_argument("--log-file", type=str, default="", help="Log file path (rotating). Empty disables file logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("render", help="Render PNG frames into a directory.")
    r.add_argument("outdir", type=str, help="Directory to receive output PNG files.")
    r.add_argument("numsteps", type=int, help="Integer number of frames in the video (at least 2).")
    r.add_argument("xcenter", type=float, help="The real component of the zoom center point.")
    r.add_argument("ycenter", type=float, help="The imaginary component of the zoom center point.")
    r.add_argument("zoom", type=float, help="The magnification factor of the final frame (at least 1.0).")
    r.add_argument("--width", type=int, default=None, help="Frame width in pixels (default 1280).")
    r.add_argument("--height", type=int, default=None, help="Frame height in pixels (default 720).")
    r.add_argument("--max-iter", type=int, default=None, help="Iteration limit per pixel (default 16000).")
    r.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")

    e = sub.add_parser("encode", help="Encode rendered frames into an MP4 video using OpenCV.")
    e.add_argument("--input-dir", type=str, default=None, help="Frames directory (defaults to config frames_dir).")
    e.add_argument("--output", type=str, default=None, help="Output MP4 file (defaults to config output_video).")
    e.add_argument("--fps", type=int, default=None, help="Frames per second (defaults to config fps).")

    return p

def _apply_render_args(cfg: dict, args: argparse.Namespace) -> dict:
    cfg["frames_dir"] = args.outdir
    cfg["frames"] = args.numsteps
    cfg["center"] = [args.xcenter, args.ycenter]
    cfg["final_zoom"] = args.zoom
    if args.width is not None:
        cfg["width"] = args.width
    if args.height is not None:
        cfg["height"] = args.height
    if args.max_iter is not None:
        cfg["max_iter"] = args.max_iter
    if args.no_progress:
        cfg["progress"] = False
    return cfg

def main(argv: Optional[list] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    log_file = args.log_file if args.log_file and args.log_file.strip() else None
    configure_root_logging(level=log_level, console=True, log_file=log_file)
    logger = get_logger()

    try:
        cfg = load_config(args.config)

        if args.cmd == "render":
            cfg = normalise_config(_apply_render_args(cfg, args))
            manifest = build_manifest(config=cfg, git_commit=_git_commit())
            run_zoom(cfg=cfg)
            manifest_path = os.path.join(cfg["frames_dir"], "run.json")
            write_manifest(manifest_path, manifest)
            logger.info("Run manifest written: %s", manifest_path)
            return 0

        if args.cmd == "encode":
            cfg = normalise_config(cfg)
            input_dir = args.input_dir or cfg["frames_dir"]
            output = args.output or cfg["output_video"]
            fps = args.fps or cfg["fps"]

            encode_with_opencv(input_dir=input_dir, output_file=output, fps=fps)
            return 0

        raise RuntimeError("Unknown command.")
    except (ValueError, EncodingError, OSError) as e:
        logger.error("%s", e)
        return 1
