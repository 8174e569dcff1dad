"""Create an animated GIF from the sequence of frame_XXX.png solving frames."""

# animate_gif.py
# Build an animated GIF from per-placement frames.
# Usage:
#   python -m apps.cli.animate_gif --dir solve_export --out solve_export/solve.gif \
#     --size 600 --step_ms 700 --end_ms 2000 --fade 1 --fade_frames 4 --fade_ms 40

import argparse
import glob
from pathlib import Path

from PIL import Image, ImageOps


def gather_frames(dir_path):
    return sorted(glob.glob(str(Path(dir_path) / "frame_*.png")))


def load_img(path, size=None):
    im = Image.open(path).convert("RGB")
    if size:
        im = ImageOps.fit(im, (size, size), method=Image.BICUBIC)
    return im


def animate(
    frame_paths,
    out_path,
    size=None,
    step_ms=700,
    end_ms=2000,
    fade=False,
    fade_frames=4,
    fade_ms=40,
):
    if not frame_paths:
        raise ValueError("no frames to animate")

    frames = []
    durations = []
    prev = None
    for path in frame_paths:
        img = load_img(path, size=size)
        if fade and prev is not None:
            for k in range(1, fade_frames + 1):
                frames.append(Image.blend(prev, img, alpha=k / (fade_frames + 1)))
                durations.append(fade_ms)
        frames.append(img)
        durations.append(step_ms)
        prev = img

    durations[-1] = max(durations[-1], end_ms)  # hold the solution

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=0,
        optimize=False,
        disposal=2,
    )
    return len(frames)


def main():
    """CLI entrypoint. Scans a directory for frame_*.png and encodes them into an animated GIF at --out."""
    ap = argparse.ArgumentParser()
    ap.add_argument("--dir", type=str, default="solve_export")
    ap.add_argument("--out", type=str, default="solve_export/solve.gif")
    ap.add_argument("--size", type=int, default=None, help="final square size in px")
    ap.add_argument("--step_ms", type=int, default=700)
    ap.add_argument("--end_ms", type=int, default=2000)
    ap.add_argument("--fade", type=int, default=0)
    ap.add_argument("--fade_frames", type=int, default=4)
    ap.add_argument("--fade_ms", type=int, default=40)
    args = ap.parse_args()

    count = animate(
        gather_frames(args.dir),
        args.out,
        size=args.size,
        step_ms=args.step_ms,
        end_ms=args.end_ms,
        fade=bool(args.fade),
        fade_frames=args.fade_frames,
        fade_ms=args.fade_ms,
    )
    print(f"Wrote {args.out} with {count} frames.")


if __name__ == "__main__":
    main()
