#!/usr/bin/env python3
import argparse, os
from ppmaze.mapgen.generator import generate_maze
from ppmaze.render.png import save_as_png
from ppmaze.render.ppm import save_as_ppm
from ppmaze.render.raster import draw_maze

def render(size, seed):
    env = generate_maze(size, seed=seed)
    return draw_maze(env)

def write_outputs(pixels, ppm_path, png_path=None, scale=1):
    try:
        save_as_ppm(pixels, ppm_path)
        if png_path:
            save_as_png(pixels, png_path, scale=scale)
    except OSError as e:
        raise SystemExit(f"{ppm_path}: {e}")

def cmd_emit(args):
    write_outputs(render(args.size, args.seed), args.out, args.png, args.scale)
    print(f"Wrote {args.out}" + (f" and {args.png}" if args.png else ""))

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for i in range(args.count):
        # consecutive seeds so a batch can be regenerated from its first seed
        seed = args.seed + i
        base = os.path.join(args.outdir, f"maze_{args.size}_{seed}")
        write_outputs(render(args.size, seed), base + ".ppm",
                      base + ".png" if args.png else None, args.scale)
    print(f"Wrote {args.count} mazes to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--size', type=int, default=10)
    p1.add_argument('--seed', type=int)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--png', type=str, help="Also write a PNG here")
    p1.add_argument('--scale', type=int, default=1, help="PNG upscale factor")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--size', type=int, default=10)
    p2.add_argument('--count', type=int, required=True)
    p2.add_argument('--seed', type=int, default=1, help="First seed of the batch")
    p2.add_argument('--outdir', type=str, required=True)
    p2.add_argument('--png', action='store_true', help="Write a PNG next to each PPM")
    p2.add_argument('--scale', type=int, default=1, help="PNG upscale factor")
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    if args.size < 1:
        raise SystemExit(f"--size must be >= 1, got {args.size}")
    args.func(args)

if __name__ == '__main__':
    main()
