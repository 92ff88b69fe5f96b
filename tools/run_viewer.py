#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - R: new maze (next seed)
# - + / -: grow / shrink the grid by one cell and regenerate
# - S: save the current maze as PPM (to --out)
# - Esc: quit

import argparse
import pygame
from ppmaze.config import DEFAULT
from ppmaze.mapgen.generator import generate_maze
from ppmaze.render.ppm import save_as_ppm
from ppmaze.render.raster import draw_maze
from ppmaze.render.surface import to_surface
from ppmaze.rng import make_rng

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=DEFAULT.size, help="Cells per side")
    ap.add_argument("--seed", type=int, default=None, help="Starting seed (random if omitted)")
    ap.add_argument("--scale", type=int, default=4, help="Screen pixels per image pixel")
    ap.add_argument("--out", type=str, default=DEFAULT.output, help="Where S saves the PPM")
    args = ap.parse_args()

    size = max(1, args.size)
    seed = make_rng(args.seed).seed

    pygame.init()
    clock = pygame.time.Clock()

    def load():
        pixels = draw_maze(generate_maze(size, seed=seed))
        return pixels, to_surface(pixels, args.scale)

    pixels, surf = load()
    screen = pygame.display.set_mode(surf.get_size())
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed += 1
                    pixels, surf = load()
                elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    size += 1
                    pixels, surf = load()
                    screen = pygame.display.set_mode(surf.get_size())
                elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS) and size > 1:
                    size -= 1
                    pixels, surf = load()
                    screen = pygame.display.set_mode(surf.get_size())
                elif ev.key == pygame.K_s:
                    try:
                        save_as_ppm(pixels, args.out)
                        print(f"[viewer] wrote {args.out} (size {size}, seed {seed})")
                    except OSError as e:
                        print(f"[viewer] save failed: {e}")

        screen.fill((0, 0, 0))
        screen.blit(surf, (0, 0))
        pygame.display.set_caption(f"ppmaze viewer — {size}x{size}  seed {seed}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
