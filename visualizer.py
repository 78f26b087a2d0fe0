import sys

import numpy as np
import pygame

from sorters import ALGORITHMS, get_generator, is_sorted

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH    = 1100
WINDOW_HEIGHT   = 680
ARRAY_SIZE      = 64
FPS             = 120
FINISH_PAUSE_MS = 1800

BACKGROUND_COLOR = (5, 5, 10)
ACTIVE_COLOR     = (255, 60, 60)
LABEL_COLOR      = (140, 140, 160)
BAR_SPACING      = 1
LABEL_HEIGHT     = 60

# keys 1-4 follow the order of sorters.ALGORITHMS
KEY_BINDINGS = {
    pygame.K_1: "bubble",
    pygame.K_2: "selection",
    pygame.K_3: "insertion",
    pygame.K_4: "quick",
}

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def value_to_color(value, max_value):
    r = value / max_value
    if r < 0.25: return (0, int(255 * r * 4), 255)
    if r < 0.5:  return (0, 255, int(255 * (1 - (r - 0.25) * 4)))
    if r < 0.75: return (int(255 * (r - 0.5) * 4), 255, 0)
    return (255, int(255 * (1 - (r - 0.75) * 4)), 0)


def draw_bars(screen, array, active_indices, label="", font=None):
    screen.fill(BACKGROUND_COLOR)
    n = len(array)
    if n:
        width, height = screen.get_size()
        bw = width / n
        top = max(max(array), 1)
        for i, v in enumerate(array):
            h = (v / top) * (height - LABEL_HEIGHT)
            c = ACTIVE_COLOR if i in active_indices else value_to_color(v, top)
            pygame.draw.rect(screen, c, (i * bw, height - h, bw - BAR_SPACING, h))
    if label and font:
        screen.blit(font.render(label, True, LABEL_COLOR), (12, 10))
    pygame.display.flip()


def shuffled_array(size, rng=None) -> list:
    """Values 1..size in random order."""
    rng = rng or np.random.default_rng()
    return rng.permutation(np.arange(1, size + 1)).tolist()


def algorithm_name(key):
    for name, k in ALGORITHMS:
        if k == key: return name
    raise KeyError(f"Unknown key: {key}")

# ============================================================
# ========================= MAIN =============================
# ============================================================

def run_sort(screen, font, key, size=ARRAY_SIZE, rng=None):
    """
    Animate one sort until the generator is exhausted or ESC is pressed.
    Returns the number of steps shown and whether the array ended sorted.
    """
    arr = shuffled_array(size, rng)
    gen = get_generator(key, arr)
    clock = pygame.time.Clock(); label = algorithm_name(key)
    steps = 0
    print(f"Sorting {size} values with {label}")

    while True:
        clock.tick(FPS)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT: pygame.quit(); sys.exit()
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                print(f"{label} aborted after {steps} steps")
                return steps, False
        try:
            state, active = next(gen)
        except StopIteration:
            ok = is_sorted(arr)
            draw_bars(screen, arr, [], label + ("  [SORTED]" if ok else "  [UNSORTED]"), font)
            print(f"{label} finished in {steps} steps, sorted={ok}")
            pygame.time.wait(FINISH_PAUSE_MS)
            return steps, ok
        steps += 1
        draw_bars(screen, state, active, label, font)


def main():
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("SuperSorter")
    font = pygame.font.SysFont("consolas", 18)
    clock = pygame.time.Clock()

    key = ALGORITHMS[0][1]
    hint = "1-4 pick algorithm   SPACE run   ESC stop / quit   "
    draw_bars(screen, [], [], hint + algorithm_name(key), font)

    while True:
        clock.tick(60)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT: pygame.quit(); sys.exit()
            if ev.type != pygame.KEYDOWN: continue
            if ev.key == pygame.K_ESCAPE: pygame.quit(); sys.exit()
            if ev.key in KEY_BINDINGS:
                key = KEY_BINDINGS[ev.key]
                draw_bars(screen, [], [], hint + algorithm_name(key), font)
            elif ev.key == pygame.K_SPACE:
                run_sort(screen, font, key)
                draw_bars(screen, [], [], hint + algorithm_name(key), font)

if __name__ == "__main__":
    main()
