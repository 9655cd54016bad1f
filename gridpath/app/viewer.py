# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Gridpath Viewer: watch the search expand one cell at a time

- Keyboard:
    [1]/[2]/[3]  -> switch bundled map
    [A]/[D]      -> select algorithm (A* / Dijkstra)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import pygame

from gridpath.core.astar import AStarSearch
from gridpath.core.dijkstra import DijkstraSearch
from gridpath.core.maps import MAP_FILES, default_grid, load_map
from gridpath.core.types import Cell, ConfigurationError, Grid, SearchStatus, Terrain

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 48
FONT_NAME = None  # default pygame font

ALGOS = {"astar": ("A*", AStarSearch), "dijkstra": ("Dijkstra", DijkstraSearch)}

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
FLOOR_GRAY  = (200,200,200)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36)
BG_DARK     = (28,30,38)
BTN_IDLE    = (36,40,48)
BTN_ACTIVE  = (58,86,160)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

STATE_LABELS = {
    SearchStatus.IDLE: "Idle",
    SearchStatus.RUNNING: "Running",
    SearchStatus.GOAL_REACHED: "Done",
    SearchStatus.EXHAUSTED: "No path",
    SearchStatus.BUDGET_EXCEEDED: "Stopped",
}


@dataclass
class Button:
    label: str
    rect: pygame.Rect
    callback: Callable[[], None]
    togglable: bool = False
    active: bool = False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, algo: str = "astar"):
        pygame.init()

        self.grid = grid
        self.cell_size = self._auto_cell_size(grid)
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        win_w = GRID_MARGIN*2 + grid.width * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.height * self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Gridpath")

        self._buttons: List[Button] = []
        self._layout(win_w, win_h)

        self.open_set: set = set()
        self.closed_set: set = set()
        self.path: List[Cell] = []

        self.running = False
        self.quit_requested = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self._last_step_t = 0.0
        self.state = "Idle"
        self.selected_map_key = "custom"
        self.selected_algo = algo if algo in ALGOS else "astar"

        self.algo = self._make_algo(self.selected_algo)
        self.algo.init(self.grid)
        self._reset_overlays()
        self._refresh_active_states()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid left of the panel."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(8, min(avail_w // self.grid.width, avail_h // self.grid.height))

        grid_plate_w = self.grid.width * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    # ---------- loop ----------
    def run(self):
        while not self.quit_requested:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)
        pygame.quit()

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.path is not None:
            self.path = res.path
        if res.status.terminal:
            self.running = False
            self.state = STATE_LABELS[res.status]
        else:
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.quit_requested = True
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.quit_requested = True
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_1:
                    self._switch_map("01_classic")
                elif e.key == pygame.K_2:
                    self._switch_map("02_open_field")
                elif e.key == pygame.K_3:
                    self._switch_map("03_walled_off")
                elif e.key == pygame.K_a:
                    self._switch_algo("astar")
                elif e.key == pygame.K_d:
                    self._switch_algo("dijkstra")
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
                self._refresh_active_states()
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                for b in self._buttons:
                    if b.rect.collidepoint(e.pos):
                        b.callback()
                        break

    # ---------- actions ----------
    def _make_algo(self, key: str):
        label, cls = ALGOS[key]
        return cls(name=label)

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            grid = load_map(MAP_FILES[key])
        except ConfigurationError as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.grid = grid
        self.selected_map_key = key
        pygame.display.set_caption(f"Gridpath - {key}")
        self.algo.init(self.grid)
        self._layout(*self.screen.get_size())
        self._reset()

    def _switch_algo(self, key: str):
        self.selected_algo = key
        self.algo = self._make_algo(key)
        self.algo.init(self.grid)
        self._reset()

    def _reset_overlays(self):
        self.open_set = {self.grid.start}
        self.closed_set.clear()
        self.path = []
        self._last_metrics = {
            "algo": self.algo.name,
            "popped": 0,
            "stale": 0,
            "open_size": 1,
            "closed_count": 0,
            "path_len": 0,
            "total_cost": None,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.algo.status.terminal:
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BG_DARK)
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                rect = self._cell_rect((row, col))
                if self.grid.cells[row][col] == Terrain.OBSTACLE:
                    pygame.draw.rect(self.screen, BLACK, rect)
                else:
                    pygame.draw.rect(self.screen, FLOOR_GRAY, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays: closed then open
        for cells, rgba in ((self.closed_set, NEON_MAG_A), (self.open_set, NEON_CYAN_A)):
            for cell in cells:
                s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
                self.screen.blit(s, self._cell_rect(cell).topleft)

        # path runs from the start cell through the returned cells
        if self.path:
            pts = [self._cell_rect(c).center for c in [self.grid.start] + self.path]
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (0, 255, 220, 60), False, pts, 7)
            self.screen.blit(glow, (0,0), special_flags=pygame.BLEND_ADD)
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 5)

        self._draw_badge(self.grid.start, "S", BLUE)
        self._draw_badge(self.grid.goal,  "G", RED)

    def _draw_badge(self, cell: Cell, label: str, color: Tuple[int,int,int]):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(6, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = Button(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap
        add("Algo: A*",       lambda: self._switch_algo("astar"),    togglable=True, store_as="btn_algo_a"); y += h + gap
        add("Algo: Dijkstra", lambda: self._switch_algo("dijkstra"), togglable=True, store_as="btn_algo_d"); y += h + gap
        for i, key in enumerate(MAP_FILES, start=1):
            add(f"Map {i}: {key[3:].replace('_', ' ')}", lambda k=key: self._switch_map(k),
                togglable=True, store_as=f"btn_map{i}")
            y += h + gap

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.active = self.running
        if hasattr(self, "btn_algo_a"):
            self.btn_algo_a.active = self.selected_algo == "astar"
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.active = self.selected_algo == "dijkstra"
        for i, key in enumerate(MAP_FILES, start=1):
            btn = getattr(self, f"btn_map{i}", None)
            if btn:
                btn.active = self.selected_map_key == key

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        pygame.draw.rect(self.screen, CARD_BG, (rb.x + 10, rb.y + 10, rb.width - 20, 210),
                         border_radius=14)

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self._last_metrics
        line(f"{m.get('algo', '')}: {self.state}", big=True, color=ACCENT_GOLD)
        line(f"Popped: {m.get('popped', 0)}  (stale {m.get('stale', 0)})")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Total Cost: {m['total_cost']}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            lit = b.togglable and b.active
            pygame.draw.rect(self.screen, BTN_ACTIVE if lit else BTN_IDLE, b.rect, border_radius=8)
            text = self.font.render(b.label, True, TEXT_LIGHT)
            self.screen.blit(text, text.get_rect(center=b.rect.center))


# ---------- main ----------
def main():
    Viewer(default_grid()).run()


if __name__ == "__main__":
    main()
