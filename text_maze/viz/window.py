import logging
from typing import Tuple
import pygame
from text_maze.algo.registry import Algorithm
from text_maze.viz.frontend import Frontend, MazeSession
from text_maze.viz.text_renderer import render, render_lines

logger = logging.getLogger(__name__)


class WindowFrontend(Frontend):
    COLOR_BG = (10, 10, 10)
    COLOR_TEXT = (200, 200, 200)
    COLOR_HUD = (255, 215, 0)

    FONT_NAMES = "consolas,dejavusansmono,menlo,couriernew,monospace"
    FONT_SIZE = 16
    PADDING = 10

    def __init__(self, session: MazeSession, width=1280, height=720, animate=False):
        super().__init__(session)
        self.screen_width = width
        self.screen_height = height
        self.animate = animate

        self.font = None
        self.clock = None
        self.surface = None
        self.char_width = 1
        self.char_height = 1

        self.gen_iter = None
        self.gen_finished = True

    def init_window(self):
        pygame.init()
        pygame.display.set_caption("Text Maze")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(self.FONT_NAMES, self.FONT_SIZE)
        self.char_width, self.char_height = self.font.size("M")
        self.char_height = max(self.char_height, self.font.get_linesize())

        # Initial fit
        self.fit()

    def report_available_size(self) -> Tuple[int, int]:
        usable_w = self.screen_width - self.PADDING * 2
        # Bottom line is reserved for the HUD
        usable_h = self.screen_height - self.PADDING * 2 - self.char_height
        return usable_w // self.char_width, usable_h // self.char_height

    def on_resize(self, rows: int, columns: int) -> str:
        if not self.animate:
            return super().on_resize(rows, columns)

        logger.info(f"Resizing to {rows}x{columns} ({self.session.algorithm.label}), animated")
        self.session.grid.resize(rows, columns)
        self.gen_iter = self.session.carve()
        self.gen_finished = False
        # Carving has not started yet, so this is the cleared grid at its new size
        return render(self.session.grid)

    def regenerate(self):
        grid = self.session.grid
        self.on_resize(grid.rows, grid.columns)

    def switch_algorithm(self):
        algos = list(Algorithm)
        current = algos.index(self.session.algorithm)
        self.session.algorithm = algos[(current + 1) % len(algos)]
        logger.info(f"Switched to {self.session.algorithm.label}")
        self.regenerate()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.on_quit()

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
                self.fit()

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.on_quit()
                elif event.key == pygame.K_r:
                    self.regenerate()
                elif event.key == pygame.K_a:
                    self.switch_algorithm()

    def draw_text(self):
        self.surface.fill(self.COLOR_BG)

        # Partially carved grids render fine, so draw the live grid
        for i, line in enumerate(render_lines(self.session.grid)):
            lbl = self.font.render(line, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (self.PADDING, self.PADDING + i * self.char_height))

    def draw_hud(self):
        grid = self.session.grid
        status = "Done" if self.gen_finished else "Carving"
        text = (f"{self.session.algorithm.label} {grid.rows}x{grid.columns} - {status}"
                f"   [r] regenerate  [a] algorithm  [q] quit")
        lbl = self.font.render(text, True, self.COLOR_HUD)
        self.surface.blit(lbl, (self.PADDING, self.screen_height - self.PADDING - self.char_height))

    def step_generator(self):
        if self.gen_iter and not self.gen_finished:
            try:
                next(self.gen_iter)
            except StopIteration:
                self.gen_finished = True
                self.gen_iter = None

    def run_loop(self):
        while self.running:
            self.handle_input()
            if not self.running:
                break

            self.step_generator()

            self.draw_text()
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(30)

        pygame.quit()
