from __future__ import annotations

import logging
from typing import Optional

import pygame
from pygame import gfxdraw

from checkers.game import CheckersGame
from checkers.move import Coordinate
from checkers.pieces import Color, Piece

from .controller import BoardController
from .settings import DisplaySettings

logger = logging.getLogger(__name__)


class CheckersGUI:
    def __init__(self, game: CheckersGame, settings: Optional[DisplaySettings] = None) -> None:
        self.game = game
        self.controller = BoardController(game)
        self.settings = settings or DisplaySettings()

        self.square_size = self.settings.square_size
        self.board_size = self.game.board.boardSize
        self.board_pixels = self.square_size * self.board_size
        self.info_height = self.settings.info_height
        self.margin = self.settings.margin

        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 28, bold=True)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.hover_cell: Coordinate | None = None
        self.piece_surfaces: dict[tuple[Color, bool], pygame.Surface] = {}

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "red_piece": (196, 48, 43),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "warning": (255, 140, 120),
            "board_frame": (82, 54, 29),
            "king": (255, 215, 0),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        logger.info("Board reset")
                        self.controller.reset()
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(self.settings.fps)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None:
            self.game.deselect()
            return
        self.controller.handleCell(*cell)

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Coordinate | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        frame_rect = board_rect.inflate(20, 20)
        pygame.draw.rect(self.screen, self.colors["board_frame"], frame_rect, border_radius=20)

        for row in range(self.board_size):
            for col in range(self.board_size):
                color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
                pygame.draw.rect(self.screen, color, self._rect_for_cell(row, col))

    def _draw_selection(self) -> None:
        selected = self.game.getSelected()
        if selected:
            pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(*selected), 4, border_radius=8)

        destinations = {move.end for move in self.game.getValidMoves()}
        for dest in destinations:
            center = self._center_for_cell(*dest)
            highlight_rgba = (*self.colors["highlight"], 140)
            gfxdraw.filled_circle(self.screen, center[0], center[1], 12, highlight_rgba)
            gfxdraw.aacircle(self.screen, center[0], center[1], 12, self.colors["outline"])

        if self.hover_cell and self.hover_cell in destinations:
            center = self._center_for_cell(*self.hover_cell)
            selected_rgba = (*self.colors["selected"], 90)
            gfxdraw.filled_circle(self.screen, center[0], center[1], 16, selected_rgba)
            gfxdraw.aacircle(self.screen, center[0], center[1], 16, self.colors["outline"])

    def _draw_pieces(self) -> None:
        for row, cells in enumerate(self.game.getBoardSnapshot()):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                surface = self._get_piece_surface(piece)
                self.screen.blit(surface, surface.get_rect(center=self._center_for_cell(row, col)))

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 20
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 20)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        title = self.title_font.render("Checkers", True, self.colors["text"])
        self.screen.blit(title, (info_rect.left + 20, info_rect.top + 12))

        counts: dict[Color, tuple[int, int]] = {Color.RED: (0, 0), Color.BLACK: (0, 0)}
        for cells in self.game.getBoardSnapshot():
            for piece in cells:
                if piece is None:
                    continue
                total, kings = counts[piece.color]
                counts[piece.color] = (total + 1, kings + int(piece.is_king))

        current = self.game.getCurrentPlayer()
        lines = [
            f"Current player: {current.value.capitalize()}",
            f"Red: {counts[Color.RED][0]} pieces, {counts[Color.RED][1]} kings",
            f"Black: {counts[Color.BLACK][0]} pieces, {counts[Color.BLACK][1]} kings",
            "R: Reset  |  Esc/Q: Quit",
        ]
        y_offset = info_rect.top + 52
        for line in lines:
            text_surface = self.small_font.render(line, True, self.colors["text"])
            self.screen.blit(text_surface, (info_rect.left + 24, y_offset))
            y_offset += 22

        if not self.game.canAnyMove():
            notice = self.font.render(f"{current.value.capitalize()} has no legal moves", True, self.colors["warning"])
            self.screen.blit(notice, (info_rect.left + 24, y_offset + 4))

    def _rect_for_cell(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )

    def _get_piece_surface(self, piece: Piece) -> pygame.Surface:
        key = (piece.color, piece.is_king)
        if key in self.piece_surfaces:
            return self.piece_surfaces[key]

        diameter = self.square_size - 14
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        base = self.colors["red_piece"] if piece.color == Color.RED else self.colors["black_piece"]
        pygame.draw.circle(surface, base, (cx, cy), radius)
        pygame.draw.circle(surface, self.colors["outline"], (cx, cy), radius, 2)

        if piece.is_king:
            crown = self.king_font.render("K", True, self.colors["king"])
            surface.blit(crown, crown.get_rect(center=(cx, cy)))

        self.piece_surfaces[key] = surface
        return surface
