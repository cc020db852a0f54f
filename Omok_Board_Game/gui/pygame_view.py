"""Pygame-based board renderer and input helper."""

import os

try:
    from Player import Intent
    from engine import history
    from engine.win_detector import winning_cells
    from gui import layout as layout_mod
    from gui.themes import get_theme
except ImportError:
    from Omok_Board_Game.Player import Intent
    from Omok_Board_Game.engine import history
    from Omok_Board_Game.engine.win_detector import winning_cells
    from Omok_Board_Game.gui import layout as layout_mod
    from Omok_Board_Game.gui.themes import get_theme


class PygameView:
    # --- Constants ---
    CAPTION = "Omok"
    FRAME_DELAY_MS = 15

    def __init__(self, window_size=(1100, 820), headless=False):
        if headless:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        import pygame

        self._pygame = pygame
        self.width, self.height = window_size

        pygame.init()
        self.screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption(self.CAPTION)

        # Fonts
        self.font_large = pygame.font.Font(None, 40)
        self.font_medium = pygame.font.Font(None, 28)
        self.font_small = pygame.font.Font(None, 24)

        self.layout = None

    def compute_layout(self, game):
        settings = game.settings
        return layout_mod.compute_layout(
            self.width,
            self.height,
            game.board_size,
            game.moves(),
            sizes=game.state.allowed_sizes,
            theme=game.theme,
            ascending=game.ascending,
            compact_breakpoint=settings.compact_breakpoint,
        )

    def _draw_text(self, text, font, color, center_pos=None, midleft_pos=None):
        text_surface = font.render(text, True, color)
        if center_pos is not None:
            text_rect = text_surface.get_rect(center=center_pos)
        else:
            text_rect = text_surface.get_rect(midleft=midleft_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_button(self, button, theme, font):
        color = theme.button_active if button.active else theme.button
        rect = self._pygame.Rect(*button.rect)
        self._pygame.draw.rect(self.screen, color, rect, border_radius=4)
        self._draw_text(button.label, font, theme.button_text, center_pos=button.rect.center)

    def _draw_settings_panel(self, layout, theme):
        panel_h = layout_mod.SETTINGS_H_COMPACT if layout.compact else layout_mod.SETTINGS_H
        self._pygame.draw.rect(self.screen, theme.panel, self._pygame.Rect(0, 0, layout.width, panel_h))
        self._draw_text("Board Size:", self.font_small, theme.button_text, midleft_pos=layout.size_label_pos)
        self._draw_text("Theme:", self.font_small, theme.button_text, midleft_pos=layout.theme_label_pos)

    def _draw_board(self, game, layout, theme):
        pygame = self._pygame
        pygame.draw.rect(self.screen, theme.board, pygame.Rect(*layout.board_rect))

        winners = winning_cells(game.win_result)
        last = history.last_move_index(game.state)
        pad = layout.cell_padding
        mark_font = pygame.font.Font(None, max(12, int(layout.cell_size * 0.9)))

        for index, value in enumerate(game.squares):
            cell = layout.cell_rect(index)
            inner = pygame.Rect(cell.x + pad, cell.y + pad, cell.w - 2 * pad, cell.h - 2 * pad)
            if index in winners:
                pygame.draw.rect(self.screen, theme.winning, inner)
            pygame.draw.rect(self.screen, theme.grid, inner, 1)
            if value is None:
                continue
            color = theme.mark_x if value == "X" else theme.mark_o
            self._draw_text(value, mark_font, color, center_pos=cell.center)
            if index == last and not winners:
                # Small dot marking the most recent move
                pygame.draw.circle(self.screen, theme.winning, (cell.x + cell.w - 5, cell.y + 5), 3)

    def _draw_move_panel(self, game, layout, theme):
        self._draw_text(
            f"Moves ({len(game.state.history)})",
            self.font_medium,
            theme.text,
            midleft_pos=layout.moves_header_pos,
        )
        for button in layout.move_buttons:
            self._draw_button(button, theme, self.font_small)

    def render(self, game):
        theme = get_theme(game.theme)
        layout = self.compute_layout(game)
        self.layout = layout

        self.screen.fill(theme.background)
        self._draw_settings_panel(layout, theme)
        for button in layout.buttons:
            self._draw_button(button, theme, self.font_small)
        self._draw_text(game.status, self.font_large, theme.text, midleft_pos=layout.status_pos)
        self._draw_board(game, layout, theme)
        self._draw_move_panel(game, layout, theme)

        self._pygame.display.flip()

    def resize(self, game, width, height):
        self.width, self.height = max(1, width), max(1, height)
        self.screen = self._pygame.display.set_mode((self.width, self.height), self._pygame.RESIZABLE)
        game.update_viewport(self.width)

    def intent_for_event(self, game, event):
        """Translate one pygame event into an Intent (or None)."""
        pygame = self._pygame
        if event.type == pygame.QUIT:
            return Intent("quit")
        if event.type == pygame.VIDEORESIZE:
            self.resize(game, event.w, event.h)
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            layout = self.layout or self.compute_layout(game)
            return layout.hit_test(event.pos)
        return None

    def wait_for_intent(self, game):
        pygame = self._pygame
        game.update_viewport(self.width)
        while True:
            for event in pygame.event.get():
                intent = self.intent_for_event(game, event)
                if intent is not None:
                    return intent

            self.render(game)
            pygame.time.delay(self.FRAME_DELAY_MS)

    def close(self):
        self._pygame.quit()
