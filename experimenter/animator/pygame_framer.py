"""Pygame framer drawing the pillars from environment render data."""

import pygame
import numpy as np
from typing import Dict, Any, Optional
from environment import Role
from .daylight import sky_color, light_level, shade


class PygameFramer:
    """Pygame framer that works with the frame-driven sort loop."""

    def __init__(self, config, window_size: Optional[tuple] = None):
        """
        Initialize framer.

        Args:
            config: Configuration object (pillar layout, palette, day length)
            window_size: Optional window size, taken from config if None
        """
        self.config = config
        self.window_size = window_size or tuple(config.window_size)
        self.fps = config.frame_rate

        # Layout in world units
        self.pillar_width = config.pillar_width
        self.pillar_spacing = config.pillar_width * config.distance_between_pillars
        self.world_width = config.number_of_pillars * self.pillar_spacing
        self.max_height = config.maximum_pillar_height + 1.0
        if config.initial_heights:
            self.max_height = max(self.max_height, max(config.initial_heights))

        # Palette (0-1 RGB), dimmed each frame by the daylight level
        self.palette = {
            Role.OUTER: config.current_color,
            Role.INNER: config.compare_color,
            Role.SHORTEST: config.shortest_color,
            Role.UNMARKED: config.unmarked_color,
        }
        self.colors = {
            'ground': config.ground_color,
            'text': (255, 255, 255),
            'muted_text': (200, 200, 200),
        }
        self.ground_height = 40
        self.margin = 20

        # Camera: world x at the left edge of the screen and pixels per world unit
        self.camera_x = 0.0
        self.zoom = self._fit_zoom()

        # Animation state
        self.running = True
        self.paused = False
        self.elapsed = 0.0
        self.screen = None

    def _fit_zoom(self) -> float:
        """Zoom showing every pillar."""
        return (self.window_size[0] - 2 * self.margin) / self.world_width

    def _world_to_screen_x(self, world_x: float) -> int:
        return self.margin + int((world_x - self.camera_x) * self.zoom)

    def _pillar_rect(self, pillar_id: int, height: float) -> pygame.Rect:
        """Screen rectangle of one pillar, standing on the ground."""
        x = self._world_to_screen_x(pillar_id * self.pillar_spacing)
        width = max(1, int(round(self.pillar_width * self.zoom)))
        ground_y = self.window_size[1] - self.ground_height
        usable = ground_y - 80
        pixel_height = max(1, int(usable * height / self.max_height))
        return pygame.Rect(x, ground_y - pixel_height, width, pixel_height)

    def _draw_background(self, level: float):
        self.screen.fill(sky_color(self.elapsed, self.config.day_length))
        ground_y = self.window_size[1] - self.ground_height
        pygame.draw.rect(self.screen, shade(self.colors['ground'], level),
                         (0, ground_y, self.window_size[0], self.ground_height))

    def _draw_pillars(self, heights: np.ndarray, roles, dirty_ids, level: float):
        """Draw visible pillars; highlighted roles are drawn last so they stay on top."""
        colors = {role: shade(rgb, level) for role, rgb in self.palette.items()}
        highlighted = []
        for pillar_id, (height, role) in enumerate(zip(heights, roles)):
            rect = self._pillar_rect(pillar_id, height)
            if rect.right < 0 or rect.left > self.window_size[0]:
                continue
            if role is Role.UNMARKED:
                pygame.draw.rect(self.screen, colors[role], rect)
            else:
                highlighted.append((rect, role))
        for rect, role in highlighted:
            rect.width = max(rect.width, 3)
            pygame.draw.rect(self.screen, colors[role], rect)
        # Pillars whose height just changed
        for pillar_id in dirty_ids:
            rect = self._pillar_rect(pillar_id, heights[pillar_id])
            rect.width = max(rect.width, 3)
            pygame.draw.rect(self.screen, self.colors['text'], rect, 1)

    def _draw_text(self, text: str, pos: tuple, font=None, color=None):
        """Draw text on screen."""
        if font is None:
            font = self.font
        if color is None:
            color = self.colors['text']
        text_surface = font.render(text, True, color)
        self.screen.blit(text_surface, pos)

    def _draw_info_panel(self, render_data: Dict[str, Any]):
        x_offset, y_offset = 10, 10
        status = "Sorted" if render_data['done'] else ("Paused" if self.paused else "Sorting")
        self._draw_text(f"Selection sort - {status}", (x_offset, y_offset))
        y_offset += 24
        self._draw_text(f"Step: {render_data['step_count']}", (x_offset, y_offset), self.small_font)
        y_offset += 18
        self._draw_text(f"Pass: {render_data['outer']}  Compare: {render_data['inner']}",
                        (x_offset, y_offset), self.small_font)
        y_offset += 18
        self._draw_text(f"Swaps: {render_data['swap_count']}", (x_offset, y_offset), self.small_font)

        controls_x = self.window_size[0] - 190
        controls = ["SPACE: Pause/Resume", "LEFT/RIGHT: Pan", "UP/DOWN: Zoom",
                    "HOME: Reset view", "ESC/Q: Quit"]
        for i, line in enumerate(controls):
            self._draw_text(line, (controls_x, 10 + 18 * i), self.small_font, self.colors['muted_text'])

    def pan(self, direction: float):
        """Move the camera by a tenth of the visible width."""
        visible_world = self.window_size[0] / self.zoom
        self.camera_x += direction * visible_world / 10
        self.camera_x = max(0.0, min(self.camera_x, max(0.0, self.world_width - visible_world / 2)))

    def zoom_by(self, factor: float):
        """Zoom around the screen center."""
        center = self.camera_x + self.window_size[0] / (2 * self.zoom)
        self.zoom = max(self._fit_zoom(), min(self.zoom * factor, 200.0))
        self.camera_x = max(0.0, center - self.window_size[0] / (2 * self.zoom))

    def reset_view(self):
        self.camera_x = 0.0
        self.zoom = self._fit_zoom()

    def handle_events(self) -> bool:
        """Handle pygame events. Returns True if should continue."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    return False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_LEFT:
                    self.pan(-1.0)
                elif event.key == pygame.K_RIGHT:
                    self.pan(1.0)
                elif event.key == pygame.K_UP:
                    self.zoom_by(1.25)
                elif event.key == pygame.K_DOWN:
                    self.zoom_by(0.8)
                elif event.key == pygame.K_HOME:
                    self.reset_view()
        return True

    def render_frame(self, render_data: Dict[str, Any]) -> bool:
        """
        Draw one frame.

        Args:
            render_data: Render data from Environment.get_render_data()

        Returns:
            True if should continue, False if should quit
        """
        if not self.handle_events():
            self.running = False
            return False

        self.elapsed += 1.0 / self.fps
        level = light_level(self.elapsed, self.config.day_length, self.config.ambient_brightness)

        self._draw_background(level)
        self._draw_pillars(render_data['heights'], render_data['roles'],
                           render_data.get('dirty_ids', []), level)
        self._draw_info_panel(render_data)

        pygame.display.flip()
        self.clock.tick(self.fps)
        return True

    def start(self):
        # Initialize Pygame
        pygame.init()
        self.screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption("PillarSort - Selection Sort")
        self.clock = pygame.time.Clock()
        # Font
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 18)

    def finish(self):
        """Close the framer."""
        pygame.display.quit()
