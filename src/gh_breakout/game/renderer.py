"""Renderer for drawing game frames using Pillow."""

import math

from PIL import Image, ImageDraw

from .timeline import FrameState, SimulationTimeline


class Renderer:
    """Renders timeline snapshots as PIL Images."""

    def __init__(self, timeline: SimulationTimeline):
        """
        Initialize renderer.

        Args:
            timeline: Finished simulation with its layout, geometry and theme
        """
        self.timeline = timeline
        self.config = timeline.config
        self.context = timeline.context
        self.width = int(math.ceil(timeline.layout.width))
        self.height = int(math.ceil(timeline.layout.height))

    def render_frame(self, frame: FrameState) -> Image.Image:
        """
        Render one snapshot.

        Args:
            frame: Snapshot to draw

        Returns:
            Palette-mode image of the frame
        """
        img = Image.new("RGB", (self.width, self.height), self.context.background_color)
        draw = ImageDraw.Draw(img)

        self._draw_bricks(draw, frame)
        self._draw_paddle(draw, frame)
        self._draw_ball(draw, frame)

        return img.convert("P", palette=Image.Palette.ADAPTIVE)

    def _draw_bricks(self, draw: ImageDraw.ImageDraw, frame: FrameState) -> None:
        size = self.config.brick_size
        for brick, status in zip(self.timeline.bricks, frame.bricks):
            if status == "visible":
                fill = self.context.color_for_class(brick.color_class)
            elif self.timeline.ghost_bricks:
                fill = self.context.base_color
            else:
                continue
            draw.rounded_rectangle(
                [brick.x, brick.y, brick.x + size, brick.y + size],
                radius=self.config.brick_radius,
                fill=fill,
            )

    def _draw_paddle(self, draw: ImageDraw.ImageDraw, frame: FrameState) -> None:
        top = self.timeline.layout.paddle_y
        draw.rounded_rectangle(
            [
                frame.paddle_x,
                top,
                frame.paddle_x + self.config.paddle_width,
                top + self.config.paddle_height,
            ],
            radius=self.config.paddle_radius,
            fill=self.context.paddle_color,
        )

    def _draw_ball(self, draw: ImageDraw.ImageDraw, frame: FrameState) -> None:
        radius = self.config.ball_radius
        draw.ellipse(
            [
                frame.ball_x - radius,
                frame.ball_y - radius,
                frame.ball_x + radius,
                frame.ball_y + radius,
            ],
            fill=self.context.ball_color,
        )
