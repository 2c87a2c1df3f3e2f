import pygame

from .sim import MAX_VALUE, Step

BACKGROUND = (0, 0, 0)
BAR = (128, 128, 128)
ARROW = (255, 255, 255)
MARKED = (255, 255, 0)
CANDIDATE = (0, 255, 0)

H_MARGIN = 16
V_MARGIN = 64
GAP_RATIO = 0.25
OUTLINE = 2
ARROW_OFFSET = 8

HIGHLIGHTS = {
    (Step.MARK, 0): MARKED,
    (Step.COMPARE, 0): MARKED,
    (Step.COMPARE, 1): CANDIDATE,
    (Step.SWAP_HAPPENED, 0): CANDIDATE,
    (Step.SWAP_HAPPENED, 1): MARKED,
}


def outline_color(step, offset):
    """Outline color for a column `offset` places right of the cursor, or None."""
    return HIGHLIGHTS.get((step, offset))


class Layout:
    """Maps column indices and values to window coordinates."""

    def __init__(self, width, height, count):
        self.count = count
        self.left = H_MARGIN
        self.top = V_MARGIN
        self.bottom = height - V_MARGIN
        self.column_w = (width - 2 * H_MARGIN) / (count * (1.0 + GAP_RATIO))
        self.gap = self.column_w * GAP_RATIO
        self.column_h = max(0.0, self.bottom - self.top)
        self.arrow_h = self.column_h / 24.0

    def column_x(self, i):
        return self.left + i * (self.column_w + self.gap)

    def bar_rect(self, i, value):
        bar_h = self.column_h * (int(value) / MAX_VALUE)
        return pygame.Rect(
            round(self.column_x(i)),
            round(self.top + self.column_h - bar_h),
            max(1, round(self.column_w)),
            round(bar_h),
        )

    def outline_rect(self, i, value):
        return self.bar_rect(i, value).inflate(OUTLINE * 2, OUTLINE * 2)

    def arrow_points(self, i):
        x = self.column_x(i)
        y = self.bottom + ARROW_OFFSET
        return [
            (x + self.column_w / 2, y),
            (x, y + self.arrow_h),
            (x + self.column_w, y + self.arrow_h),
        ]


def draw(surface, snapshot):
    width, height = surface.get_size()
    layout = Layout(width, height, len(snapshot.items))
    surface.fill(BACKGROUND)

    for i, value in enumerate(snapshot.items):
        rect = layout.bar_rect(i, value)
        if rect.height > 0:
            pygame.draw.rect(surface, BAR, rect)
        color = outline_color(snapshot.step, i - snapshot.cursor)
        if color is not None:
            pygame.draw.rect(surface, color, layout.outline_rect(i, value), OUTLINE)

    if snapshot.step is not Step.FINISHED:
        pygame.draw.polygon(surface, ARROW, layout.arrow_points(snapshot.cursor))
