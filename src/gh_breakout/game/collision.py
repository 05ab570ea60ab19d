"""Collision helpers."""


def circle_rect_collision(
    circle_x: float,
    circle_y: float,
    radius: float,
    rect_x: float,
    rect_y: float,
    rect_width: float,
    rect_height: float,
) -> bool:
    """Check whether a circle overlaps an axis-aligned rectangle.

    Clamps the circle center onto the rectangle to find the closest point,
    then compares the squared distance with the squared radius. Touching
    counts as a hit.
    """
    closest_x = max(rect_x, min(circle_x, rect_x + rect_width))
    closest_y = max(rect_y, min(circle_y, rect_y + rect_height))
    dx = circle_x - closest_x
    dy = circle_y - closest_y
    return dx * dx + dy * dy <= radius * radius
