"""An off-screen drawing layer composited onto a window."""

import pygame


class Layer:
    """A transparent surface the size of the window.

    Drawables are objects with ``image`` and ``rect`` attributes whose
    rect is given in world coordinates; the layer's view decides which
    part of the world is shown.
    """

    def __init__(self, window):
        width, height = window.get_size()
        if width <= 0 or height <= 0:
            raise ValueError("undefined window size")
        self.window = window
        self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self._view = pygame.Rect(0, 0, width, height)
        self.clear()

    @property
    def view(self):
        """The world area currently shown by the layer."""
        return pygame.Rect(self._view)

    def set_view(self, view):
        """Show the given world area on the whole layer."""
        view = pygame.Rect(view)
        if view.width <= 0 or view.height <= 0:
            raise ValueError("view must have a positive size")
        self._view = view

    def add_to_layer(self, drawable):
        """Draw an element onto the layer."""
        width, height = self.surface.get_size()
        scale_x = width / self._view.width
        scale_y = height / self._view.height
        rect = drawable.rect
        left = (rect.x - self._view.x) * scale_x
        top = (rect.y - self._view.y) * scale_y
        image = drawable.image
        if scale_x != 1 or scale_y != 1:
            size = (
                max(0, round(rect.width * scale_x)),
                max(0, round(rect.height * scale_y)),
            )
            image = pygame.transform.scale(image, size)
        self.surface.blit(image, (round(left), round(top)))

    def draw(self):
        """Composite the layer onto the window."""
        self.window.blit(self.surface, (0, 0))

    def clear(self):
        """Remove everything from the layer, leaving it transparent."""
        self.surface.fill((0, 0, 0, 0))