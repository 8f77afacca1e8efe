"""Draws the alien formation."""


class AlienControl:
    """Keeps an alien and draws it onto a layer."""

    def __init__(self, layer, alien):
        self.layer = layer
        self.alien = alien

    def draw_aliens(self):
        """Draw the alien onto the layer."""
        self.layer.add_to_layer(self.alien.sprite)