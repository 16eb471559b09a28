"""Component tree, behaviour protocols and the components built on them."""

__all__ = [
    "actor",
    "anim",
    "camera",
    "container",
    "drawdag",
    "drawopts",
    "game",
    "imageref",
    "interface",
    "prisms",
    "sheet",
    "solid",
    "traits",
]