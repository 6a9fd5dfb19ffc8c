"""Ray-traced sphere viewer: vectors, rays, a free-look camera, the scene and a pygame window."""

__version__ = "0.1.0"