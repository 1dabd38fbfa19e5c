"""Software rasterizer: meshes, camera, clipping, lighting and depth-buffered drawing."""

__version__ = "0.1.0"

__all__ = [
    "vec",
    "matrix",
    "geometry",
    "interpolation",
    "color",
    "triangle",
    "transform",
    "meshes",
    "canvas",
    "camera",
    "instance",
    "light",
    "clipping",
    "drawing",
    "rasterizer",
]