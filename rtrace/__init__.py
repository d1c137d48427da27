"""A small ray tracer: tuples, transforms, shapes, materials, patterns, lighting, OBJ loading and rendering."""

__version__ = "0.1.0"