"""Renderable shapes: spheres, planes, cubes, cylinders, cones, triangles and groups."""