"""Shapeclip - planar polygon clipping toolkit.

Shapeclip works on points, segments and multi-ring polygons. It clips
segments and whole polygons against polygon boundaries, stitches clipped
fragments back into continuous rings and builds a heuristic union ("outer
hull") of several polygons.

Example:
    $ shapeclip clip shapes.json --outside

This writes shapes-clip.svg with the parts of the first polygon that lie
outside the second one.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
