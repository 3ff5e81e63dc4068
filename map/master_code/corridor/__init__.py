from corridor.arcs import Direction, LatLon, chord_offset, generate_arc

__all__ = ["Direction", "LatLon", "chord_offset", "generate_arc"]
