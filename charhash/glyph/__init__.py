"""
Glyph generation package.

prng -> svg_geom -> motif_generators -> layout_engine -> stroke_filler -> svg_render
"""
