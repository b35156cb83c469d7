"""Literal reference tables: palettes, named colors, ease, body-shape rules and brand charts."""
