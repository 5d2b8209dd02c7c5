"""colour_by_value.core — Foundation layer.

Contains the hash provider, palettes, HSL generator, emphasis rules, style
bundles, value conditions, the openpyxl sheet host and the report builder.
This module has NO dependencies on colour_by_value.modes or
colour_by_value.registry.
"""
