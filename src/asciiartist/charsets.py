# Ramps are ordered from the glyph used for brightness 0 to the one used for 255.
DEFAULT = " .:-=+*#%@"

# Reversed default, often better on dark terminal backgrounds
INVERTED = DEFAULT[::-1]

# Block elements, light to full
BLOCKS = " ░▒▓█"
