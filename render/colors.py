"""
bubs_world module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
BUB = (0, 121, 241)
DANGER = (255, 0, 0, 80)  # translucent
HUD_TEXT = (255, 255, 255)
