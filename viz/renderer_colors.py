# viz/renderer_colors.py
BG   = (20, 20, 24)
FOOD = (200, 70, 70)
HEAD = (120, 230, 120)
BODY = (80, 200, 80)
TEXT = (220, 220, 230)
