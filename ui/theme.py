from __future__ import annotations

COLORS = {
  "orig": "#00C853",
  "pow2": "#FF6D00",
  "neutral": "#90A4AE",
  "bg": "#121212",
  "panel": "#1E1E1E",
  "grid": "#263238",
}

# Cell shading from table minimum to maximum (blue, green, yellow, red)
TABLE_GRADIENT = [
  (153, 153, 255),
  (152, 255, 125),
  (255, 255, 115),
  (255, 102, 102),
]
