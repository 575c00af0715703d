"""Pure helpers: point math, triangle math, units, grid snapping, colors, logging."""
