"""UI components for the Geometry Canvas Editor

This package contains:
- interaction: pointer/keyboard state machine (no widget dependency)
- canvas_widget: QWidget that paints shapes and forwards input
"""
