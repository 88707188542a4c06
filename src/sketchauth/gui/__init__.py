# -*- coding: utf-8 -*-
"""
The GUI Package for SketchAuth.

PyQt6 widgets for drawing the gesture and showing the saved template:
- `sketch_canvas`: the drawing surface feeding the session controller.
- `replay`: timer-driven progressive redraw of the template.
- `overlay`: maps a fingerprint into canvas coordinates (no Qt needed).

The Qt modules are not imported here so that `overlay` can be used without
a display.
"""
