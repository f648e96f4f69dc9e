"""
Terminal-facing services (drawing, key input, terminal lifecycle).
"""
