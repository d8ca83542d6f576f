"""PyQt6 presentation: board view, move entry and the main window."""
