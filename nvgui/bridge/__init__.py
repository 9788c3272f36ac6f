"""Redraw event types, redraw event parsing and clipboard conversion."""