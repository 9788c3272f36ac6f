"""Styles, cursor, character grid and draw command batching."""