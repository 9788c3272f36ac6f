"""Editor-side building blocks for a graphical Neovim front end."""

__version__ = "0.1.0"