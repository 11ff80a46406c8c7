"""Render Mermaid diagram files to SVG, PNG or PDF via headless Chromium."""

__version__ = "0.1.0"
