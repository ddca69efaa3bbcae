"""
Commit Chart Renderer for CommitMoji.

This service is responsible for:
- Loading the serialized commit messages document
- Rendering per-category commit counts as a bar chart
- Overlaying each bar with a packed grid of category glyphs
- Serving the document and the rendered chart over HTTP
"""

__version__ = "1.0.0"
__author__ = "CommitMoji Team"
__description__ = "Commit category bar chart with glyph overlays"
