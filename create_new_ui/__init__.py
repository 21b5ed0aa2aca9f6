"""create-new-ui -- interactive scaffolding for New UI frontend projects."""

__version__ = "0.1.0"
