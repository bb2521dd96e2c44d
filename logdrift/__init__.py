"""Composable stages for merging, filtering and watching log streams for drift."""

__version__ = "0.1.0"