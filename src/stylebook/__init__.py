"""stylebook: a single-screen viewer for the Effective Dart style guide."""

__version__ = "0.1.0"
