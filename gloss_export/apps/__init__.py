"""Entry points that drive the export pipeline."""
