"""Application – selection, export, file delivery and popup session use cases."""
