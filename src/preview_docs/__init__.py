"""preview_docs: push local documentation to a sandbox ref and open the rendered preview."""

__version__ = "0.1.0"
