"""Multi-file archiver based on static arithmetic coding."""

__version__ = "0.1.0"
__all__ = ["bitio", "report", "encoder", "decoder", "cli"]