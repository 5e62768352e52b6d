"""Solutions to build-order, warp-drive and longest-common-subsequence problems."""

__version__ = "0.1.0"
__all__ = ["acmcraft", "alpha_centauri", "lcs"]