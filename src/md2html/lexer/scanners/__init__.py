"""Mode-specific scanners for the md2html line classifier."""

from md2html.lexer.scanners.block import BlockScannerMixin
from md2html.lexer.scanners.fence import FenceScannerMixin

__all__ = ["BlockScannerMixin", "FenceScannerMixin"]
