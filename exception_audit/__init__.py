"""
exception-audit: inventory of throw sites across a directory of Java projects.

The package is organised as:
  - parser: Tree-sitter parsing and per-language throw extraction
  - scanning: project and workspace directory walks
  - aggregation: ordering policy and aggregate computation
  - reporting: HTML report and text catalogue renderers
"""

__version__ = "0.1.0"
