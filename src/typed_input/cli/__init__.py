"""CLI layer — demo programs, argument parsing, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and the package root, but nothing else imports from
``cli``.
"""
