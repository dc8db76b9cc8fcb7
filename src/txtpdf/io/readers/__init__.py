"""File readers registered with :mod:`txtpdf.io`."""
