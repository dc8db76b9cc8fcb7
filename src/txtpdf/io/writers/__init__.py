"""Document writers registered with :mod:`txtpdf.io`."""
