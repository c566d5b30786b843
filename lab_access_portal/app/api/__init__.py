"""
API package.

``router.py`` exposes the JSON API router and the HTML page router;
the individual endpoints live in the ``endpoints`` subpackage.
"""
