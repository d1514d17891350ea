"""Protocol modules.

Each protocol follows the same lifecycle: a frozen request descriptor is
compiled once into a read-only request, which is then bound to per-target
variables, executed, and normalized into a ``ResultEvent``.
"""
