# homestead/ui/__init__.py
