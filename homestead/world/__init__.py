# homestead/world/__init__.py
