# homestead/garden/__init__.py
