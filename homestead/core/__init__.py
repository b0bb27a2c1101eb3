# homestead/core/__init__.py
