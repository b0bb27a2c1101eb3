# homestead/utils/__init__.py
