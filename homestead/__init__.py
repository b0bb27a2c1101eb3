# homestead/__init__.py
