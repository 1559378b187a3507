# app/__init__.py
# This makes "app" a package

__version__ = "1.0.0"
