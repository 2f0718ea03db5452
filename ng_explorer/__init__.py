"""ng-explorer: search Compodoc documentation for Angular constructs."""

__version__ = "1.0.0"
