"""
phpplan - build plan inference for PHP (Composer) projects.

This package inspects a project's composer.json and derives the values a
build template needs: PHP version, framework, apt packages and application
variant.
"""

__version__ = "0.1.0"
