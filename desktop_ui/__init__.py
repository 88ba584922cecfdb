"""
Desktop host for the grid layout core.

Qt Quick window, Qt models and the QObject bridge around the core
coordinator. Desktop-only package.
"""
