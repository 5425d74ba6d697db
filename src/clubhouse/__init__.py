"""Clubhouse package.

This package is organized by feature modules (users, events, attendance,
photos) with a thin Flask controller layer over service/repository layers.
"""
