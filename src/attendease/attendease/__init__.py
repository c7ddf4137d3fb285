"""AttendEase package.

This package is organized by feature modules (users, attendance, reports)
with a thin Flask controller layer over service/repository layers, all
persisted through a pluggable key-value store.
"""
