"""
Only the root tests directory carries an __init__.py; test subdirectories work as namespace
packages (PEP 420).

Keeping this one file makes pytest treat tests/ as a package, so test modules with the same
name in different subdirectories do not clash and imports behave the same in every environment.
"""
