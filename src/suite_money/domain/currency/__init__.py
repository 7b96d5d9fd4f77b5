"""Currency units and the registry that loads them from currency data files."""
