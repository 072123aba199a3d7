"""Report writers for check results."""
