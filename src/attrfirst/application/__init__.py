"""attrfirst application layer: filters, expression tests, services, reporters."""
