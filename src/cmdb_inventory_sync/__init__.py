"""One-way synchronization of discovered inventory into a ServiceNow CMDB table."""

__version__ = "0.1.0"
