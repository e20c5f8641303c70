"""Hello CRM: the first microservice of the CRM project."""

__version__ = "1.0.0"
