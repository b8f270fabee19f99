"""adminkit - admin/CRUD framework core.

Subpackages:
- configuration: pydantic-settings based application settings
- logging: structlog setup and request-scoped log context
- i18n: message catalogs and the MessageResolver
- enums: label-bearing enumerations
- context: request-scoped user context
- crud: generic CRUD base service
- services: singleton providers and FastAPI dependency aliases
"""

__version__ = "0.1.0"
