"""Lingua: locale resolution and translation lifecycle for web applications.

Packages:
- configuration: Settings (pydantic-settings, LINGUA_ environment prefix)
- logging: Structured logging setup and request context binding
- i18n: Locale normalization, resolvers, translation loading and caching
- http: FastAPI/Starlette integration (middleware, routes, dependencies)
"""
