"""
Service layer abstraction.

Services hold the business functions behind each endpoint.  They know
nothing about HTTP; failures are reported by raising
:class:`~string_service_api.app.core.errors.DomainError`.
"""
