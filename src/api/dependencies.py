"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountStore
from src.config.settings import Settings, get_settings
from src.domain.credentials import CredentialHasher
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_account_store(pool: ConnectionPool = Depends(get_pool)) -> PostgresAccountStore:
    """Create account store with connection pool from app state."""
    return PostgresAccountStore(pool)


def get_credential_hasher(settings: Settings = Depends(get_settings)) -> CredentialHasher:
    """Create bcrypt hasher with the configured work factor."""
    return CredentialHasher(cost=settings.bcrypt_cost)


def get_registration_service(
    store: PostgresAccountStore = Depends(get_account_store),
    hasher: CredentialHasher = Depends(get_credential_hasher),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the account store and credential hasher for the domain service.
    """
    return RegistrationService(store=store, hasher=hasher)
