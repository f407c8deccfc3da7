"""Supabase client setup."""

from supabase import AsyncClient, acreate_client

from ..config import Settings


async def create_store_client(settings: Settings) -> AsyncClient:
    """Create an async Supabase client authenticated with the service role key."""
    return await acreate_client(settings.supabase_url, settings.service_role_key)
