from functools import lru_cache
from supabase import create_client, Client
from app.config import settings
import logging

# Supabase Client Setup
@lru_cache
def get_supabase_client() -> Client:
    """Get Supabase client for authentication operations"""
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key.get_secret_value()
    )

@lru_cache
def get_supabase_admin_client() -> Client:
    """Get Supabase admin client for table operations"""
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key.get_secret_value()
    )

def is_duplicate_key_error(error: Exception) -> bool:
    """True when Postgres rejected a write on a unique constraint"""
    return getattr(error, "code", None) == "23505" or "duplicate key value" in str(error)

# Function to test Supabase connection
def test_supabase_connection():
    """Test Supabase connection"""
    try:
        get_supabase_admin_client().table("quizzes").select("id").limit(1).execute()
        return True
    except Exception as e:
        logging.error(f"Supabase connection test failed: {e}")
        return False

# Database operations using Supabase REST API
class Database:
    """Database operations using Supabase REST API"""

    def __init__(self, client: Client):
        self.client = client

    def insert(self, table: str, data: dict):
        """Insert data into table"""
        try:
            result = self.client.table(table).insert(data).execute()
            return result.data[0] if result.data else None
        except Exception as e:
            logging.error(f"Insert error in {table}: {e}")
            raise e

    def select(self, table: str, columns: str = "*", filters: dict = None, limit: int = None,
               order_by: str = None, descending: bool = False):
        """Select data from table"""
        try:
            query = self.client.table(table).select(columns)

            if filters:
                for key, value in filters.items():
                    query = query.eq(key, value)

            if order_by:
                query = query.order(order_by, desc=descending)

            if limit:
                query = query.limit(limit)

            result = query.execute()
            return result.data
        except Exception as e:
            logging.error(f"Select error in {table}: {e}")
            raise e
