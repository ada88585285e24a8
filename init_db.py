#!/usr/bin/env python3
"""
Database initialization script for the quiz generator
Run this to check the Supabase connection before applying create_tables.sql
"""

import sys

from app.database import test_supabase_connection

def init_supabase():
    """Test Supabase connection and provide setup instructions"""
    print("Testing Supabase connection...")

    if not test_supabase_connection():
        print("Could not reach the quizzes table.")
        print("\nTroubleshooting:")
        print("1. Check your .env file has SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY set")
        print("2. Make sure create_tables.sql has been run in the Supabase SQL Editor")
        print("3. Verify your Supabase project is active")
        return False

    print("Supabase connection successful!")
    print("\nTables in use:")
    print("  - quizzes (questions embedded as jsonb, unique sample quiz per topic)")
    print("  - submissions")
    return True

if __name__ == "__main__":
    sys.exit(0 if init_supabase() else 1)
