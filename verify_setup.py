#!/usr/bin/env python3
"""Verify that the Database Wizard is properly set up."""

import os
import sys


def check_env_file():
    """Check if .env file exists and has the SQL Server settings."""
    print("Checking .env file...")

    if not os.path.exists(".env"):
        print("  ℹ️  No .env file found (environment variables are used as-is)")
    else:
        print("  ✓ .env file exists")

    try:
        from dotenv import load_dotenv
        load_dotenv()
    except ImportError:
        print("  ⚠️  python-dotenv not installed")
        return False

    server_url = os.getenv("SQLSERVER_URL")
    if not server_url:
        print("  ℹ️  SQLSERVER_URL not set (only needed to execute generated SQL)")
        return True

    try:
        from database_wizard.executor import parse_server_url
        params = parse_server_url(server_url)
    except ValueError as e:
        print(f"  ✗ SQLSERVER_URL is invalid: {e}")
        return False
    except ImportError:
        print("  ⚠️  database_wizard is not importable, skipping SQLSERVER_URL check")
        return False

    print(f"  ✓ SQLSERVER_URL points at {params['server']}:{params['port']}")
    return True


def check_dependencies():
    """Check if all required packages are installed."""
    print("\nChecking dependencies...")

    required = [
        "fastapi",
        "pydantic",
        "pymssql",
        "dotenv",
        "typer",
    ]

    missing = []

    for package in required:
        try:
            __import__(package)
            print(f"  ✓ {package}")
        except ImportError:
            print(f"  ✗ {package} (missing)")
            missing.append(package)

    if missing:
        print("\n  → Run: pip install -e .")
        return False

    return True


def check_package_structure():
    """Check if the package structure is correct."""
    print("\nChecking package structure...")

    required_files = [
        "src/database_wizard/__init__.py",
        "src/database_wizard/cli.py",
        "src/database_wizard/schema_model.py",
        "src/database_wizard/validation.py",
        "src/database_wizard/generator.py",
        "src/database_wizard/executor.py",
        "src/database_wizard/service.py",
        "src/database_wizard/api.py",
    ]

    all_exist = True
    for file_path in required_files:
        if os.path.exists(file_path):
            print(f"  ✓ {file_path}")
        else:
            print(f"  ✗ {file_path} (missing)")
            all_exist = False

    return all_exist


def main():
    """Run all checks."""
    print("=" * 60)
    print("Database Wizard - Setup Verification")
    print("=" * 60 + "\n")

    checks = [
        check_package_structure(),
        check_dependencies(),
        check_env_file(),
    ]

    print("\n" + "=" * 60)

    if all(checks):
        print("✓ All checks passed! You're ready to use Database Wizard.")
        print("\nRun the API with:")
        print("  uvicorn main:app --port 8005")
        print("or generate SQL with:")
        print("  python -m database_wizard generate schema.json")
        print("\n" + "=" * 60)
        return 0
    else:
        print("⚠️  Some checks failed. Please fix the issues above.")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main())
