#!/usr/bin/env python3
"""
Course Mock API - Easy Startup Script
Run this file to start the mock backend for local frontend development
"""

import sys
from pathlib import Path


def load_environment():
    """Load .env if present; every setting has a default"""
    from dotenv import load_dotenv

    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)
        print("✅ Loaded settings from .env")
    else:
        print("ℹ️  No .env file found, using defaults (port 3000, in-memory store)")


def check_dependencies():
    """Check if all dependencies are installed"""
    print("\n🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        print("✅ All core dependencies installed!")
        return True
    except ImportError as e:
        print(f"❌ ERROR: Missing dependency: {e}")
        print("\n📦 Install dependencies with:")
        print("   pip install -e .")
        return False


def print_banner():
    """Print startup banner"""
    banner = """
╔═══════════════════════════════════════════════════╗
║                                                   ║
║                 Course Mock API                   ║
║       courses / students / enrollments CRUD       ║
║                                                   ║
╚═══════════════════════════════════════════════════╝
    """
    print(banner)


def print_startup_info(settings):
    """Print startup information"""
    base = f"http://localhost:{settings.port}{settings.API_PREFIX}"
    print("\n🚀 Starting server...")
    print("\n📚 Once started, you can access:")
    print(f"   • Courses:            {base}/courses")
    print(f"   • Students:           {base}/students")
    print(f"   • Enrollments:        {base}/enrollments")
    print(f"   • Full database:      http://localhost:{settings.port}/db")
    print(f"   • API Docs (Swagger): http://localhost:{settings.port}/docs")
    if settings.DB_FILE:
        print(f"\n💾 Backing file: {settings.DB_FILE}")
    print("\n💡 Press CTRL+C to stop the server")
    print("\n" + "="*55 + "\n")


def main():
    """Main startup function"""
    print_banner()

    load_environment()

    # Check dependencies
    if not check_dependencies():
        sys.exit(1)

    from app.config import get_settings
    from app.core.logging_config import configure_logging

    get_settings.cache_clear()
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    # Print startup info
    print_startup_info(settings)

    # Start the server
    try:
        import uvicorn

        uvicorn.run(
            "app.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.LOG_LEVEL.lower()
        )
    except KeyboardInterrupt:
        print("\n\n👋 Server stopped by user")
    except Exception as e:
        print(f"\n❌ ERROR: Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
