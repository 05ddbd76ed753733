"""
Book Reviews - Web Server Entry Point
=====================================

Run this to start the API:
    python main.py

Then open http://127.0.0.1:8000/docs in your browser.
Host, port, reload and log level come from BOOKREVIEWS_* environment variables.
"""

import uvicorn

from book_reviews.infrastructure.config import get_settings


def main():
    """Start the web server."""
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   Book Reviews - API Server")
    print("=" * 50)
    print(f"\n   Starting server at http://{settings.server.host}:{settings.server.port}")
    print(f"   Database: {settings.database.path}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "book_reviews.web.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.server.log_level,
    )


if __name__ == "__main__":
    main()
