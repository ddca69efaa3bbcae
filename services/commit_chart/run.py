#!/usr/bin/env python3
"""
Commit Chart Service Entry Point

This script starts the Commit Chart service.
"""

import uvicorn
from config.settings import get_settings

def main():
    """Start the Commit Chart service."""
    settings = get_settings()

    uvicorn.run(
        "services.commit_chart.main:app",
        host=settings.service.host,
        port=settings.service.commit_chart_port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning"
    )

if __name__ == "__main__":
    main()
