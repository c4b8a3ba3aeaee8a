#!/usr/bin/env python3
"""
Simple launcher script for the GTD Scheduler API.
Run this from the root directory to start the application.
"""

import os
import uvicorn
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

if __name__ == "__main__":
    print("🚀 Starting GTD Scheduler API with auto-reload...")
    print(f"📖 API Documentation: http://localhost:{PORT}/docs")
    print(f"🔍 Health Check: http://localhost:{PORT}/health")
    print("🛑 Press Ctrl+C to stop the server")
    print("-" * 50)

    uvicorn.run(
        "gtd_scheduler.main:app",
        host=HOST,
        port=PORT,
        reload=True,
        reload_dirs=["gtd_scheduler"],
        log_level=LOG_LEVEL
    )
