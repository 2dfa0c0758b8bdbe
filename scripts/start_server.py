#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the Weather API HTTP server.
#
# Usage:
#   # Start on the default address (0.0.0.0:8000)
#   python scripts/start_server.py
#
#   # Pick the address explicitly
#   python scripts/start_server.py --host 127.0.0.1 --port 8080
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.server import main


if __name__ == "__main__":
    sys.exit(main())
