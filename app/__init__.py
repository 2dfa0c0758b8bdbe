# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the Weather API web application:
# - main.py: App factory, middleware setup, error handlers, root route
# - config.py: Environment variable loading and settings
# - routers/: Controllers, mounted from an explicit table
# - server.py: Process bootstrap (socket binding, uvicorn lifecycle)
# =============================================================================

__version__ = "0.1.0"
