"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers. Session state (imports, widgets, users, surveys) lives
# in worker memory, so more than one worker means each sees its own copy.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

wsgi_app = "darpan.main:app"

timeout = 60

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive — must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
