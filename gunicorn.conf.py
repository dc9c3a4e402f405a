"""
Gunicorn configuration for production deployment.
"""
import os

# Server socket
PORT = int(os.environ.get("PORT", 8787))
bind = f"0.0.0.0:{PORT}"
backlog = 2048

# Worker processes
# Handlers block on outbound HTTP calls, so scale with workers rather than async
workers = int(os.environ.get("WEB_CONCURRENCY", 2))
worker_class = "sync"
timeout = 60
keepalive = 2
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"

# Process naming
proc_name = "crowdin-bridge"

wsgi_app = "wsgi:app"


def worker_int(worker):
    """Called when a worker receives INT or QUIT signal."""
    import logging
    logging.warning(f"Worker {worker.pid} received INT/QUIT signal")
