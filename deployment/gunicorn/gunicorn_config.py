# Gunicorn settings for the feedlot API
# Run with: gunicorn core.wsgi:application -c deployment/gunicorn/gunicorn_config.py
import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/feedlot/feedlot-backend/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 120
keepalive = 5

# Logging
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "/var/log/feedlot-backend/access.log")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "/var/log/feedlot-backend/error.log")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

# Process naming
proc_name = "feedlot-backend"

# Server mechanics
daemon = False
pidfile = "/var/run/feedlot-backend/gunicorn.pid"
umask = 0o007


def on_starting(server):
    server.log.info("Starting feedlot API")


def when_ready(server):
    server.log.info("Feedlot API ready, spawning %s workers", workers)


def worker_abort(worker):
    worker.log.warning("Worker %s aborted (timeout?)", worker.pid)
