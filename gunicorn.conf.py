# Server Socket
bind = "0.0.0.0:3000"

# Worker Configuration
workers = 1
worker_class = "gthread"
threads = 8
timeout = 30
keepalive = 5

# Logging
loglevel = "info"
accesslog = "-"
errorlog = "-"
