import os
from datetime import datetime, timedelta

API_BASE_URL = os.environ.get('RESERVATION_API_BASE_URL', 'http://localhost:3000/api').rstrip('/')
API_TIMEOUT = float(os.environ.get('RESERVATION_API_TIMEOUT', '10'))

# Buchbarer Zeitraum (Pre-Opening)
DATE_WINDOW_START = os.environ.get('RESERVATION_DATE_WINDOW_START', '2025-06-20')
DATE_WINDOW_END = os.environ.get('RESERVATION_DATE_WINDOW_END', '2025-07-04')

SECRET_KEY = os.environ.get('SECRET_KEY') or os.urandom(24)
# Nur hinter HTTPS aktivieren, sonst schickt der Browser das Cookie nicht mit
SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', '0').lower() in ('1', 'true', 'yes')

SERVER_HOST = os.environ.get('SERVER_HOST', '127.0.0.1')
SERVER_PORT = int(os.environ.get('SERVER_PORT', '5001'))
SERVER_THREADS = int(os.environ.get('SERVER_THREADS', '4'))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


def generate_date_range(start_str=None, end_str=None):
    start = datetime.strptime(start_str or DATE_WINDOW_START, "%Y-%m-%d").date()
    end = datetime.strptime(end_str or DATE_WINDOW_END, "%Y-%m-%d").date()
    if end < start:
        raise ValueError(f"Reservierungszeitraum ist leer: {start} bis {end}")
    dates = []
    current = start
    while current <= end:
        dates.append(current.strftime("%Y-%m-%d"))
        current += timedelta(days=1)
    return dates


# Fehlkonfiguration schon beim Start melden
generate_date_range()
