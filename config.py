import os

DB_CONFIG = {
    'host': os.environ.get('DB_HOST', 'localhost'),
    'port': int(os.environ.get('DB_PORT', 3306)),
    'user': os.environ.get('DB_USER'),
    'password': os.environ.get('DB_PASS'),
    'database': os.environ.get('DB_NAME', 'co2app')
}

DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 5))

OSRM_BASE_URL = os.environ.get('OSRM_BASE_URL', 'https://router.project-osrm.org')

NOMINATIM_URL = os.environ.get('NOMINATIM_URL', 'https://nominatim.openstreetmap.org')

# Nominatim rejects requests without an identifying User-Agent
GEOCODER_USER_AGENT = os.environ.get('GEOCODER_USER_AGENT', 'EcoTrajet-App/1.0')

HTTP_TIMEOUT = float(os.environ.get('HTTP_TIMEOUT', 10))

SECRET_KEY = os.environ.get('FLASK_SECRET_KEY', 'default_secret_key')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
