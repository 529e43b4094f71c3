import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Serialization Settings
JSON_INDENT = int(os.getenv('JSON_INDENT', '2'))
JSON_ENSURE_ASCII = os.getenv('JSON_ENSURE_ASCII', 'false').strip().lower() in ('1', 'true', 'yes')

# Backend Settings (None means detect the backend from the element type)
DEFAULT_BACKEND = os.getenv('DEFAULT_BACKEND') or None

# Header Settings
BLANK_HEADER_BASE = 'Column'
GENERATED_HEADER_PREFIX = 'Column'

# Selector Settings
HEADER_SECTION_TAG = 'thead'
HEADER_CELL_TAG = 'th'
ROW_TAG = 'tr'
ROW_SELECTOR = 'tr:not(thead tr)'  # rows outside the header section, document order
HEADER_CELL_SELECTOR = ':scope > th'
DATA_CELL_SELECTOR = ':scope > td'

# API Settings
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
MAX_HTML_SIZE = int(os.getenv('MAX_HTML_SIZE', str(5 * 1024 * 1024)))  # 5MB
CORS_ALLOW_ORIGINS = [origin.strip() for origin in os.getenv('CORS_ALLOW_ORIGINS', '*').split(',') if origin.strip()]
