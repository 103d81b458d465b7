# Structured log event codes emitted by route handlers
MISSING_URL = 'MISSING_URL'
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
SHORTCODE_GENERATION_EXHAUSTED = 'SHORTCODE_GENERATION_EXHAUSTED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
