# Log event / error codes of the redirect_url handler
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
MISSING_CODE = 'MISSING_CODE'
SHORTLINK_NOT_FOUND = 'SHORTLINK_NOT_FOUND'
INVALID_LEGACY_PATH = 'INVALID_LEGACY_PATH'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
