# Log event / error codes of the shorten_url handler
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
PAYLOAD_TOO_LARGE = 'PAYLOAD_TOO_LARGE'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_PATH = 'MISSING_PATH'
EMPTY_MESSAGE = 'EMPTY_MESSAGE'
BLOCKED_MESSAGE = 'BLOCKED_MESSAGE'
CODE_SPACE_EXHAUSTED = 'CODE_SPACE_EXHAUSTED'
PERSIST_FAILED = 'PERSIST_FAILED'
SHORTLINK_CREATED = 'SHORTLINK_CREATED'
SHORTLINK_REUSED = 'SHORTLINK_REUSED'
