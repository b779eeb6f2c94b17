# Log event / error codes of the track_event handler
TRACK_EVENT = 'track_event'
PAYLOAD_TOO_LARGE = 'PAYLOAD_TOO_LARGE'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'

# Client supplied fields copied into the log record
TRACK_FIELDS = ('event', 'path', 'query', 'referrer', 'timezone', 'screen', 'viewport')
