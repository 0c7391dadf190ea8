MY_IDENTITY_ENDPOINT = "/users/me"

MY_PROFILE_ENDPOINT = "/profile"

CONNECTION_SEND_ENDPOINT = "/connection/send"
CONNECTION_ACCEPT_ENDPOINT = "/connection/accept"
CONNECTION_DECLINE_ENDPOINT = "/connection/decline"
CONNECTION_LIST_ENDPOINT = "/connection/connections"
CONNECTION_PENDING_ENDPOINT = "/connection/pending"
CONNECTION_STATUS_ENDPOINT = "/connection/status"
CONNECTION_DELETE_ENDPOINT = "/connection/{connection_id}"

MATCHMAKING_ENDPOINT = "/matchmaking"
DISCOVERY_ENDPOINT = "/discovery"

HEALTH_ENDPOINT = "/fastapi/health"
