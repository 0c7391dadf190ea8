"""Names of the environment variables read by the service."""

DATABASE_URL = "DATABASE_URL"
LOG_LEVEL = "LOG_LEVEL"
JWT_SECRET = "JWT_SECRET"
JWT_ALGORITHM = "JWT_ALGORITHM"
CORS_ORIGINS = "CORS_ORIGINS"
