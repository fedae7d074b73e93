"""Load environment variables early for the FastAPI app.

For local dev, loads a .env.dev file. In staging and prod, env vars are
injected by the deployment, so no .env file is loaded.

The Strava access token is deliberately not validated at startup: the app
still serves a clear error message when it is missing.
"""

import os
from dotenv import load_dotenv

STRAVA_ACCESS_TOKEN_VAR = "STRAVA_ACCESS_TOKEN"

# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from the deployment)")
elif env == "dev":
    print("Loading environment variables from .env.dev")
    load_dotenv(".env.dev", verbose=True)
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_strava_access_token() -> str | None:
    """Get the Strava bearer token, or None if it isn't configured."""
    token = os.getenv(STRAVA_ACCESS_TOKEN_VAR, "").strip()
    return token or None
